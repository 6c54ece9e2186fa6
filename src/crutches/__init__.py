"""List helpers missing from the Python standard library."""

from crutches.core import (
    ConnectorOptions,
    InvalidOptionError,
    LocaleDictionary,
    validate_options,
)
from crutches.functional import (
    NO_FILL,
    from_,
    in_groups,
    shorten,
    split,
    to,
    to_sentence,
    without,
)

__version__ = "0.1.0"

__all__ = [
    "without",
    "from_",
    "to",
    "shorten",
    "split",
    "in_groups",
    "NO_FILL",
    "to_sentence",
    "validate_options",
    "ConnectorOptions",
    "LocaleDictionary",
    "InvalidOptionError",
]

"""Core option models, exceptions and type aliases."""

from crutches.core.exceptions import InvalidOptionError
from crutches.core.options import (
    ALLOWED_KEYS,
    DEFAULT_CONNECTORS,
    ConnectorOptions,
    LocaleDictionary,
    validate_options,
)

__all__ = [
    "InvalidOptionError",
    "ALLOWED_KEYS",
    "DEFAULT_CONNECTORS",
    "ConnectorOptions",
    "LocaleDictionary",
    "validate_options",
]

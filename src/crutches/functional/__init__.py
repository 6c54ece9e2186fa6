"""Functional list helpers for crutches.

Every helper is stateless and side-effect-free: inputs are never mutated and
each call returns freshly built lists or strings.
"""

from crutches.functional.grouping import NO_FILL, in_groups
from crutches.functional.sentence import to_sentence
from crutches.functional.sequences import from_, shorten, split, to, without

__all__ = [
    "without",
    "from_",
    "to",
    "shorten",
    "split",
    "in_groups",
    "NO_FILL",
    "to_sentence",
]

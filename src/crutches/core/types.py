"""Reusable type definitions for the crutches helpers.

Type Aliases:
    Position: An index into a sequence. Negative values count from the end
        where the operation supports it.
    Predicate: A single-argument callable deciding whether an element matches.
    Splitter: Either a literal separator value or a ``Predicate``.
    GroupTransform: A callable applied to every group produced by
        :func:`crutches.functional.grouping.in_groups`.

These types are shared across the functional modules for consistent type
checking.
"""

import typing as tp

__all__ = [
    "Position",
    "Predicate",
    "Splitter",
    "GroupTransform",
]


Position = int

Predicate = tp.Callable[[tp.Any], bool]

# A separator value or a predicate over elements
Splitter = tp.Union[Predicate, tp.Any]

GroupTransform = tp.Callable[[tp.List[tp.Any]], tp.Any]

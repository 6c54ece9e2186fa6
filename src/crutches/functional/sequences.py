"""Positional and value-based list helpers.

This module provides small, side-effect-free helpers that Python's ``list``
does not offer directly:

    - **without**: Drop every element that appears in a second collection.
    - **from_**: The tail of a list starting at a (possibly negative) position.
    - **to**: The head of a list up to and including a position.
    - **shorten**: Drop a trailing run of elements, or report that the list
      is too short.
    - **split**: Partition a list into runs around a separator value or
      predicate.

Every function accepts any finite iterable and returns a new ``list``; the
input is never mutated.

Examples:
    >>> from crutches.functional.sequences import from_, split, to
    >>> from_(["a", "b", "c", "d"], -2)
    ['c', 'd']
    >>> to(["a", "b", "c"], 1)
    ['a', 'b']
    >>> split(["a", "b", "c", "d", "c", "e"], "c")
    [['a', 'b'], ['d'], ['e']]
"""

import typing as tp

from crutches.core.types import Position, Splitter

__all__ = [
    "without",
    "from_",
    "to",
    "shorten",
    "split",
]


def without(
    collection: tp.Iterable[tp.Any], elements: tp.Iterable[tp.Any]
) -> tp.List[tp.Any]:
    """Return the elements of ``collection`` that do not appear in ``elements``.

    Each element, duplicates included, is tested on its own, and the original
    order is kept.

    Args:
        collection: The elements to filter.
        elements: The elements to remove.

    Returns:
        A new list with the remaining elements.

    Example:
        >>> without([1, 1, 2, 1, 4], [1, 2])
        [4]
    """
    excluded = list(elements)
    return [item for item in collection if item not in excluded]


def from_(collection: tp.Iterable[tp.Any], position: Position) -> tp.List[tp.Any]:
    """Return the tail of ``collection`` starting at ``position``.

    A negative position counts from the end (``-1`` is the last element).
    Positions before the start clamp to the first element and positions past
    the end give an empty list.

    Args:
        collection: The elements to slice.
        position: Index of the first element to keep.

    Returns:
        A new list holding the tail.

    Example:
        >>> from_(["a", "b", "c", "d"], 2)
        ['c', 'd']
        >>> from_(["a", "b", "c", "d"], 10)
        []
    """
    items = list(collection)
    if position < 0:
        position = max(len(items) + position, 0)
    return items[position:]


def to(collection: tp.Iterable[tp.Any], position: Position) -> tp.List[tp.Any]:
    """Return the head of ``collection`` up to and including ``position``.

    Unlike :func:`from_`, negative positions are not resolved from the end:
    any negative position gives an empty list.

    Args:
        collection: The elements to slice.
        position: Index of the last element to keep.

    Returns:
        A new list holding the head, clamped to the collection length.

    Example:
        >>> to(["a", "b", "c"], 20)
        ['a', 'b', 'c']
        >>> to(["a", "b", "c"], -1)
        []
    """
    if position < 0:
        return []
    return list(collection)[: position + 1]


def shorten(
    items: tp.Iterable[tp.Any], amount: int = 1
) -> tp.Optional[tp.List[tp.Any]]:
    """Drop the last ``amount`` elements.

    The three outcomes are kept distinct: ``None`` when the list is shorter
    than ``amount``, an empty list when it is exactly ``amount`` long, and the
    leading elements otherwise.

    Args:
        items: The elements to shorten.
        amount: How many trailing elements to drop. Defaults to 1.

    Returns:
        The shortened list, or ``None`` if there are fewer than ``amount``
        elements.

    Raises:
        ValueError: If ``amount`` is negative.

    Example:
        >>> shorten(["one", "two", "three"], 2)
        ['one']
        >>> shorten([5, 6], 2)
        []
        >>> shorten([5, 6, 7, 8], 5) is None
        True
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}.")

    items = list(items)
    if len(items) < amount:
        return None
    return items[: len(items) - amount]


def split(
    collection: tp.Iterable[tp.Any], splitter: Splitter
) -> tp.List[tp.List[tp.Any]]:
    """Split ``collection`` into runs separated by ``splitter``.

    If ``splitter`` is callable it is used as a predicate, otherwise elements
    equal to it are separators. Separators are dropped from the output. The
    last run is always included, so the result holds one more run than there
    are separators.

    Args:
        collection: The elements to split. Generators and ranges are consumed
            once.
        splitter: A separator value or a single-argument predicate.

    Returns:
        A list of runs, each a list.

    Example:
        >>> split(["c", "a", "b"], "c")
        [[], ['a', 'b']]
        >>> split([1, 2, 3, 4, 5, 6, 7, 8], lambda x: x % 2 == 0)
        [[1], [3], [5], [7], []]
        >>> split([], 1)
        [[]]
    """
    if callable(splitter):
        is_separator = splitter
    else:
        is_separator = lambda item: item == splitter  # noqa: E731

    runs: tp.List[tp.List[tp.Any]] = []
    current: tp.List[tp.Any] = []
    for item in collection:
        if is_separator(item):
            runs.append(current)
            current = []
        else:
            current.append(item)
    runs.append(current)
    return runs

"""Split a collection into a fixed number of groups.

The groups are filled from left to right without overlap. When the length
does not divide evenly, the leading groups receive one extra element and the
remaining groups are padded with a fill value so that every group has the
same length. Passing :data:`NO_FILL` leaves the short groups unpadded.

Example:
    >>> in_groups([str(i) for i in range(1, 11)], 3)
    [['1', '2', '3', '4'], ['5', '6', '7', None], ['8', '9', '10', None]]
    >>> in_groups([str(i) for i in range(1, 11)], 3, NO_FILL)
    [['1', '2', '3', '4'], ['5', '6', '7'], ['8', '9', '10']]
"""

import typing as tp

from crutches.core.types import GroupTransform
from crutches.logger.logger import logger

__all__ = ["NO_FILL", "in_groups"]

# Passed as ``fill_with`` to leave short groups unpadded
NO_FILL = False


def in_groups(
    collection: tp.Iterable[tp.Any],
    number: int,
    fill_with: tp.Any = None,
    transform: tp.Optional[GroupTransform] = None,
) -> tp.List[tp.Any]:
    """Split ``collection`` into exactly ``number`` groups.

    With ``n`` elements, ``q, r = divmod(n, number)``: the first ``r`` groups
    hold ``q + 1`` elements and the others hold ``q``. If ``r > 0`` and
    ``fill_with`` is not ``NO_FILL``, each of the shorter groups gets one
    ``fill_with`` appended. Evenly divisible collections are never padded.

    A ``number`` larger than the collection is allowed: every element gets a
    group of its own and the remaining groups hold only the fill value, or
    nothing at all with ``NO_FILL``.

    Args:
        collection: The elements to group.
        number: How many groups to produce. Must be a positive integer.
        fill_with: Value appended to the short groups. ``NO_FILL`` (``False``)
            disables padding.
        transform: Optional callable applied to each group. When given, the
            list of its results is returned instead of the groups.

    Returns:
        The list of groups, or of transformed groups.

    Raises:
        ValueError: If ``number`` is not a positive integer.

    Example:
        >>> in_groups([1, 2, 3, 4, 5, 6], 3, transform=sum)
        [3, 7, 11]
    """
    if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
        raise ValueError(f"number must be a positive integer, got {number!r}.")

    items = list(collection)
    division, modulo = divmod(len(items), number)
    pad = modulo > 0 and fill_with is not NO_FILL
    logger.debug(
        f"Grouping {len(items)} elements into {number} groups "
        f"(size={division}, larger={modulo}, padded={pad})"
    )

    groups = []
    start = 0
    for index in range(number):
        size = division + 1 if index < modulo else division
        group = items[start : start + size]
        start += size
        if pad and index >= modulo:
            group.append(fill_with)
        groups.append(group)

    if transform is not None:
        return [transform(group) for group in groups]
    return groups

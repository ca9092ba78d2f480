"""Positional update and erase of array variables.

Both functions work on a copy of the array they are given, so a failed
update never leaves a half-written list behind.
"""

from typing import List

from .exceptions import ArrayBoundsError, IndexCountMismatchError


def update_values(array: List[str], indexes: List[int], values: List[str]) -> List[str]:
    """Assign values at 1-based indexes.

    The array grows as needed; new slots between the old end and an index
    hold the empty string. When an index appears twice the later value wins.

    Args:
        array: Current elements
        indexes: 1-based target positions
        values: One value per index

    Returns:
        A new list with the assignments applied

    Raises:
        IndexCountMismatchError: If len(values) != len(indexes)
        ArrayBoundsError: If any index is below 1
    """
    if len(values) != len(indexes):
        raise IndexCountMismatchError()

    for index in indexes:
        if index < 1:
            raise ArrayBoundsError(index)

    result = list(array)
    for index, value in zip(indexes, values):
        if index > len(result):
            result.extend([''] * (index - len(result)))
        result[index - 1] = value
    return result


def erase_values(array: List[str], indexes: List[int]) -> List[str]:
    """Remove elements at 1-based indexes.

    Duplicates are collapsed and indexes outside 1..len(array) are ignored.
    Removal runs from the highest index down so earlier removals do not
    shift positions that are still to be removed.

    Returns:
        A new list without the erased elements
    """
    result = list(array)
    for index in sorted(set(indexes), reverse=True):
        if 0 < index <= len(result):
            del result[index - 1]
    return result

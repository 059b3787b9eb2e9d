"""Binary search over a sorted sequence."""

from collections.abc import Sequence
from typing import Any


def find(array: Sequence[Any], key: Any) -> int | None:
    """Index of ``key`` in the sorted ``array``, or None if absent."""
    low, high = 0, len(array)
    while low < high:
        mid = low + (high - low) // 2
        value = array[mid]
        if key == value:
            return mid
        if key < value:
            high = mid
        else:
            low = mid + 1
    return None
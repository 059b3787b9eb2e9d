"""Classify how two lists relate to each other."""

from collections.abc import Sequence
from enum import Enum
from typing import Any


class Comparison(Enum):
    EQUAL = "equal"
    SUBLIST = "sublist"
    SUPERLIST = "superlist"
    UNEQUAL = "unequal"


def is_sublist(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Whether ``first`` appears as a contiguous run inside ``second``."""
    first = list(first)
    second = list(second)
    size = len(first)
    if size == 0:
        return True
    head = first[0]
    return any(
        second[i] == head and second[i:i + size] == first
        for i in range(len(second) - size + 1)
    )


def is_superlist(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Whether ``second`` appears as a contiguous run inside ``first``."""
    return is_sublist(second, first)


def sublist(first: Sequence[Any], second: Sequence[Any]) -> Comparison:
    """How ``first`` relates to ``second``."""
    sub = is_sublist(first, second)
    sup = is_superlist(first, second)
    if sub and sup:
        return Comparison.EQUAL
    if sub:
        return Comparison.SUBLIST
    if sup:
        return Comparison.SUPERLIST
    return Comparison.UNEQUAL
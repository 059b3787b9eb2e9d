"""Sum of the distinct multiples of given factors below a limit."""

from collections.abc import Iterable


def sum_of_multiples(limit: int, factors: Iterable[int]) -> int:
    """Sum of every number below ``limit`` that is a multiple of a non-zero factor."""
    multiples: set[int] = set()
    for factor in factors:
        if factor:
            multiples.update(range(factor, limit, factor))
    return sum(multiples)
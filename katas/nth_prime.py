"""Generate prime numbers."""

from collections.abc import Iterator
from itertools import islice, takewhile
from math import isqrt


def primes() -> Iterator[int]:
    """Yield the primes in increasing order, without end."""
    found: list[int] = []
    candidate = 2
    while True:
        limit = isqrt(candidate)
        if all(candidate % p for p in takewhile(lambda p: p <= limit, found)):
            found.append(candidate)
            yield candidate
        if candidate == 2:
            candidate = 3
        elif candidate == 3:
            candidate = 5
        else:
            # Step over multiples of 2 and 3: candidates are 6k-1 and 6k+1.
            candidate += 4 if candidate % 6 == 1 else 2


def nth(n: int) -> int:
    """The prime at zero-based position ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return next(islice(primes(), n, None))
"""Steps of the Collatz sequence."""

_U64_MAX = 2**64 - 1


def collatz(n: int) -> int | None:
    """Steps needed to reach 1 from ``n``; None for non-positive input or overflow."""
    if n < 1:
        return None
    steps = 0
    while n != 1:
        if n % 2 == 0:
            n //= 2
        else:
            n = 3 * n + 1
            if n > _U64_MAX:
                return None
        steps += 1
    return steps
"""Square of sums versus sum of squares."""


def square_of_sum(n: int) -> int:
    """Square of the sum of the first ``n`` natural numbers."""
    return (n * (n + 1) // 2) ** 2


def sum_of_squares(n: int) -> int:
    """Sum of the squares of the first ``n`` natural numbers."""
    return n * (n + 1) * (2 * n + 1) // 6


def difference(n: int) -> int:
    """Square of the sum minus the sum of the squares."""
    return square_of_sum(n) - sum_of_squares(n)
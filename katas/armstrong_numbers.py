"""Armstrong (narcissistic) numbers."""


def is_armstrong_number(number: int) -> bool:
    """Whether ``number`` equals the sum of its digits raised to its digit count."""
    digits = str(number)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == number
"""Grains of wheat on a chessboard."""

_SQUARES = 64


def square(number: int) -> int:
    """Grains on square ``number`` (1 to 64)."""
    if not 1 <= number <= _SQUARES:
        raise ValueError("Square must be between 1 and 64")
    return 2 ** (number - 1)


def total() -> int:
    """Grains on the whole board."""
    return 2**_SQUARES - 1
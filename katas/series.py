"""Contiguous substrings of a given length."""


def series(digits: str, length: int) -> list[str]:
    """All contiguous substrings of ``digits`` of ``length`` characters, in order."""
    if length < 1:
        raise ValueError("length must be positive")
    return [digits[i:i + length] for i in range(len(digits) - length + 1)]
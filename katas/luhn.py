"""Validate numbers with the Luhn checksum."""

_DIGITS = "0123456789"


def _weighted(position: int, digit: int) -> int:
    """Value of ``digit`` at ``position`` counted from the right, starting at 0."""
    if position % 2 == 0:
        return digit
    doubled = digit * 2
    return doubled - 9 if doubled > 9 else doubled


def is_valid(code: str) -> bool:
    """Whether ``code`` passes the Luhn check, ignoring whitespace."""
    chars = [c for c in code if not c.isspace()]
    if len(chars) < 2 or any(c not in _DIGITS for c in chars):
        return False
    total = sum(_weighted(i, int(c)) for i, c in enumerate(reversed(chars)))
    return total % 10 == 0
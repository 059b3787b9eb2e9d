"""Reverse a string."""


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]
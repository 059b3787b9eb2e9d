"""Reshape letter scores from score-to-letters into letter-to-score."""

from collections.abc import Iterable, Mapping


def _ascii_lower(char: str) -> str:
    return char.lower() if char.isascii() else char


def transform(legacy: Mapping[int, Iterable[str]]) -> dict[str, int]:
    """Map each lower-cased letter to its score."""
    return {
        _ascii_lower(letter): score
        for score, letters in sorted(legacy.items())
        for letter in letters
    }
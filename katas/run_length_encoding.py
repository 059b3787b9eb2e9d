"""Run-length encoding of strings."""

import re
from itertools import groupby

_RUN_PATTERN = re.compile(r"([0-9]*)([^0-9])|([0-9]+)\Z")


def encode(source: str) -> str:
    """Replace runs of a character with the run length followed by the character."""
    parts = []
    for char, group in groupby(source):
        count = sum(1 for _ in group)
        parts.append(f"{count}{char}" if count > 1 else char)
    return "".join(parts)


def decode(source: str) -> str:
    """Expand an encoded string back into its runs."""
    parts = []
    for match in _RUN_PATTERN.finditer(source):
        count, char, trailing = match.groups()
        if trailing is not None:
            count, char = trailing[:-1], trailing[-1]
        parts.append(char * (int(count) if count else 1))
    return "".join(parts)
"""Build acronyms from phrases."""

import re
from string import ascii_lowercase, ascii_uppercase

_DELIMITERS = re.compile(r"[ \t\n\r\f_-]")
_TO_ASCII_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)


def _word_letters(word: str) -> str:
    """First letter of a word plus any later camel-case capitals."""
    if not word:
        return ""
    rest = word.lstrip(ascii_uppercase)
    return word[0] + "".join(c for c in rest if c in ascii_uppercase)


def abbreviate(phrase: str) -> str:
    """Return the acronym for ``phrase``."""
    letters = "".join(_word_letters(word) for word in _DELIMITERS.split(phrase))
    return letters.translate(_TO_ASCII_UPPER)
"""Check that brackets in a text are balanced and properly nested."""

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CLOSERS = frozenset(_PAIRS.values())


def brackets_are_balanced(text: str) -> bool:
    """Whether every bracket in ``text`` is matched and correctly nested."""
    expected: list[str] = []
    for char in text:
        if char in _PAIRS:
            expected.append(_PAIRS[char])
        elif char in _CLOSERS:
            if not expected or expected.pop() != char:
                return False
    return not expected
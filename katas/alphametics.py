"""Solve alphametic addition puzzles."""

import re


def _coefficients(puzzle: str) -> dict[str, int]:
    """Weight of each letter so that a solution makes the weighted sum zero."""
    weights: dict[str, int] = {}
    sign, place = -1, 0
    for char in reversed("".join(puzzle.split())):
        if char == "=":
            sign, place = 1, 0
        elif char == "+":
            place = 0
        else:
            weights[char] = weights.get(char, 0) + sign * 10**place
            place += 1
    return weights


def solve(puzzle: str) -> dict[str, int] | None:
    """Return a letter-to-digit mapping solving ``puzzle``, or None."""
    leading = {term.strip()[0] for term in re.split(r"[+=]", puzzle) if term.strip()}
    weights = _coefficients(puzzle)
    letters = sorted(weights, key=lambda c: -abs(weights[c]))
    values = [weights[c] for c in letters]
    # Largest magnitude the remaining letters can still contribute.
    reach = [9 * sum(abs(v) for v in values[i:]) for i in range(len(values) + 1)]

    assigned: list[int] = []
    used: set[int] = set()

    def search(total: int) -> bool:
        depth = len(assigned)
        if depth == len(letters):
            return total == 0
        if abs(total) > reach[depth]:
            return False
        for digit in range(10):
            if digit in used or (digit == 0 and letters[depth] in leading):
                continue
            used.add(digit)
            assigned.append(digit)
            if search(total + digit * values[depth]):
                return True
            assigned.pop()
            used.discard(digit)
        return False

    if not search(0):
        return None
    return dict(zip(letters, assigned))
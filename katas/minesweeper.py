"""Annotate a minesweeper board with counts of adjacent mines."""

from collections.abc import Sequence

MINE = "*"


def _count_adjacent(field: Sequence[str], row: int, col: int) -> int:
    count = 0
    for r in range(max(row - 1, 0), min(row + 2, len(field))):
        line = field[r]
        for c in range(max(col - 1, 0), min(col + 2, len(line))):
            if (r, c) != (row, col) and line[c] == MINE:
                count += 1
    return count


def _annotate_cell(field: Sequence[str], row: int, col: int) -> str:
    if field[row][col] == MINE:
        return MINE
    count = _count_adjacent(field, row, col)
    return str(count) if count else " "


def annotate(minefield: Sequence[str]) -> list[str]:
    """Return the board with each empty cell replaced by its adjacent mine count."""
    return [
        "".join(_annotate_cell(minefield, r, c) for c in range(len(line)))
        for r, line in enumerate(minefield)
    ]
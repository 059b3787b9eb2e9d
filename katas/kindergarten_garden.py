"""Which plants each kindergarten student tends."""

STUDENTS = (
    "Alice", "Bob", "Charlie", "David", "Eve", "Fred",
    "Ginny", "Harriet", "Ileana", "Joseph", "Kincaid", "Larry",
)

_PLANTS = {"V": "violets", "R": "radishes", "G": "grass"}


def _plant(code: str) -> str:
    return _PLANTS.get(code, "clover")


def plants(diagram: str, student: str) -> list[str]:
    """The plants in ``student``'s two cups on each row of ``diagram``."""
    try:
        start = STUDENTS.index(student) * 2
    except ValueError:
        raise ValueError(f"unknown student: {student!r}") from None
    return [_plant(code) for row in diagram.splitlines() for code in row[start:start + 2]]
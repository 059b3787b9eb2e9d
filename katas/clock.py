"""A 24-hour clock without dates."""

from __future__ import annotations

_MINUTES_PER_DAY = 24 * 60


class Clock:
    """Time of day in hours and minutes, wrapping around midnight."""

    __slots__ = ("_total",)

    def __init__(self, hours: int = 0, minutes: int = 0) -> None:
        self._total = (hours * 60 + minutes) % _MINUTES_PER_DAY

    @property
    def hours(self) -> int:
        return self._total // 60

    @property
    def minutes(self) -> int:
        return self._total % 60

    def add_minutes(self, minutes: int) -> Clock:
        """A new clock ``minutes`` later (earlier if negative)."""
        return Clock(0, self._total + minutes)

    @classmethod
    def from_string(cls, text: str) -> Clock:
        """Parse ``"H:M"`` where both parts are integers, possibly out of range."""
        parts = text.split(":")
        if len(parts) != 2:
            raise ValueError(f"cannot build Clock from {text!r}")
        hours, minutes = (int(part) for part in parts)
        return cls(hours, minutes)

    def __str__(self) -> str:
        return f"{self.hours:02}:{self.minutes:02}"

    def __repr__(self) -> str:
        return f"Clock({self.hours}, {self.minutes})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clock):
            return NotImplemented
        return self._total == other._total

    def __hash__(self) -> int:
        return hash(self._total)
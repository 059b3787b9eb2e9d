"""A player's high-score list."""

from collections.abc import Iterable


class HighScores:
    """Scores in the order they were achieved."""

    def __init__(self, scores: Iterable[int]) -> None:
        self.scores = list(scores)

    def latest(self) -> int | None:
        """The most recent score, or None if there are none."""
        return self.scores[-1] if self.scores else None

    def personal_best(self) -> int | None:
        """The highest score, or None if there are none."""
        return max(self.scores, default=None)

    def personal_top_three(self) -> list[int]:
        """Up to three highest scores, highest first."""
        return sorted(self.scores, reverse=True)[:3]

    def __repr__(self) -> str:
        return f"HighScores({self.scores!r})"
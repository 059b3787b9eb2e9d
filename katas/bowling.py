"""Score a game of ten-pin bowling."""

FRAMES = 10
PINS = 10


class BowlingError(Exception):
    """Base class for invalid rolls."""


class NotEnoughPinsLeftError(BowlingError):
    """More pins were knocked down than were standing."""


class GameCompleteError(BowlingError):
    """A roll was made after the game had ended."""


class BowlingGame:
    """A single bowling game, fed one roll at a time."""

    def __init__(self) -> None:
        self._rolls: list[int] = []
        self._standing_used = 0

    def roll(self, pins: int) -> None:
        """Record a roll knocking down ``pins`` pins."""
        if pins + self._standing_used > PINS:
            raise NotEnoughPinsLeftError(f"only {PINS - self._standing_used} pins left")
        if self.score() is not None:
            raise GameCompleteError("the game is already complete")
        self._rolls.append(pins)
        self._standing_used = 0 if self._standing_used + pins == PINS else pins

    def score(self) -> int | None:
        """Total score, or None while the game is not yet complete."""
        rolls = self._rolls
        total = 0
        frame = 0
        for _ in range(FRAMES):
            if frame + 1 >= len(rolls):
                return None
            first, second = rolls[frame], rolls[frame + 1]
            total += first + second
            if first + second >= PINS:
                if frame + 2 >= len(rolls):
                    return None
                total += rolls[frame + 2]
            # A strike occupies one roll; its next two rolls also start the next frame.
            frame += 1 if first == PINS else 2
        return total
"""Simulate a robot moving on an infinite grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Direction(Enum):
    """Compass directions, in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def dxdy(self) -> tuple[int, int]:
        """Step taken when advancing in this direction."""
        return _STEPS[self]

    def turn(self, clockwise: bool) -> Direction:
        """The direction after a quarter turn."""
        return Direction((self.value + (1 if clockwise else 3)) % 4)


_STEPS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


class Instruction(Enum):
    """Commands a robot understands."""

    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    ADVANCE = "A"

    @classmethod
    def from_char(cls, char: str) -> Instruction:
        """Parse a single instruction letter."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Unexpected instructions: {char}") from None


@dataclass(frozen=True)
class Robot:
    """A robot's position and heading; every move returns a new robot."""

    x: int
    y: int
    direction: Direction

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def turn_right(self) -> Robot:
        return replace(self, direction=self.direction.turn(True))

    def turn_left(self) -> Robot:
        return replace(self, direction=self.direction.turn(False))

    def advance(self) -> Robot:
        dx, dy = self.direction.dxdy
        return replace(self, x=self.x + dx, y=self.y + dy)

    def instructions(self, instructions: str) -> Robot:
        """Apply a string of L, R and A instructions in order."""
        robot = self
        for instruction in map(Instruction.from_char, instructions):
            if instruction is Instruction.TURN_LEFT:
                robot = robot.turn_left()
            elif instruction is Instruction.TURN_RIGHT:
                robot = robot.turn_right()
            else:
                robot = robot.advance()
        return robot
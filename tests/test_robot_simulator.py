import pytest

from katas.robot_simulator import Direction, Instruction, Robot


def test_at_origin_facing_north():
    robot = Robot(0, 0, Direction.NORTH)
    assert robot.position == (0, 0)
    assert robot.direction is Direction.NORTH


def test_at_negative_position_facing_south():
    robot = Robot(-1, -1, Direction.SOUTH)
    assert robot.position == (-1, -1)
    assert robot.direction is Direction.SOUTH


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Direction.NORTH, Direction.EAST),
        (Direction.EAST, Direction.SOUTH),
        (Direction.SOUTH, Direction.WEST),
        (Direction.WEST, Direction.NORTH),
    ],
)
def test_turn_right(start, end):
    robot = Robot(0, 0, start).turn_right()
    assert robot.position == (0, 0)
    assert robot.direction is end


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Direction.NORTH, Direction.WEST),
        (Direction.WEST, Direction.SOUTH),
        (Direction.SOUTH, Direction.EAST),
        (Direction.EAST, Direction.NORTH),
    ],
)
def test_turn_left(start, end):
    robot = Robot(0, 0, start).turn_left()
    assert robot.position == (0, 0)
    assert robot.direction is end


@pytest.mark.parametrize(
    ("direction", "position"),
    [
        (Direction.NORTH, (0, 1)),
        (Direction.SOUTH, (0, -1)),
        (Direction.EAST, (1, 0)),
        (Direction.WEST, (-1, 0)),
    ],
)
def test_advance(direction, position):
    robot = Robot(0, 0, direction).advance()
    assert robot.position == position
    assert robot.direction is direction


@pytest.mark.parametrize(
    ("start", "instructions", "position", "direction"),
    [
        (Robot(7, 3, Direction.NORTH), "RAALAL", (9, 4), Direction.WEST),
        (Robot(0, 0, Direction.NORTH), "LAAARALA", (-4, 1), Direction.WEST),
        (Robot(2, -7, Direction.EAST), "RRAAAAALA", (-3, -8), Direction.SOUTH),
        (Robot(8, 4, Direction.SOUTH), "LAAARRRALLLL", (11, 5), Direction.NORTH),
    ],
)
def test_instructions(start, instructions, position, direction):
    robot = start.instructions(instructions)
    assert robot.position == position
    assert robot.direction is direction


def test_moves_do_not_change_original():
    robot = Robot(0, 0, Direction.NORTH)
    robot.advance()
    robot.turn_right()
    assert robot.position == (0, 0)
    assert robot.direction is Direction.NORTH


def test_instruction_from_char():
    assert Instruction.from_char("A") is Instruction.ADVANCE
    assert Instruction.from_char("L") is Instruction.TURN_LEFT


def test_invalid_instruction_raises():
    with pytest.raises(ValueError, match="Unexpected instructions: X"):
        Robot(0, 0, Direction.NORTH).instructions("AXA")


@pytest.mark.parametrize(
    "direction",
    [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST],
)
def test_four_turns_return_to_start(direction):
    assert direction.turn(True).turn(True).turn(True).turn(True) is direction
    assert direction.turn(False).turn(False).turn(False).turn(False) is direction
    assert Robot(0, 0, direction).instructions("RRRR").direction is direction
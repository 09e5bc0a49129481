"""Day 12: steer a ferry by heading or by waypoint."""

from __future__ import annotations

from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, manhattan_distance, read_lines

Instruction = tuple[str, int]

START_HEADING = 90
START_WAYPOINT = (10, -1)

# North is negative y, east is positive x.
_COMPASS = {"N": (0, -1), "S": (0, 1), "E": (1, 0), "W": (-1, 0)}
_HEADINGS = {0: (0, -1), 90: (1, 0), 180: (0, 1), 270: (-1, 0)}


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Split lines such as 'F10' into a command letter and an amount."""
    instructions = []
    for line in lines:
        if not line:
            raise ValueError("empty navigation instruction")
        instructions.append((line[0], int(line[1:])))
    return instructions


def move_ship(command: str, amount: int, heading: int, x: int, y: int) -> tuple[int, int, int]:
    """Apply one instruction to a ship; returns the new heading, x and y."""
    if command in _COMPASS:
        dx, dy = _COMPASS[command]
        return heading, x + dx * amount, y + dy * amount
    if command == "F":
        if heading not in _HEADINGS:
            raise ValueError(f"cannot move forward with heading {heading}")
        dx, dy = _HEADINGS[heading]
        return heading, x + dx * amount, y + dy * amount
    if command == "R":
        return (heading + amount) % 360, x, y
    if command == "L":
        heading -= amount
        if heading < 0:
            heading += 360
        return heading, x, y
    raise ValueError(f"unknown direction command {command!r}")


def move_waypoint(command: str, amount: int, x: int, y: int) -> tuple[int, int]:
    """Shift the waypoint by a compass instruction."""
    if command not in _COMPASS:
        raise ValueError(f"unknown direction command {command!r}")
    dx, dy = _COMPASS[command]
    return x + dx * amount, y + dy * amount


def rotate_waypoint(command: str, amount: int, x: int, y: int) -> tuple[int, int]:
    """Rotate the waypoint about the ship; 'R' turns right, anything else left."""
    right = {90: (-y, x), 180: (-x, -y), 270: (y, -x)}
    left = {90: (y, -x), 180: (-x, -y), 270: (-y, x)}
    turns = right if command == "R" else left
    if amount not in turns:
        raise ValueError(f"bad rotation {amount}")
    return turns[amount]


def navigate(instructions: Iterable[Instruction]) -> int:
    """Manhattan distance travelled when instructions move the ship directly."""
    heading, x, y = START_HEADING, 0, 0
    for command, amount in instructions:
        heading, x, y = move_ship(command, amount, heading, x, y)
    return manhattan_distance(0, 0, x, y)


def navigate_waypoint(instructions: Iterable[Instruction]) -> int:
    """Manhattan distance travelled when instructions steer a waypoint."""
    wx, wy = START_WAYPOINT
    ship_x = ship_y = 0
    for command, amount in instructions:
        if command in _COMPASS:
            wx, wy = move_waypoint(command, amount, wx, wy)
        elif command == "F":
            ship_x += wx * amount
            ship_y += wy * amount
        elif command in ("L", "R"):
            wx, wy = rotate_waypoint(command, amount, wx, wy)
        else:
            raise ValueError(f"unknown command {command!r}")
    return manhattan_distance(0, 0, ship_x, ship_y)


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Rain risk", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    instructions = parse_instructions(read_lines(args.file))
    if args.part == "a":
        print("Ship changed distance:", navigate(instructions))
    else:
        print("Ship changed distance:", navigate_waypoint(instructions))
"""Day 5: decode binary space partitioned boarding passes."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

ROW_CHARS = 7
SEAT_LIMIT = 1000


def narrow_range(char: str, lower: int, upper: int) -> tuple[int, int]:
    """Keep the lower half of the range for 'F' or 'L', the upper half otherwise."""
    half = (upper - lower + 1) // 2
    if char in ("F", "L"):
        return lower, lower + half - 1
    return lower + half, upper


def _decode(chars: str, upper: int) -> int:
    lower, _ = reduce(lambda bounds, char: narrow_range(char, *bounds), chars, (0, upper))
    return lower


def seat_id(boarding_pass: str) -> int:
    """Seat ID: row times eight plus column."""
    row = _decode(boarding_pass[:ROW_CHARS], 127)
    column = _decode(boarding_pass[ROW_CHARS:], 7)
    return row * 8 + column


def highest_seat_id(passes: Iterable[str]) -> int:
    """Largest seat ID among the passes, 0 when there are none."""
    return max((seat_id(p) for p in passes), default=0)


def find_free_seat(passes: Iterable[str]) -> int:
    """The empty seat whose neighbours on both sides are taken, or 0."""
    taken = {seat_id(p) for p in passes}
    for seat in range(1, SEAT_LIMIT):
        if seat not in taken and seat - 1 in taken and seat + 1 in taken:
            return seat
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    args = make_parser("Binary boarding", "testInput.txt").parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    passes = read_lines(args.file)
    if args.part == "a":
        print("Highest Seat Number: ", highest_seat_id(passes))
    else:
        print("Our Seat Number: ", find_free_seat(passes))
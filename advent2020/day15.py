"""Day 15: the elves' memory game."""

from __future__ import annotations

from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser

STARTING_SETS = (
    "0,3,6",
    "1,3,2",
    "2,1,3",
    "1,2,3",
    "2,3,1",
    "3,2,1",
    "3,1,2",
    "1,0,15,2,10,13",
)


def play_memory_game(starting: str, last_round: int) -> int:
    """The number spoken on turn last_round, given comma-separated starting numbers.

    Each turn repeats the age of the previous number: 0 if it was new,
    otherwise how many turns ago it had last been spoken.
    """
    numbers = [int(entry) for entry in starting.split(",")]
    if last_round <= len(numbers):
        raise ValueError("last_round must come after the starting numbers")
    last_seen = {number: turn for turn, number in enumerate(numbers[:-1], 1)}
    current = numbers[-1]
    for turn in range(len(numbers), last_round):
        previous = last_seen.get(current)
        last_seen[current] = turn
        current = 0 if previous is None else turn - previous
    return current


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Rambunctious recitation", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    rounds = 2020 if args.part == "a" else 30000000
    for starting in STARTING_SETS:
        print(f"{rounds}th number spoken for [{starting}]:", play_memory_game(starting, rounds))
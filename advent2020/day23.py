"""Day 23: the crab's cup shuffling game."""

from __future__ import annotations

from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser

TOTAL_CUPS = 1_000_000
EXAMPLE_LABELS = "389125467"
PUZZLE_LABELS = "716892543"


def play_crab_cups(cups: Sequence[int], moves: int) -> list[int]:
    """Play the given number of moves starting at the first cup.

    Cups must be labelled 1..n. Returns a successor table: entry i holds the
    label of the cup clockwise of cup i (entry 0 is unused).
    """
    count = len(cups)
    if count == 0 or sorted(cups) != list(range(1, count + 1)):
        raise ValueError("cups must be labelled 1..n with no gaps or repeats")
    if moves < 0:
        raise ValueError("moves must not be negative")
    following = [0] * (count + 1)
    for cup, nxt in zip(cups, [*cups[1:], cups[0]]):
        following[cup] = nxt
    highest = count
    current = cups[0]
    for _ in range(moves):
        first = following[current]
        second = following[first]
        third = following[second]
        following[current] = following[third]
        picked = (first, second, third)
        destination = current - 1
        while True:
            if destination < 1:
                destination = highest
            if destination not in picked:
                break
            destination -= 1
        following[third] = following[destination]
        following[destination] = first
        current = following[current]
    return following


def _digits(labels: str) -> list[int]:
    if not labels.isdigit():
        raise ValueError(f"labels must be digits: {labels!r}")
    return [int(char) for char in labels]


def crab_cups_labels(labels: str, moves: int) -> str:
    """Labels clockwise after cup 1 once the moves are played."""
    following = play_crab_cups(_digits(labels), moves)
    result = []
    cup = following[1]
    while cup != 1:
        result.append(str(cup))
        cup = following[cup]
    return "".join(result)


def crab_cups_stars(labels: str, moves: int) -> int:
    """Product of the two cups after cup 1, playing with a million cups."""
    cups = _digits(labels)
    cups.extend(range(max(cups) + 1, TOTAL_CUPS + 1))
    following = play_crab_cups(cups, moves)
    first = following[1]
    return first * following[first]


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Crab cups", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part == "a":
        print("Part a test:", crab_cups_labels(EXAMPLE_LABELS, 10))
        print("Part a test:", crab_cups_labels(EXAMPLE_LABELS, 100))
        print("Part a real:", crab_cups_labels(PUZZLE_LABELS, 100))
    else:
        print("Part b test:", crab_cups_stars(EXAMPLE_LABELS, 10))
        print("Part b test:", crab_cups_stars(EXAMPLE_LABELS, 10_000_000))
        print("Part b real:", crab_cups_stars(PUZZLE_LABELS, 10_000_000))
"""Day 9: find the number that breaks the XMAS encoding and its weakness."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, parse_ints, read_lines


def _first_invalid(numbers: Sequence[int], preamble: int) -> tuple[int, int] | None:
    """Index and value of the first number not a sum of two different earlier ones."""
    for index in range(preamble, len(numbers)):
        value = numbers[index]
        window = numbers[index - preamble:index]
        if not any(a != b and a + b == value for a, b in combinations(window, 2)):
            return index, value
    return None


def find_invalid_number(numbers: Sequence[int], preamble: int) -> int:
    """First number that is not the sum of two different numbers in its preamble, or 0."""
    found = _first_invalid(numbers, preamble)
    return 0 if found is None else found[1]


def find_weakness(numbers: Sequence[int], preamble: int) -> int:
    """Sum of the smallest and largest values of the run adding up to the invalid number.

    Runs are searched backwards from just before the invalid number; the
    smallest and largest are taken from the run without its last element.
    When no run matches, the invalid number itself is returned.
    """
    found = _first_invalid(numbers, preamble)
    if found is None:
        return 0
    index, target = found
    for end in range(index - 1, -1, -1):
        total = numbers[end]
        for start in range(end - 1, -1, -1):
            total += numbers[start]
            if total == target:
                block = numbers[start:end]
                return min(block) + max(block)
            if total > target:
                break
    return target


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Encoding error", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    parser.add_argument("-pre", "--pre", dest="pre", type=int, default=5, help="Preamble")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    numbers = parse_ints(read_lines(args.file))
    if args.part == "a":
        print("first failed number:", find_invalid_number(numbers, args.pre))
    else:
        print("failed number items:", find_weakness(numbers, args.pre))
"""Day 1: find expense entries that sum to 2020."""

from __future__ import annotations

import math
from itertools import permutations
from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, parse_ints, read_lines

TARGET = 2020


def _find_product(expenses: Sequence[int], size: int) -> int | None:
    for combo in permutations(expenses, size):
        if sum(combo) == TARGET:
            return math.prod(combo)
    return None


def find_pair_product(expenses: Sequence[int]) -> int | None:
    """Product of the first two distinct entries summing to 2020, or None."""
    return _find_product(expenses, 2)


def find_triple_product(expenses: Sequence[int]) -> int | None:
    """Product of the first three distinct entries summing to 2020, or None."""
    return _find_product(expenses, 3)


def check_expenses(lines: Sequence[str], part: str) -> int:
    """Solve the puzzle for the given part; 0 when no combination is found."""
    expenses = parse_ints(lines)
    result = find_pair_product(expenses) if part == "a" else find_triple_product(expenses)
    return 0 if result is None else result


def main(argv: Sequence[str] | None = None) -> None:
    args = make_parser("Report repair", "input.txt").parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {check_expenses(read_lines(args.file), args.part)}")
"""Day 10: chain joltage adapters."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise, takewhile
from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, parse_ints, read_lines

MAX_STEP = 3


def jolt_differences_product(adapters: Sequence[int]) -> int:
    """Number of 1-jolt steps times number of 3-jolt steps, device included."""
    if not adapters:
        raise ValueError("no adapters given")
    steps = Counter(b - a for a, b in pairwise([0, *sorted(adapters)]))
    return steps[1] * (steps[3] + 1)


def count_arrangements(adapters: Sequence[int]) -> int:
    """Number of distinct adapter chains starting from the outlet.

    A chain ends at any adapter from which no further adapter is reachable.
    """
    chain = [0, *sorted(adapters)]
    ways = [1] * len(chain)
    for i in reversed(range(len(chain))):
        reachable = list(
            takewhile(lambda j: chain[j] - chain[i] <= MAX_STEP, range(i + 1, len(chain)))
        )
        if reachable:
            ways[i] = sum(ways[j] for j in reachable)
    return ways[0]


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Adapter array", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    adapters = parse_ints(read_lines(args.file))
    if args.part == "a":
        print("number of jolt differences:", jolt_differences_product(adapters))
    else:
        print("number of arrangements:", count_arrangements(adapters))
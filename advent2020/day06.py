"""Day 6: sum the answers given by customs declaration groups."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines


def _groups(lines: Iterable[str]) -> Iterator[list[str]]:
    group: list[str] = []
    for line in lines:
        if line == "":
            yield group
            group = []
        else:
            group.append(line)
    yield group


def count_group_answers(lines: Iterable[str], part: str) -> int:
    """Sum per group of questions answered by anyone (a) or by everyone (b)."""
    total = 0
    for group in _groups(lines):
        answers = Counter("".join(group))
        needed = 1 if part == "a" else len(group)
        total += sum(1 for count in answers.values() if count >= needed)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    args = make_parser("Custom customs", "testInput.txt").parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    lines = read_lines(args.file)
    if args.part == "a":
        print("Sum of anyone answers:", count_group_answers(lines, "a"))
    else:
        print("Sum of everyone answers:", count_group_answers(lines, "b"))
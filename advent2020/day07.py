"""Day 7: bags that contain other bags."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

Rules = dict[str, dict[str, int]]

TARGET_BAG = "shiny gold bag"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def strip_bag_suffix(name: str) -> str:
    """Remove a trailing ' bags' and then a trailing ' bag'."""
    name = name.removesuffix(" bags")
    return name.removesuffix(" bag")


def parse_rule(line: str) -> tuple[str, dict[str, int]]:
    """Parse one rule into the outer bag and the bags it holds with their counts."""
    parts = line.split("contain")
    if len(parts) < 2:
        raise ValueError(f"malformed bag rule: {line!r}")
    outer = strip_bag_suffix(parts[0].strip(" "))
    contents: dict[str, int] = {}
    if parts[1].strip(" .") == "no other bags":
        return outer, contents
    for item in parts[1].split(","):
        item = item.strip(" .")
        match = _LEADING_INT_RE.match(item)
        count = int(match.group(1)) if match else 0
        _, _, name = item.partition(" ")
        contents[strip_bag_suffix(name)] = count
    return outer, contents


def parse_rules(lines: Iterable[str]) -> Rules:
    """Build the full rule table."""
    return dict(parse_rule(line) for line in lines)


def can_contain(rules: Mapping[str, Mapping[str, int]], outer: str, target: str) -> bool:
    """Whether the outer bag holds the target bag at any depth."""
    seen: set[str] = set()
    stack = [outer]
    while stack:
        bag = stack.pop()
        if bag in seen:
            continue
        seen.add(bag)
        for inner in rules.get(bag, {}):
            if inner == target:
                return True
            stack.append(inner)
    return False


def count_containers(rules: Mapping[str, Mapping[str, int]], bag: str) -> int:
    """Number of other bag colours that eventually contain the given bag."""
    bag = strip_bag_suffix(bag)
    return sum(1 for outer in rules if outer != bag and can_contain(rules, outer, bag))


def count_contained(rules: Mapping[str, Mapping[str, int]], bag: str) -> int:
    """Total number of bags required inside the given bag."""
    bag = strip_bag_suffix(bag)
    return sum(
        count * (1 + count_contained(rules, inner))
        for inner, count in rules.get(bag, {}).items()
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Handy haversacks", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    rules = parse_rules(read_lines(args.file))
    if args.part == "a":
        print("Bag Varieties:", count_containers(rules, TARGET_BAG))
    else:
        print("Number of Bags:", count_contained(rules, TARGET_BAG))
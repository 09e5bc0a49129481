"""Day 19: match messages against a grammar of numbered rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

START_RULE = "0"


@dataclass(frozen=True)
class Rule:
    """Either a literal character or alternatives of rule sequences."""

    char: str = ""
    sub_rules: tuple[tuple[str, ...], ...] = ()


_MISSING = Rule()


def parse_input(lines: Sequence[str]) -> tuple[dict[str, Rule], list[str]]:
    """Split the input into the rule table and the messages after the blank line."""
    rules: dict[str, Rule] = {}
    for index, line in enumerate(lines):
        if line == "":
            return rules, [msg for msg in lines[index + 1:]]
        rule_id, sep, body = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed rule: {line!r}")
        if '"' in body:
            rules[rule_id] = Rule(char=body.strip('"'))
        else:
            alternatives = tuple(tuple(part.split(" ")) for part in body.split(" | "))
            rules[rule_id] = Rule(sub_rules=alternatives)
    return rules, []


def match_rule(
    rules: Mapping[str, Rule], rule_id: str, message: str, index: int
) -> tuple[bool, int]:
    """Try a rule at a position; returns success and the position after the match.

    Reaching the end of the message counts as success with position 0.
    """
    if index == len(message):
        return True, 0
    rule = rules.get(rule_id, _MISSING)
    if rule.char:
        if message[index:index + 1] == rule.char:
            return True, index + 1
        return False, 0
    for sequence in rule.sub_rules:
        pos = index
        for part in sequence:
            ok, pos = match_rule(rules, part, message, pos)
            if not ok:
                break
        else:
            return True, pos
    return False, index


def count_matching(lines: Sequence[str]) -> int:
    """Number of messages that rule 0 matches completely."""
    rules, messages = parse_input(lines)
    count = 0
    for message in messages:
        ok, pos = match_rule(rules, START_RULE, message, 0)
        if ok and pos == len(message):
            count += 1
    return count


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Monster messages", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part == "a":
        print("Part a answer:", count_matching(read_lines(args.file)))
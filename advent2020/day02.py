"""Day 2: count passwords that satisfy their policy."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

_ENTRY_RE = re.compile(r"\s*(\d+)-(\d+) (\S): (\S+)")


@dataclass(frozen=True)
class PasswordEntry:
    """A password together with its policy."""

    minimum: int
    maximum: int
    char: str
    password: str

    def valid_by_count(self) -> bool:
        """The character appears between minimum and maximum times."""
        return self.minimum <= self.password.count(self.char) <= self.maximum

    def valid_by_position(self) -> bool:
        """Exactly one of the two 1-based positions holds the character."""
        first = self.password[self.minimum - 1] == self.char
        second = self.password[self.maximum - 1] == self.char
        return first != second


def parse_entry(line: str) -> PasswordEntry:
    """Parse a line such as '1-3 a: abcde'."""
    match = _ENTRY_RE.match(line)
    if match is None:
        raise ValueError(f"malformed password line: {line!r}")
    low, high, char, password = match.groups()
    return PasswordEntry(int(low), int(high), char, password)


def count_valid_passwords(lines: Iterable[str], part: str) -> int:
    """Count valid passwords under part 'a' (count) or 'b' (position) rules."""
    entries = (parse_entry(line) for line in lines)
    if part == "a":
        return sum(entry.valid_by_count() for entry in entries)
    return sum(entry.valid_by_position() for entry in entries)


def main(argv: Sequence[str] | None = None) -> None:
    args = make_parser("Password philosophy", "testInput.txt").parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    print(f"Result is: {count_valid_passwords(read_lines(args.file), args.part)}")
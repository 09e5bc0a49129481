"""Day 4: validate passport records."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

_STRICT_INT_RE = re.compile(r"[+-]?\d+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HAIR_RE = re.compile(r"#[0-9a-f]{6}")


@dataclass
class Passport:
    """Raw passport fields as strings; missing fields are empty."""

    byr: str = ""
    iyr: str = ""
    eyr: str = ""
    hgt: str = ""
    hcl: str = ""
    ecl: str = ""
    pid: str = ""
    cid: str = ""


_FIELD_NAMES = frozenset(f.name for f in fields(Passport))


def validate_number(value: str, part: str, digits: int, minimum: int, maximum: int) -> bool:
    """Check a numeric field; a 0..0 range means any number of that length."""
    if part == "a":
        return value != ""
    if len(value) != digits or not _STRICT_INT_RE.fullmatch(value):
        return False
    if minimum == 0 and maximum == 0:
        return True
    return minimum <= int(value) <= maximum


def _leading_int(value: str) -> int:
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0


def validate_height(value: str, part: str) -> bool:
    """Heights are 59-76 in or 150-193 cm."""
    if part == "a":
        return value != ""
    if value.find("in") > 0:
        return 59 <= _leading_int(value) <= 76
    if value.find("cm") > 0:
        return 150 <= _leading_int(value) <= 193
    return False


def validate_eye_colour(value: str, part: str) -> bool:
    """Eye colour must be one of the known codes."""
    if part == "a":
        return value != ""
    return value in EYE_COLOURS


def validate_hair_colour(value: str, part: str) -> bool:
    """Hair colour is '#' followed by six lowercase hex digits."""
    if part == "a":
        return value != ""
    return _HAIR_RE.fullmatch(value) is not None


def parse_passports(lines: Iterable[str]) -> list[Passport]:
    """Group blank-line separated records into passports."""
    passports: list[Passport] = []
    current: Passport | None = None
    for line in lines:
        if not line:
            current = None
            continue
        if current is None:
            current = Passport()
            passports.append(current)
        for item in line.split(" "):
            key, sep, value = item.partition(":")
            if sep and value and key in _FIELD_NAMES:
                setattr(current, key, value)
    return passports


def _is_valid(passport: Passport, part: str) -> bool:
    return all(
        (
            validate_number(passport.byr, part, 4, 1920, 2002),
            validate_number(passport.iyr, part, 4, 2010, 2020),
            validate_number(passport.eyr, part, 4, 2020, 2030),
            validate_number(passport.pid, part, 9, 0, 0),
            validate_height(passport.hgt, part),
            validate_hair_colour(passport.hcl, part),
            validate_eye_colour(passport.ecl, part),
        )
    )


def count_valid_passports(passports: Iterable[Passport], part: str) -> int:
    """Count passports whose required fields (all but cid) are valid."""
    return sum(_is_valid(passport, part) for passport in passports)


def main(argv: Sequence[str] | None = None) -> None:
    args = make_parser("Passport processing", "testInput.txt").parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    passports = parse_passports(read_lines(args.file))
    print("Number of valid passports: ", count_valid_passports(passports, args.part))
"""Shared helpers for the daily puzzle solvers: input reading and command-line parsing."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Iterable

BAD_PART_MESSAGE = "Bad part choice. Available choices are 'a' and 'b'"
VALID_PARTS = ("a", "b")

_INT_RE = re.compile(r"[+-]?\d+")


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def parse_ints(lines: Iterable[str]) -> list[int]:
    """Convert each line to an int; lines that are not integers become 0."""
    return [int(line) if _INT_RE.fullmatch(line) else 0 for line in lines]


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two points on a grid."""
    return abs(x1 - x2) + abs(y1 - y2)


def make_parser(description: str, default_file: str) -> argparse.ArgumentParser:
    """Build the standard argument parser used by every day's command."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "-file",
        "--file",
        dest="file",
        default=default_file,
        help="Filename containing the puzzle input",
    )
    parser.add_argument(
        "-part",
        "--part",
        dest="part",
        default="a",
        help="Which part of the puzzle to calculate (a or b)",
    )
    parser.add_argument(
        "-debug",
        "--debug",
        dest="debug",
        action="store_true",
        help="Turn debug output on",
    )
    return parser
"""Day 24: hexagonal floor tiles flipped by routes and by a daily rule."""

from __future__ import annotations

import re
from collections import Counter
from typing import AbstractSet, Iterable, Iterator, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

Tile = tuple[int, int]

# Axial coordinates (q, r).
DIRECTIONS: dict[str, Tile] = {
    "e": (1, 0),
    "se": (0, 1),
    "sw": (-1, 1),
    "w": (-1, 0),
    "nw": (0, -1),
    "ne": (1, -1),
}

DAYS = 100

_STEP_RE = re.compile(r"se|sw|ne|nw|e|w")


def tile_for_route(route: str) -> Tile:
    """Axial coordinates reached by following the route from the reference tile."""
    q = r = 0
    pos = 0
    while pos < len(route):
        match = _STEP_RE.match(route, pos)
        if match is None:
            raise ValueError(f"corrupt route {route!r} at position {pos}")
        dq, dr = DIRECTIONS[match.group()]
        q, r = q + dq, r + dr
        pos = match.end()
    return q, r


def initial_black_tiles(lines: Iterable[str]) -> set[Tile]:
    """Tiles left black after flipping the tile at the end of each route."""
    black: set[Tile] = set()
    for line in lines:
        black ^= {tile_for_route(line)}
    return black


def count_flipped_tiles(lines: Iterable[str]) -> int:
    """Number of black tiles after all routes are followed."""
    return len(initial_black_tiles(lines))


def _neighbours(tile: Tile) -> Iterator[Tile]:
    q, r = tile
    for dq, dr in DIRECTIONS.values():
        yield q + dq, r + dr


def next_day(black: AbstractSet[Tile]) -> set[Tile]:
    """Apply one day's rule to every tile at once.

    A black tile with zero or more than two black neighbours turns white; a
    white tile with exactly two black neighbours turns black.
    """
    counts = Counter(n for tile in black for n in _neighbours(tile))
    return {
        tile
        for tile, count in counts.items()
        if count == 2 or (count == 1 and tile in black)
    }


def _daily_counts(lines: Iterable[str], days: int) -> Iterator[int]:
    black = initial_black_tiles(lines)
    yield len(black)
    for _ in range(days):
        black = next_day(black)
        yield len(black)


def living_display(lines: Iterable[str], days: int) -> int:
    """Number of black tiles after the given number of days."""
    *_, last = _daily_counts(lines, days)
    return last


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Lobby layout", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    lines = read_lines(args.file)
    if args.part == "a":
        if args.debug:
            for route in ("esenee", "esew", "nwwswee", "sesenwnenenewseeswwswswwnenewsewsw"):
                print(f"{route}:", tile_for_route(route))
        print("Flipped black tiles:", count_flipped_tiles(lines))
    else:
        count = 0
        for day, count in enumerate(_daily_counts(lines, DAYS)):
            print(f"Day {day}: {count}")
        print("Flipped black tiles:", count)
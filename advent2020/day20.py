"""Day 20: find the corner tiles of a jigsaw of image tiles."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import Iterable, Mapping, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

_HEADER_RE = re.compile(r"\s*Tile\s+([+-]?\d+):")

CORNER_MATCHES = 4


def tile_edges(picture: str) -> tuple[str, ...]:
    """The eight edges of a square tile given as its rows joined together.

    Order: top, top reversed, bottom, bottom reversed, left, left reversed,
    right, right reversed. Left and right read top to bottom.
    """
    size = math.isqrt(len(picture))
    if size == 0 or size * size != len(picture):
        raise ValueError("tile picture is not square")
    top = picture[:size]
    bottom = picture[-size:]
    left = picture[::size]
    right = picture[size - 1::size]
    return (top, top[::-1], bottom, bottom[::-1], left, left[::-1], right, right[::-1])


def parse_tiles(lines: Iterable[str]) -> dict[int, str]:
    """Map each tile number to its rows joined into one string."""
    tiles: dict[int, str] = {}
    number: int | None = None
    rows: list[str] = []

    def flush() -> None:
        if number is not None and rows:
            tiles[number] = "".join(rows)

    for line in lines:
        if line == "":
            flush()
            rows = []
            continue
        header = _HEADER_RE.match(line)
        if header:
            number = int(header.group(1))
        else:
            rows.append(line)
    flush()
    return tiles


def corner_product(tiles: Mapping[int, str]) -> int:
    """Product of the IDs of tiles whose edges match others exactly four times; 0 if none."""
    edges = {tile: tile_edges(picture) for tile, picture in tiles.items()}
    seen = Counter(edge for tile_edges_ in edges.values() for edge in tile_edges_)
    corners = [
        tile
        for tile, tile_edges_ in edges.items()
        if sum(seen[edge] - 1 for edge in tile_edges_) == CORNER_MATCHES
    ]
    return math.prod(corners) if corners else 0


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Jurassic jigsaw", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part == "a":
        print("Part a answer:", corner_product(parse_tiles(read_lines(args.file))))
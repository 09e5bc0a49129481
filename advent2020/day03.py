"""Day 3: count trees hit when sledding down a repeating slope."""

from __future__ import annotations

import math
from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def count_trees(grid: Sequence[str], slope_x: int, slope_y: int) -> int:
    """Count '#' cells visited moving right slope_x and down slope_y each step."""
    width, height = len(grid[0]), len(grid)
    if slope_y >= height:
        raise IndexError("slope leaves the grid on the first step")
    trees = 0
    x = slope_x
    for y in range(slope_y, height, slope_y):
        if grid[y][x] == "#":
            trees += 1
        x = (x + slope_x) % width
    return trees


def product_of_slopes(grid: Sequence[str]) -> int:
    """Multiply the tree counts of the standard set of slopes."""
    return math.prod(count_trees(grid, dx, dy) for dx, dy in SLOPES)


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Toboggan trajectory", "testInput.txt")
    parser.add_argument("-slopex", "--slopex", dest="slopex", type=int, default=3)
    parser.add_argument("-slopey", "--slopey", dest="slopey", type=int, default=1)
    args = parser.parse_args(argv)
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    grid = read_lines(args.file)
    if args.part == "a":
        print("Number of trees: ", count_trees(grid, args.slopex, args.slopey))
    else:
        print("Result is: ", product_of_slopes(grid))
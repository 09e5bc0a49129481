"""Day 17: Conway cubes in three or four dimensions."""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import AbstractSet, Iterable, Iterator, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

Cell = tuple[int, ...]

ACTIVE = "#"
BOOT_CYCLES = 6


@lru_cache(maxsize=None)
def _offsets(dimensions: int) -> tuple[Cell, ...]:
    return tuple(delta for delta in product((-1, 0, 1), repeat=dimensions) if any(delta))


def _neighbourhood(cell: Cell) -> Iterator[Cell]:
    for delta in _offsets(len(cell)):
        yield tuple(a + b for a, b in zip(cell, delta))


def initial_state(lines: Iterable[str], dimensions: int) -> set[Cell]:
    """Active cells of a 2D starting slice placed in a space of the given dimensions."""
    if dimensions < 2:
        raise ValueError("at least two dimensions are needed for the starting slice")
    padding = (0,) * (dimensions - 2)
    return {
        (x, y, *padding)
        for y, line in enumerate(lines)
        for x, char in enumerate(line)
        if char == ACTIVE
    }


def active_neighbours(cell: Cell, active: AbstractSet[Cell]) -> int:
    """Number of active cells next to the given cell, the cell itself excluded."""
    return sum(1 for neighbour in _neighbourhood(cell) if neighbour in active)


def cycle(active: AbstractSet[Cell]) -> set[Cell]:
    """One boot cycle.

    An active cell stays active with 2 or 3 active neighbours; an inactive
    cell becomes active with exactly 3.
    """
    candidates = set(active)
    for cell in active:
        candidates.update(_neighbourhood(cell))
    result = set()
    for cell in candidates:
        count = active_neighbours(cell, active)
        if count == 3 or (count == 2 and cell in active):
            result.add(cell)
    return result


def count_active_after(lines: Sequence[str], dimensions: int, cycles: int) -> int:
    """Number of active cells after running the given number of cycles."""
    active = initial_state(lines, dimensions)
    for _ in range(cycles):
        active = cycle(active)
    return len(active)


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Conway cubes", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    dimensions = 3 if args.part == "a" else 4
    print("active cubes:", count_active_after(read_lines(args.file), dimensions, BOOT_CYCLES))
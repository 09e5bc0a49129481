"""Day 11: simulate passengers filling a seating area."""

from __future__ import annotations

from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

Grid = Sequence[str]

OCCUPIED = "#"
EMPTY = "L"
FLOOR = "."

_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _inside(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def adjacent_occupied(grid: Grid, row: int, col: int) -> int:
    """Occupied seats among the eight cells around a position."""
    return sum(
        1
        for dr, dc in _DIRECTIONS
        if _inside(grid, row + dr, col + dc) and grid[row + dr][col + dc] == OCCUPIED
    )


def _first_seat(grid: Grid, row: int, col: int, dr: int, dc: int) -> str | None:
    r, c = row + dr, col + dc
    while _inside(grid, r, c):
        if grid[r][c] in (OCCUPIED, EMPTY):
            return grid[r][c]
        r, c = r + dr, c + dc
    return None


def visible_occupied(grid: Grid, row: int, col: int) -> int:
    """Occupied seats that are the first seat seen in each of the eight directions."""
    return sum(1 for dr, dc in _DIRECTIONS if _first_seat(grid, row, col, dr, dc) == OCCUPIED)


def apply_rules(grid: Grid, part: str) -> tuple[tuple[str, ...], bool]:
    """One round of seating changes; returns the new grid and whether anything changed."""
    count, limit = (adjacent_occupied, 4) if part == "a" else (visible_occupied, 5)
    changed = False
    rows = []
    for r, line in enumerate(grid):
        cells = []
        for c, cell in enumerate(line):
            if cell not in (OCCUPIED, EMPTY, FLOOR):
                raise ValueError(f"unexpected cell {cell!r} at x:{c} y:{r}")
            if cell == EMPTY and count(grid, r, c) == 0:
                cell = OCCUPIED
                changed = True
            elif cell == OCCUPIED and count(grid, r, c) >= limit:
                cell = EMPTY
                changed = True
            cells.append(cell)
        rows.append("".join(cells))
    return tuple(rows), changed


def count_occupied(grid: Grid) -> int:
    """Number of occupied seats in the grid."""
    return sum(line.count(OCCUPIED) for line in grid)


def stable_occupied_seats(lines: Iterable[str], part: str) -> int:
    """Occupied seats once the layout stops changing."""
    grid: tuple[str, ...] = tuple(lines)
    changed = True
    while changed:
        grid, changed = apply_rules(grid, part)
    return count_occupied(grid)


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Seating system", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    print("occupied seats:", stable_occupied_seats(read_lines(args.file), args.part))
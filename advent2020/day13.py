"""Day 13: shuttle bus timetables."""

from __future__ import annotations

import math
from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

NO_BUS = "x"
_NO_WAIT = 999999

EXAMPLE_SCHEDULES = (
    "7,13,x,x,59,x,31,19",
    "17,x,13,19",
    "67,7,59,61",
    "67,x,7,59,61",
    "67,7,x,59,61",
    "1789,37,47,1889",
)

PUZZLE_SCHEDULE = (
    "29,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,37,x,x,x,x,x,433,x,x,x,x,x,x,x,x,x,x,"
    "x,x,13,17,x,x,x,x,19,x,x,x,23,x,x,x,x,x,x,x,977,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,"
    "x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,x,41"
)


def _parse_schedule(schedule: str) -> list[int | None]:
    """Bus IDs in schedule order; out-of-service entries become None."""
    return [None if entry == NO_BUS else int(entry) for entry in schedule.split(",")]


def earliest_bus(earliest: int, schedule: str) -> int:
    """ID of the first bus to leave after the earliest time, times the wait for it.

    A bus is taken to arrive at the next whole multiple of its ID strictly
    after the earliest time. Returns 0 when there is no bus in service.
    """
    best_bus, best_wait = 0, _NO_WAIT
    for bus in _parse_schedule(schedule):
        if not bus:
            continue
        wait = (earliest // bus) * bus + bus - earliest
        if wait < best_wait:
            best_bus, best_wait = bus, wait
    return best_bus * best_wait


def earliest_timestamp(schedule: str) -> int:
    """Earliest time at which each bus departs at its offset in the schedule.

    The first and last entries must be buses. The search steps through
    multiples of the first bus, widening the step as each bus is satisfied.
    """
    buses = _parse_schedule(schedule)
    first, last = buses[0], buses[-1]
    if not first or not last:
        raise ValueError("the first and last entries of the schedule must be buses")
    last_pos = len(buses) - 1
    constraints = [(last_pos, last)]
    constraints += [
        (pos, bus) for pos, bus in enumerate(buses) if bus and pos not in (0, last_pos)
    ]
    timestamp = step = first
    for pos, bus in constraints:
        for _ in range(bus):
            if (timestamp + pos) % bus == 0:
                break
            timestamp += step
        else:
            raise ValueError(f"no timestamp satisfies bus {bus} at offset {pos}")
        step = math.lcm(step, bus)
    return timestamp


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Shuttle search", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part == "a":
        lines = read_lines(args.file)
        earliest = int(lines[0])
        print("Earliest time:", earliest)
        print("Part a answer:", earliest_bus(earliest, lines[1]))
    else:
        for schedule in EXAMPLE_SCHEDULES:
            print(f"{schedule} Result is:", earliest_timestamp(schedule))
        print("Real Result is:", earliest_timestamp(PUZZLE_SCHEDULE))
# advent2020

Solvers for the Advent of Code 2020 puzzles, one module per day
(`advent2020.day01` to `advent2020.day25`). Most days read their puzzle input
from a text file and print the answer for part `a` or part `b`.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a day

Every solved day has its own command:

```
advent2020-day01
advent2020-day07
advent2020-day24
```

Commands exist for days 1 to 15, 17 and 19 to 25. They share these options:

- `--file` (also `-file`): the input file. Day 1 defaults to `input.txt`,
  every other day to `testInput.txt`.
- `--part` (also `-part`): `a` (the default) or `b`. Anything else prints
  `Bad part choice. Available choices are 'a' and 'b'`.
- `--debug` (also `-debug`): accepted by every day; day 24 part `a` uses it
  to print the tiles reached by a few sample routes.

Some days take more:

- day 3: `--slopex` (default 3) and `--slopey` (default 1) set the slope for
  part `a`; part `b` multiplies the tree counts of five fixed slopes.
- day 9: `--pre` sets the preamble length (default 5).
- days 7 to 25: `--test`, which on every such day except 7 makes the command
  exit without output.

A few days do not read the input file: day 13 part `b` solves a set of
example schedules and a fixed puzzle schedule, day 15 plays a fixed set of
starting numbers, and day 23 plays fixed example and puzzle cup labels.

## Using the solvers from Python

The solving functions take data that has already been read, so they work
without files. `advent2020.common.read_lines` reads a file into a list of
lines, and `advent2020.common.parse_ints` turns lines into integers.

```python
from advent2020.common import read_lines
from advent2020.day01 import find_pair_product
from advent2020.day05 import seat_id
from advent2020.day15 import play_memory_game

print(find_pair_product([1721, 979, 366, 299, 675, 1456]))
print(seat_id("FBFBBFFRLR"))
print(play_memory_game("0,3,6", 2020))

lines = read_lines("input.txt")
```

Some other entry points:

- `advent2020.day07.parse_rules`, `count_containers` and `count_contained`
  for the bag rules
- `advent2020.day08.parse_program`, `run_until_loop` and `repair_and_run`
  for the boot code
- `advent2020.day11.stable_occupied_seats` for the seating layout
- `advent2020.day13.earliest_bus` and `earliest_timestamp` for the bus
  schedule
- `advent2020.day14.run_program` for the bitmask memory program
- `advent2020.day17.count_active_after` for Conway cubes in 3 or 4 dimensions
- `advent2020.day21.count_safe_ingredients` and `canonical_dangerous_list`
  for the allergen lists
- `advent2020.day23.crab_cups_labels` and `crab_cups_stars` for the cup game
- `advent2020.day24.count_flipped_tiles` and `living_display` for the
  hexagonal tile floor
- `advent2020.day25.encryption_key` for the door handshake

Malformed input raises `ValueError` (or `IndexError` where a position leaves
the grid or program) rather than being silently skipped.

## What is not included

- There are no solvers for days 16 and 18.
- Days 19, 20 and 22 solve part `a` only; with `--part b` their commands
  print nothing.
- Day 25 has no part `b`; with `--part b` its command only echoes the file
  name, part and debug setting.
</br>
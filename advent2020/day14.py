"""Day 14: bitmask memory initialisation."""

from __future__ import annotations

import re
from itertools import product
from typing import Iterable, Iterator, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

WORD_BITS = 36
_WORD_MASK = (1 << WORD_BITS) - 1

_MASK_RE = re.compile(r"mask = (\S+)")
_MEM_RE = re.compile(r"mem\[([+-]?\d+)\] = ([+-]?\d+)")


def to_bits(number: int) -> str:
    """The low 36 bits of a non-negative number as a zero-padded binary string."""
    if number < 0:
        raise ValueError(f"cannot represent negative number {number}")
    return format(number & _WORD_MASK, f"0{WORD_BITS}b")


def apply_value_mask(mask: str, number: int) -> int:
    """Overwrite bits with the mask's 0s and 1s, leaving X positions alone."""
    bits = list(to_bits(number))
    for i, flag in enumerate(mask):
        if flag in "01":
            bits[i] = flag
        elif flag != "X":
            raise ValueError(f"corrupt mask {mask!r}")
    return int("".join(bits), 2)


def _floating(bits: list[str]) -> Iterator[int]:
    positions = [i for i, bit in enumerate(bits) if bit == "X"][::-1]
    for choice in product("01", repeat=len(positions)):
        for pos, bit in zip(positions, choice):
            bits[pos] = bit
        yield int("".join(bits), 2)


def floating_addresses(mask: str, address: int) -> list[int]:
    """Every address produced by a mask whose 1s set bits and whose Xs float."""
    bits = list(to_bits(address))
    for i, flag in enumerate(mask):
        if flag in "1X":
            bits[i] = flag
        elif flag != "0":
            raise ValueError(f"corrupt mask {mask!r}")
    return list(_floating(bits))


def run_program(lines: Iterable[str], part: str) -> int:
    """Run the initialisation program and return the sum of memory.

    Part 'a' masks the values written; part 'b' masks the addresses.
    """
    memory: dict[int, int] = {}
    mask = ""
    for line in lines:
        mask_match = _MASK_RE.match(line)
        if mask_match:
            mask = mask_match.group(1)
            continue
        mem_match = _MEM_RE.match(line)
        if mem_match is None:
            raise ValueError(f"unrecognised program line: {line!r}")
        address, value = int(mem_match.group(1)), int(mem_match.group(2))
        if part == "a":
            memory[address] = apply_value_mask(mask, value)
        else:
            for target in floating_addresses(mask, address):
                memory[target] = value
    return sum(memory.values())


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Docking data", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    lines = read_lines(args.file)
    if args.part == "a":
        print("Part a answer:", run_program(lines, "a"))
    else:
        print("Part b answer:", run_program(lines, "b"))
"""Day 8: a tiny boot-code interpreter."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

_SWAP = {"nop": "jmp", "jmp": "nop"}


@dataclass(frozen=True)
class Instruction:
    """One boot-code operation and its argument."""

    operator: str
    amount: int


def parse_program(lines: Iterable[str]) -> list[Instruction]:
    """Parse lines such as 'acc +3' into instructions."""
    program = []
    for line in lines:
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"malformed instruction: {line!r}")
        program.append(Instruction(parts[0], int(parts[1])))
    return program


def step(instruction: Instruction, line: int, accumulator: int) -> tuple[int, int]:
    """Execute one instruction, returning the next line and accumulator."""
    if instruction.operator == "nop":
        return line + 1, accumulator
    if instruction.operator == "acc":
        return line + 1, accumulator + instruction.amount
    if instruction.operator == "jmp":
        return line + instruction.amount, accumulator
    raise ValueError(f"invalid operator: {instruction.operator!r}")


def _execute(program: Sequence[Instruction]) -> tuple[bool, int]:
    """Run until a line repeats or the end is passed; report termination and accumulator."""
    visited: set[int] = set()
    line = accumulator = 0
    while line not in visited:
        if line >= len(program):
            return True, accumulator
        if line < 0:
            raise IndexError(f"jump to line {line} leaves the program")
        visited.add(line)
        line, accumulator = step(program[line], line, accumulator)
    return False, accumulator


def run_until_loop(program: Sequence[Instruction]) -> int:
    """Accumulator value just before any instruction would run a second time."""
    _, accumulator = _execute(program)
    return accumulator


def repair_and_run(program: Sequence[Instruction]) -> int:
    """Swap one nop/jmp so the program terminates, returning its accumulator."""
    for index, instruction in enumerate(program):
        swapped = _SWAP.get(instruction.operator)
        if swapped is None:
            continue
        candidate = list(program)
        candidate[index] = replace(instruction, operator=swapped)
        terminated, accumulator = _execute(candidate)
        if terminated:
            return accumulator
    raise ValueError("no single nop/jmp change makes the program terminate")


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Handheld halting", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    program = parse_program(read_lines(args.file))
    if args.part == "a":
        print("Accumulator:", run_until_loop(program))
    else:
        print("Accumulator on working code:", repair_and_run(program))
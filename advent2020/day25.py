"""Day 25: break the door's handshake encryption."""

from __future__ import annotations

from typing import Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

SUBJECT = 7
MODULUS = 20201227


def find_loop_size(public_key: int) -> int:
    """Smallest loop size that transforms the subject 7 into the public key."""
    if not 0 < public_key < MODULUS:
        raise ValueError(f"public key {public_key} is out of range")
    value = 1
    for loop_size in range(1, MODULUS):
        value = value * SUBJECT % MODULUS
        if value == public_key:
            return loop_size
    raise ValueError(f"public key {public_key} cannot be reached")


def transform(subject: int, loop_size: int) -> int:
    """Multiply by the subject loop_size times modulo 20201227, starting at 1."""
    if loop_size < 0:
        raise ValueError("loop size must not be negative")
    return pow(subject, loop_size, MODULUS)


def encryption_key(card_key: int, door_key: int) -> int:
    """The shared key: the door's public key transformed by the card's loop size."""
    return transform(door_key, find_loop_size(card_key))


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Combo breaker", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part != "a":
        print(args.file, args.part, args.debug)
        return
    lines = read_lines(args.file)
    card_key, door_key = int(lines[0]), int(lines[1])
    card_loop = find_loop_size(card_key)
    door_loop = find_loop_size(door_key)
    print(f"publicKey: {card_key} loopSize: {card_loop}")
    print(f"publicKey: {door_key} loopSize: {door_loop}")
    first = transform(door_key, card_loop)
    second = transform(card_key, door_loop)
    print(f"Encryption 1: {first} 2: {second}")
    print("Encryption key:", first)
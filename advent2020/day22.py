"""Day 22: the card game Combat."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, parse_ints, read_lines

PLAYER_ONE = "Player 1:"
PLAYER_TWO = "Player 2:"


def read_deck(lines: Iterable[str], header: str) -> list[int]:
    """Cards listed after the header line, up to the next blank line."""
    cards: list[str] = []
    in_section = False
    for line in lines:
        if line == "" and in_section:
            break
        if line == header:
            in_section = True
        elif in_section:
            cards.append(line)
    return parse_ints(cards)


def play_combat(deck1: Sequence[int], deck2: Sequence[int]) -> list[int]:
    """Play until one player holds every card; returns the winning deck.

    The higher card wins each round and goes to the bottom of the winner's
    deck, followed by the losing card. Equal cards cannot be resolved.
    """
    hand1, hand2 = deque(deck1), deque(deck2)
    while hand1 and hand2:
        card1, card2 = hand1.popleft(), hand2.popleft()
        if card1 > card2:
            hand1.extend((card1, card2))
        elif card2 > card1:
            hand2.extend((card2, card1))
        else:
            raise ValueError(f"draw between two cards of value {card1}")
    return list(hand1 or hand2)


def score(deck: Sequence[int]) -> int:
    """Each card times its position counted from the bottom, summed."""
    return sum(card * position for position, card in zip(range(len(deck), 0, -1), deck))


def winning_score(lines: Sequence[str]) -> int:
    """Score of the winning deck after a game of Combat."""
    deck1 = read_deck(lines, PLAYER_ONE)
    deck2 = read_deck(lines, PLAYER_TWO)
    return score(play_combat(deck1, deck2))


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Crab combat", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    if args.part == "a":
        print("Winning Score:", winning_score(read_lines(args.file)))
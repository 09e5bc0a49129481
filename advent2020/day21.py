"""Day 21: work out which ingredients carry which allergens."""

from __future__ import annotations

from typing import Iterable, Sequence

from .common import BAD_PART_MESSAGE, VALID_PARTS, make_parser, read_lines

_CONTAINS = " (contains "


def _parse_food(line: str) -> tuple[list[str], list[str]]:
    head, sep, tail = line.partition(_CONTAINS)
    if not sep:
        raise ValueError(f"food line lists no allergens: {line!r}")
    return head.split(" "), tail.removesuffix(")").split(", ")


def analyse_foods(
    lines: Iterable[str],
) -> tuple[list[str], dict[str, str], dict[str, str]]:
    """Resolve allergens to ingredients.

    Returns every ingredient occurrence in input order, a map of allergen to
    ingredient and the reverse map of ingredient to allergen.
    """
    ingredients: list[str] = []
    candidates: dict[str, list[str]] = {}
    for line in lines:
        food_ingredients, allergens = _parse_food(line)
        for allergen in allergens:
            if allergen in candidates:
                candidates[allergen] = [i for i in candidates[allergen] if i in food_ingredients]
            else:
                candidates[allergen] = list(food_ingredients)
        ingredients.extend(food_ingredients)

    found_allergens: dict[str, str] = {}
    found_ingredients: dict[str, str] = {}
    while candidates:
        allergen = next((a for a, options in candidates.items() if len(options) == 1), None)
        if allergen is None:
            raise ValueError("allergens cannot be resolved to single ingredients")
        ingredient = candidates.pop(allergen)[0]
        found_allergens[allergen] = ingredient
        found_ingredients[ingredient] = allergen
        for remaining, options in candidates.items():
            candidates[remaining] = [i for i in options if i != ingredient]
    return ingredients, found_allergens, found_ingredients


def count_safe_ingredients(lines: Iterable[str]) -> int:
    """Occurrences of ingredients that carry no allergen."""
    ingredients, _, found_ingredients = analyse_foods(lines)
    return sum(1 for ingredient in ingredients if ingredient not in found_ingredients)


def canonical_dangerous_list(lines: Iterable[str]) -> str:
    """Dangerous ingredients, ordered by their allergen, joined with commas."""
    _, found_allergens, _ = analyse_foods(lines)
    return ",".join(found_allergens[allergen] for allergen in sorted(found_allergens))


def main(argv: Sequence[str] | None = None) -> None:
    parser = make_parser("Allergen assessment", "testInput.txt")
    parser.add_argument("-test", "--test", dest="test", action="store_true", help="Run tests only")
    args = parser.parse_args(argv)
    if args.test:
        return
    if args.part not in VALID_PARTS:
        print(BAD_PART_MESSAGE)
        return
    lines = read_lines(args.file)
    if args.part == "a":
        print("Non Allergens appear:", count_safe_ingredients(lines))
    else:
        print("Canonical List:", canonical_dangerous_list(lines))
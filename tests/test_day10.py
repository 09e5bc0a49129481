import pytest

from advent2020.common import BAD_PART_MESSAGE
from advent2020.day10 import count_arrangements, jolt_differences_product, main

SMALL = [16, 10, 15, 5, 1, 11, 7, 19, 6, 12, 4]
LARGE = [
    28, 33, 18, 42, 31, 14, 46, 20, 48, 47, 24, 23, 49, 45, 19, 38,
    39, 11, 1, 32, 25, 35, 8, 17, 7, 9, 4, 2, 34, 10, 3,
]


def test_small_example_differences():
    assert jolt_differences_product(SMALL) == 35


def test_small_example_arrangements():
    assert count_arrangements(SMALL) == 8


def test_large_example_arrangements():
    assert count_arrangements(LARGE) == 19208


def test_order_does_not_matter():
    assert count_arrangements(list(reversed(LARGE))) == count_arrangements(LARGE)
    assert jolt_differences_product(sorted(LARGE)) == jolt_differences_product(LARGE)


def test_consecutive_chain_counts_one_steps():
    adapters = list(range(1, 11))
    assert jolt_differences_product(adapters) == len(adapters)


def test_empty_adapters_rejected():
    with pytest.raises(ValueError):
        jolt_differences_product([])


def test_main_bad_part(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(map(str, SMALL)) + "\n")
    main(["-file", str(path), "-part", "q"])
    assert capsys.readouterr().out.strip() == BAD_PART_MESSAGE
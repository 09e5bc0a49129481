import pytest

from advent2020.day02 import PasswordEntry, count_valid_passwords, main, parse_entry

EXAMPLE = ["1-3 a: abcde", "1-3 b: cdefg", "2-9 c: ccccccccc"]


def test_parse_entry_fields():
    assert parse_entry("1-3 a: abcde") == PasswordEntry(1, 3, "a", "abcde")


def test_parse_entry_malformed():
    with pytest.raises(ValueError):
        parse_entry("not a policy")


def test_count_part_a_example():
    assert count_valid_passwords(EXAMPLE, "a") == 2


def test_count_part_b_example():
    assert count_valid_passwords(EXAMPLE, "b") == 1


def test_valid_by_count_individual():
    assert [parse_entry(line).valid_by_count() for line in EXAMPLE] == [True, False, True]


def test_valid_by_position_individual():
    assert [parse_entry(line).valid_by_position() for line in EXAMPLE] == [True, False, False]


def test_position_out_of_range():
    with pytest.raises(IndexError):
        PasswordEntry(1, 10, "a", "abc").valid_by_position()


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE), encoding="utf-8")
    main(["-file", str(path), "-part", "a"])
    assert "Result is: 2" in capsys.readouterr().out
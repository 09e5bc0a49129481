from advent2020.day06 import count_group_answers

EXAMPLE = ["abc", "", "a", "b", "c", "", "ab", "ac", "", "a", "a", "a", "a", "", "b"]


def test_example_part_a():
    assert count_group_answers(EXAMPLE, "a") == 11


def test_example_part_b():
    assert count_group_answers(EXAMPLE, "b") == 6


def test_everyone_never_exceeds_anyone():
    lines = ["xyz", "xy", "", "q", "qr", "", "m"]
    assert count_group_answers(lines, "b") <= count_group_answers(lines, "a")


def test_single_person_groups_agree():
    lines = ["abc", "", "de", "", "f"]
    assert count_group_answers(lines, "a") == count_group_answers(lines, "b")
    assert count_group_answers(lines, "a") == len("abcdef")


def test_trailing_blank_line_changes_nothing():
    assert count_group_answers(EXAMPLE + [""], "a") == count_group_answers(EXAMPLE, "a")
    assert count_group_answers(EXAMPLE + [""], "b") == count_group_answers(EXAMPLE, "b")


def test_empty_input():
    assert count_group_answers([], "a") == 0
    assert count_group_answers([], "b") == 0
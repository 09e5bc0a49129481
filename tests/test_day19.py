import pytest

from advent2020.day19 import Rule, count_matching, match_rule, parse_input

EXAMPLE = [
    "0: 4 1 5",
    "1: 2 3 | 3 2",
    "2: 4 4 | 5 5",
    "3: 4 5 | 5 4",
    '4: "a"',
    '5: "b"',
    "",
    "ababbb",
    "bababa",
    "abbbab",
    "aaabbb",
    "aaaabbb",
]

SIMPLE = ["0: 1 2", '1: "a"', '2: "b"', ""]


def test_parse_input_rules_and_messages():
    rules, messages = parse_input(EXAMPLE)
    assert rules["4"] == Rule(char="a")
    assert rules["1"] == Rule(sub_rules=(("2", "3"), ("3", "2")))
    assert rules["0"].sub_rules == (("4", "1", "5"),)
    assert messages == EXAMPLE[7:]


def test_parse_input_without_messages():
    rules, messages = parse_input(['0: "a"'])
    assert messages == []
    assert rules == {"0": Rule(char="a")}


def test_parse_input_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse_input(["0 4 1 5", ""])


def test_count_matching_example():
    assert count_matching(EXAMPLE) == 2


def test_match_rule_consumes_whole_message():
    rules, _ = parse_input(SIMPLE)
    assert match_rule(rules, "0", "ab", 0) == (True, 2)


def test_match_rule_rejects_wrong_order():
    rules, _ = parse_input(SIMPLE)
    ok, _ = match_rule(rules, "0", "ba", 0)
    assert ok is False


def test_match_rule_end_of_message_reports_position_zero():
    rules, _ = parse_input(SIMPLE)
    assert match_rule(rules, "0", "a", 0) == (True, 0)


def test_short_message_is_not_counted():
    assert count_matching(SIMPLE + ["a", "ab", "abb"]) == 1


def test_unknown_rule_does_not_match():
    rules, _ = parse_input(SIMPLE)
    assert match_rule(rules, "99", "ab", 0) == (False, 0)


def test_matching_messages_all_have_even_structure():
    rules, messages = parse_input(EXAMPLE)
    for message in messages:
        ok, pos = match_rule(rules, "0", message, 0)
        if ok and pos == len(message):
            assert len(message) == 6
            assert message[0] == "a" and message[-1] == "b"
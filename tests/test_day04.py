import pytest

from advent2020.day04 import (
    Passport,
    count_valid_passports,
    main,
    parse_passports,
    validate_eye_colour,
    validate_hair_colour,
    validate_height,
    validate_number,
)

EXAMPLE = """\
ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in""".splitlines()

INVALID = """\
eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946

hcl:dab227 iyr:2012
ecl:brn hgt:182cm pid:021572410 eyr:2020 byr:1992 cid:277

hgt:59cm ecl:zzz
eyr:2038 hcl:74454a iyr:2023
pid:3556412378 byr:2007""".splitlines()


@pytest.mark.parametrize(
    ("colour", "expected"), [("brn", True), ("wat", False)]
)
def test_eye_colour(colour, expected):
    assert validate_eye_colour(colour, "b") is expected


@pytest.mark.parametrize(
    ("value", "digits", "low", "high", "expected"),
    [
        ("000000001", 9, 0, 0, True),
        ("0123456789", 9, 0, 0, False),
        ("2002", 4, 1920, 2002, True),
        ("2003", 4, 1920, 2002, False),
    ],
)
def test_validate_number(value, digits, low, high, expected):
    assert validate_number(value, "b", digits, low, high) is expected


@pytest.mark.parametrize(
    ("colour", "expected"), [("#123abc", True), ("#123abz", False), ("123abc", False)]
)
def test_hair_colour(colour, expected):
    assert validate_hair_colour(colour, "b") is expected


@pytest.mark.parametrize(
    ("height", "expected"),
    [("60in", True), ("190cm", True), ("190in", False), ("190", False)],
)
def test_height(height, expected):
    assert validate_height(height, "b") is expected


def test_part_a_only_checks_presence():
    assert validate_number("x", "a", 4, 1920, 2002) is True
    assert validate_number("", "a", 4, 1920, 2002) is False
    assert validate_height("", "a") is False
    assert validate_hair_colour("zzz", "a") is True


def test_parse_passports():
    passports = parse_passports(EXAMPLE)
    assert len(passports) == 4
    assert passports[0].cid == "147"
    assert passports[1].hgt == ""


def test_count_part_a_example():
    assert count_valid_passports(parse_passports(EXAMPLE), "a") == 2


def test_invalid_examples_fail_part_b():
    passports = parse_passports(INVALID)
    assert count_valid_passports(passports, "b") == 0
    assert count_valid_passports(passports, "b") <= count_valid_passports(passports, "a")


def test_empty_passport_never_valid():
    assert count_valid_passports([Passport()], "a") == 0
    assert count_valid_passports([Passport()], "b") == 0


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE), encoding="utf-8")
    main(["-file", str(path), "-part", "a"])
    assert "Number of valid passports:  2" in capsys.readouterr().out
import pytest

from advent2020.day13 import PUZZLE_SCHEDULE, earliest_bus, earliest_timestamp, main


def _satisfies(schedule, timestamp):
    entries = schedule.split(",")
    return all(
        (timestamp + pos) % int(bus) == 0
        for pos, bus in enumerate(entries)
        if bus != "x"
    )


def test_earliest_bus_worked_example():
    assert earliest_bus(939, "7,13,x,x,59,x,31,19") == 295


def test_earliest_bus_result_is_multiple_of_chosen_bus():
    result = earliest_bus(100, "7,13")
    assert result % 7 == 0 or result % 13 == 0
    assert result > 0


def test_earliest_bus_with_no_buses_is_zero():
    assert earliest_bus(100, "x,x") == 0


def test_earliest_bus_exact_multiple_waits_full_cycle():
    # arrival is always strictly after the earliest time
    assert earliest_bus(10, "5") == 5 * 5


def test_earliest_timestamp_worked_example():
    assert earliest_timestamp("7,13,x,x,59,x,31,19") == 1068781


def test_earliest_timestamp_short_example():
    assert earliest_timestamp("17,x,13,19") == 3417


@pytest.mark.parametrize(
    "schedule",
    ["67,7,59,61", "67,x,7,59,61", "67,7,x,59,61", "1789,37,47,1889", PUZZLE_SCHEDULE],
)
def test_earliest_timestamp_satisfies_every_bus(schedule):
    timestamp = earliest_timestamp(schedule)
    assert timestamp > 0
    assert _satisfies(schedule, timestamp)


def test_earliest_timestamp_is_minimal_for_small_schedule():
    schedule = "3,x,5"
    timestamp = earliest_timestamp(schedule)
    assert timestamp == 3
    assert not any(_satisfies(schedule, t) for t in range(3, timestamp, 3))


def test_single_bus_returns_its_id():
    assert earliest_timestamp("11") == 11


@pytest.mark.parametrize("schedule", ["x,7", "7,x"])
def test_missing_first_or_last_bus_raises(schedule):
    with pytest.raises(ValueError):
        earliest_timestamp(schedule)


def test_unsatisfiable_schedule_raises():
    with pytest.raises(ValueError):
        earliest_timestamp("4,6")


def test_main_part_a_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("939\n7,13,x,x,59,x,31,19\n")
    main(["-file", str(path), "-part", "a"])
    assert "Part a answer: 295" in capsys.readouterr().out


def test_main_bad_part(capsys):
    main(["-part", "q"])
    assert "Bad part choice" in capsys.readouterr().out
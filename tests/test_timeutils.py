from datetime import time

import pytest

from frontdesk.scheduling.timeutils import day_time_slots, format_minutes, from_minutes, slot_end, to_minutes


def test_to_minutes_accepts_time_and_strings():
    assert to_minutes(time(9, 15)) == 555
    assert to_minutes("09:15") == 555
    assert to_minutes("18:30:00") == 1110


@pytest.mark.parametrize("value", ["9", "24:00", "10:60", "ab:cd", "1:2:3:4"])
def test_to_minutes_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        to_minutes(value)


def test_format_minutes_pads():
    assert format_minutes(0) == "00:00"
    assert format_minutes(9 * 60 + 5) == "09:05"
    assert format_minutes(18 * 60 + 30) == "18:30"


def test_from_minutes_round_trips_within_a_day():
    assert from_minutes(555) == time(9, 15)
    with pytest.raises(ValueError):
        from_minutes(24 * 60)


def test_slot_end():
    assert slot_end("09:00", 30) == 570
    assert slot_end(time(17, 30), 60) == 1110


def test_default_day_grid_runs_from_eight_to_six():
    slots = day_time_slots()

    assert slots[0] == time(8, 0)
    assert slots[-1] == time(18, 0)
    assert len(slots) == 21
    assert time(12, 30) in slots


def test_day_grid_rejects_non_positive_step():
    with pytest.raises(ValueError):
        day_time_slots(step=0)

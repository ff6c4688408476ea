from datetime import date, timedelta

import pytest

from frontdesk.scheduling.date_range import (
    DateRange,
    Direction,
    ViewMode,
    add_months,
    month_grid,
    navigate,
    period_label,
    resolve_date_range,
)


def every_day(year):
    day = date(year, 1, 1)
    while day.year == year:
        yield day
        day += timedelta(days=1)


def test_day_range_is_the_reference_date():
    window = resolve_date_range(date(2024, 3, 6), ViewMode.DAY)
    assert window.start == window.end == date(2024, 3, 6)


def test_week_range_runs_sunday_to_saturday():
    # 2024-03-06 is a Wednesday
    window = resolve_date_range(date(2024, 3, 6), "week")
    assert window == DateRange(date(2024, 3, 3), date(2024, 3, 9))


def test_week_range_when_reference_is_sunday():
    window = resolve_date_range(date(2024, 3, 3), ViewMode.WEEK)
    assert window.start == date(2024, 3, 3)


def test_biweekly_range_spans_fourteen_days():
    window = resolve_date_range(date(2024, 3, 6), ViewMode.BIWEEKLY)
    assert window.start == date(2024, 3, 3)
    assert window.end == date(2024, 3, 16)
    assert len(window.days()) == 14


def test_month_range_in_leap_february():
    window = resolve_date_range(date(2024, 2, 15), ViewMode.MONTH)
    assert window == DateRange(date(2024, 2, 1), date(2024, 2, 29))


def test_month_range_in_common_february():
    assert resolve_date_range(date(2023, 2, 10), ViewMode.MONTH).end == date(2023, 2, 28)


def test_unknown_view_mode_is_rejected():
    with pytest.raises(ValueError):
        resolve_date_range(date(2024, 3, 6), "fortnight")


@pytest.mark.parametrize("view_mode", list(ViewMode))
def test_range_invariants_hold_for_every_day(view_mode):
    for day in list(every_day(2024)) + list(every_day(2025)):
        window = resolve_date_range(day, view_mode)

        assert window.start <= window.end
        assert day in window
        if view_mode in (ViewMode.WEEK, ViewMode.BIWEEKLY):
            # date.weekday(): Sunday == 6
            assert window.start.weekday() == 6
        if view_mode is ViewMode.MONTH:
            assert window.start.day == 1
            assert (window.end + timedelta(days=1)).day == 1
            assert 28 <= window.end.day <= 31


def test_date_range_iterates_inclusive():
    window = DateRange(date(2024, 2, 28), date(2024, 3, 1))
    assert list(window) == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


@pytest.mark.parametrize(
    "view_mode, expected_next",
    [
        (ViewMode.DAY, date(2024, 3, 7)),
        (ViewMode.WEEK, date(2024, 3, 13)),
        (ViewMode.BIWEEKLY, date(2024, 3, 20)),
        (ViewMode.MONTH, date(2024, 4, 6)),
    ],
)
def test_navigate_steps_one_view_length(view_mode, expected_next):
    reference = date(2024, 3, 6)
    assert navigate(reference, view_mode, Direction.NEXT) == expected_next
    assert navigate(expected_next, view_mode, Direction.PREVIOUS) == reference


def test_month_navigation_clamps_to_shorter_months():
    assert navigate(date(2024, 1, 31), ViewMode.MONTH, "next") == date(2024, 2, 29)
    assert navigate(date(2023, 1, 31), ViewMode.MONTH, "next") == date(2023, 2, 28)
    assert navigate(date(2024, 3, 31), ViewMode.MONTH, "previous") == date(2024, 2, 29)


def test_month_navigation_is_not_reversible_at_month_end():
    there = navigate(date(2024, 1, 31), ViewMode.MONTH, Direction.NEXT)
    back = navigate(there, ViewMode.MONTH, Direction.PREVIOUS)
    assert back == date(2024, 1, 29)


def test_month_navigation_crosses_years():
    assert navigate(date(2024, 12, 15), ViewMode.MONTH, Direction.NEXT) == date(2025, 1, 15)
    assert navigate(date(2025, 1, 15), ViewMode.MONTH, Direction.PREVIOUS) == date(2024, 12, 15)
    assert add_months(date(2024, 2, 29), 12) == date(2025, 2, 28)


@pytest.mark.parametrize("view_mode", list(ViewMode))
def test_navigation_round_trip(view_mode):
    for day in every_day(2024):
        if view_mode is ViewMode.MONTH and day.day > 28:
            continue
        forward = navigate(day, view_mode, Direction.NEXT)
        assert navigate(forward, view_mode, Direction.PREVIOUS) == day


def test_month_grid_pads_to_sunday():
    # 1 February 2024 is a Thursday
    grid = month_grid(date(2024, 2, 15))

    assert grid[:4] == [None, None, None, None]
    assert grid[4] == date(2024, 2, 1)
    assert grid[-1] == date(2024, 2, 29)
    assert len(grid) == 4 + 29


def test_month_grid_without_padding_when_month_starts_on_sunday():
    # 1 September 2024 is a Sunday
    assert month_grid(date(2024, 9, 10))[0] == date(2024, 9, 1)


def test_period_labels():
    assert period_label(date(2024, 2, 15), ViewMode.DAY) == "15 February 2024"
    assert period_label(date(2024, 3, 6), ViewMode.WEEK) == "3 - 9 March 2024"
    assert period_label(date(2024, 2, 28), ViewMode.BIWEEKLY) == "25 February - 9 March 2024"
    assert period_label(date(2024, 2, 15), ViewMode.MONTH) == "February 2024"
    assert period_label(date(2024, 12, 31), ViewMode.WEEK) == "29 December 2024 - 4 January 2025"

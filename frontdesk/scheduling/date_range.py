"""Date-range resolution and navigation for the calendar views.

Every function here is pure: the reference date comes in, a new value goes
out, nothing reads the clock.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterator

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class ViewMode(str, Enum):
    """Calendar granularity."""
    DAY = "day"
    WEEK = "week"
    BIWEEKLY = "biweekly"
    MONTH = "month"


class Direction(str, Enum):
    """Navigation direction."""
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end

    def __iter__(self) -> Iterator[date]:
        return iter(self.days())

    def days(self) -> list[date]:
        """Every date from start to end, inclusive."""
        return [self.start + timedelta(days=offset) for offset in range((self.end - self.start).days + 1)]


def week_start(reference: date) -> date:
    """The Sunday on or before ``reference``."""
    # date.weekday() is Monday=0; shift so Sunday=0
    days_since_sunday = (reference.weekday() + 1) % 7
    return reference - timedelta(days=days_since_sunday)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(reference: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = reference.year * 12 + (reference.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    return reference.replace(year=year, month=month, day=min(reference.day, last_day_of_month(year, month)))


def resolve_date_range(reference: date, view_mode: ViewMode | str) -> DateRange:
    """Compute the inclusive date window a view displays around ``reference``."""
    view_mode = ViewMode(view_mode)

    if view_mode is ViewMode.DAY:
        return DateRange(reference, reference)

    if view_mode is ViewMode.WEEK:
        start = week_start(reference)
        return DateRange(start, start + timedelta(days=6))

    if view_mode is ViewMode.BIWEEKLY:
        start = week_start(reference)
        return DateRange(start, start + timedelta(days=13))

    start = reference.replace(day=1)
    end = reference.replace(day=last_day_of_month(reference.year, reference.month))
    return DateRange(start, end)


NAVIGATION_STEP_DAYS = {
    ViewMode.DAY: 1,
    ViewMode.WEEK: 7,
    ViewMode.BIWEEKLY: 14,
}


def navigate(current: date, view_mode: ViewMode | str, direction: Direction | str) -> date:
    """Move the reference date one view-length backwards or forwards.

    Month navigation clamps to the end of shorter months, so it is not
    reversible from the 29th onwards: Jan 31 -> Feb 29 -> Mar 29.
    """
    view_mode = ViewMode(view_mode)
    sign = 1 if Direction(direction) is Direction.NEXT else -1

    if view_mode is ViewMode.MONTH:
        return add_months(current, sign)
    return current + timedelta(days=sign * NAVIGATION_STEP_DAYS[view_mode])


def month_grid(reference: date) -> list[date | None]:
    """Sunday-first month layout: one ``None`` per weekday before the 1st, then every day."""
    first = reference.replace(day=1)
    leading = (first.weekday() + 1) % 7
    days = resolve_date_range(reference, ViewMode.MONTH).days()
    return [None] * leading + days


def period_label(reference: date, view_mode: ViewMode | str) -> str:
    """Heading shown above a view, e.g. ``3 - 9 March 2024``."""
    view_mode = ViewMode(view_mode)
    window = resolve_date_range(reference, view_mode)
    start, end = window.start, window.end

    if view_mode is ViewMode.MONTH:
        return f"{MONTH_NAMES[reference.month - 1]} {reference.year}"
    if view_mode is ViewMode.DAY:
        return f"{start.day} {MONTH_NAMES[start.month - 1]} {start.year}"
    if start.month == end.month:
        return f"{start.day} - {end.day} {MONTH_NAMES[start.month - 1]} {start.year}"
    if start.year == end.year:
        return f"{start.day} {MONTH_NAMES[start.month - 1]} - {end.day} {MONTH_NAMES[end.month - 1]} {end.year}"
    return (
        f"{start.day} {MONTH_NAMES[start.month - 1]} {start.year} - "
        f"{end.day} {MONTH_NAMES[end.month - 1]} {end.year}"
    )

"""Time-of-day arithmetic shared by the overlap check and the day grid.

All times are reduced to minutes since midnight. Appointments never cross
midnight, so a single integer per boundary is enough.
"""

from datetime import time

MINUTES_PER_DAY = 24 * 60


def to_minutes(value: time | str) -> int:
    """Convert a time (or an ``HH:MM`` / ``HH:MM:SS`` string) to minutes since midnight."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid time of day: {value!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid time of day: {value!r}") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time of day: {value!r}")
    return hours * 60 + minutes


def from_minutes(minutes: int) -> time:
    """Inverse of ``to_minutes`` for values inside a single day."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range for a single day: {minutes}")
    return time(hour=minutes // 60, minute=minutes % 60)


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def slot_end(start: time | str, duration: int) -> int:
    """End of a slot, in minutes since midnight."""
    return to_minutes(start) + duration


def day_time_slots(
    day_start: time | str = "08:00",
    last_start: time | str = "18:00",
    step: int = 30,
) -> list[time]:
    """Bookable start times of a working day, ``day_start`` to ``last_start`` inclusive."""
    if step <= 0:
        raise ValueError("step must be positive")

    slots = []
    current = to_minutes(day_start)
    last = to_minutes(last_start)
    while current <= last:
        slots.append(from_minutes(current))
        current += step
    return slots

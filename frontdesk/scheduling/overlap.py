"""Overlap validation for bookings of one professional on one day.

The caller fetches the day's appointments; this module only decides. Two
slots conflict when their half-open ``[start, start + duration)`` intervals
intersect, so back-to-back bookings (one ends at 09:00, the next starts at
09:00) are allowed.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Iterable, Mapping

from frontdesk.scheduling.timeutils import format_minutes, to_minutes


@dataclass(frozen=True)
class Candidate:
    """A booking about to be created or edited."""

    date: date
    time: time | str
    duration: int
    professional_id: Any
    exclude_appointment_id: Any = None


@dataclass(frozen=True)
class OverlapResult:
    """Outcome of an overlap check."""

    has_conflict: bool
    conflicting_appointment: Any = None
    message: str | None = None


NO_CONFLICT = OverlapResult(has_conflict=False)


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def intervals_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Half-open interval intersection; touching boundaries do not overlap."""
    return start < other_end and end > other_start


def conflict_message(existing_start: int, existing_end: int) -> str:
    return (
        "Schedule conflict! There is already an appointment from "
        f"{format_minutes(existing_start)} to {format_minutes(existing_end)}"
    )


def check_overlap(candidate: Candidate, existing: Iterable[Any]) -> OverlapResult:
    """Return the first existing appointment the candidate collides with.

    ``existing`` holds the appointments already booked for the candidate's
    professional on the candidate's date. Items may be ORM rows, schema
    objects or mappings, as long as they expose ``id``, ``time`` and
    ``duration``. The appointment whose id equals
    ``candidate.exclude_appointment_id`` is skipped so an edit never
    conflicts with itself.
    """
    start = to_minutes(candidate.time)
    end = start + candidate.duration

    for appointment in existing:
        appointment_id = _field(appointment, "id")
        if candidate.exclude_appointment_id is not None and appointment_id == candidate.exclude_appointment_id:
            continue

        other_start = to_minutes(_field(appointment, "time"))
        other_end = other_start + _field(appointment, "duration")

        if intervals_overlap(start, end, other_start, other_end):
            return OverlapResult(
                has_conflict=True,
                conflicting_appointment=appointment,
                message=conflict_message(other_start, other_end),
            )

    return NO_CONFLICT


def available_slots(
    existing: Iterable[Any],
    duration: int,
    slots: Iterable[time],
    exclude_appointment_id: Any = None,
) -> list[time]:
    """Start times from ``slots`` where a booking of ``duration`` minutes fits."""
    booked = []
    for appointment in existing:
        if exclude_appointment_id is not None and _field(appointment, "id") == exclude_appointment_id:
            continue
        other_start = to_minutes(_field(appointment, "time"))
        booked.append((other_start, other_start + _field(appointment, "duration")))

    free = []
    for slot in slots:
        start = to_minutes(slot)
        end = start + duration
        if not any(intervals_overlap(start, end, other_start, other_end) for other_start, other_end in booked):
            free.append(slot)
    return free

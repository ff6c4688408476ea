"""Scheduling core - pure date-range, overlap and status logic (no I/O)."""

from frontdesk.scheduling.date_range import (
    DateRange,
    Direction,
    ViewMode,
    month_grid,
    navigate,
    period_label,
    resolve_date_range,
)
from frontdesk.scheduling.overlap import Candidate, OverlapResult, available_slots, check_overlap
from frontdesk.scheduling.status import AppointmentStatus, NEXT_STATUS, next_status, status_label
from frontdesk.scheduling.tickets import generate_ticket_number
from frontdesk.scheduling.timeutils import day_time_slots, format_minutes, to_minutes

__all__ = [
    "DateRange",
    "Direction",
    "ViewMode",
    "month_grid",
    "navigate",
    "period_label",
    "resolve_date_range",
    "Candidate",
    "OverlapResult",
    "available_slots",
    "check_overlap",
    "AppointmentStatus",
    "NEXT_STATUS",
    "next_status",
    "status_label",
    "generate_ticket_number",
    "day_time_slots",
    "format_minutes",
    "to_minutes",
]

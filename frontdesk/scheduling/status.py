"""Appointment status values and the front-desk "cycle" shortcut."""

from enum import Enum


class AppointmentStatus(str, Enum):
    """Appointment status enum."""
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    WAITING = "waiting"
    NO_SHOW = "no_show"
    COMPLETED = "completed"


STATUS_LABELS = {
    AppointmentStatus.SCHEDULED: "Not confirmed",
    AppointmentStatus.CONFIRMED: "Confirmed",
    AppointmentStatus.WAITING: "Patient waiting",
    AppointmentStatus.NO_SHOW: "Patient did not arrive",
    AppointmentStatus.COMPLETED: "Visit completed",
}

# Used only by the cycle shortcut; a direct edit may set any status.
NEXT_STATUS = {
    AppointmentStatus.SCHEDULED: AppointmentStatus.CONFIRMED,
    AppointmentStatus.CONFIRMED: AppointmentStatus.WAITING,
    AppointmentStatus.WAITING: AppointmentStatus.COMPLETED,
    AppointmentStatus.COMPLETED: AppointmentStatus.SCHEDULED,
    AppointmentStatus.NO_SHOW: AppointmentStatus.SCHEDULED,
}


def next_status(status: AppointmentStatus | str) -> AppointmentStatus:
    """Status the cycle shortcut moves ``status`` to."""
    return NEXT_STATUS[AppointmentStatus(status)]


def status_label(status: AppointmentStatus | str) -> str:
    try:
        return STATUS_LABELS[AppointmentStatus(status)]
    except ValueError:
        return str(status)

import random
from datetime import datetime, timezone

import pytest

from frontdesk.scheduling.status import AppointmentStatus, NEXT_STATUS, next_status, status_label
from frontdesk.scheduling.tickets import generate_ticket_number


def test_cycle_follows_front_desk_order():
    status = AppointmentStatus.SCHEDULED
    seen = [status]
    for _ in range(4):
        status = next_status(status)
        seen.append(status)

    assert seen == [
        AppointmentStatus.SCHEDULED,
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.WAITING,
        AppointmentStatus.COMPLETED,
        AppointmentStatus.SCHEDULED,
    ]


def test_no_show_cycles_back_to_scheduled():
    assert next_status("no_show") is AppointmentStatus.SCHEDULED


def test_every_status_has_a_next_status():
    assert set(NEXT_STATUS) == set(AppointmentStatus)


def test_unknown_status_cannot_be_cycled():
    with pytest.raises(ValueError):
        next_status("cancelled")


def test_status_labels():
    assert status_label("waiting") == "Patient waiting"
    assert status_label("legacy") == "legacy"


def test_ticket_number_uses_given_clock_and_entropy():
    now = datetime(2024, 3, 6, 12, 0, tzinfo=timezone.utc)
    expected_suffix = random.Random(7).randrange(1000)

    ticket = generate_ticket_number(now, random.Random(7))

    assert ticket == f"TKT-1709726400000-{expected_suffix}"


def test_ticket_number_is_deterministic_under_test():
    now = datetime(2024, 3, 6, 12, 0, tzinfo=timezone.utc)

    assert generate_ticket_number(now, random.Random(1)) == generate_ticket_number(now, random.Random(1))


def test_ticket_prefix_is_configurable():
    now = datetime(2024, 3, 6, 12, 0, tzinfo=timezone.utc)

    assert generate_ticket_number(now, random.Random(1), prefix="CLN").startswith("CLN-1709726400000-")

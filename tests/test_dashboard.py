"""Front-desk dashboard: today's agenda, free capacity, totals and recent bookings."""

from datetime import date, time

import pytest

from frontdesk.schemas.appointment import AppointmentCreate
from frontdesk.schemas.patient import PatientCreate
from frontdesk.schemas.professional import ProfessionalCreate
from frontdesk.services import AppointmentService, DashboardService, PatientService, ProfessionalService

pytestmark = pytest.mark.anyio

DAY = date(2024, 3, 6)


@pytest.fixture
async def clinic(db):
    patient = await PatientService(db).create_patient(PatientCreate(name="Ana Souza"))
    first = await ProfessionalService(db).create_professional(ProfessionalCreate(name="Dr. Carlos Lima"))
    second = await ProfessionalService(db).create_professional(ProfessionalCreate(name="Dra. Beatriz Rocha"))

    appointments = AppointmentService(db)
    for start, duration, day in [(time(10, 0), 30, DAY), (time(8, 0), 60, DAY), (time(9, 0), 30, date(2024, 3, 7))]:
        await appointments.create_appointment(
            AppointmentCreate(
                patient_id=patient.id,
                professional_id=first.id,
                date=day,
                time=start,
                duration=duration,
            )
        )
    return patient, first, second


async def test_summary_lists_the_day_in_time_order(db, clinic):
    summary = await DashboardService(db).get_summary(DAY)

    assert summary.day == DAY
    assert [item.time for item in summary.today] == [time(8, 0), time(10, 0)]
    assert summary.today[0].patient_name == "Ana Souza"
    assert summary.today[0].professional_name == "Dr. Carlos Lima"


async def test_available_slots_are_counted_per_professional(db, clinic):
    summary = await DashboardService(db).get_summary(DAY)

    # 21 starts each; the first professional loses 08:00, 08:30 and 10:00
    assert summary.available_slots == 18 + 21


async def test_totals_and_recent_bookings(db, clinic):
    summary = await DashboardService(db).get_summary(DAY)

    assert summary.total_patients == 1
    assert summary.total_professionals == 2
    assert len(summary.recent) == 3
    assert {item.date for item in summary.recent} == {DAY, date(2024, 3, 7)}


async def test_recent_bookings_are_limited(db, clinic):
    assert len(await DashboardService(db).get_recent(limit=2)) == 2


async def test_empty_clinic(db):
    summary = await DashboardService(db).get_summary(DAY)

    assert summary.today == []
    assert summary.available_slots == 0
    assert summary.total_patients == summary.total_professionals == 0
    assert summary.recent == []


async def test_dashboard_endpoint(client):
    patient = (await client.post("/api/patients/", json={"name": "Ana Souza"})).json()
    professional = (await client.post("/api/professionals/", json={"name": "Dr. Carlos Lima"})).json()
    await client.post(
        "/api/appointments/",
        json={
            "patient_id": patient["id"],
            "professional_id": professional["id"],
            "date": "2024-03-06",
            "time": "09:00",
        },
    )

    response = await client.get("/api/dashboard/", params={"day": "2024-03-06"})

    assert response.status_code == 200
    body = response.json()
    assert body["day"] == "2024-03-06"
    assert [item["time"] for item in body["today"]] == ["09:00:00"]
    assert body["available_slots"] == 20
    assert body["total_patients"] == 1
    assert body["total_professionals"] == 1
    assert body["recent"][0]["patient_name"] == "Ana Souza"

"""Calendar service - Appointments of a day/week/biweekly/month view."""

from collections import Counter
from datetime import date
from uuid import UUID

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.models.appointment import Appointment
from frontdesk.models.patient import Patient
from frontdesk.models.professional import Professional
from frontdesk.scheduling.date_range import (
    Direction,
    ViewMode,
    month_grid,
    navigate,
    period_label,
    resolve_date_range,
)
from frontdesk.scheduling.status import AppointmentStatus, status_label
from frontdesk.schemas.appointment import AppointmentDetail, AppointmentResponse
from frontdesk.schemas.calendar import CalendarDay, CalendarView

MISSING_PATIENT = "Patient not found"
MISSING_PROFESSIONAL = "Professional not found"


def detail_query():
    """Appointments joined with the patient and professional names."""
    return (
        select(Appointment, Patient.name, Professional.name)
        .outerjoin(Patient, Patient.id == Appointment.patient_id)
        .outerjoin(Professional, Professional.id == Appointment.professional_id)
    )


def to_details(rows) -> list[AppointmentDetail]:
    return [
        AppointmentDetail(
            **AppointmentResponse.model_validate(appointment).model_dump(),
            patient_name=patient_name or MISSING_PATIENT,
            professional_name=professional_name or MISSING_PROFESSIONAL,
            status_label=status_label(appointment.status),
        )
        for appointment, patient_name, professional_name in rows
    ]


class CalendarService:
    """Service class for calendar views."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_appointment_details(
        self,
        start: date,
        end: date,
        professional_id: UUID | None = None,
        status: AppointmentStatus | None = None,
    ) -> list[AppointmentDetail]:
        """Appointments in a date window with patient and professional names resolved."""
        query = detail_query().where(
            and_(
                Appointment.date >= start,
                Appointment.date <= end,
            )
        )

        if professional_id:
            query = query.where(Appointment.professional_id == professional_id)
        if status:
            query = query.where(Appointment.status == AppointmentStatus(status).value)

        query = query.order_by(Appointment.date, Appointment.time)
        result = await self.db.execute(query)

        return to_details(result.all())

    async def get_calendar(
        self,
        reference_date: date,
        view_mode: ViewMode,
        professional_id: UUID | None = None,
        status: AppointmentStatus | None = None,
    ) -> CalendarView:
        """Build a calendar view around ``reference_date``."""
        window = resolve_date_range(reference_date, view_mode)
        details = await self.get_appointment_details(window.start, window.end, professional_id, status)

        by_day: dict[date, list[AppointmentDetail]] = {day: [] for day in window.days()}
        for detail in details:
            by_day[detail.date].append(detail)

        leading_blank_days = 0
        if ViewMode(view_mode) is ViewMode.MONTH:
            leading_blank_days = month_grid(reference_date).count(None)

        return CalendarView(
            reference_date=reference_date,
            view_mode=view_mode,
            start=window.start,
            end=window.end,
            professional_id=professional_id,
            status=AppointmentStatus(status).value if status else None,
            label=period_label(reference_date, view_mode),
            previous_date=navigate(reference_date, view_mode, Direction.PREVIOUS),
            next_date=navigate(reference_date, view_mode, Direction.NEXT),
            leading_blank_days=leading_blank_days,
            days=[CalendarDay(date=day, appointments=items) for day, items in by_day.items()],
            status_counts=dict(Counter(detail.status for detail in details)),
            total=len(details),
        )

"""Appointment service - Business logic for appointment operations."""

import random
from datetime import date, datetime, timezone
from typing import Callable
from uuid import UUID

import logfire
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.config import get_settings
from frontdesk.errors import ConflictError, NotFoundError, ValidationError
from frontdesk.models.appointment import Appointment
from frontdesk.models.patient import Patient
from frontdesk.models.professional import Professional
from frontdesk.scheduling.overlap import Candidate, OverlapResult, available_slots, check_overlap
from frontdesk.scheduling.status import AppointmentStatus, next_status
from frontdesk.scheduling.tickets import generate_ticket_number
from frontdesk.scheduling.timeutils import MINUTES_PER_DAY, day_time_slots, to_minutes
from frontdesk.schemas.appointment import AppointmentCreate, AppointmentUpdate, AvailableSlot
from frontdesk.services.persistence import flush

# Fields whose change moves the booking and so needs a fresh overlap check
SCHEDULING_FIELDS = {"professional_id", "date", "time", "duration"}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentService:
    """Service class for appointment operations.

    ``clock`` and ``rng`` feed ticket-number generation; tests pass fixed
    ones to get predictable tickets.
    """

    def __init__(
        self,
        db: AsyncSession,
        clock: Callable[[], datetime] = utc_now,
        rng: random.Random | None = None,
    ):
        self.db = db
        self.clock = clock
        self.rng = rng or random.Random()
        self.settings = get_settings()

    async def get_appointment_by_id(self, appointment_id: UUID) -> Appointment | None:
        """Get an appointment by ID."""
        return await self.db.get(Appointment, appointment_id)

    async def list_appointments(
        self,
        start: date,
        end: date,
        professional_id: UUID | None = None,
        status: AppointmentStatus | None = None,
    ) -> list[Appointment]:
        """Get appointments between two dates (inclusive), ordered by date and time."""
        query = select(Appointment).where(
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
        return list(result.scalars().all())

    async def get_day_appointments(self, professional_id: UUID, day: date) -> list[Appointment]:
        """Get every appointment of one professional on one day."""
        result = await self.db.execute(
            select(Appointment)
            .where(
                and_(
                    Appointment.professional_id == professional_id,
                    Appointment.date == day,
                )
            )
            .order_by(Appointment.time)
        )
        return list(result.scalars().all())

    async def check_overlap(self, candidate: Candidate) -> OverlapResult:
        """Run the overlap check against the candidate's day."""
        existing = await self.get_day_appointments(candidate.professional_id, candidate.date)
        return check_overlap(candidate, existing)

    async def validate_candidate(self, candidate: Candidate) -> None:
        """Raise ConflictError if the candidate collides with an existing booking."""
        self.validate_duration(candidate.time, candidate.duration)

        result = await self.check_overlap(candidate)
        if result.has_conflict:
            logfire.warn(
                "appointment_conflict",
                professional_id=str(candidate.professional_id),
                date=str(candidate.date),
                time=str(candidate.time),
                conflicting_id=str(result.conflicting_appointment.id),
            )
            raise ConflictError(result.message, result)

    def validate_duration(self, start, duration: int) -> None:
        """Reject durations outside the configured set or running past midnight."""
        if duration not in self.settings.allowed_durations:
            allowed = ", ".join(str(d) for d in self.settings.allowed_durations)
            raise ValidationError(f"Duration must be one of: {allowed} minutes")
        if to_minutes(start) + duration > MINUTES_PER_DAY:
            raise ValidationError("Appointment cannot run past midnight")

    async def ensure_references(self, patient_id: UUID, professional_id: UUID) -> None:
        """Verify the patient and the professional exist."""
        if await self.db.get(Patient, patient_id) is None:
            raise NotFoundError("Patient not found")
        if await self.db.get(Professional, professional_id) is None:
            raise NotFoundError("Professional not found")

    async def create_appointment(self, appointment_data: AppointmentCreate) -> Appointment:
        """Validate and book a new appointment with a fresh ticket number."""
        await self.ensure_references(appointment_data.patient_id, appointment_data.professional_id)
        await self.validate_candidate(
            Candidate(
                date=appointment_data.date,
                time=appointment_data.time,
                duration=appointment_data.duration,
                professional_id=appointment_data.professional_id,
            )
        )

        values = appointment_data.model_dump()
        values["status"] = AppointmentStatus(values["status"]).value
        appointment = Appointment(
            **values,
            ticket_number=generate_ticket_number(self.clock(), self.rng, self.settings.ticket_prefix),
        )
        self.db.add(appointment)
        await flush(self.db, "book appointment", appointment)

        logfire.info(
            "appointment_created",
            appointment_id=str(appointment.id),
            ticket=appointment.ticket_number,
            date=str(appointment.date),
            time=str(appointment.time),
        )
        return appointment

    async def update_appointment(
        self, appointment: Appointment, appointment_data: AppointmentUpdate
    ) -> Appointment:
        """Update (reschedule) an appointment, re-checking overlap if it moves."""
        update_data = appointment_data.model_dump(exclude_unset=True)

        # Explicit nulls on required columns mean "leave unchanged"
        update_data = {
            field: value for field, value in update_data.items()
            if value is not None or field == "notes"
        }

        if "patient_id" in update_data or "professional_id" in update_data:
            await self.ensure_references(
                update_data.get("patient_id", appointment.patient_id),
                update_data.get("professional_id", appointment.professional_id),
            )

        if SCHEDULING_FIELDS & update_data.keys():
            await self.validate_candidate(
                Candidate(
                    date=update_data.get("date", appointment.date),
                    time=update_data.get("time", appointment.time),
                    duration=update_data.get("duration", appointment.duration),
                    professional_id=update_data.get("professional_id", appointment.professional_id),
                    exclude_appointment_id=appointment.id,
                )
            )

        if "status" in update_data:
            update_data["status"] = AppointmentStatus(update_data["status"]).value

        for field, value in update_data.items():
            setattr(appointment, field, value)
        await flush(self.db, "reschedule appointment", appointment)

        logfire.info("appointment_updated", appointment_id=str(appointment.id), fields=sorted(update_data))
        return appointment

    async def cycle_status(self, appointment: Appointment) -> Appointment:
        """Advance the status along the front-desk cycle."""
        previous = appointment.status
        appointment.status = next_status(previous).value
        await flush(self.db, "change appointment status", appointment)

        logfire.info(
            "appointment_status_cycled",
            appointment_id=str(appointment.id),
            previous=previous,
            current=appointment.status,
        )
        return appointment

    async def delete_appointment(self, appointment: Appointment) -> None:
        """Delete an appointment permanently."""
        await self.db.delete(appointment)
        await flush(self.db, "delete appointment")
        logfire.info("appointment_deleted", appointment_id=str(appointment.id))

    async def get_available_slots(
        self,
        professional_id: UUID,
        day: date,
        duration: int = 30,
        exclude_appointment_id: UUID | None = None,
    ) -> list[AvailableSlot]:
        """Start times of the working day where a booking of ``duration`` still fits."""
        existing = await self.get_day_appointments(professional_id, day)
        slots = day_time_slots(
            self.settings.day_start,
            self.settings.last_slot_start,
            self.settings.slot_minutes,
        )

        return [
            AvailableSlot(
                date=day,
                time=slot_time,
                formatted=day.strftime("%A, %B %d") + " at " + slot_time.strftime("%I:%M %p"),
            )
            for slot_time in available_slots(existing, duration, slots, exclude_appointment_id)
        ]

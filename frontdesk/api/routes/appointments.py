"""Appointment routes - API endpoints for appointment operations."""

from datetime import date
from fastapi import APIRouter, HTTPException
from uuid import UUID

from frontdesk.api.deps import DBSession
from frontdesk.scheduling.overlap import Candidate
from frontdesk.scheduling.status import AppointmentStatus
from frontdesk.schemas.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
    AvailableSlot,
    OverlapCheckRequest,
    OverlapCheckResponse,
)
from frontdesk.services.appointment_service import AppointmentService

router = APIRouter()


@router.post("/", response_model=AppointmentResponse, status_code=201)
async def create_appointment(appointment_data: AppointmentCreate, db: DBSession):
    """Book a new appointment. Rejected with 409 if it overlaps another booking."""
    service = AppointmentService(db)
    return await service.create_appointment(appointment_data)


@router.get("/", response_model=list[AppointmentResponse])
async def list_appointments(
    start: date,
    end: date,
    db: DBSession,
    professional_id: UUID | None = None,
    status: AppointmentStatus | None = None,
):
    """Get appointments between two dates (inclusive)."""
    if end < start:
        raise HTTPException(status_code=422, detail="end must not be before start")

    service = AppointmentService(db)
    return await service.list_appointments(start, end, professional_id, status)


@router.post("/check-overlap", response_model=OverlapCheckResponse)
async def check_overlap(request: OverlapCheckRequest, db: DBSession):
    """Dry-run the overlap check without booking anything."""
    service = AppointmentService(db)
    result = await service.check_overlap(
        Candidate(
            date=request.date,
            time=request.time,
            duration=request.duration,
            professional_id=request.professional_id,
            exclude_appointment_id=request.exclude_appointment_id,
        )
    )

    return OverlapCheckResponse(
        has_conflict=result.has_conflict,
        conflicting_appointment_id=result.conflicting_appointment.id if result.has_conflict else None,
        message=result.message,
    )


@router.get("/available-slots", response_model=list[AvailableSlot])
async def get_available_slots(
    professional_id: UUID,
    day: date,
    db: DBSession,
    duration: int = 30,
    exclude_appointment_id: UUID | None = None,
):
    """Get the free start times of a professional's day."""
    service = AppointmentService(db)
    service.validate_duration("00:00", duration)
    return await service.get_available_slots(professional_id, day, duration, exclude_appointment_id)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(appointment_id: UUID, db: DBSession):
    """Get an appointment by ID."""
    service = AppointmentService(db)
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    return appointment


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: UUID,
    appointment_data: AppointmentUpdate,
    db: DBSession,
):
    """Update an appointment (reschedule, reassign or set any status)."""
    service = AppointmentService(db)
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    return await service.update_appointment(appointment, appointment_data)


@router.post("/{appointment_id}/cycle-status", response_model=AppointmentResponse)
async def cycle_appointment_status(appointment_id: UUID, db: DBSession):
    """Advance the status one step along the front-desk cycle."""
    service = AppointmentService(db)
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    return await service.cycle_status(appointment)


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(appointment_id: UUID, db: DBSession):
    """Delete an appointment permanently."""
    service = AppointmentService(db)
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    await service.delete_appointment(appointment)

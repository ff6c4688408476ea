import datetime as dt
from pydantic import BaseModel, Field
from uuid import UUID
from frontdesk.scheduling.status import AppointmentStatus


class AppointmentBase(BaseModel):
    """Base appointment schema."""
    patient_id: UUID = Field(..., description="Patient ID")
    professional_id: UUID = Field(..., description="Professional ID")
    date: dt.date = Field(..., description="Appointment date (YYYY-MM-DD)")
    time: dt.time = Field(..., description="Start time (HH:MM)")
    duration: int = Field(30, gt=0, description="Duration in minutes")
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = Field(None, description="Optional notes")


class AppointmentCreate(AppointmentBase):
    """Schema for creating an appointment."""
    pass


class AppointmentUpdate(BaseModel):
    """Schema for updating (rescheduling) an appointment."""
    patient_id: UUID | None = None
    professional_id: UUID | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    duration: int | None = Field(None, gt=0)
    status: AppointmentStatus | None = None
    notes: str | None = None


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""
    id: UUID
    patient_id: UUID
    professional_id: UUID
    date: dt.date
    time: dt.time
    duration: int
    status: str
    notes: str | None
    ticket_number: str
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class AppointmentDetail(AppointmentResponse):
    """Appointment with the patient and professional names resolved."""
    patient_name: str
    professional_name: str
    status_label: str


class OverlapCheckRequest(BaseModel):
    """Dry-run overlap check for a prospective booking."""
    professional_id: UUID
    date: dt.date
    time: dt.time
    duration: int = Field(30, gt=0)
    exclude_appointment_id: UUID | None = None


class OverlapCheckResponse(BaseModel):
    """Result of an overlap check."""
    has_conflict: bool
    conflicting_appointment_id: UUID | None = None
    message: str | None = None


class AvailableSlot(BaseModel):
    """Schema for available slot."""
    date: dt.date
    time: dt.time
    formatted: str = Field(..., description="Human-readable format")

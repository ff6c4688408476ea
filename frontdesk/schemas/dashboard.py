import datetime as dt
from pydantic import BaseModel, Field
from frontdesk.schemas.appointment import AppointmentDetail


class DashboardSummary(BaseModel):
    """Front-desk overview of one day."""
    day: dt.date
    today: list[AppointmentDetail]
    available_slots: int = Field(..., description="Free start times left across all professionals")
    total_patients: int
    total_professionals: int
    recent: list[AppointmentDetail] = Field(..., description="Most recently booked appointments")

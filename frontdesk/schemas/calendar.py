import datetime as dt
from pydantic import BaseModel, Field
from uuid import UUID
from frontdesk.scheduling.date_range import ViewMode
from frontdesk.schemas.appointment import AppointmentDetail


class DateRangeResponse(BaseModel):
    """Inclusive date window of a calendar view."""
    reference_date: dt.date
    view_mode: ViewMode
    start: dt.date
    end: dt.date


class NavigationResponse(BaseModel):
    """Reference date after moving one view-length."""
    reference_date: dt.date
    view_mode: ViewMode
    direction: str
    target_date: dt.date


class CalendarDay(BaseModel):
    """One day cell of a calendar view."""
    date: dt.date
    appointments: list[AppointmentDetail] = []


class CalendarView(BaseModel):
    """Appointments of a view, grouped per day.

    The request parameters are echoed back so a client can drop a response
    that arrives after the user has already moved to another period.
    """
    reference_date: dt.date
    view_mode: ViewMode
    start: dt.date
    end: dt.date
    professional_id: UUID | None = None
    status: str | None = None
    label: str
    previous_date: dt.date
    next_date: dt.date
    leading_blank_days: int = Field(0, description="Empty cells before the 1st in month view")
    days: list[CalendarDay]
    status_counts: dict[str, int]
    total: int

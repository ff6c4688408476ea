from frontdesk.schemas.patient import PatientCreate, PatientUpdate, PatientResponse
from frontdesk.schemas.professional import ProfessionalCreate, ProfessionalUpdate, ProfessionalResponse
from frontdesk.schemas.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
    AppointmentDetail,
    OverlapCheckRequest,
    OverlapCheckResponse,
    AvailableSlot,
)
from frontdesk.schemas.calendar import CalendarDay, CalendarView, DateRangeResponse, NavigationResponse
from frontdesk.schemas.dashboard import DashboardSummary

__all__ = [
    "PatientCreate",
    "PatientUpdate",
    "PatientResponse",
    "ProfessionalCreate",
    "ProfessionalUpdate",
    "ProfessionalResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentResponse",
    "AppointmentDetail",
    "OverlapCheckRequest",
    "OverlapCheckResponse",
    "AvailableSlot",
    "CalendarDay",
    "CalendarView",
    "DateRangeResponse",
    "NavigationResponse",
    "DashboardSummary",
]
"""Services package - Business logic layer."""

from frontdesk.services.patient_service import PatientService
from frontdesk.services.professional_service import ProfessionalService
from frontdesk.services.appointment_service import AppointmentService
from frontdesk.services.calendar_service import CalendarService
from frontdesk.services.dashboard_service import DashboardService

__all__ = ["PatientService", "ProfessionalService", "AppointmentService", "CalendarService", "DashboardService"]

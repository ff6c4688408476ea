from frontdesk.models.patient import Patient
from frontdesk.models.professional import Professional
from frontdesk.models.appointment import Appointment

__all__ = ["Patient", "Professional", "Appointment"]

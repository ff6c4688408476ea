"""Dashboard service - Today's agenda, free capacity and recent bookings."""

from collections import defaultdict
from datetime import date

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.config import get_settings
from frontdesk.models.appointment import Appointment
from frontdesk.models.patient import Patient
from frontdesk.models.professional import Professional
from frontdesk.scheduling.overlap import available_slots
from frontdesk.scheduling.timeutils import day_time_slots
from frontdesk.schemas.appointment import AppointmentDetail
from frontdesk.schemas.dashboard import DashboardSummary
from frontdesk.services.calendar_service import detail_query, to_details

RECENT_LIMIT = 10


class DashboardService:
    """Service class for the front-desk dashboard."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    async def count(self, model) -> int:
        result = await self.db.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    async def get_day_details(self, day: date) -> list[AppointmentDetail]:
        """Every appointment of the day, ordered by time."""
        result = await self.db.execute(
            detail_query().where(Appointment.date == day).order_by(Appointment.time)
        )
        return to_details(result.all())

    async def get_recent(self, limit: int = RECENT_LIMIT) -> list[AppointmentDetail]:
        """Latest bookings, newest first."""
        result = await self.db.execute(
            detail_query().order_by(Appointment.created_at.desc()).limit(limit)
        )
        return to_details(result.all())

    async def count_available_slots(self, today: list[AppointmentDetail]) -> int:
        """Free slot-length start times summed over every professional."""
        slots = day_time_slots(
            self.settings.day_start,
            self.settings.last_slot_start,
            self.settings.slot_minutes,
        )

        by_professional = defaultdict(list)
        for detail in today:
            by_professional[detail.professional_id].append(detail)

        result = await self.db.execute(select(Professional.id))
        return sum(
            len(available_slots(by_professional[professional_id], self.settings.slot_minutes, slots))
            for professional_id in result.scalars().all()
        )

    async def get_summary(self, day: date) -> DashboardSummary:
        """Build the dashboard for ``day``."""
        today = await self.get_day_details(day)

        return DashboardSummary(
            day=day,
            today=today,
            available_slots=await self.count_available_slots(today),
            total_patients=await self.count(Patient),
            total_professionals=await self.count(Professional),
            recent=await self.get_recent(),
        )

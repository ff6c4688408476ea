"""Dashboard routes - front-desk overview."""

from datetime import date
from fastapi import APIRouter

from frontdesk.api.deps import DBSession
from frontdesk.schemas.dashboard import DashboardSummary
from frontdesk.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/", response_model=DashboardSummary)
async def get_dashboard(db: DBSession, day: date | None = None):
    """Get today's appointments, free slots, record totals and recent bookings."""
    service = DashboardService(db)
    return await service.get_summary(day or date.today())

"""Calendar routes - date windows, navigation and per-view appointment listings."""

from datetime import date
from fastapi import APIRouter
from uuid import UUID

from frontdesk.api.deps import DBSession
from frontdesk.scheduling.date_range import Direction, ViewMode, navigate, resolve_date_range
from frontdesk.scheduling.status import AppointmentStatus
from frontdesk.schemas.calendar import CalendarView, DateRangeResponse, NavigationResponse
from frontdesk.services.calendar_service import CalendarService

router = APIRouter()


@router.get("/", response_model=CalendarView)
async def get_calendar(
    reference_date: date,
    db: DBSession,
    view_mode: ViewMode = ViewMode.MONTH,
    professional_id: UUID | None = None,
    status: AppointmentStatus | None = None,
):
    """Get the appointments of a view grouped per day."""
    service = CalendarService(db)
    return await service.get_calendar(reference_date, view_mode, professional_id, status)


@router.get("/range", response_model=DateRangeResponse)
async def get_date_range(reference_date: date, view_mode: ViewMode = ViewMode.MONTH):
    """Get the date window a view covers."""
    window = resolve_date_range(reference_date, view_mode)
    return DateRangeResponse(
        reference_date=reference_date,
        view_mode=view_mode,
        start=window.start,
        end=window.end,
    )


@router.get("/navigate", response_model=NavigationResponse)
async def navigate_calendar(reference_date: date, view_mode: ViewMode, direction: Direction):
    """Get the reference date of the previous or next period."""
    return NavigationResponse(
        reference_date=reference_date,
        view_mode=view_mode,
        direction=direction.value,
        target_date=navigate(reference_date, view_mode, direction),
    )

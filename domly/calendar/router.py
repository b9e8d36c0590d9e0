from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.models import utcnow
from domly.maintenance.events import (
    DerivedEvent,
    event_days,
    events_on,
    project_events,
    upcoming_events,
)
from domly.maintenance.repository import fetch_maintenance_records
from domly.user.models import User

router = APIRouter(prefix="/calendar")


class CalendarView(BaseModel):
    day: date
    events: list[DerivedEvent]
    upcoming: list[DerivedEvent]
    event_days: list[date]


@router.get("", response_model=CalendarView)
async def get_calendar(
    day: date | None = None,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> CalendarView:
    """Events for the selected day plus the next few across the calendar.

    Undated maintenance is shown on today with ``scheduled`` set to false.
    """
    records = await fetch_maintenance_records(session, user)
    now = utcnow()
    today = now.date()
    events = project_events(records, now)
    return CalendarView(
        day=day or today,
        events=events_on(events, day or today),
        upcoming=upcoming_events(events, today),
        event_days=event_days(events),
    )

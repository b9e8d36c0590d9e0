"""Calendar projection of maintenance records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domly.maintenance.models import MaintenanceKind, MaintenanceStatus
from domly.maintenance.records import MaintenanceRecord

UNTITLED = "Maintenance without description"
UNKNOWN_LOCATION = "Unidentified equipment"
UPCOMING_LIMIT = 5


class DerivedEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    date: datetime
    # False when the record had no date and `date` is the projection moment.
    scheduled: bool
    kind: MaintenanceKind
    status: MaintenanceStatus
    title: str
    location: str
    condominium: str | None = None

    @property
    def day(self) -> date:
        return self.date.date()


def project_event(record: MaintenanceRecord, now: datetime) -> DerivedEvent:
    if record.due_date is not None:
        resolved = datetime.combine(record.due_date, time.min, tzinfo=timezone.utc)
    else:
        resolved = now

    return DerivedEvent(
        id=record.id,
        date=resolved,
        scheduled=record.due_date is not None,
        kind=record.kind,
        status=record.status,
        title=record.description or UNTITLED,
        location=record.asset_name or UNKNOWN_LOCATION,
        condominium=record.condominium_name,
    )


def project_events(
    records: Iterable[MaintenanceRecord], now: datetime
) -> list[DerivedEvent]:
    return [project_event(record, now) for record in records]


def events_on(events: Iterable[DerivedEvent], day: date) -> list[DerivedEvent]:
    return [event for event in events if event.day == day]


def upcoming_events(
    events: Iterable[DerivedEvent], today: date, limit: int = UPCOMING_LIMIT
) -> list[DerivedEvent]:
    """The next `limit` events from `today` onwards, soonest first."""
    ahead = [event for event in events if event.day >= today]
    return sorted(ahead, key=lambda event: event.date)[:limit]


def event_days(events: Sequence[DerivedEvent]) -> list[date]:
    return sorted({event.day for event in events})

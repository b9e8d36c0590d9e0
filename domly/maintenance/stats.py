from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from uuid import UUID

from pydantic import BaseModel

from domly.asset.models import AlertStatus
from domly.maintenance.models import MaintenanceStatus
from domly.maintenance.records import AssetSummary, MaintenanceRecord
from domly.maintenance.urgency import is_urgent

PLANNED_LIMIT = 5
ALERTS_LIMIT = 3


class DashboardStats(BaseModel):
    total_cost: float
    completed_count: int
    pending_alerts: int
    urgent_count: int


class PendingAlert(BaseModel):
    id: UUID
    asset_id: UUID
    asset_name: str
    description: str


def compute_stats(
    records: Sequence[MaintenanceRecord],
    assets: Sequence[AssetSummary],
    today: date,
) -> DashboardStats:
    return DashboardStats(
        total_cost=sum(record.effective_cost for record in records),
        completed_count=sum(1 for record in records if record.is_completed),
        pending_alerts=sum(
            1
            for asset in assets
            for alert in asset.alerts
            if alert.status is AlertStatus.PENDING
        ),
        urgent_count=sum(
            1
            for record in records
            if record.status is MaintenanceStatus.PENDING and is_urgent(record, today)
        ),
    )


def planned_maintenance(
    records: Sequence[MaintenanceRecord], limit: int = PLANNED_LIMIT
) -> list[MaintenanceRecord]:
    return [r for r in records if r.status is MaintenanceStatus.PENDING][:limit]


def pending_alerts(
    assets: Sequence[AssetSummary], limit: int = ALERTS_LIMIT
) -> list[PendingAlert]:
    """Open alerts across all assets, tagged with the asset they belong to."""
    flattened = [
        PendingAlert(
            id=alert.id,
            asset_id=asset.id,
            asset_name=asset.name,
            description=alert.description,
        )
        for asset in assets
        for alert in asset.alerts
        if alert.status is AlertStatus.PENDING
    ]
    return flattened[:limit]

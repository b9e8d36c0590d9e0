"""Read-only views of maintenance rows and assets consumed by the dashboard,
calendar and maintenance list.

Rows are flattened once at fetch time so the filtering and aggregation code
never touches the ORM or a session.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from domly.asset.models import AlertStatus, Asset
from domly.maintenance.models import Maintenance, MaintenanceKind, MaintenanceStatus


def _lenient_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


class MaintenanceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    asset_id: UUID
    condominium_id: UUID
    asset_name: str | None = None
    condominium_name: str | None = None
    kind: MaintenanceKind = MaintenanceKind.PREVENTIVE
    description: str | None = None
    cost: float | None = None
    due_date: date | None = None
    status: MaintenanceStatus = MaintenanceStatus.PENDING

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, value: Any) -> date | None:
        # Absent or garbled dates are treated as "no date", never as an error.
        return _lenient_date(value)

    @property
    def effective_cost(self) -> float:
        return self.cost or 0.0

    @property
    def is_completed(self) -> bool:
        return self.status is MaintenanceStatus.COMPLETED

    @classmethod
    def from_model(cls, maintenance: Maintenance) -> Self:
        """Build from a row whose asset and condominium are already loaded."""
        asset = maintenance.asset
        return cls(
            id=maintenance.id,
            asset_id=maintenance.asset_id,
            condominium_id=asset.condominium_id,
            asset_name=asset.name,
            condominium_name=asset.condominium.name,
            kind=maintenance.kind,
            description=maintenance.description,
            cost=maintenance.cost,
            due_date=maintenance.due_date,
            status=maintenance.status,
        )


class AlertRecord(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    asset_id: UUID
    description: str
    status: AlertStatus = AlertStatus.PENDING


class AssetSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    condominium_id: UUID
    alerts: tuple[AlertRecord, ...] = ()

    @classmethod
    def from_model(cls, asset: Asset) -> Self:
        return cls(
            id=asset.id,
            name=asset.name,
            condominium_id=asset.condominium_id,
            alerts=tuple(AlertRecord.model_validate(alert) for alert in asset.alerts),
        )

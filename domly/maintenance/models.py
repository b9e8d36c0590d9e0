from __future__ import annotations

import enum
from datetime import date
from uuid import UUID

from sqlalchemy import Date, Float, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from domly.asset.models import Asset
from domly.base.models import BaseDbModel, value_enum


class MaintenanceKind(enum.Enum):
    PREVENTIVE = "preventive"
    CORRECTIVE = "corrective"


class MaintenanceStatus(enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Maintenance(BaseDbModel):
    __tablename__ = "maintenances"

    asset_id: Mapped[UUID] = mapped_column(
        ForeignKey("assets.id", ondelete="CASCADE"), nullable=False
    )
    kind: Mapped[MaintenanceKind] = mapped_column(
        value_enum(MaintenanceKind), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    # Completion date for finished work, due date while pending.
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[MaintenanceStatus] = mapped_column(
        value_enum(MaintenanceStatus), nullable=False, default=MaintenanceStatus.PENDING
    )

    asset: Mapped[Asset] = relationship(back_populates="maintenances")

from __future__ import annotations

import enum
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import BigInteger, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from domly.base.models import BaseDbModel, value_enum
from domly.condominium.models import Condominium

if TYPE_CHECKING:
    from domly.maintenance.models import Maintenance


class AssetCondition(enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class AlertStatus(enum.Enum):
    PENDING = "pending"
    RESOLVED = "resolved"


class Asset(BaseDbModel):
    __tablename__ = "assets"

    condominium_id: Mapped[UUID] = mapped_column(
        ForeignKey("condominiums.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False)
    brand: Mapped[str] = mapped_column(String, nullable=False)
    model: Mapped[str] = mapped_column(String, nullable=False)
    serial_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    installed_on: Mapped[date] = mapped_column(Date, nullable=False)
    condition: Mapped[AssetCondition] = mapped_column(
        value_enum(AssetCondition), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    location: Mapped[str | None] = mapped_column(String, nullable=True)

    condominium: Mapped[Condominium] = relationship(back_populates="assets")
    alerts: Mapped[list[Alert]] = relationship(
        back_populates="asset",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    maintenances: Mapped[list[Maintenance]] = relationship(
        back_populates="asset",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Alert(BaseDbModel):
    """A reported fault on an asset, open until someone resolves it."""

    __tablename__ = "alerts"

    asset_id: Mapped[UUID] = mapped_column(
        ForeignKey("assets.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[AlertStatus] = mapped_column(
        value_enum(AlertStatus), nullable=False, default=AlertStatus.PENDING
    )

    asset: Mapped[Asset] = relationship(back_populates="alerts")

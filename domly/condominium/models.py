from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from domly.base.models import BaseDbModel
from domly.user.models import User

if TYPE_CHECKING:
    from domly.asset.models import Asset


class Condominium(BaseDbModel):
    __tablename__ = "condominiums"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    city: Mapped[str] = mapped_column(String, nullable=False)
    address: Mapped[str] = mapped_column(String, nullable=False)
    postal_code: Mapped[str] = mapped_column(String, nullable=False)
    tax_number: Mapped[int] = mapped_column(Integer, nullable=False)
    iban: Mapped[str] = mapped_column(String, nullable=False)
    bank: Mapped[str] = mapped_column(String, nullable=False)
    unit_count: Mapped[int] = mapped_column(Integer, nullable=False)
    floor_count: Mapped[int] = mapped_column(Integer, nullable=False)
    construction_year: Mapped[int] = mapped_column(Integer, nullable=False)
    has_elevator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str] = mapped_column(String, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)

    user: Mapped[User] = relationship(back_populates="condominiums")
    assets: Mapped[list[Asset]] = relationship(
        back_populates="condominium",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from domly.base.models import BaseDbModel

if TYPE_CHECKING:
    from domly.condominium.models import Condominium


class User(BaseDbModel):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    company: Mapped[str | None] = mapped_column(String, nullable=True)

    condominiums: Mapped[list[Condominium]] = relationship(back_populates="user")

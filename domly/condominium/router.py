import logging
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import AfterValidator, BaseModel, EmailStr, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.schemas import BaseDTO, NonEmptyStr, OptionalStr, PatchModel
from domly.condominium.models import Condominium
from domly.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/condominiums")

TaxNumber = Annotated[int, Field(ge=100_000_000, le=999_999_999)]


def _check_construction_year(value: int) -> int:
    if not 1800 <= value <= date.today().year:
        raise ValueError("construction year must be between 1800 and this year")
    return value


ConstructionYear = Annotated[int, AfterValidator(_check_construction_year)]


class CondominiumCreate(BaseModel):
    name: NonEmptyStr
    city: NonEmptyStr
    address: NonEmptyStr
    postal_code: NonEmptyStr
    tax_number: TaxNumber
    iban: NonEmptyStr
    bank: NonEmptyStr
    unit_count: int = Field(ge=1)
    floor_count: int = Field(ge=1)
    construction_year: ConstructionYear
    has_elevator: bool = False
    email: EmailStr
    phone: NonEmptyStr
    image_url: OptionalStr = None


class CondominiumUpdate(PatchModel):
    nullable_fields = frozenset({"image_url"})

    name: NonEmptyStr | None = None
    city: NonEmptyStr | None = None
    address: NonEmptyStr | None = None
    postal_code: NonEmptyStr | None = None
    tax_number: TaxNumber | None = None
    iban: NonEmptyStr | None = None
    bank: NonEmptyStr | None = None
    unit_count: int | None = Field(default=None, ge=1)
    floor_count: int | None = Field(default=None, ge=1)
    construction_year: ConstructionYear | None = None
    has_elevator: bool | None = None
    email: EmailStr | None = None
    phone: NonEmptyStr | None = None
    image_url: OptionalStr = None


class CondominiumResponse(BaseDTO):
    name: str
    city: str
    address: str
    postal_code: str
    tax_number: int
    iban: str
    bank: str
    unit_count: int
    floor_count: int
    construction_year: int
    has_elevator: bool
    email: str
    phone: str
    image_url: str | None


async def get_user_condominium(
    condominium_id: UUID,
    user: User,
    session: AsyncSession,
) -> Condominium:
    stmt = select(Condominium).where(
        Condominium.id == condominium_id, Condominium.user_id == user.id
    )
    condominium = (await session.execute(stmt)).scalar_one_or_none()
    if condominium is None:
        raise HTTPException(status_code=404, detail="Condominium not found")
    return condominium


@router.get("", response_model=list[CondominiumResponse])
async def list_condominiums(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> list[Condominium]:
    stmt = (
        select(Condominium)
        .where(Condominium.user_id == user.id)
        .order_by(Condominium.created_at.desc())
    )
    return list((await session.execute(stmt)).scalars().all())


@router.post("", response_model=CondominiumResponse, status_code=201)
async def create_condominium(
    body: CondominiumCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Condominium:
    condominium = Condominium(user_id=user.id, **body.model_dump())
    session.add(condominium)
    await session.flush()
    logger.info("Created condominium %s for user %s", condominium.id, user.id)
    return condominium


@router.get("/{condominium_id}", response_model=CondominiumResponse)
async def get_condominium(
    condominium_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Condominium:
    return await get_user_condominium(condominium_id, user, session)


@router.patch("/{condominium_id}", response_model=CondominiumResponse)
async def update_condominium(
    condominium_id: UUID,
    body: CondominiumUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Condominium:
    condominium = await get_user_condominium(condominium_id, user, session)
    for key, value in body.changes().items():
        setattr(condominium, key, value)
    await session.flush()
    return condominium


@router.delete("/{condominium_id}", status_code=204)
async def delete_condominium(
    condominium_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> None:
    condominium = await get_user_condominium(condominium_id, user, session)
    await session.delete(condominium)
    logger.info("Deleted condominium %s", condominium_id)

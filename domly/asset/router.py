import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domly.asset.models import Alert, AlertStatus, Asset, AssetCondition
from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.schemas import BaseDTO, NonEmptyStr, OptionalStr, PatchModel
from domly.condominium.models import Condominium
from domly.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter()


class AssetCreate(BaseModel):
    condominium_id: UUID
    name: NonEmptyStr = Field(max_length=100)
    category: NonEmptyStr
    brand: NonEmptyStr
    model: NonEmptyStr
    serial_number: int
    installed_on: date
    condition: AssetCondition
    description: NonEmptyStr
    value: float = Field(ge=0)
    location: OptionalStr = None


class AssetUpdate(PatchModel):
    nullable_fields = frozenset({"location"})

    name: NonEmptyStr | None = Field(default=None, max_length=100)
    category: NonEmptyStr | None = None
    brand: NonEmptyStr | None = None
    model: NonEmptyStr | None = None
    serial_number: int | None = None
    installed_on: date | None = None
    condition: AssetCondition | None = None
    description: NonEmptyStr | None = None
    value: float | None = Field(default=None, ge=0)
    location: OptionalStr = None


class AssetResponse(BaseDTO):
    condominium_id: UUID
    name: str
    category: str
    brand: str
    model: str
    serial_number: int
    installed_on: date
    condition: AssetCondition
    description: str
    value: float
    location: str | None


class AlertCreate(BaseModel):
    description: NonEmptyStr


class AlertUpdate(BaseModel):
    status: AlertStatus


class AlertResponse(BaseDTO):
    asset_id: UUID
    description: str
    status: AlertStatus


async def get_user_asset(asset_id: UUID, user: User, session: AsyncSession) -> Asset:
    stmt = (
        select(Asset)
        .join(Asset.condominium)
        .where(Asset.id == asset_id, Condominium.user_id == user.id)
    )
    asset = (await session.execute(stmt)).scalar_one_or_none()
    if asset is None:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


async def _ensure_own_condominium(
    condominium_id: UUID, user: User, session: AsyncSession
) -> None:
    stmt = select(Condominium.id).where(
        Condominium.id == condominium_id, Condominium.user_id == user.id
    )
    if (await session.execute(stmt)).scalar_one_or_none() is None:
        raise HTTPException(status_code=400, detail="Unknown condominium")


@router.get("/assets", response_model=list[AssetResponse])
async def list_assets(
    condominium_id: UUID | None = None,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> list[Asset]:
    stmt = (
        select(Asset)
        .join(Asset.condominium)
        .where(Condominium.user_id == user.id)
        .order_by(Asset.name)
    )
    if condominium_id is not None:
        stmt = stmt.where(Asset.condominium_id == condominium_id)
    return list((await session.execute(stmt)).scalars().all())


@router.post("/assets", response_model=AssetResponse, status_code=201)
async def create_asset(
    body: AssetCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Asset:
    await _ensure_own_condominium(body.condominium_id, user, session)
    asset = Asset(**body.model_dump())
    session.add(asset)
    await session.flush()
    logger.info("Created asset %s in condominium %s", asset.id, asset.condominium_id)
    return asset


@router.get("/assets/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Asset:
    return await get_user_asset(asset_id, user, session)


@router.patch("/assets/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: UUID,
    body: AssetUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Asset:
    asset = await get_user_asset(asset_id, user, session)
    for key, value in body.changes().items():
        setattr(asset, key, value)
    await session.flush()
    return asset


@router.delete("/assets/{asset_id}", status_code=204)
async def delete_asset(
    asset_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> None:
    asset = await get_user_asset(asset_id, user, session)
    await session.delete(asset)
    logger.info("Deleted asset %s", asset_id)


@router.get("/assets/{asset_id}/alerts", response_model=list[AlertResponse])
async def list_alerts(
    asset_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> list[Alert]:
    await get_user_asset(asset_id, user, session)
    stmt = (
        select(Alert)
        .where(Alert.asset_id == asset_id)
        .order_by(Alert.created_at.desc())
    )
    return list((await session.execute(stmt)).scalars().all())


@router.post(
    "/assets/{asset_id}/alerts", response_model=AlertResponse, status_code=201
)
async def create_alert(
    asset_id: UUID,
    body: AlertCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Alert:
    await get_user_asset(asset_id, user, session)
    alert = Alert(asset_id=asset_id, description=body.description)
    session.add(alert)
    await session.flush()
    logger.info("Alert %s raised on asset %s", alert.id, asset_id)
    return alert


@router.patch("/alerts/{alert_id}", response_model=AlertResponse)
async def update_alert(
    alert_id: UUID,
    body: AlertUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Alert:
    stmt = (
        select(Alert)
        .join(Alert.asset)
        .join(Asset.condominium)
        .where(Alert.id == alert_id, Condominium.user_id == user.id)
    )
    alert = (await session.execute(stmt)).scalar_one_or_none()
    if alert is None:
        raise HTTPException(status_code=404, detail="Alert not found")
    alert.status = body.status
    await session.flush()
    return alert

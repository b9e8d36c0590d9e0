import logging
from datetime import date
from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domly.asset.models import Asset
from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.models import utcnow
from domly.base.schemas import BaseDTO, OptionalStr, PatchModel
from domly.condominium.models import Condominium
from domly.maintenance.filtering import (
    ALL,
    FilterCriteria,
    candidate_assets,
    filter_records,
)
from domly.maintenance.models import Maintenance, MaintenanceKind, MaintenanceStatus
from domly.maintenance.records import AssetSummary, MaintenanceRecord
from domly.maintenance.repository import (
    fetch_assets_with_alerts,
    fetch_maintenance_records,
)
from domly.maintenance.urgency import is_urgent
from domly.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maintenance")


class MaintenanceCreate(BaseModel):
    asset_id: UUID
    kind: MaintenanceKind
    description: OptionalStr = None
    cost: float | None = Field(default=None, ge=0)
    due_date: date | None = None
    status: MaintenanceStatus = MaintenanceStatus.PENDING


class MaintenanceUpdate(PatchModel):
    nullable_fields = frozenset({"description", "cost", "due_date"})

    asset_id: UUID | None = None
    kind: MaintenanceKind | None = None
    description: OptionalStr = None
    cost: float | None = Field(default=None, ge=0)
    due_date: date | None = None
    status: MaintenanceStatus | None = None


class MaintenanceResponse(BaseDTO):
    asset_id: UUID
    kind: MaintenanceKind
    description: str | None
    cost: float | None
    due_date: date | None
    status: MaintenanceStatus


class MaintenanceListItem(MaintenanceRecord):
    urgent: bool


class MaintenanceList(BaseModel):
    count: int
    records: list[MaintenanceListItem]


async def _get_user_maintenance(
    maintenance_id: UUID, user: User, session: AsyncSession
) -> Maintenance:
    stmt = (
        select(Maintenance)
        .join(Maintenance.asset)
        .join(Asset.condominium)
        .where(Maintenance.id == maintenance_id, Condominium.user_id == user.id)
    )
    maintenance = (await session.execute(stmt)).scalar_one_or_none()
    if maintenance is None:
        raise HTTPException(status_code=404, detail="Maintenance not found")
    return maintenance


async def _ensure_own_asset(asset_id: UUID, user: User, session: AsyncSession) -> None:
    stmt = (
        select(Asset.id)
        .join(Asset.condominium)
        .where(Asset.id == asset_id, Condominium.user_id == user.id)
    )
    if (await session.execute(stmt)).scalar_one_or_none() is None:
        raise HTTPException(status_code=400, detail="Unknown asset")


@router.get("", response_model=MaintenanceList)
async def list_maintenance(
    criteria: Annotated[FilterCriteria, Query()],
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> MaintenanceList:
    records = await fetch_maintenance_records(session, user)
    today = utcnow().date()
    matching = filter_records(records, criteria)
    return MaintenanceList(
        count=len(matching),
        records=[
            MaintenanceListItem(**record.model_dump(), urgent=is_urgent(record, today))
            for record in matching
        ],
    )


@router.get("/asset-options", response_model=list[AssetSummary])
async def list_asset_options(
    condominium: Literal["all"] | UUID = ALL,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> list[AssetSummary]:
    assets = await fetch_assets_with_alerts(session, user)
    return candidate_assets(assets, condominium)


@router.post("", response_model=MaintenanceResponse, status_code=201)
async def create_maintenance(
    body: MaintenanceCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Maintenance:
    await _ensure_own_asset(body.asset_id, user, session)
    maintenance = Maintenance(**body.model_dump())
    session.add(maintenance)
    await session.flush()
    logger.info("Logged maintenance %s on asset %s", maintenance.id, body.asset_id)
    return maintenance


@router.get("/{maintenance_id}", response_model=MaintenanceResponse)
async def get_maintenance(
    maintenance_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Maintenance:
    return await _get_user_maintenance(maintenance_id, user, session)


@router.patch("/{maintenance_id}", response_model=MaintenanceResponse)
async def update_maintenance(
    maintenance_id: UUID,
    body: MaintenanceUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Maintenance:
    maintenance = await _get_user_maintenance(maintenance_id, user, session)
    changes = body.changes()
    if "asset_id" in changes:
        await _ensure_own_asset(changes["asset_id"], user, session)
    for key, value in changes.items():
        setattr(maintenance, key, value)
    await session.flush()
    return maintenance


@router.delete("/{maintenance_id}", status_code=204)
async def delete_maintenance(
    maintenance_id: UUID,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> None:
    maintenance = await _get_user_maintenance(maintenance_id, user, session)
    await session.delete(maintenance)
    logger.info("Deleted maintenance %s", maintenance_id)

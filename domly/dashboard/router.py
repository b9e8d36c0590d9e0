from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.models import utcnow
from domly.condominium.models import Condominium
from domly.maintenance.records import MaintenanceRecord
from domly.maintenance.repository import (
    fetch_assets_with_alerts,
    fetch_maintenance_records,
)
from domly.maintenance.stats import (
    DashboardStats,
    PendingAlert,
    compute_stats,
    pending_alerts,
    planned_maintenance,
)
from domly.user.models import User

router = APIRouter(prefix="/dashboard")


class DashboardView(BaseModel):
    condominium_count: int
    asset_count: int
    stats: DashboardStats
    planned: list[MaintenanceRecord]
    alerts: list[PendingAlert]


@router.get("", response_model=DashboardView)
async def get_dashboard(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> DashboardView:
    condominium_count = (
        await session.execute(
            select(func.count())
            .select_from(Condominium)
            .where(Condominium.user_id == user.id)
        )
    ).scalar_one()
    records = await fetch_maintenance_records(session, user)
    assets = await fetch_assets_with_alerts(session, user)

    return DashboardView(
        condominium_count=condominium_count,
        asset_count=len(assets),
        stats=compute_stats(records, assets, utcnow().date()),
        planned=planned_maintenance(records),
        alerts=pending_alerts(assets),
    )

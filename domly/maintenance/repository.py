import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domly.asset.models import Asset
from domly.condominium.models import Condominium
from domly.maintenance.models import Maintenance
from domly.maintenance.records import AssetSummary, MaintenanceRecord
from domly.user.models import User

logger = logging.getLogger(__name__)


async def fetch_maintenance_records(
    session: AsyncSession, user: User
) -> list[MaintenanceRecord]:
    """All of the user's maintenance, soonest due first, undated last."""
    stmt = (
        select(Maintenance)
        .join(Maintenance.asset)
        .join(Asset.condominium)
        .where(Condominium.user_id == user.id)
        .options(selectinload(Maintenance.asset).selectinload(Asset.condominium))
        .order_by(Maintenance.due_date.asc().nulls_last(), Maintenance.created_at)
    )
    rows = (await session.execute(stmt)).scalars().all()
    logger.debug("Fetched %d maintenance records for user %s", len(rows), user.id)
    return [MaintenanceRecord.from_model(row) for row in rows]


async def fetch_assets_with_alerts(
    session: AsyncSession, user: User
) -> list[AssetSummary]:
    stmt = (
        select(Asset)
        .join(Asset.condominium)
        .where(Condominium.user_id == user.id)
        .options(selectinload(Asset.alerts))
        .order_by(Asset.name)
    )
    rows = (await session.execute(stmt)).scalars().all()
    logger.debug("Fetched %d assets for user %s", len(rows), user.id)
    return [AssetSummary.from_model(row) for row in rows]

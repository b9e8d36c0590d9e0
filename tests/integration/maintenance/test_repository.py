from datetime import date
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from domly.asset.models import Alert, AlertStatus, Asset
from domly.maintenance.models import Maintenance, MaintenanceKind, MaintenanceStatus
from domly.maintenance.repository import (
    fetch_assets_with_alerts,
    fetch_maintenance_records,
)
from domly.user.models import User


class TestFetchMaintenanceRecords:
    async def test_enriches_with_asset_and_condominium(
        self, db_session: AsyncSession, user: User, asset: Asset
    ) -> None:
        db_session.add(
            Maintenance(
                asset_id=asset.id,
                kind=MaintenanceKind.CORRECTIVE,
                description="Fix door sensor",
                cost=75.0,
                due_date=date(2026, 11, 3),
                status=MaintenanceStatus.PENDING,
            )
        )
        await db_session.flush()

        records = await fetch_maintenance_records(db_session, user)

        assert len(records) == 1
        record = records[0]
        assert record.asset_id == asset.id
        assert record.asset_name == "Elevator A"
        assert record.condominium_id == asset.condominium_id
        assert record.condominium_name == "Edifício Aurora"
        assert record.due_date == date(2026, 11, 3)

    async def test_scoped_to_owner(
        self,
        db_session: AsyncSession,
        user: User,
        other_user: User,
        make_condominium: Any,
        make_asset: Any,
    ) -> None:
        foreign = await make_asset(await make_condominium(owner=other_user))
        db_session.add(Maintenance(asset_id=foreign.id, kind=MaintenanceKind.PREVENTIVE))
        await db_session.flush()

        assert await fetch_maintenance_records(db_session, user) == []
        assert len(await fetch_maintenance_records(db_session, other_user)) == 1


class TestFetchAssetsWithAlerts:
    async def test_includes_alerts(
        self, db_session: AsyncSession, user: User, asset: Asset
    ) -> None:
        db_session.add_all(
            [
                Alert(asset_id=asset.id, description="Leak", status=AlertStatus.PENDING),
                Alert(asset_id=asset.id, description="Rust", status=AlertStatus.RESOLVED),
            ]
        )
        await db_session.flush()

        assets = await fetch_assets_with_alerts(db_session, user)

        assert len(assets) == 1
        assert {a.description for a in assets[0].alerts} == {"Leak", "Rust"}

    async def test_asset_without_alerts(
        self, db_session: AsyncSession, user: User, asset: Asset
    ) -> None:
        assets = await fetch_assets_with_alerts(db_session, user)

        assert assets[0].alerts == ()

from datetime import date, datetime
from uuid import uuid4

import pytest

from domly.asset.models import Alert, AlertStatus, Asset
from domly.condominium.models import Condominium
from domly.maintenance.models import Maintenance, MaintenanceKind, MaintenanceStatus
from domly.maintenance.records import AssetSummary, MaintenanceRecord


def _payload(**overrides: object) -> dict[str, object]:
    return {
        "id": uuid4(),
        "asset_id": uuid4(),
        "condominium_id": uuid4(),
        **overrides,
    }


class TestMaintenanceRecord:
    def test_defaults(self) -> None:
        record = MaintenanceRecord.model_validate(_payload())

        assert record.kind is MaintenanceKind.PREVENTIVE
        assert record.status is MaintenanceStatus.PENDING
        assert record.cost is None
        assert record.effective_cost == 0.0
        assert record.due_date is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2026-10-20", date(2026, 10, 20)),
            ("2026-10-20T09:15:00+00:00", date(2026, 10, 20)),
            (datetime(2026, 10, 20, 9, 15), date(2026, 10, 20)),
            ("", None),
            ("20/10/2026", None),
            (None, None),
        ],
    )
    def test_due_date_parsing(self, raw: object, expected: date | None) -> None:
        record = MaintenanceRecord.model_validate(_payload(due_date=raw))

        assert record.due_date == expected

    def test_status_from_string(self) -> None:
        record = MaintenanceRecord.model_validate(_payload(status="completed"))

        assert record.is_completed is True

    def test_from_model_flattens_asset_and_condominium(self) -> None:
        condominium = Condominium(id=uuid4(), name="Edifício Aurora")
        asset = Asset(
            id=uuid4(),
            name="Boiler",
            condominium_id=condominium.id,
            condominium=condominium,
        )
        maintenance = Maintenance(
            id=uuid4(),
            asset_id=asset.id,
            asset=asset,
            kind=MaintenanceKind.CORRECTIVE,
            description="Replace valve",
            cost=80.0,
            due_date=date(2026, 10, 25),
            status=MaintenanceStatus.PENDING,
        )

        record = MaintenanceRecord.from_model(maintenance)

        assert record.id == maintenance.id
        assert record.asset_name == "Boiler"
        assert record.condominium_id == condominium.id
        assert record.condominium_name == "Edifício Aurora"
        assert record.kind is MaintenanceKind.CORRECTIVE
        assert record.cost == 80.0


class TestAssetSummary:
    def test_from_model_copies_alerts(self) -> None:
        asset = Asset(id=uuid4(), name="Gate", condominium_id=uuid4())
        asset.alerts = [
            Alert(
                id=uuid4(),
                asset_id=asset.id,
                description="Motor noise",
                status=AlertStatus.PENDING,
            )
        ]

        summary = AssetSummary.from_model(asset)

        assert summary.name == "Gate"
        assert len(summary.alerts) == 1
        assert summary.alerts[0].description == "Motor noise"
        assert summary.alerts[0].status is AlertStatus.PENDING

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, NonNegativeFloat

from domly.base.schemas import blank_to_none
from domly.maintenance.models import MaintenanceStatus
from domly.maintenance.records import AssetSummary, MaintenanceRecord

ALL = "all"

CostBound = Annotated[NonNegativeFloat | None, BeforeValidator(blank_to_none)]


class FilterCriteria(BaseModel):
    """Maintenance list filters. Every default is the match-everything value."""

    model_config = ConfigDict(frozen=True)

    condominium: Literal["all"] | UUID = ALL
    asset: Literal["all"] | UUID = ALL
    status: Literal["all"] | MaintenanceStatus = ALL
    min_cost: CostBound = None
    max_cost: CostBound = None

    def matches(self, record: MaintenanceRecord) -> bool:
        if self.condominium != ALL and record.condominium_id != self.condominium:
            return False
        if self.asset != ALL and record.asset_id != self.asset:
            return False
        if self.status != ALL and record.status is not self.status:
            return False
        if self.min_cost is not None and record.effective_cost < self.min_cost:
            return False
        if self.max_cost is not None and record.effective_cost > self.max_cost:
            return False
        return True


def filter_records(
    records: Sequence[MaintenanceRecord], criteria: FilterCriteria
) -> list[MaintenanceRecord]:
    """Keep the records matching every active criterion, in their original order."""
    return [record for record in records if criteria.matches(record)]


def candidate_assets(
    assets: Sequence[AssetSummary], condominium: Literal["all"] | UUID = ALL
) -> list[AssetSummary]:
    """Assets offered by the asset filter for the selected condominium."""
    if condominium == ALL:
        return list(assets)
    return [asset for asset in assets if asset.condominium_id == condominium]

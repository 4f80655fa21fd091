"""Pipeline board — deals grouped into stage columns, with stage transitions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from jewelcrm.application.schemas import PipelineCreate
from jewelcrm.domain.entities import PIPELINE_STAGES, STAGE_VALUES, PipelineStats, Record

from .derived_stats import parse_timestamp
from .entity_views import pipeline_view
from .list_view_controller import ListViewController
from .mutation_flow import Confirm, FormDialog, MutationResult, confirm_and_run, run_mutation
from .record_normalizer import read_text, safe_sum

if TYPE_CHECKING:
    from jewelcrm.infrastructure.api import CrmApiService


@dataclass
class StageColumn:
    stage: str
    label: str
    deals: list[Record] = field(default_factory=list)
    value: float = 0.0


class PipelineBoard:
    def __init__(self, api: "CrmApiService"):
        self._api = api
        self.deals: ListViewController[PipelineStats] = pipeline_view(api)
        self.create_dialog = FormDialog(refresh=self.deals.refresh, description="create deal")

    async def load(self) -> list[Record]:
        return await self.deals.refresh()

    async def filter_stage(self, stage: str) -> None:
        await self.deals.set_filter("stage", stage)

    def columns(self) -> list[StageColumn]:
        """One column per known stage over the visible deals, each with its summed value."""
        visible = self.deals.visible_records
        columns = []
        for stage in PIPELINE_STAGES:
            deals = [d for d in visible if read_text(d, "stage") == stage.value]
            columns.append(
                StageColumn(
                    stage=stage.value,
                    label=stage.label,
                    deals=deals,
                    value=safe_sum(deals, "expected_value"),
                )
            )
        return columns

    def upcoming_closures(self, now: datetime | None = None) -> list[Record]:
        """Deals whose expected close date lies after ``now``, soonest first."""
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        upcoming: list[tuple[datetime, Record]] = []
        for deal in self.deals.visible_records:
            closes = parse_timestamp(deal.get("expected_close_date"))
            if closes is not None and closes > now:
                upcoming.append((closes, deal))
        upcoming.sort(key=lambda pair: pair[0])
        return [deal for _, deal in upcoming]

    def start_create(self, initial: dict[str, Any] | None = None) -> None:
        self.create_dialog.open(initial)

    async def submit_create(self) -> MutationResult:
        return await self.create_dialog.submit(
            lambda values: self._api.create_sales_pipeline(PipelineCreate.model_validate(values))
        )

    async def transition(self, deal_id: int | str, stage: str) -> MutationResult:
        if stage not in STAGE_VALUES:
            return MutationResult.failed(f"Unknown pipeline stage '{stage}'")
        return await run_mutation(
            lambda: self._api.update_pipeline_stage(deal_id, stage),
            refresh=self.deals.refresh,
            description=f"move deal {deal_id} to {stage}",
        )

    async def delete(self, deal: Record, confirm: Confirm) -> MutationResult | None:
        deal_id = deal.get("id")
        title = read_text(deal, "title", f"deal #{deal_id}")
        return await confirm_and_run(
            f"Are you sure you want to delete {title}?",
            confirm,
            lambda: self._api.delete_pipeline(deal_id),
            refresh=self.deals.refresh,
            description=f"delete deal {deal_id}",
        )

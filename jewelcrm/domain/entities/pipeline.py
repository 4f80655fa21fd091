"""Sales pipeline stages as the dashboards display them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineStage:
    value: str
    label: str


PIPELINE_STAGES: tuple[PipelineStage, ...] = (
    PipelineStage("lead", "Lead"),
    PipelineStage("qualified", "Qualified"),
    PipelineStage("proposal", "Proposal"),
    PipelineStage("negotiation", "Negotiation"),
    PipelineStage("closed_won", "Closed Won"),
    PipelineStage("closed_lost", "Closed Lost"),
)

STAGE_VALUES: frozenset[str] = frozenset(s.value for s in PIPELINE_STAGES)

from .api_response import ApiResponse
from .list_view import ListQuery, ListViewState, Record
from .pipeline import PIPELINE_STAGES, STAGE_VALUES, PipelineStage
from .session import Session
from .stats import (
    ActiveCountStats,
    AnnouncementStats,
    AppointmentStats,
    CustomerStats,
    OrderStats,
    PipelineStats,
    ProductStats,
    StageSummary,
)

__all__ = [
    "ApiResponse",
    "ListQuery",
    "ListViewState",
    "Record",
    "PIPELINE_STAGES",
    "STAGE_VALUES",
    "PipelineStage",
    "Session",
    "ActiveCountStats",
    "AnnouncementStats",
    "AppointmentStats",
    "CustomerStats",
    "OrderStats",
    "PipelineStats",
    "ProductStats",
    "StageSummary",
]

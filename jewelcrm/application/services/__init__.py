from .auth_service import AuthService
from .customer_directory import CustomerDirectory, ExportFile
from .entity_views import LIST_VIEWS, create_list_view
from .list_view_controller import ListViewController
from .mutation_flow import FormDialog, MutationResult, confirm_and_run, run_mutation
from .pipeline_board import PipelineBoard, StageColumn

__all__ = [
    "LIST_VIEWS",
    "AuthService",
    "CustomerDirectory",
    "ExportFile",
    "FormDialog",
    "ListViewController",
    "MutationResult",
    "PipelineBoard",
    "StageColumn",
    "confirm_and_run",
    "create_list_view",
    "run_mutation",
]

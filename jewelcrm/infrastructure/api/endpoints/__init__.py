"""Endpoint groups of the CRM API, one class per backend area."""

from .auth import AuthEndpoints, DashboardEndpoints, TenantEndpoints
from .clients import ClientEndpoints
from .products import PRODUCT_PAGE_SIZE, ProductEndpoints
from .sales import PipelineEndpoints, SalesEndpoints
from .appointments import AppointmentEndpoints
from .team import StoreEndpoints, TeamEndpoints, WorkspaceEndpoints
from .messaging import AnnouncementEndpoints, EscalationEndpoints, SupportEndpoints

__all__ = [
    "AuthEndpoints",
    "DashboardEndpoints",
    "TenantEndpoints",
    "ClientEndpoints",
    "PRODUCT_PAGE_SIZE",
    "ProductEndpoints",
    "PipelineEndpoints",
    "SalesEndpoints",
    "AppointmentEndpoints",
    "StoreEndpoints",
    "TeamEndpoints",
    "WorkspaceEndpoints",
    "AnnouncementEndpoints",
    "EscalationEndpoints",
    "SupportEndpoints",
]

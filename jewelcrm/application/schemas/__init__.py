from .auth import LoginRequest
from .client import ClientCreate, ClientUpdate
from .product import CategoryCreate, ProductCreate, ProductUpdate
from .sales import PipelineCreate, PipelineUpdate, SaleCreate, SaleUpdate, StageTransition
from .appointment import AppointmentCreate, AppointmentReschedule, AppointmentUpdate
from .team import StoreCreate, TeamMemberCreate, TeamMemberUpdate, TenantCreate
from .messaging import (
    AnnouncementCreate,
    EscalationNoteCreate,
    MessageReply,
    SupportTicketCreate,
    TicketMessageCreate,
)

__all__ = [
    "LoginRequest",
    "ClientCreate",
    "ClientUpdate",
    "CategoryCreate",
    "ProductCreate",
    "ProductUpdate",
    "PipelineCreate",
    "PipelineUpdate",
    "SaleCreate",
    "SaleUpdate",
    "StageTransition",
    "AppointmentCreate",
    "AppointmentReschedule",
    "AppointmentUpdate",
    "StoreCreate",
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "TenantCreate",
    "AnnouncementCreate",
    "EscalationNoteCreate",
    "MessageReply",
    "SupportTicketCreate",
    "TicketMessageCreate",
]

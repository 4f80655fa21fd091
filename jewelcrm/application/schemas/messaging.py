"""Pydantic DTOs for announcements, team messages, support tickets and escalations."""

from pydantic import BaseModel, Field


class AnnouncementCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    announcement_type: str = "general"
    priority: str = "medium"
    requires_acknowledgment: bool = False
    target_roles: list[str] = Field(default_factory=list)


class MessageReply(BaseModel):
    content: str = Field(..., min_length=1)
    message_type: str = "reply"
    is_internal: bool = False


class SupportTicketCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    summary: str = Field(..., min_length=1)
    category: str = "general"
    priority: str = "medium"
    is_urgent: bool = False
    requires_callback: bool = False
    callback_phone: str | None = None
    callback_preferred_time: str | None = None


class TicketMessageCreate(BaseModel):
    content: str = Field(..., min_length=1)
    is_internal: bool = False
    message_type: str = "text"


class EscalationNoteCreate(BaseModel):
    content: str = Field(..., min_length=1)
    is_internal: bool = False

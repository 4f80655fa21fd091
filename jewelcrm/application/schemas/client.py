"""Pydantic DTOs for the Client (customer) feature."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator


def _blank_to_none(value: Any) -> Any:
    """Forms and the backend send ``""`` for optional fields left empty."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _date_part(value: Any) -> Any:
    """Accept ``YYYY-MM-DD`` as well as full timestamps, keeping only the date."""
    value = _blank_to_none(value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value.strip()) > 10:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return value
    return value


class ClientCreate(BaseModel):
    """Schema for creating a new customer.

    Fields the backend assigns itself (status defaults, tenant, audit
    timestamps) are left out; they show up after the list is reloaded.
    """

    first_name: str = Field(..., min_length=1, max_length=100, examples=["Priya"])
    last_name: str = Field("", max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    customer_type: str = "individual"
    status: str | None = Field(None, examples=["lead"])
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    date_of_birth: date | None = None
    anniversary_date: date | None = None
    preferred_metal: str | None = None
    preferred_stone: str | None = None
    ring_size: str | None = None
    budget_range: str | None = None
    lead_source: str | None = None
    assigned_to: int | None = None
    notes: str | None = None
    community: str | None = None
    mother_tongue: str | None = None
    reason_for_visit: str | None = None
    age_of_end_user: str | None = None
    saving_scheme: str | None = None
    catchment_area: str | None = None
    next_follow_up: date | None = None
    summary_notes: str | None = None
    customer_interests: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)

    @field_validator("email", "phone", "assigned_to", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("date_of_birth", "anniversary_date", "next_follow_up", mode="before")
    @classmethod
    def date_only(cls, value: Any) -> Any:
        return _date_part(value)


class ClientUpdate(BaseModel):
    """Schema for updating an existing customer — all fields optional."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    status: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    preferred_metal: str | None = None
    preferred_stone: str | None = None
    budget_range: str | None = None
    assigned_to: int | None = None
    notes: str | None = None
    next_follow_up: date | None = None
    summary_notes: str | None = None

    @field_validator("email", "phone", "assigned_to", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("next_follow_up", mode="before")
    @classmethod
    def date_only(cls, value: Any) -> Any:
        return _date_part(value)

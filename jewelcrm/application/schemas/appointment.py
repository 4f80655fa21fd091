"""Pydantic DTOs for appointments."""

import datetime as dt

from pydantic import BaseModel, Field


class AppointmentCreate(BaseModel):
    client: int
    date: dt.date
    time: dt.time
    purpose: str = Field(..., min_length=1)
    notes: str | None = None
    duration: int = Field(30, gt=0)
    location: str | None = None
    assigned_to: int | None = None
    requires_follow_up: bool = False


class AppointmentUpdate(BaseModel):
    date: dt.date | None = None
    time: dt.time | None = None
    purpose: str | None = None
    notes: str | None = None
    status: str | None = None
    duration: int | None = Field(None, gt=0)
    location: str | None = None
    outcome_notes: str | None = None
    next_action: str | None = None


class AppointmentReschedule(BaseModel):
    new_date: dt.date
    new_time: dt.time
    reason: str | None = None

"""Pydantic DTOs for sales orders and the sales pipeline."""

from datetime import date

from pydantic import BaseModel, Field


class SaleCreate(BaseModel):
    client: int
    status: str = "pending"
    payment_status: str = "pending"
    subtotal: float = Field(0, ge=0)
    tax_amount: float = Field(0, ge=0)
    discount_amount: float = Field(0, ge=0)
    total_amount: float = Field(0, ge=0)
    shipping_address: str | None = None
    notes: str | None = None


class SaleUpdate(BaseModel):
    status: str | None = None
    payment_status: str | None = None
    paid_amount: float | None = Field(None, ge=0)
    tracking_number: str | None = None
    notes: str | None = None


class PipelineCreate(BaseModel):
    """Schema for opening a new deal in the pipeline."""

    title: str = Field(..., min_length=1, max_length=200)
    client: int
    stage: str = "lead"
    probability: int = Field(0, ge=0, le=100)
    expected_value: float = Field(0, ge=0)
    expected_close_date: date | None = None
    notes: str | None = None
    next_action: str | None = None
    next_action_date: date | None = None


class PipelineUpdate(BaseModel):
    title: str | None = None
    probability: int | None = Field(None, ge=0, le=100)
    expected_value: float | None = Field(None, ge=0)
    actual_value: float | None = Field(None, ge=0)
    expected_close_date: date | None = None
    notes: str | None = None
    next_action: str | None = None
    next_action_date: date | None = None


class StageTransition(BaseModel):
    """Body of ``POST /sales/pipeline/{id}/transition/``."""

    stage: str = Field(..., min_length=1)

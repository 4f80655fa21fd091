"""Pydantic DTOs for tenants, stores and team members."""

from pydantic import BaseModel, EmailStr, Field


class TenantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = None
    business_type: str | None = None
    subscription_plan: str | None = None
    subscription_status: str | None = None
    is_active: bool = True


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    address: str = ""
    city: str = ""
    state: str = ""
    timezone: str = "Asia/Kolkata"
    manager: int | None = None
    is_active: bool = True


class TeamMemberCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    password: str = Field(..., min_length=8)
    role: str = Field(..., examples=["inhouse_sales"])
    phone: str | None = None
    address: str | None = None
    store: int | None = None


class TeamMemberUpdate(BaseModel):
    email: EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    phone: str | None = None
    address: str | None = None
    store: int | None = None
    is_active: bool | None = None

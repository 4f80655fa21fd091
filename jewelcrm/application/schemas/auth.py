"""Pydantic DTOs for authentication requests."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials posted to ``/auth/login/``."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

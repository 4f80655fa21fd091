"""Domain entity — an authenticated login session."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Session:
    """Token pair and profile returned by ``POST /auth/login/``."""

    token: str
    refresh_token: str | None = None
    user: dict[str, Any] = field(default_factory=dict)

    @property
    def role(self) -> str | None:
        role = self.user.get("role")
        return role if isinstance(role, str) else None

    @property
    def tenant_id(self) -> int | None:
        tenant = self.user.get("tenant")
        return tenant if isinstance(tenant, int) else None

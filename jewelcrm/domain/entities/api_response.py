"""Domain entity — the envelope every CRM API call resolves to."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApiResponse:
    """Uniform result of a backend call.

    ``data`` holds whatever the backend returned: a record, a list, a
    paginated ``{"results": [...]}`` object, raw bytes for file downloads,
    or ``None`` for empty/unparseable bodies. Top-level keys of an
    already-enveloped backend reply (``token``, ``user``...) that are not
    ``data``/``success``/``message`` are kept in ``extras``.
    """

    data: Any = None
    success: bool = True
    message: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_envelope(cls, payload: dict[str, Any]) -> "ApiResponse":
        """Build from a reply that already has the ``{success, data, ...}`` shape."""
        message = payload.get("message")
        return cls(
            data=payload.get("data"),
            success=bool(payload.get("success")),
            message=message if isinstance(message, str) else None,
            extras={
                k: v for k, v in payload.items()
                if k not in ("data", "success", "message")
            },
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Read a top-level reply field, looking in ``extras`` then in ``data``."""
        if key in self.extras:
            return self.extras[key]
        if isinstance(self.data, dict):
            return self.data.get(key, default)
        return default

"""Session stores — in-memory and JSON-file backed implementations of SessionProvider.

The file layout mirrors the dashboards' persisted ``auth-storage`` blob::

    {"state": {"user": {...}, "token": "...", "refreshTokenString": "...",
               "isAuthenticated": true}, "version": 0}

A bare ``{"token": "..."}`` file is accepted as well.
"""

import json
import logging
from pathlib import Path
from typing import Any

from jewelcrm.application.interfaces import SessionProvider
from jewelcrm.domain.entities import Session

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionProvider):
    """Process-local session, lost on exit."""

    def __init__(self, session: Session | None = None):
        self._session = session

    def get_token(self) -> str | None:
        return self._session.token if self._session else None

    def get_session(self) -> Session | None:
        return self._session

    def save(self, session: Session) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileSessionStore(SessionProvider):
    """Session persisted to a JSON file.

    The file is parsed once and cached; ``save`` and ``clear`` keep the
    cache and the file in sync.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._session: Session | None = None
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    def get_token(self) -> str | None:
        session = self.get_session()
        return session.token if session else None

    def get_session(self) -> Session | None:
        if not self._loaded:
            self._session = self._read()
            self._loaded = True
        return self._session

    def save(self, session: Session) -> None:
        payload = {
            "state": {
                "user": session.user,
                "token": session.token,
                "refreshTokenString": session.refresh_token,
                "isAuthenticated": True,
            },
            "version": 0,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), "utf-8")
        self._session = session
        self._loaded = True
        logger.debug("Session saved to %s", self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
        self._session = None
        self._loaded = True
        logger.info("Session cleared")

    def _read(self) -> Session | None:
        if not self._path.exists():
            return None
        try:
            parsed = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read session file %s: %s", self._path, exc)
            return None
        return _session_from_blob(parsed)


def _session_from_blob(parsed: Any) -> Session | None:
    if not isinstance(parsed, dict):
        return None
    state = parsed.get("state")
    source = state if isinstance(state, dict) else parsed

    token = source.get("token") or parsed.get("token")
    if not isinstance(token, str) or not token:
        return None

    refresh = source.get("refreshTokenString") or source.get("refresh")
    user = source.get("user")
    return Session(
        token=token,
        refresh_token=refresh if isinstance(refresh, str) else None,
        user=user if isinstance(user, dict) else {},
    )

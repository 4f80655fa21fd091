"""Application service — login/logout against the CRM backend and session bookkeeping."""

import logging
from typing import TYPE_CHECKING, Any

from jewelcrm.application.interfaces import SessionProvider
from jewelcrm.domain.entities import Session

if TYPE_CHECKING:
    from jewelcrm.infrastructure.api import CrmApiService

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Login failed"


class AuthService:
    """Owns the login state shown by the sign-in view."""

    def __init__(self, api: "CrmApiService", session: SessionProvider):
        self._api = api
        self._session = session
        self.loading = False
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self._session.get_token() is not None

    @property
    def user(self) -> dict[str, Any] | None:
        session = self._session.get_session()
        return session.user if session else None

    async def login(self, username: str, password: str) -> bool:
        """Exchange credentials for a token pair; ``error`` holds the reason on failure."""
        self.loading = True
        self.error = None
        try:
            response = await self._api.login(username, password)
        except Exception as exc:
            logger.error("Login error: %s", exc)
            self.error = str(exc) or LOGIN_FAILED
            return False
        finally:
            self.loading = False

        if not response.success:
            self.error = response.message or LOGIN_FAILED
            return False

        token = response.get("token")
        if not isinstance(token, str) or not token:
            logger.warning("Login reply for %s carried no token", username)
            self.error = LOGIN_FAILED
            return False

        user = response.get("user")
        self._session.save(
            Session(
                token=token,
                refresh_token=response.get("refresh"),
                user=user if isinstance(user, dict) else {},
            )
        )
        logger.info("Logged in as %s", username)
        return True

    async def logout(self) -> None:
        """Sign out through the facade, which forgets the session."""
        try:
            await self._api.logout()
        except Exception as exc:
            logger.error("Logout error: %s", exc)
            self._session.clear()
        self.error = None

    async def current_user(self) -> dict[str, Any] | None:
        """Fetch the profile of the logged-in user; ``None`` when it cannot be loaded."""
        try:
            response = await self._api.get_current_user()
        except Exception as exc:
            logger.warning("Failed to load current user: %s", exc)
            return None
        if not response.success:
            return None
        user = response.get("user", response.data)
        return user if isinstance(user, dict) else None

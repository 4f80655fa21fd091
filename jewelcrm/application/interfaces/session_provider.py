"""Abstract session provider interface (port) for the persisted login session."""

from abc import ABC, abstractmethod

from jewelcrm.domain.entities import Session


class SessionProvider(ABC):
    """Port for the auth session — created once at startup and shared by reference.

    Every request reads the token; only the login/logout flows and the
    global 401 handler write to it.
    """

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the bearer token of the current session, if any."""
        ...

    @abstractmethod
    def get_session(self) -> Session | None:
        """Return the full session (token, refresh token, user)."""
        ...

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist a freshly obtained session."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Forget the session (logout or rejected token)."""
        ...

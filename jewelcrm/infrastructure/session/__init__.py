"""Session persistence package."""

from .session_store import FileSessionStore, InMemorySessionStore

__all__ = ["FileSessionStore", "InMemorySessionStore"]

from .session_provider import SessionProvider

__all__ = [
    "SessionProvider",
]

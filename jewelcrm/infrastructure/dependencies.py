"""Dependency wiring — builds the shared session store, the API facade and the page flows."""

from collections.abc import Callable
from functools import lru_cache

import httpx

from jewelcrm.config import Settings, get_settings
from jewelcrm.application.interfaces import SessionProvider
from jewelcrm.application.services import (
    AuthService,
    CustomerDirectory,
    ListViewController,
    PipelineBoard,
    create_list_view,
)
from jewelcrm.infrastructure.api import CrmApiService
from jewelcrm.infrastructure.logging.log_config import setup_logging
from jewelcrm.infrastructure.session import FileSessionStore


@lru_cache
def get_session_store() -> FileSessionStore:
    """Process-wide session store; every facade built here shares it."""
    return FileSessionStore(get_settings().session_file)


def build_api_service(
    settings: Settings | None = None,
    session: SessionProvider | None = None,
    http_client: httpx.AsyncClient | None = None,
    on_unauthorized: Callable[[], None] | None = None,
) -> CrmApiService:
    """Provides a CrmApiService bound to the configured backend URL."""
    settings = settings or get_settings()
    return CrmApiService(
        settings.api_base_url,
        session if session is not None else get_session_store(),
        http_client=http_client,
        on_unauthorized=on_unauthorized,
        timeout=settings.request_timeout,
    )


def bootstrap(on_unauthorized: Callable[[], None] | None = None) -> CrmApiService:
    """Process startup: configure logging once and build the shared facade."""
    setup_logging()
    return build_api_service(on_unauthorized=on_unauthorized)


def build_auth_service(api: CrmApiService) -> AuthService:
    return AuthService(api, api.session)


def build_customer_directory(api: CrmApiService) -> CustomerDirectory:
    return CustomerDirectory(api)


def build_pipeline_board(api: CrmApiService) -> PipelineBoard:
    return PipelineBoard(api)


def build_list_view(api: CrmApiService, name: str) -> ListViewController:
    """Provides the controller for one list page, e.g. ``"products"`` or ``"team"``."""
    return create_list_view(api, name)

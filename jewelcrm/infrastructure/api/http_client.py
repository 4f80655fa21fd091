"""CRM backend HTTP client — the single chokepoint for calls to the REST API.

Uses httpx for async requests. Handles bearer-token injection from the
session provider, the global 401 logout, file-download detection and the
two reply shapes the backend uses (``{success, data, ...}`` envelopes and
bare JSON values).
"""

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from jewelcrm.application.interfaces import SessionProvider
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.domain.exceptions import ApiError, AuthenticationError, TransportError

logger = logging.getLogger(__name__)

_FILE_CONTENT_TYPES = (
    "text/csv",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)

QueryParams = Mapping[str, Any]
Body = Mapping[str, Any] | BaseModel


class CrmHttpClient:
    """Infrastructure adapter — talks to the CRM REST backend.

    The session provider is injected once and only read here, except for
    a 401 reply which clears it and fires ``on_unauthorized`` (typically a
    redirect to the login view).
    """

    def __init__(
        self,
        base_url: str,
        session: SessionProvider,
        *,
        http_client: httpx.AsyncClient | None = None,
        on_unauthorized: Callable[[], None] | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._http_client = http_client
        self._on_unauthorized = on_unauthorized
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> SessionProvider:
        return self._session

    def _get_headers(self, token: str | None, *, multipart: bool = False) -> dict[str, str]:
        """Default headers; multipart bodies set their own Content-Type."""
        headers: dict[str, str] = {}
        if not multipart:
            headers["Content-Type"] = "application/json"
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        params: QueryParams | None = None,
        json: Body | None = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Send one request to ``base_url + endpoint`` and wrap the reply.

        Raises:
            AuthenticationError: on 401, after the session was cleared.
            ApiError: on any other non-2xx status.
            TransportError: when no response was received.
        """
        url = f"{self._base_url}{endpoint}"
        token = self._session.get_token()
        request_headers = self._get_headers(token, multipart=files is not None)
        if headers:
            request_headers.update(headers)

        logger.debug(
            "API request %s %s (token=%s)",
            method,
            url,
            f"{token[:10]}..." if token else None,
        )

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method,
                    url,
                    params=build_query(params) or None,
                    json=_dump_body(json),
                    data=data,
                    files=files,
                    headers=request_headers,
                )
            except httpx.TransportError as exc:
                logger.error("API request failed: %s %s — %s", method, url, exc)
                raise TransportError(str(exc) or type(exc).__name__, url) from exc

            if not response.is_success:
                self._raise_api_error(response)

            return self._parse_response(response)

        finally:
            if should_close:
                await client.aclose()

    def _parse_response(self, response: httpx.Response) -> ApiResponse:
        """Turn a 2xx reply into an ApiResponse without ever raising."""
        content_type = response.headers.get("content-type", "")
        disposition = response.headers.get("content-disposition", "")

        if "attachment" in disposition or any(t in content_type for t in _FILE_CONTENT_TYPES):
            logger.debug("File download (%s, %d bytes)", content_type, len(response.content))
            return ApiResponse(data=response.content, success=True)

        text = response.text
        parsed: Any = None
        if text.strip():
            try:
                parsed = json.loads(text)
            except ValueError as exc:
                logger.warning("Failed to parse JSON response from %s: %s", response.url, exc)
                parsed = None

        if isinstance(parsed, dict) and "success" in parsed:
            return ApiResponse.from_envelope(parsed)
        return ApiResponse(data=parsed, success=True)

    def _raise_api_error(self, response: httpx.Response) -> None:
        """Raise ApiError (or AuthenticationError for 401) from a non-2xx reply."""
        body = response.text
        logger.error(
            "API error response: %s %s — %s",
            response.status_code,
            response.url,
            body[:500],
        )

        message = _error_message(body) or response.reason_phrase or "Request failed"
        url = str(response.url)

        if response.status_code == 401:
            self._session.clear()
            if self._on_unauthorized is not None:
                self._on_unauthorized()
            raise AuthenticationError(response.status_code, message, url)

        raise ApiError(response.status_code, message, url)


def build_query(params: QueryParams | None) -> dict[str, str]:
    """Drop empty values and stringify the rest, keeping insertion order."""
    if not params:
        return {}
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "" or value is False:
            continue
        query[key] = str(value)
    return query


def _dump_body(body: Body | None) -> Any:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return dict(body)


def _error_message(body: str) -> str:
    """Pull a human-readable message out of a JSON error body, if there is one."""
    try:
        parsed = json.loads(body)
    except ValueError:
        return ""
    if isinstance(parsed, dict):
        for key in ("message", "detail", "error"):
            if isinstance(parsed.get(key), str):
                return parsed[key]
    return ""

"""Unit tests for CrmHttpClient — headers, reply parsing and error handling."""

import json

import httpx
import pytest

from jewelcrm.domain.entities import Session
from jewelcrm.domain.exceptions import ApiError, AuthenticationError, TransportError
from jewelcrm.infrastructure.api import CrmHttpClient, build_query
from jewelcrm.infrastructure.session import InMemorySessionStore
from tests.services.session_fakes import CountingSessionStore

BASE_URL = "http://testserver/api"


# ── Helpers ──


def _make_client(
    handler,
    session: InMemorySessionStore | None = None,
    on_unauthorized=None,
) -> CrmHttpClient:
    return CrmHttpClient(
        BASE_URL,
        session if session is not None else InMemorySessionStore(Session(token="tok-123")),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        on_unauthorized=on_unauthorized,
    )


def _json_handler(payload, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


# ── Request building ──


@pytest.mark.asyncio
async def test_request_sends_bearer_token_and_json_content_type():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    client = _make_client(handler)
    await client.request("/clients/clients/", params={"status": "lead", "search": ""})

    request = seen[0]
    assert request.headers["Authorization"] == "Bearer tok-123"
    assert request.headers["Content-Type"] == "application/json"
    assert request.url.path == "/api/clients/clients/"
    assert dict(request.url.params) == {"status": "lead"}


@pytest.mark.asyncio
async def test_request_without_session_sends_no_authorization():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    client = _make_client(handler, session=InMemorySessionStore())
    await client.request("/auth/profile/")

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_request_serializes_json_body():
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json={"id": 9})

    client = _make_client(handler)
    response = await client.request("/clients/clients/", method="POST", json={"first_name": "Priya"})

    assert bodies == [{"first_name": "Priya"}]
    assert response.success is True
    assert response.data == {"id": 9}


def test_build_query_drops_empty_values():
    query = build_query({"page": 2, "search": "", "status": None, "active": False, "x": 0})
    assert query == {"page": "2", "x": "0"}


# ── Reply parsing ──


@pytest.mark.asyncio
async def test_bare_json_is_wrapped_as_success():
    client = _make_client(_json_handler({"results": [{"id": 1}], "count": 1}))
    response = await client.request("/clients/clients/")
    assert response.success is True
    assert response.data == {"results": [{"id": 1}], "count": 1}


@pytest.mark.asyncio
async def test_enveloped_reply_is_used_as_is():
    payload = {"success": True, "token": "abc", "refresh": "r", "user": {"id": 1}}
    client = _make_client(_json_handler(payload))

    response = await client.request("/auth/login/", method="POST", json={})

    assert response.success is True
    assert response.data is None
    assert response.get("token") == "abc"
    assert response.get("user") == {"id": 1}


@pytest.mark.asyncio
async def test_enveloped_failure_keeps_message():
    client = _make_client(_json_handler({"success": False, "message": "Invalid credentials"}))
    response = await client.request("/auth/login/", method="POST", json={})
    assert response.success is False
    assert response.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_empty_body_yields_none_data():
    client = _make_client(lambda request: httpx.Response(204))
    response = await client.request("/clients/clients/1/", method="DELETE")
    assert response.success is True
    assert response.data is None


@pytest.mark.asyncio
async def test_invalid_json_yields_none_data():
    client = _make_client(
        lambda request: httpx.Response(
            200, content=b"<html>oops</html>", headers={"content-type": "application/json"}
        )
    )
    response = await client.request("/clients/clients/")
    assert response.success is True
    assert response.data is None


@pytest.mark.asyncio
async def test_csv_download_is_returned_as_bytes():
    csv = b"first_name,last_name\nPriya,Sharma\n"

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=csv,
            headers={
                "content-type": "text/csv",
                "content-disposition": 'attachment; filename="customers.csv"',
            },
        )

    client = _make_client(handler)
    response = await client.request("/clients/clients/export_csv/")

    assert response.data == csv


# ── Errors ──


@pytest.mark.asyncio
async def test_error_status_raises_api_error_with_backend_message():
    client = _make_client(_json_handler({"detail": "Not found."}, status_code=404))

    with pytest.raises(ApiError) as exc_info:
        await client.request("/clients/clients/999/")

    assert not isinstance(exc_info.value, AuthenticationError)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not found."
    assert str(exc_info.value) == "API Error: 404 Not found."


@pytest.mark.asyncio
async def test_error_without_json_body_falls_back_to_reason_phrase():
    client = _make_client(lambda request: httpx.Response(500, content=b"boom"))

    with pytest.raises(ApiError) as exc_info:
        await client.request("/sales/")

    assert exc_info.value.message == "Internal Server Error"


@pytest.mark.asyncio
async def test_unauthorized_clears_session_once_and_notifies():
    session = CountingSessionStore(Session(token="expired"))
    redirects: list[str] = []
    client = _make_client(
        _json_handler({"detail": "Given token not valid"}, status_code=401),
        session=session,
        on_unauthorized=lambda: redirects.append("/login"),
    )

    with pytest.raises(AuthenticationError) as exc_info:
        await client.request("/clients/clients/")

    assert exc_info.value.status_code == 401
    assert session.get_token() is None
    assert session.clear_count == 1
    assert redirects == ["/login"]


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = _make_client(handler)

    with pytest.raises(TransportError) as exc_info:
        await client.request("/clients/clients/")

    assert "Connection refused" in exc_info.value.message
    assert exc_info.value.url == f"{BASE_URL}/clients/clients/"

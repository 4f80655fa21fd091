"""End-to-end customer page flows against the in-memory CRM backend."""

from datetime import datetime, timezone

import httpx
import pytest

from jewelcrm.application.services import CustomerDirectory
from jewelcrm.config import Settings
from jewelcrm.domain.entities import Session
from jewelcrm.infrastructure.dependencies import build_api_service
from jewelcrm.infrastructure.session import InMemorySessionStore
from jewelcrm.presentation.tables import customer_cards, customer_row
from tests.integration.services.fake_crm_backend import FakeCrmBackend
from tests.services.session_fakes import CountingSessionStore


def _directory(backend: FakeCrmBackend, now: datetime, session=None, on_unauthorized=None):
    api = build_api_service(
        Settings(_env_file=None, api_base_url="http://testserver/api"),
        session or InMemorySessionStore(Session(token=backend.token)),
        httpx.AsyncClient(transport=backend.transport()),
        on_unauthorized,
    )
    return CustomerDirectory(api, clock=lambda: now)


@pytest.fixture
def backend() -> FakeCrmBackend:
    backend = FakeCrmBackend()
    backend.add_client(first_name="Priya", status="lead", created_at="2024-01-15T00:00:00Z")
    backend.add_client(first_name="Rahul", status="customer", created_at="2023-11-02T09:00:00Z")
    return backend


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "now, new_this_month",
    [
        (datetime(2024, 1, 28, tzinfo=timezone.utc), 1),
        (datetime(2024, 3, 1, tzinfo=timezone.utc), 0),
    ],
)
async def test_lead_filter_shows_one_badged_row(backend, now, new_this_month):
    directory = _directory(backend, now)
    await directory.load()

    await directory.customers.set_filter("status", "lead")

    assert backend.requests[-1].url.params["status"] == "lead"
    rows = [customer_row(c) for c in directory.customers.page_records]
    assert len(rows) == 1
    assert rows[0]["name"] == "Priya"
    assert rows[0]["status"] == "Lead"
    cards = {c.title: c.value for c in customer_cards(directory.customers.stats)}
    assert cards["New This Month"] == str(new_this_month)
    assert directory.customers.loading is False


@pytest.mark.asyncio
async def test_delete_reloads_list_from_backend(backend):
    directory = _directory(backend, datetime(2024, 1, 28, tzinfo=timezone.utc))
    await directory.load()
    priya = directory.customers.records[0]

    result = await directory.move_to_trash(priya, lambda prompt: True)

    assert result.ok is True
    assert backend.paths()[-2:] == [
        "DELETE /api/clients/clients/1/",
        "GET /api/clients/clients/",
    ]
    assert [c["first_name"] for c in directory.customers.records] == ["Rahul"]


@pytest.mark.asyncio
async def test_soft_delete_is_reversible(backend):
    directory = _directory(backend, datetime(2024, 1, 28, tzinfo=timezone.utc))
    await directory.load()
    await directory.open_trash()
    priya = directory.customers.records[0]

    await directory.move_to_trash(priya, lambda prompt: True)
    assert [c["id"] for c in directory.trash.records] == [priya["id"]]

    result = await directory.restore(priya["id"])

    assert result.ok is True
    assert result.message == "Customer restored"
    assert sorted(c["id"] for c in directory.customers.records) == [1, 2]
    assert directory.trash.records == []


@pytest.mark.asyncio
async def test_created_customer_appears_after_reload(backend):
    directory = _directory(backend, datetime(2024, 1, 28, tzinfo=timezone.utc))
    await directory.load()

    directory.start_create({"first_name": "Meera", "email": "meera@example.com"})
    result = await directory.submit_create()

    assert result.ok is True
    assert result.data["id"] == 3
    assert "Meera" in [c["first_name"] for c in directory.customers.records]


@pytest.mark.asyncio
async def test_expired_token_logs_out_and_empties_list(backend):
    session = CountingSessionStore(Session(token="expired"))
    redirects: list[str] = []
    directory = _directory(
        backend,
        datetime(2024, 1, 28, tzinfo=timezone.utc),
        session=session,
        on_unauthorized=lambda: redirects.append("/login"),
    )

    records = await directory.load()

    assert records == []
    assert directory.customers.error == "API Error: 401 Authentication credentials were not provided."
    assert session.get_token() is None
    assert session.clear_count == 1
    assert redirects == ["/login"]

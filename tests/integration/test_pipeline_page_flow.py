"""End-to-end pipeline page flows against the in-memory CRM backend."""

import httpx
import pytest

from jewelcrm.application.services import PipelineBoard
from jewelcrm.config import Settings
from jewelcrm.domain.entities import Session
from jewelcrm.infrastructure.dependencies import build_api_service
from jewelcrm.infrastructure.session import InMemorySessionStore
from jewelcrm.presentation.tables import deal_row, pipeline_cards
from tests.integration.services.fake_crm_backend import FakeCrmBackend


@pytest.fixture
def backend() -> FakeCrmBackend:
    backend = FakeCrmBackend()
    backend.add_deal(title="Bridal set", client=1, expected_value=50000, stage="lead")
    backend.add_deal(title="Anniversary ring", client=2, expected_value=None, stage="closed_won")
    return backend


@pytest.fixture
def board(backend: FakeCrmBackend) -> PipelineBoard:
    api = build_api_service(
        Settings(_env_file=None, api_base_url="http://testserver/api"),
        InMemorySessionStore(Session(token=backend.token)),
        httpx.AsyncClient(transport=backend.transport()),
    )
    return PipelineBoard(api)


@pytest.mark.asyncio
async def test_stat_cards_tolerate_missing_deal_values(board):
    await board.load()

    cards = {c.title: c.value for c in pipeline_cards(board.deals.stats)}

    assert cards["Pipeline Value"] == "₹50,000.00"
    assert cards["Won Deals"] == "1"
    assert cards["Conversion Rate"] == "50.0%"
    assert [deal_row(d)["value"] for d in board.deals.records] == ["₹50,000.00", "₹0.00"]


@pytest.mark.asyncio
async def test_transition_refetches_the_board(backend, board):
    await board.load()

    result = await board.transition(1, "proposal")

    assert result.ok is True
    assert backend.paths()[-2:] == [
        "POST /api/sales/pipeline/1/transition/",
        "GET /api/sales/pipeline/",
    ]
    columns = {c.stage: c for c in board.columns()}
    assert [d["title"] for d in columns["proposal"].deals] == ["Bridal set"]
    assert columns["lead"].deals == []


@pytest.mark.asyncio
async def test_stage_filter_is_sent_to_backend(backend, board):
    await board.load()

    await board.filter_stage("closed_won")

    assert backend.requests[-1].url.params["stage"] == "closed_won"
    assert [d["title"] for d in board.deals.records] == ["Anniversary ring"]

"""Unit tests for the per-page list views: server-side inputs vs local filtering."""

import pytest

from jewelcrm.application.services import LIST_VIEWS, create_list_view
from jewelcrm.application.services.entity_views import (
    PRODUCTS_PER_PAGE,
    announcements_view,
    appointments_view,
    orders_view,
    products_view,
    tenants_view,
    team_view,
)
from jewelcrm.domain.entities import ApiResponse


class RecordingApi:
    """Serves canned payloads per endpoint and records every call with its arguments."""

    def __init__(self, **payloads):
        self.payloads = payloads
        self.calls: list[tuple[str, dict]] = []

    def _serve(self, name: str, **kwargs) -> ApiResponse:
        self.calls.append((name, kwargs))
        return ApiResponse(data=self.payloads.get(name, []))

    async def get_clients(self, **kwargs):
        return self._serve("get_clients", **kwargs)

    async def get_trashed_clients(self):
        return self._serve("get_trashed_clients")

    async def get_products(self, **kwargs):
        return self._serve("get_products", **kwargs)

    async def get_sales(self, **kwargs):
        return self._serve("get_sales", **kwargs)

    async def get_sales_pipeline(self, **kwargs):
        return self._serve("get_sales_pipeline", **kwargs)

    async def get_appointments(self, **kwargs):
        return self._serve("get_appointments", **kwargs)

    async def get_announcements(self, **kwargs):
        return self._serve("get_announcements", **kwargs)

    async def get_tenants(self):
        return self._serve("get_tenants")

    async def get_team_members(self):
        return self._serve("get_team_members")


# ── Products ──


PRODUCTS = [
    {"id": 1, "name": "Gold Ring", "sku": "GR-1", "category_name": "rings", "status": "active"},
    {"id": 2, "name": "Silver Chain", "sku": "SC-1", "category_name": "chains", "status": "active"},
    {"id": 3, "name": "Rose Gold Ring", "sku": "RR-1", "category_name": "rings", "status": "draft"},
]


@pytest.mark.asyncio
async def test_products_filter_locally():
    api = RecordingApi(get_products={"results": PRODUCTS})
    view = products_view(api)
    await view.refresh()

    await view.set_search("ring")
    await view.set_filter("category", "rings")
    await view.set_filter("status", "active")

    assert api.calls == [("get_products", {})]
    assert [p["id"] for p in view.visible_records] == [1]
    assert len(view.records) == 3


@pytest.mark.asyncio
async def test_products_page_locally():
    products = [{"id": i, "name": f"Bangle {i}"} for i in range(PRODUCTS_PER_PAGE + 5)]
    api = RecordingApi(get_products=products)
    view = products_view(api)
    await view.refresh()

    await view.set_page(2)
    assert [p["id"] for p in view.page_records] == list(range(PRODUCTS_PER_PAGE, PRODUCTS_PER_PAGE + 5))

    await view.set_search("bangle 2")
    assert view.state.current_page == 1
    assert [p["id"] for p in view.page_records][:2] == [2, 20]
    assert len(api.calls) == 1


# ── Orders ──


@pytest.mark.asyncio
async def test_orders_search_and_status_filter_locally():
    orders = [
        {"id": 1, "order_number": "ORD-001", "status": "pending"},
        {"id": 2, "order_number": "ORD-002", "status": "delivered"},
        {"id": 3, "order_number": "INV-100", "status": "pending"},
    ]
    api = RecordingApi(get_sales=orders)
    view = orders_view(api)
    await view.refresh()

    await view.set_search("ord")
    await view.set_filter("status", "pending")

    assert api.calls == [("get_sales", {})]
    assert [o["id"] for o in view.visible_records] == [1]
    assert view.stats.pending_orders == 2


# ── Appointments ──


@pytest.mark.asyncio
async def test_appointments_send_status_and_date():
    api = RecordingApi(
        get_appointments=[
            {"id": 1, "purpose": "Ring sizing", "status": "confirmed"},
            {"id": 2, "purpose": "Necklace pickup", "status": "confirmed"},
        ]
    )
    view = appointments_view(api)
    await view.refresh()

    await view.set_filter("status", "confirmed")
    await view.set_filter("date", "2024-03-01")
    await view.set_search("ring")

    assert api.calls == [
        ("get_appointments", {"status": None, "date": None}),
        ("get_appointments", {"status": "confirmed", "date": None}),
        ("get_appointments", {"status": "confirmed", "date": "2024-03-01"}),
    ]
    assert [a["id"] for a in view.visible_records] == [1]


# ── Announcements ──


@pytest.mark.asyncio
async def test_announcements_filter_priority_and_type_locally():
    api = RecordingApi(
        get_announcements=[
            {"id": 1, "title": "Diwali hours", "priority": "high", "announcement_type": "event"},
            {"id": 2, "title": "New catalogue", "priority": "high", "announcement_type": "product"},
            {"id": 3, "title": "Staff meeting", "priority": "low", "announcement_type": "event"},
        ]
    )
    view = announcements_view(api)
    await view.refresh()

    await view.set_filter("priority", "high")
    await view.set_filter("type", "event")

    assert api.calls == [("get_announcements", {})]
    assert [a["id"] for a in view.visible_records] == [1]

    await view.set_filter("priority", "all")
    assert [a["id"] for a in view.visible_records] == [1, 3]


# ── Tenants & team ──


@pytest.mark.asyncio
async def test_tenants_filter_on_subscription_status():
    api = RecordingApi(
        get_tenants=[
            {"id": 1, "name": "Sona Jewellers", "subscription_status": "active"},
            {"id": 2, "name": "Heera Gold", "subscription_status": "trial", "is_active": False},
        ]
    )
    view = tenants_view(api)
    await view.refresh()

    await view.set_filter("status", "trial")

    assert api.calls == [("get_tenants", {})]
    assert [t["id"] for t in view.visible_records] == [2]
    assert view.stats.active == 1


@pytest.mark.asyncio
async def test_team_filter_on_role_and_search():
    api = RecordingApi(
        get_team_members={
            "results": [
                {"id": 1, "first_name": "Ravi", "role": "manager"},
                {"id": 2, "first_name": "Meera", "role": "inhouse_sales"},
                {"id": 3, "first_name": "Ravina", "role": "inhouse_sales"},
            ]
        }
    )
    view = team_view(api)
    await view.refresh()

    await view.set_filter("role", "inhouse_sales")
    await view.set_search("rav")

    assert api.calls == [("get_team_members", {})]
    assert [m["id"] for m in view.visible_records] == [3]


# ── Registry ──


@pytest.mark.parametrize("name", sorted(LIST_VIEWS))
@pytest.mark.asyncio
async def test_every_registered_view_loads(name):
    api = RecordingApi()
    view = create_list_view(api, name)

    assert await view.refresh() == []
    assert len(api.calls) == 1


def test_unknown_view_name():
    with pytest.raises(ValueError, match="invoices"):
        create_list_view(RecordingApi(), "invoices")

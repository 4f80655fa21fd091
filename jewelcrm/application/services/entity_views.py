"""Per-page list views: which inputs go to the backend and which filter locally.

=================  ==========================  ===========================
view               server-side inputs          client-side inputs
=================  ==========================  ===========================
customers          page, search, status        -
trashed customers  -                           search
products           - (one fetch of 200 rows)   search, category, status,
                                               page (20 per page)
orders             -                           search, status
pipeline           stage                       search
appointments       status, date                search
announcements      -                           search, priority, type
tenants            -                           search, status
team               -                           search, role
=================  ==========================  ===========================

A view that filters locally fetches once and re-applies its predicate as
the inputs change; a view that filters server-side re-fetches. Views are
looked up by name through ``LIST_VIEWS``.
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from jewelcrm.domain.entities import (
    ActiveCountStats,
    AnnouncementStats,
    AppointmentStats,
    CustomerStats,
    ListViewState,
    OrderStats,
    PipelineStats,
    ProductStats,
    Record,
)

from .derived_stats import (
    active_count_stats,
    announcement_stats,
    appointment_stats,
    customer_stats,
    order_stats,
    pipeline_stats,
    product_stats,
)
from .list_view_controller import PAGE, SEARCH, ListViewController, active_filter
from .record_normalizer import read_text

if TYPE_CHECKING:
    from jewelcrm.infrastructure.api import CrmApiService

Clock = Callable[[], datetime]

PRODUCTS_PER_PAGE = 20


def matches_search(record: Record, term: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match over ``fields``; an empty term matches everything."""
    needle = term.strip().lower()
    if not needle:
        return True
    return any(needle in read_text(record, f).lower() for f in fields)


def client_display_name(client: object) -> str:
    """Name of a client given either as an id or as a nested client object."""
    if isinstance(client, dict):
        full = read_text(client, "full_name")
        if full:
            return full
        return " ".join(
            p for p in (read_text(client, "first_name"), read_text(client, "last_name")) if p
        ) or "Unknown Client"
    if isinstance(client, (int, str)) and not isinstance(client, bool) and str(client):
        return f"Client #{client}"
    return "Unknown Client"


def _field_filter(state: ListViewState, name: str, record: Record, *fields: str) -> bool:
    wanted = active_filter(state, name)
    if wanted is None:
        return True
    return any(read_text(record, f) == wanted for f in fields)


# ── Customers ───────────────────────────────────────────────────────


def customers_view(
    api: "CrmApiService", *, clock: Clock | None = None
) -> ListViewController[CustomerStats]:
    return ListViewController(
        lambda q: api.get_clients(page=q.page, search=q.search, status=q.param("status")),
        name="customers",
        server_params={PAGE, SEARCH, "status"},
        stats=lambda records: customer_stats(records, now=clock() if clock else None),
        filters={"status": "all"},
    )


def _trash_predicate(record: Record, state: ListViewState) -> bool:
    return matches_search(
        record, state.search_term, ("first_name", "last_name", "email", "phone")
    )


def trashed_customers_view(api: "CrmApiService") -> ListViewController[None]:
    return ListViewController(
        lambda q: api.get_trashed_clients(),
        name="trashed customers",
        predicate=_trash_predicate,
    )


# ── Products ────────────────────────────────────────────────────────


def _product_predicate(record: Record, state: ListViewState) -> bool:
    return (
        matches_search(record, state.search_term, ("name", "sku", "description"))
        and _field_filter(state, "category", record, "category_name", "category")
        and _field_filter(state, "status", record, "status")
    )


def products_view(api: "CrmApiService") -> ListViewController[ProductStats]:
    return ListViewController(
        lambda q: api.get_products(),
        name="products",
        predicate=_product_predicate,
        stats=product_stats,
        filters={"category": "all", "status": "all"},
        page_size=PRODUCTS_PER_PAGE,
    )


# ── Orders ──────────────────────────────────────────────────────────


def _order_predicate(record: Record, state: ListViewState) -> bool:
    return (
        matches_search(record, state.search_term, ("order_number", "client"))
        and _field_filter(state, "status", record, "status")
    )


def orders_view(api: "CrmApiService") -> ListViewController[OrderStats]:
    return ListViewController(
        lambda q: api.get_sales(),
        name="orders",
        predicate=_order_predicate,
        stats=order_stats,
        filters={"status": "all"},
    )


# ── Pipeline ────────────────────────────────────────────────────────


def _pipeline_predicate(record: Record, state: ListViewState) -> bool:
    term = state.search_term
    return matches_search(record, term, ("title", "notes", "next_action")) or (
        bool(term.strip())
        and term.strip().lower() in client_display_name(record.get("client")).lower()
    )


def pipeline_view(api: "CrmApiService") -> ListViewController[PipelineStats]:
    return ListViewController(
        lambda q: api.get_sales_pipeline(stage=q.param("stage")),
        name="pipeline deals",
        server_params={"stage"},
        predicate=_pipeline_predicate,
        stats=pipeline_stats,
        filters={"stage": ""},
    )


# ── Appointments ────────────────────────────────────────────────────


def _appointment_predicate(record: Record, state: ListViewState) -> bool:
    return matches_search(
        record, state.search_term, ("purpose", "client_name", "location", "notes")
    )


def appointments_view(api: "CrmApiService") -> ListViewController[AppointmentStats]:
    return ListViewController(
        lambda q: api.get_appointments(status=q.param("status"), date=q.param("date")),
        name="appointments",
        server_params={"status", "date"},
        predicate=_appointment_predicate,
        stats=appointment_stats,
        filters={"status": "all", "date": ""},
    )


# ── Announcements ───────────────────────────────────────────────────


def _announcement_predicate(record: Record, state: ListViewState) -> bool:
    return (
        matches_search(record, state.search_term, ("title", "content"))
        and _field_filter(state, "priority", record, "priority")
        and _field_filter(state, "type", record, "announcement_type")
    )


def announcements_view(api: "CrmApiService") -> ListViewController[AnnouncementStats]:
    return ListViewController(
        lambda q: api.get_announcements(),
        name="announcements",
        predicate=_announcement_predicate,
        stats=announcement_stats,
        filters={"priority": "all", "type": "all"},
    )


# ── Tenants & team ──────────────────────────────────────────────────


def _tenant_predicate(record: Record, state: ListViewState) -> bool:
    return (
        matches_search(record, state.search_term, ("name", "slug", "business_type"))
        and _field_filter(state, "status", record, "subscription_status")
    )


def tenants_view(api: "CrmApiService") -> ListViewController[ActiveCountStats]:
    return ListViewController(
        lambda q: api.get_tenants(),
        name="tenants",
        predicate=_tenant_predicate,
        stats=active_count_stats,
        filters={"status": "all"},
    )


def _team_predicate(record: Record, state: ListViewState) -> bool:
    return (
        matches_search(
            record,
            state.search_term,
            ("name", "first_name", "last_name", "username", "email"),
        )
        and _field_filter(state, "role", record, "role")
    )


def team_view(api: "CrmApiService") -> ListViewController[ActiveCountStats]:
    return ListViewController(
        lambda q: api.get_team_members(),
        name="team members",
        predicate=_team_predicate,
        stats=active_count_stats,
        filters={"role": "all"},
    )


# ── Registry ────────────────────────────────────────────────────────

ViewFactory = Callable[["CrmApiService"], ListViewController[Any]]

LIST_VIEWS: dict[str, ViewFactory] = {
    "customers": customers_view,
    "trashed_customers": trashed_customers_view,
    "products": products_view,
    "orders": orders_view,
    "pipeline": pipeline_view,
    "appointments": appointments_view,
    "announcements": announcements_view,
    "tenants": tenants_view,
    "team": team_view,
}


def create_list_view(api: "CrmApiService", name: str) -> ListViewController[Any]:
    """Build the list view registered as ``name``."""
    try:
        factory = LIST_VIEWS[name]
    except KeyError:
        raise ValueError(f"Unknown list view '{name}'") from None
    return factory(api)

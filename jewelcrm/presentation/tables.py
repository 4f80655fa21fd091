"""Row and stat-card builders for the list pages.

Each builder turns one raw record into the plain dict a table renders:
display strings only, with the record id kept for row actions.
"""

from dataclasses import dataclass

from jewelcrm.application.services.derived_stats import stock_level
from jewelcrm.application.services.entity_views import client_display_name
from jewelcrm.application.services.record_normalizer import read_text
from jewelcrm.domain.entities import (
    ActiveCountStats,
    AnnouncementStats,
    AppointmentStats,
    CustomerStats,
    OrderStats,
    PipelineStats,
    ProductStats,
    Record,
)

from .formatting import format_currency, format_date, format_percent, status_label

Row = dict[str, object]


@dataclass
class StatCard:
    title: str
    value: str


def _date_or_dash(value: object) -> str:
    return format_date(value) if value else "-"


def _as_record(value: object) -> Record:
    """Rows for malformed entries render as blanks instead of failing."""
    return value if isinstance(value, dict) else {}


# ── Rows ────────────────────────────────────────────────────────────


def customer_row(client: Record) -> Row:
    client = _as_record(client)
    name = " ".join(
        p for p in (read_text(client, "first_name"), read_text(client, "last_name")) if p
    )
    return {
        "id": client.get("id"),
        "name": name or "-",
        "email": read_text(client, "email", "-"),
        "phone": read_text(client, "phone", "-"),
        "status": status_label(client.get("status")),
        "created": _date_or_dash(client.get("created_at")),
    }


def product_row(product: Record) -> Row:
    product = _as_record(product)
    return {
        "id": product.get("id"),
        "name": read_text(product, "name", "-"),
        "sku": read_text(product, "sku", "-"),
        "category": read_text(product, "category_name") or read_text(product, "category", "-"),
        "price": format_currency(product.get("selling_price")),
        "quantity": read_text(product, "quantity", "0"),
        "stock": status_label(stock_level(product)),
    }


def order_row(order: Record) -> Row:
    order = _as_record(order)
    return {
        "id": order.get("id"),
        "order_number": read_text(order, "order_number", "-"),
        "client": client_display_name(order.get("client")),
        "total": format_currency(order.get("total_amount")),
        "status": status_label(order.get("status")),
        "date": _date_or_dash(order.get("order_date") or order.get("created_at")),
    }


def deal_row(deal: Record) -> Row:
    deal = _as_record(deal)
    return {
        "id": deal.get("id"),
        "title": read_text(deal, "title", "-"),
        "client": client_display_name(deal.get("client")),
        "value": format_currency(deal.get("expected_value")),
        "stage": status_label(deal.get("stage")),
        "probability": format_percent(deal.get("probability")),
        "expected_close": _date_or_dash(deal.get("expected_close_date")),
        "next_action_date": format_date(deal.get("next_action_date"))
        if deal.get("next_action_date")
        else "No date",
    }


def appointment_row(appointment: Record) -> Row:
    appointment = _as_record(appointment)
    return {
        "id": appointment.get("id"),
        "client": read_text(appointment, "client_name")
        or client_display_name(appointment.get("client")),
        "date": format_date(appointment.get("date")),
        "time": read_text(appointment, "time", "-"),
        "purpose": read_text(appointment, "purpose", "-"),
        "status": status_label(appointment.get("status")),
    }


# ── Stat cards ──────────────────────────────────────────────────────


def customer_cards(stats: CustomerStats) -> list[StatCard]:
    return [
        StatCard("Total Customers", str(stats.total)),
        StatCard("Active Customers", str(stats.active)),
        StatCard("Leads", str(stats.leads)),
        StatCard("New This Month", str(stats.new_this_month)),
    ]


def pipeline_cards(stats: PipelineStats) -> list[StatCard]:
    return [
        StatCard("Total Deals", str(stats.total_deals)),
        StatCard("Pipeline Value", format_currency(stats.total_value)),
        StatCard("Won Deals", str(stats.won_deals)),
        StatCard("Conversion Rate", format_percent(stats.conversion_rate)),
    ]


def order_cards(stats: OrderStats) -> list[StatCard]:
    return [
        StatCard("Total Orders", str(stats.total_orders)),
        StatCard("Pending", str(stats.pending_orders)),
        StatCard("Completed", str(stats.completed_orders)),
        StatCard("Revenue", format_currency(stats.total_revenue)),
    ]


def product_cards(stats: ProductStats) -> list[StatCard]:
    return [
        StatCard("Total Products", str(stats.total_products)),
        StatCard("Low Stock", str(stats.low_stock)),
        StatCard("Out of Stock", str(stats.out_of_stock)),
        StatCard("Inventory Value", format_currency(stats.inventory_value)),
    ]


def appointment_cards(stats: AppointmentStats) -> list[StatCard]:
    return [
        StatCard("Total Appointments", str(stats.total)),
        StatCard("Upcoming", str(stats.upcoming)),
        StatCard("Completed", str(stats.completed)),
        StatCard("Cancelled", str(stats.cancelled)),
    ]


def announcement_cards(stats: AnnouncementStats) -> list[StatCard]:
    return [
        StatCard("Unread", str(stats.unread)),
        StatCard("High Priority", str(stats.high_priority)),
        StatCard("Pending Acknowledgement", str(stats.pending_acknowledgement)),
    ]


def active_count_cards(stats: ActiveCountStats, noun: str) -> list[StatCard]:
    """Cards for plain directories, e.g. ``noun="Tenants"``."""
    return [
        StatCard(f"Total {noun}", str(stats.total)),
        StatCard(f"Active {noun}", str(stats.active)),
    ]

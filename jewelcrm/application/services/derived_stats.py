"""Derived statistics for each list page, recomputed from the current records."""

from collections.abc import Sequence
from datetime import datetime, timezone

from jewelcrm.domain.entities import (
    PIPELINE_STAGES,
    ActiveCountStats,
    AnnouncementStats,
    AppointmentStats,
    CustomerStats,
    OrderStats,
    PipelineStats,
    ProductStats,
    Record,
    StageSummary,
)

from .record_normalizer import percentage, read_text, safe_number, safe_sum


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 date or datetime from the API; ``None`` when unusable."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _count(records: Sequence[Record], field: str, value: str) -> int:
    return sum(1 for r in records if read_text(r, field) == value)


def customer_stats(records: Sequence[Record], now: datetime | None = None) -> CustomerStats:
    """Totals for the customers page; "new this month" uses the calendar month of ``now``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    new_this_month = 0
    for record in records:
        created = parse_timestamp(record.get("created_at") if isinstance(record, dict) else None)
        if created is None:
            continue
        created = created.astimezone(now.tzinfo)
        if created.year == now.year and created.month == now.month:
            new_this_month += 1

    return CustomerStats(
        total=len(records),
        active=_count(records, "status", "customer"),
        leads=_count(records, "status", "lead"),
        prospects=_count(records, "status", "prospect"),
        new_this_month=new_this_month,
    )


def pipeline_stats(records: Sequence[Record]) -> PipelineStats:
    total = len(records)
    won = _count(records, "stage", "closed_won")

    stages = []
    for stage in PIPELINE_STAGES:
        deals = [r for r in records if read_text(r, "stage") == stage.value]
        stages.append(
            StageSummary(
                stage=stage.value,
                label=stage.label,
                count=len(deals),
                value=safe_sum(deals, "expected_value"),
            )
        )

    return PipelineStats(
        total_deals=total,
        total_value=safe_sum(records, "expected_value"),
        won_deals=won,
        lost_deals=_count(records, "stage", "closed_lost"),
        conversion_rate=percentage(won, total),
        stages=stages,
    )


def order_stats(records: Sequence[Record]) -> OrderStats:
    return OrderStats(
        total_orders=len(records),
        pending_orders=_count(records, "status", "pending"),
        completed_orders=_count(records, "status", "delivered"),
        cancelled_orders=_count(records, "status", "cancelled"),
        total_revenue=safe_sum(records, "total_amount"),
    )


def stock_level(record: Record) -> str:
    """``out_of_stock``, ``low_stock`` or ``in_stock`` for one product."""
    quantity = safe_number(record.get("quantity"))
    if quantity <= 0 or read_text(record, "status") == "out_of_stock":
        return "out_of_stock"
    if record.get("is_low_stock") is True or quantity <= safe_number(record.get("min_quantity")):
        return "low_stock"
    return "in_stock"


def product_stats(records: Sequence[Record]) -> ProductStats:
    products = [r for r in records if isinstance(r, dict)]
    levels = [stock_level(p) for p in products]
    return ProductStats(
        total_products=len(records),
        low_stock=levels.count("low_stock"),
        out_of_stock=levels.count("out_of_stock"),
        inventory_value=sum(
            (safe_number(p.get("selling_price")) * safe_number(p.get("quantity")) for p in products),
            0.0,
        ),
    )


def appointment_stats(records: Sequence[Record]) -> AppointmentStats:
    return AppointmentStats(
        total=len(records),
        upcoming=_count(records, "status", "confirmed"),
        completed=_count(records, "status", "completed"),
        cancelled=_count(records, "status", "cancelled"),
    )


def announcement_stats(records: Sequence[Record]) -> AnnouncementStats:
    items = [r for r in records if isinstance(r, dict)]
    return AnnouncementStats(
        unread=sum(1 for r in items if not r.get("is_read_by_current_user")),
        high_priority=_count(items, "priority", "high"),
        pending_acknowledgement=sum(
            1 for r in items if not r.get("is_acknowledged_by_current_user")
        ),
    )


def active_count_stats(records: Sequence[Record]) -> ActiveCountStats:
    """Tenants and team members: everything counts as active unless flagged otherwise."""
    return ActiveCountStats(
        total=len(records),
        active=sum(
            1 for r in records
            if isinstance(r, dict) and r.get("is_active", True) is not False
        ),
    )

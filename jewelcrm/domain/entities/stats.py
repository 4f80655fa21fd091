"""Derived statistics shown in the stat cards above each list.

Always recomputed from the records currently held by a controller;
never sent back to the backend.
"""

from dataclasses import dataclass, field


@dataclass
class CustomerStats:
    total: int = 0
    active: int = 0
    leads: int = 0
    prospects: int = 0
    new_this_month: int = 0


@dataclass
class StageSummary:
    stage: str
    label: str
    count: int = 0
    value: float = 0.0


@dataclass
class PipelineStats:
    total_deals: int = 0
    total_value: float = 0.0
    won_deals: int = 0
    lost_deals: int = 0
    conversion_rate: float = 0.0
    stages: list[StageSummary] = field(default_factory=list)


@dataclass
class OrderStats:
    total_orders: int = 0
    pending_orders: int = 0
    completed_orders: int = 0
    cancelled_orders: int = 0
    total_revenue: float = 0.0


@dataclass
class ProductStats:
    total_products: int = 0
    low_stock: int = 0
    out_of_stock: int = 0
    inventory_value: float = 0.0


@dataclass
class AppointmentStats:
    total: int = 0
    upcoming: int = 0
    completed: int = 0
    cancelled: int = 0


@dataclass
class AnnouncementStats:
    unread: int = 0
    high_priority: int = 0
    pending_acknowledgement: int = 0


@dataclass
class ActiveCountStats:
    """Totals for plain directories (tenants, team members)."""

    total: int = 0
    active: int = 0

"""Unit tests for display formatting and table row builders."""

import pytest

from jewelcrm.domain.entities import CustomerStats, PipelineStats
from jewelcrm.presentation.formatting import (
    format_currency,
    format_date,
    format_percent,
    status_label,
)
from jewelcrm.presentation.tables import (
    StatCard,
    appointment_row,
    customer_cards,
    customer_row,
    deal_row,
    order_row,
    pipeline_cards,
    product_row,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (50000, "₹50,000.00"),
        (100000, "₹1,00,000.00"),
        (12345678.9, "₹1,23,45,678.90"),
        (999, "₹999.00"),
        ("2500.5", "₹2,500.50"),
        (-1500, "-₹1,500.00"),
        (0, "₹0.00"),
        (None, "₹0.00"),
        (float("nan"), "₹0.00"),
        ("abc", "₹0.00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date("2024-01-15T00:00:00Z") == "Jan 15, 2024"
    assert format_date("2024-12-05") == "Dec 5, 2024"
    assert format_date(None) == "N/A"
    assert format_date("") == "N/A"
    assert format_date("yesterday") == "Invalid Date"


def test_status_label():
    assert status_label("lead") == "Lead"
    assert status_label("closed_won") == "Closed Won"
    assert status_label("out_of_stock") == "Out Of Stock"
    assert status_label(None) == "Unknown"
    assert status_label("") == "Unknown"


def test_format_percent():
    assert format_percent(50) == "50.0%"
    assert format_percent(33.333) == "33.3%"
    assert format_percent(None) == "0.0%"


def test_customer_row():
    row = customer_row(
        {"id": 1, "first_name": "Priya", "status": "lead", "created_at": "2024-01-15T00:00:00Z"}
    )
    assert row == {
        "id": 1,
        "name": "Priya",
        "email": "-",
        "phone": "-",
        "status": "Lead",
        "created": "Jan 15, 2024",
    }


def test_order_row_with_nested_client():
    row = order_row(
        {
            "id": 5,
            "order_number": "ORD-0005",
            "client": {"first_name": "Anil", "last_name": "Mehta"},
            "total_amount": "125000",
            "status": "delivered",
        }
    )
    assert row["client"] == "Anil Mehta"
    assert row["total"] == "₹1,25,000.00"
    assert row["status"] == "Delivered"
    assert row["date"] == "-"


def test_deal_row_with_client_id_and_missing_value():
    row = deal_row({"id": 2, "title": "Ring", "client": 17, "expected_value": None, "stage": "lead"})
    assert row["client"] == "Client #17"
    assert row["value"] == "₹0.00"
    assert row["stage"] == "Lead"
    assert row["next_action_date"] == "No date"


def test_product_row_stock_badge():
    row = product_row({"name": "Bangle", "quantity": 0, "selling_price": 2000})
    assert row["stock"] == "Out Of Stock"
    assert row["price"] == "₹2,000.00"


def test_stat_cards():
    assert StatCard("New This Month", "1") in customer_cards(CustomerStats(total=1, new_this_month=1))

    cards = pipeline_cards(
        PipelineStats(total_deals=2, total_value=50000.0, won_deals=1, conversion_rate=50.0)
    )
    assert [c.value for c in cards] == ["2", "₹50,000.00", "1", "50.0%"]


@pytest.mark.parametrize(
    "builder", [customer_row, product_row, order_row, deal_row, appointment_row]
)
@pytest.mark.parametrize("entry", [None, "junk", 42])
def test_row_builders_render_blanks_for_malformed_entries(builder, entry):
    row = builder(entry)
    assert row["id"] is None
    assert all(isinstance(value, str) for key, value in row.items() if key != "id")


def test_customer_row_for_missing_entry():
    assert customer_row(None) == {
        "id": None,
        "name": "-",
        "email": "-",
        "phone": "-",
        "status": "Unknown",
        "created": "-",
    }

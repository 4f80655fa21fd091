"""Display formatting for amounts, dates and status values (en-IN conventions)."""

from jewelcrm.application.services.derived_stats import parse_timestamp
from jewelcrm.application.services.record_normalizer import safe_number

CURRENCY_SYMBOL = "₹"


def _group_indian(digits: str) -> str:
    """``1234567`` -> ``12,34,567``: last three digits, then groups of two."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: object) -> str:
    """Format an amount as INR, e.g. ``₹1,00,000.00``; unusable input is ``₹0.00``."""
    value = safe_number(amount)
    integral, fraction = f"{abs(value):.2f}".split(".")
    sign = "-" if value < 0 and (integral, fraction) != ("0", "00") else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(integral)}.{fraction}"


def format_date(value: object) -> str:
    if value is None or value == "":
        return "N/A"
    parsed = parse_timestamp(value)
    if parsed is None:
        return "Invalid Date"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def status_label(value: object) -> str:
    """``closed_won`` -> ``Closed Won``; missing values read ``Unknown``."""
    if not isinstance(value, str) or not value.strip():
        return "Unknown"
    return " ".join(word.capitalize() for word in value.strip().split("_") if word)


def format_percent(value: object) -> str:
    return f"{safe_number(value):.1f}%"

"""Normalizer — one canonical list out of any list-endpoint payload.

List endpoints answer with a bare array, a paginated ``{"results": [...]}``
object or a ``{"data": [...]}`` wrapper, and occasionally with something
else entirely. Every list page goes through ``normalize_records`` so the
records it holds are always a ``list``.

The numeric helpers read amounts defensively: any value that is missing,
non-numeric or non-finite counts as zero rather than poisoning a sum.
"""

import math
from collections.abc import Iterable
from typing import Any

from jewelcrm.domain.entities import Record


def normalize_records(payload: Any) -> list[Record]:
    """Return the records contained in ``payload``, or ``[]``. Never raises."""
    if isinstance(payload, list):
        return list(payload)
    if isinstance(payload, dict):
        for key in ("results", "data"):
            nested = payload.get(key)
            if isinstance(nested, list):
                return list(nested)
    return []


def safe_number(value: Any) -> float:
    """Finite ints/floats and numeric strings as float; anything else is 0.0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def safe_sum(records: Iterable[Any], field: str) -> float:
    """Sum ``field`` over ``records``, counting unusable entries as zero."""
    return sum(
        (safe_number(r.get(field)) for r in records if isinstance(r, dict)),
        0.0,
    )


def read_text(record: Any, field: str, default: str = "") -> str:
    """Read a display string, tolerating missing records and non-string values."""
    if not isinstance(record, dict):
        return default
    value = record.get(field)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def percentage(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return part / whole * 100

"""Project record normalization.

Coerces a normalized-shape row (mapping with snake_case or camelCase keys)
into a ProjectRecord that satisfies the summarizer's input contract:
- numeric fields are finite floats, otherwise 0
- categorical fields are non-empty strings, otherwise None
- progress is a float, a status token, or None
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic.alias_generators import to_camel

from rera_insights.models.types import ProjectRecord

NUMERIC_FIELDS = (
    "total_value",
    "received_amount",
    "total_area",
    "booking_percentage",
    "collection_percentage",
    "units_total",
    "units_booked",
    "land_cost",
    "construction_cost",
)
CATEGORICAL_FIELDS = ("name", "type", "status", "location", "promoter", "promoter_type")
DATE_FIELDS = ("approved_on", "submitted_on", "start_on", "completion_on")


def normalize_record(row: Mapping[str, Any]) -> ProjectRecord:
    """Build a ProjectRecord from a row.

    Args:
        row: Mapping of field name to raw value. Keys may be snake_case
            or camelCase; "project_id" is accepted for "id".

    Returns:
        Validated, frozen ProjectRecord.

    Raises:
        pydantic.ValidationError: If the row has no usable id.
    """
    record_id = _get(row, "id")
    if record_id is None:
        record_id = _get(row, "project_id")

    values: dict[str, Any] = {"id": record_id}
    for name in CATEGORICAL_FIELDS:
        values[name] = coerce_label(_get(row, name))
    for name in NUMERIC_FIELDS:
        values[name] = coerce_number(_get(row, name))
    for name in DATE_FIELDS:
        values[name] = coerce_date(_get(row, name))
    values["progress"] = coerce_progress(_get(row, "progress"))

    return ProjectRecord(**values)


def normalize_records(rows: Iterable[Mapping[str, Any]]) -> list[ProjectRecord]:
    """Normalize a batch of rows."""
    return [normalize_record(row) for row in rows]


def coerce_number(value: Any) -> float:
    """Finite float, or 0.0 for anything else.

    Numeric strings are parsed; thousands separators and a trailing
    percent sign are tolerated.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip().rstrip("%").replace(",", "")
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_label(value: Any) -> str | None:
    """Stripped non-empty string, or None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def coerce_progress(value: Any) -> float | str | None:
    """Progress percent, or the raw token when it is not numeric."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            float(text.rstrip("%"))
        except ValueError:
            return text
    return coerce_number(value)


def coerce_date(value: Any) -> date | None:
    """Date from a date, datetime or ISO string; None otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _get(row: Mapping[str, Any], name: str) -> Any:
    """Look a field up by snake_case name, then camelCase."""
    if name in row:
        return row[name]
    return row.get(to_camel(name))

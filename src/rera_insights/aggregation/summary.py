"""Project summary aggregation.

Turns a batch of normalized project records into a ProjectSummary:
sums, filtered averages, group-by histograms, top-N rankings, unit
sales and schedule statistics.
Pure computation - no database access, no shared state.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Mapping, Sequence

from rera_insights.aggregation.status import STATUS_LABELS, classify_status, status_label
from rera_insights.models.types import (
    FinancialSummary,
    ProjectFinancials,
    ProjectRecord,
    ProjectSummary,
    ProjectVelocity,
    SalesPerformance,
)

logger = logging.getLogger(__name__)

TOP_PROMOTERS_LIMIT = 10
TOP_LOCATIONS_LIMIT = 15
UNKNOWN_LABEL = "Unknown"


def summarize(
    records: Sequence[ProjectRecord],
    total_count: int | None = None,
) -> ProjectSummary:
    """Compute the summary statistics for a set of projects.

    Averages only consider strictly positive values; a zero or missing
    percentage means "not computed" and is left out of the denominator.

    Args:
        records: Normalized project records. Not mutated.
        total_count: Authoritative project count, when the records are
            only a batch of a larger dataset. Replaces len(records).

    Returns:
        Freshly built ProjectSummary.

    Raises:
        TypeError: If records is not a sequence.
        ValueError: If total_count is negative.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise TypeError(f"records must be a sequence, got {type(records).__name__}")
    if total_count is not None and total_count < 0:
        raise ValueError(f"total_count must be non-negative, got {total_count}")

    logger.debug(f"Summarizing {len(records)} records (total_count={total_count})")

    if not records:
        return ProjectSummary()

    total_value = 0.0
    total_area = 0.0
    received_amount = 0.0
    total_units = 0.0
    booked_units = 0.0
    land_cost = 0.0
    construction_cost = 0.0
    booking_values: list[float] = []
    progress_values: list[float] = []
    collection_values: list[float] = []
    durations: list[int] = []

    type_counts: Counter[str] = Counter()
    status_counts: dict[str, int] = {label: 0 for label in STATUS_LABELS.values()}
    location_counts: Counter[str] = Counter()
    promoter_type_counts: Counter[str] = Counter()
    promoter_counts: Counter[str] = Counter()
    booking_by_location: dict[str, list[float]] = {}

    for record in records:
        total_value += _amount(record.total_value)
        total_area += _amount(record.total_area)
        received_amount += _amount(record.received_amount)
        total_units += _amount(record.units_total)
        booked_units += _amount(record.units_booked)
        land_cost += _amount(record.land_cost)
        construction_cost += _amount(record.construction_cost)

        location = _label(record.location)

        if _is_positive(record.booking_percentage):
            booking_values.append(record.booking_percentage)
            booking_by_location.setdefault(location, []).append(record.booking_percentage)
        if _is_positive(record.progress):
            progress_values.append(record.progress)
        if _is_positive(record.collection_percentage):
            collection_values.append(record.collection_percentage)

        duration = _duration_days(record)
        if duration is not None:
            durations.append(duration)

        type_counts[_label(record.type)] += 1
        location_counts[location] += 1
        promoter_type_counts[_label(record.promoter_type)] += 1
        promoter_counts[_label(record.promoter)] += 1
        status_counts[status_label(classify_status(_status_token(record)))] += 1

    projects = len(records) if total_count is None else total_count

    avg_collection = _positive_mean(collection_values)

    return ProjectSummary(
        total_projects=projects,
        active_projects=status_counts[status_label("active")],
        completed_projects=status_counts[status_label("completed")],
        delayed_projects=status_counts[status_label("delayed")],
        unreported_projects=status_counts[status_label("unreported")],
        total_value=total_value,
        total_area=total_area,
        avg_booking_percentage=_positive_mean(booking_values),
        avg_progress=_positive_mean(progress_values),
        avg_collection_percentage=avg_collection,
        projects_by_type=dict(type_counts),
        projects_by_status=status_counts,
        projects_by_location=_top_n(location_counts, TOP_LOCATIONS_LIMIT),
        projects_by_promoter_type=dict(promoter_type_counts),
        top_promoters=_top_n(promoter_counts, TOP_PROMOTERS_LIMIT),
        avg_booking_by_location={
            location: _positive_mean(values) for location, values in booking_by_location.items()
        },
        financial_summary=FinancialSummary(
            total_value=total_value,
            received_amount=received_amount,
            avg_collection_percentage=avg_collection,
        ),
        sales_performance=SalesPerformance(
            total_units=total_units,
            booked_units=booked_units,
            total_value=total_value,
            received_amount=received_amount,
            avg_collection_percentage=avg_collection,
            revenue_per_unit=received_amount / booked_units if booked_units > 0 else 0.0,
        ),
        project_velocity=ProjectVelocity(avg_project_duration=_positive_mean(durations)),
        financials=ProjectFinancials(land_cost=land_cost, development_cost=construction_cost),
    )


def _amount(value: float | None) -> float:
    """Summable amount: None and non-finite values count as 0."""
    if value is None or not math.isfinite(value):
        return 0.0
    return value


def _is_positive(value: float | str | None) -> bool:
    """True for a finite number strictly above zero."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value > 0


def _positive_mean(values: list[float]) -> float:
    """Arithmetic mean, or 0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def _duration_days(record: ProjectRecord) -> int | None:
    """Days from start to completion; None unless both dates are set and ordered."""
    if record.start_on is None or record.completion_on is None:
        return None
    days = (record.completion_on - record.start_on).days
    return days if days > 0 else None


def _label(value: str | None) -> str:
    """Histogram key for a categorical value."""
    if value is None or not value.strip():
        return UNKNOWN_LABEL
    return value


def _status_token(record: ProjectRecord) -> str | None:
    """Raw status to classify.

    Falls back to a textual progress token when no status is reported.
    """
    if record.status and record.status.strip():
        return record.status
    if isinstance(record.progress, str):
        return record.progress
    return None


def _top_n(counts: Counter[str], limit: int) -> dict[str, int]:
    """Highest counts first; equal counts keep first-seen order."""
    return dict(counts.most_common(limit))

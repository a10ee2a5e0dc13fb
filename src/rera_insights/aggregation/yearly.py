"""Yearly trend aggregation.

Groups projects by approval year and derives two series:
projects approved per year, and mean unit consideration per year.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date

from rera_insights.models.types import ProjectRecord, YearlyDataPoint, YearlyTrends

# Approvals before this year predate the registry and are treated as noise
MIN_TREND_YEAR = 2010


def yearly_trends(
    records: Sequence[ProjectRecord],
    today: date | None = None,
) -> YearlyTrends:
    """Compute per-year series for a set of projects.

    Records without an approval date, or approved outside
    [MIN_TREND_YEAR, current year], are skipped.

    Args:
        records: Normalized project records.
        today: Reference date for the current year. Defaults to today.

    Returns:
        YearlyTrends with both series in ascending year order.

    Raises:
        TypeError: If records is not a sequence.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise TypeError(f"records must be a sequence, got {type(records).__name__}")

    current_year = (today or date.today()).year

    by_year: dict[int, list[ProjectRecord]] = {}
    for record in records:
        if record.approved_on is None:
            continue
        year = record.approved_on.year
        if year < MIN_TREND_YEAR or year > current_year:
            continue
        by_year.setdefault(year, []).append(record)

    years = sorted(by_year)

    projects_approved = [YearlyDataPoint(year=year, value=len(by_year[year])) for year in years]

    avg_unit_consideration = []
    for year in years:
        values = [r.total_value for r in by_year[year] if r.total_value > 0]
        avg = sum(values) / len(values) if values else 0.0
        avg_unit_consideration.append(YearlyDataPoint(year=year, value=avg))

    return YearlyTrends(
        projects_approved=projects_approved,
        avg_unit_consideration=avg_unit_consideration,
    )

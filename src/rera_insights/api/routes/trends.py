"""Trends API endpoint.

GET /api/trends/yearly - Yearly approvals and mean unit consideration
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from rera_insights.aggregation.yearly import yearly_trends
from rera_insights.api.app import get_db_session
from rera_insights.db import repo
from rera_insights.db.repo import DbSession
from rera_insights.models.domain import ProjectFilters
from rera_insights.models.types import YearlyTrends

router = APIRouter()

# Filter value meaning "no constraint"
ALL = "all"


def _single(value: str | None) -> list[str]:
    """One-value filter list, empty for 'all' or absent."""
    if value is None or value == ALL:
        return []
    return [value]


@router.get("/trends/yearly", response_model=YearlyTrends)
def get_yearly_trends(
    status: str | None = None,
    type: str | None = None,
    location: str | None = None,
    session: DbSession = Depends(get_db_session),
) -> YearlyTrends:
    """Get yearly trend series for stored projects.

    Args:
        status: Exact status to match, or 'all'.
        type: Exact project type to match, or 'all'.
        location: Exact location to match, or 'all'.
        session: Database session (injected).

    Returns:
        YearlyTrends over the matching projects.
    """
    filters = ProjectFilters(
        types=_single(type),
        statuses=_single(status),
        locations=_single(location),
    )
    records = repo.list_projects(session, filters)
    return yearly_trends(records)

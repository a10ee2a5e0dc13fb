"""Filter options API endpoint.

GET /api/filters - Distinct status, type and location values
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from rera_insights.api.app import get_db_session
from rera_insights.db import repo
from rera_insights.db.repo import DbSession
from rera_insights.models.types import FilterOption, FilterOptions

router = APIRouter()


def _options(session: DbSession, column: str) -> list[FilterOption]:
    """Filter options for one column."""
    return [
        FilterOption(value=value, label=value)
        for value in repo.list_distinct_values(session, column)
    ]


@router.get("/filters", response_model=FilterOptions)
def get_filter_options(session: DbSession = Depends(get_db_session)) -> FilterOptions:
    """Get the selectable values of each filter dimension."""
    return FilterOptions(
        status=_options(session, "status"),
        type=_options(session, "type"),
        location=_options(session, "location"),
    )

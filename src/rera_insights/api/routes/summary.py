"""Summary API endpoints.

GET /api/summary - Summarize stored projects matching filters
POST /api/summary - Summarize posted project records
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from rera_insights.aggregation.summary import summarize
from rera_insights.api.app import get_db_session, get_project_filters
from rera_insights.db import repo
from rera_insights.db.repo import DbSession
from rera_insights.models.domain import ProjectFilters
from rera_insights.models.types import ProjectSummary, SummaryRequest

router = APIRouter()


@router.get("/summary", response_model=ProjectSummary)
def get_summary(
    request: Request,
    filters: ProjectFilters = Depends(get_project_filters),
    session: DbSession = Depends(get_db_session),
) -> ProjectSummary:
    """Summarize stored projects.

    At most RERA_SUMMARY_FETCH_LIMIT records are aggregated; the project
    count always reflects every match.

    Args:
        request: Incoming request (carries the app's fetch limit).
        filters: Project filters (from query parameters).
        session: Database session (injected).

    Returns:
        ProjectSummary for the matching projects.
    """
    records = repo.list_projects(session, filters, limit=request.app.state.fetch_limit)
    total_count = repo.count_projects(session, filters)
    return summarize(records, total_count=total_count)


@router.post("/summary", response_model=ProjectSummary)
def post_summary(summary_request: SummaryRequest) -> ProjectSummary:
    """Summarize the posted records.

    Args:
        summary_request: Records and optional authoritative total count.

    Returns:
        ProjectSummary for the posted records.
    """
    return summarize(summary_request.records, total_count=summary_request.total_count)

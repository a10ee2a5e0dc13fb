"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping aggregation logic pure.
Returns ProjectRecord models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from sqlalchemy.orm import Query, Session

from rera_insights.db.schema import Project
from rera_insights.models.domain import ProjectFilters
from rera_insights.models.types import ProjectRecord
from rera_insights.normalize.record import normalize_record

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]

logger = logging.getLogger(__name__)

# Columns exposed as filter dimensions
DISTINCT_COLUMNS = {
    "type": Project.project_type,
    "status": Project.status,
    "location": Project.location,
}


# ============================================================================
# Converters: SQLAlchemy <-> Records
# ============================================================================


def _project_to_record(project: Project) -> ProjectRecord:
    """Convert SQLAlchemy Project to a normalized record."""
    progress = project.progress if project.progress is not None else project.progress_token
    return normalize_record(
        {
            "id": project.project_id,
            "name": project.name,
            "type": project.project_type,
            "status": project.status,
            "location": project.location,
            "promoter": project.promoter,
            "promoter_type": project.promoter_type,
            "progress": progress,
            "total_value": project.total_value,
            "received_amount": project.received_amount,
            "total_area": project.total_area,
            "booking_percentage": project.booking_percentage,
            "collection_percentage": project.collection_percentage,
            "units_total": project.units_total,
            "units_booked": project.units_booked,
            "land_cost": project.land_cost,
            "construction_cost": project.construction_cost,
            "approved_on": project.approved_on,
            "submitted_on": project.submitted_on,
            "start_on": project.start_on,
            "completion_on": project.completion_on,
        }
    )


def _record_to_project(record: ProjectRecord) -> Project:
    """Convert a record to a SQLAlchemy Project."""
    numeric_progress = not isinstance(record.progress, str)
    return Project(
        project_id=str(record.id),
        name=record.name,
        project_type=record.type,
        status=record.status,
        location=record.location,
        promoter=record.promoter,
        promoter_type=record.promoter_type,
        progress=record.progress if numeric_progress else None,
        progress_token=None if numeric_progress else record.progress,
        total_value=record.total_value,
        received_amount=record.received_amount,
        total_area=record.total_area,
        booking_percentage=record.booking_percentage,
        collection_percentage=record.collection_percentage,
        units_total=record.units_total,
        units_booked=record.units_booked,
        land_cost=record.land_cost,
        construction_cost=record.construction_cost,
        approved_on=record.approved_on,
        submitted_on=record.submitted_on,
        start_on=record.start_on,
        completion_on=record.completion_on,
    )


def _apply_filters(query: Query, filters: ProjectFilters | None) -> Query:
    """Restrict a Project query to the given filters."""
    if filters is None or filters.is_empty():
        return query

    if filters.types:
        query = query.filter(Project.project_type.in_(filters.types))
    if filters.statuses:
        query = query.filter(Project.status.in_(filters.statuses))
    if filters.locations:
        query = query.filter(Project.location.in_(filters.locations))
    if filters.min_price is not None:
        query = query.filter(Project.total_value >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(Project.total_value <= filters.max_price)
    if filters.min_area is not None:
        query = query.filter(Project.total_area >= filters.min_area)
    if filters.max_area is not None:
        query = query.filter(Project.total_area <= filters.max_area)
    if filters.min_progress is not None:
        query = query.filter(Project.progress >= filters.min_progress)
    if filters.max_progress is not None:
        query = query.filter(Project.progress <= filters.max_progress)

    return query


# ============================================================================
# Project Repository
# ============================================================================


def get_project(session: DbSession, project_id: str) -> ProjectRecord | None:
    """Get project by ID."""
    project = session.query(Project).filter(Project.project_id == project_id).first()
    return _project_to_record(project) if project else None


def list_projects(
    session: DbSession,
    filters: ProjectFilters | None = None,
    limit: int | None = None,
) -> list[ProjectRecord]:
    """List projects matching filters.

    Most recently submitted first; projects without a submission date last.
    """
    query = _apply_filters(session.query(Project), filters).order_by(
        Project.submitted_on.is_(None),
        Project.submitted_on.desc(),
        Project.project_id,
    )
    if limit is not None:
        query = query.limit(limit)

    projects = query.all()
    logger.debug(f"Fetched {len(projects)} projects (limit={limit})")
    return [_project_to_record(p) for p in projects]


def count_projects(session: DbSession, filters: ProjectFilters | None = None) -> int:
    """Count all projects matching filters, ignoring any fetch limit."""
    return _apply_filters(session.query(Project), filters).count()


def list_distinct_values(session: DbSession, column: str) -> list[str]:
    """Get sorted distinct non-blank values of a filter dimension.

    Raises:
        ValueError: If column is not one of type, status or location.
    """
    if column not in DISTINCT_COLUMNS:
        raise ValueError(f"Unknown filter column: {column}")

    attribute = DISTINCT_COLUMNS[column]
    rows = session.query(attribute).filter(attribute.isnot(None)).distinct().all()
    return sorted(value for (value,) in rows if value.strip())


def add_projects(session: DbSession, records: Iterable[ProjectRecord]) -> int:
    """Insert or replace projects. Caller commits.

    Returns:
        Number of records written.
    """
    written = 0
    for record in records:
        session.merge(_record_to_project(record))
        written += 1
    return written

"""Projects API endpoints.

GET /api/projects - List projects matching filters
GET /api/projects/{project_id} - Get project detail
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from rera_insights.api.app import get_db_session, get_project_filters
from rera_insights.db import repo
from rera_insights.db.repo import DbSession
from rera_insights.models.domain import ProjectFilters
from rera_insights.models.types import ProjectList, ProjectRecord

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/projects", response_model=ProjectList)
def list_projects(
    limit: int | None = Query(default=None, ge=1),
    filters: ProjectFilters = Depends(get_project_filters),
    session: DbSession = Depends(get_db_session),
) -> ProjectList:
    """List projects, most recently submitted first.

    Args:
        limit: Maximum number of projects returned.
        filters: Project filters (from query parameters).
        session: Database session (injected).

    Returns:
        ProjectList with the projects and the count of all matches.
    """
    projects = repo.list_projects(session, filters, limit=limit)
    total_count = repo.count_projects(session, filters)
    return ProjectList(projects=projects, total_count=total_count)


@router.get("/projects/{project_id}", response_model=ProjectRecord)
def get_project(
    project_id: str,
    session: DbSession = Depends(get_db_session),
) -> ProjectRecord:
    """Get a single project.

    Raises:
        HTTPException: 404 if project not found.
    """
    project = repo.get_project(session, project_id)

    if project is None:
        logger.info(f"Project not found: {project_id}")
        raise HTTPException(status_code=404, detail="Project not found")

    return project

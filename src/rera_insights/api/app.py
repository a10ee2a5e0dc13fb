"""FastAPI application factory.

API layer:
- Validates inputs, reads the project store
- Returns summary payloads for the dashboard
- Forbidden: aggregation logic beyond calling the engine
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from rera_insights.db.repo import DbSession
from rera_insights.db.session import get_session, resolve_db_path
from rera_insights.models.domain import ProjectFilters

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session for the app's database.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def get_project_filters(
    type: list[str] | None = Query(default=None),
    status: list[str] | None = Query(default=None),
    location: list[str] | None = Query(default=None),
    min_price: float | None = None,
    max_price: float | None = None,
    min_area: float | None = None,
    max_area: float | None = None,
    min_progress: float | None = None,
    max_progress: float | None = None,
) -> ProjectFilters:
    """Dependency building ProjectFilters from query parameters.

    type, status and location may be repeated to match any of several values.
    """
    return ProjectFilters(
        types=type or [],
        statuses=status or [],
        locations=location or [],
        min_price=min_price,
        max_price=max_price,
        min_area=min_area,
        max_area=max_area,
        min_progress=min_progress,
        max_progress=max_progress,
    )


def get_fetch_limit() -> int | None:
    """Maximum records fetched for a summary, from RERA_SUMMARY_FETCH_LIMIT.

    None (no cap) when unset or blank.

    Raises:
        ValueError: If the value is not a positive integer.
    """
    raw = os.environ.get("RERA_SUMMARY_FETCH_LIMIT", "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RERA_SUMMARY_FETCH_LIMIT must be an integer, got {raw!r}") from None
    if limit < 1:
        raise ValueError(f"RERA_SUMMARY_FETCH_LIMIT must be positive, got {limit}")
    return limit


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to RERA_DB_PATH.

    Returns:
        Configured FastAPI application.

    Raises:
        ValueError: If RERA_SUMMARY_FETCH_LIMIT is invalid.
    """
    fetch_limit = get_fetch_limit()

    app = FastAPI(
        title="RERA Insights API",
        description="Summary statistics over registered real-estate projects",
        version="0.1.0",
    )
    app.state.db_path = resolve_db_path(db_path)
    app.state.fetch_limit = fetch_limit

    origins = os.environ.get("RERA_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from rera_insights.api.routes import filters, projects, summary, trends

    app.include_router(summary.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(trends.router, prefix="/api")
    app.include_router(filters.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()

"""Shared pytest fixtures for rera_insights tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from rera_insights.db.schema import Base
from rera_insights.models.types import ProjectRecord


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def make_record():
    """Factory for ProjectRecord with a running id."""
    counter = iter(range(1, 1_000_000))

    def _make(**fields) -> ProjectRecord:
        fields.setdefault("id", f"P-{next(counter):04d}")
        return ProjectRecord(**fields)

    return _make

"""Database schema for RERA insights.

One table of normalized project rows. Upstream registry columns are
mapped to this shape before loading.
"""

from datetime import date

from sqlalchemy import Date, Float, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Project(Base):
    """A registered real-estate project.

    Progress is stored either as a percent (progress) or, when the source
    reports a status word instead, as progress_token.
    """

    __tablename__ = "projects"

    project_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    project_type: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    status: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    location: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    promoter: Mapped[str | None] = mapped_column(String(256), nullable=True)
    promoter_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    progress: Mapped[float | None] = mapped_column(Float, nullable=True)
    progress_token: Mapped[str | None] = mapped_column(String(64), nullable=True)
    total_value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    received_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_area: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    booking_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    collection_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    units_total: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    units_booked: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    land_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    construction_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    approved_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    submitted_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    start_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    completion_on: Mapped[date | None] = mapped_column(Date, nullable=True)

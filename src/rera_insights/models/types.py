"""Pydantic models for the RERA insights engine and API.

Field names are snake_case in Python and camelCase on the wire.
Both spellings are accepted on input.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectRecord(CamelModel):
    """Normalized view of one registered project.

    Frozen: the engine never mutates input records.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str | int
    name: str | None = None
    type: str | None = None
    status: str | None = None
    location: str | None = None
    promoter: str | None = None
    promoter_type: str | None = None
    progress: float | str | None = None  # percent, or a status token
    total_value: float = 0.0
    received_amount: float = 0.0
    total_area: float = 0.0
    booking_percentage: float = 0.0
    collection_percentage: float = 0.0
    units_total: float = 0.0
    units_booked: float = 0.0
    land_cost: float = 0.0
    construction_cost: float = 0.0
    approved_on: date | None = None
    submitted_on: date | None = None
    start_on: date | None = None
    completion_on: date | None = None

    @field_validator("progress", mode="before")
    @classmethod
    def parse_progress(cls, v: Any) -> float | str | None:
        """Parse numeric progress strings; keep status tokens as text."""
        from rera_insights.normalize.record import coerce_progress

        return coerce_progress(v)


class FinancialSummary(CamelModel):
    """Nested view of the financial aggregates."""

    total_value: float = 0.0
    received_amount: float = 0.0
    avg_collection_percentage: float = 0.0


class SalesPerformance(CamelModel):
    """Unit sales and revenue per booked unit."""

    total_units: float = 0.0
    booked_units: float = 0.0
    total_value: float = 0.0
    received_amount: float = 0.0
    avg_collection_percentage: float = 0.0
    revenue_per_unit: float = 0.0  # 0 when nothing is booked


class ProjectVelocity(CamelModel):
    """Schedule statistics."""

    avg_project_duration: float = 0.0  # days, start to completion


class ProjectFinancials(CamelModel):
    """Cost totals."""

    land_cost: float = 0.0
    development_cost: float = 0.0


class ProjectSummary(CamelModel):
    """Statistical summary over a set of project records."""

    total_projects: int = 0
    active_projects: int = 0
    completed_projects: int = 0
    delayed_projects: int = 0
    unreported_projects: int = 0
    total_value: float = 0.0
    total_area: float = 0.0
    avg_booking_percentage: float = 0.0
    avg_progress: float = 0.0
    avg_collection_percentage: float = 0.0
    projects_by_type: dict[str, int] = Field(default_factory=dict)
    projects_by_status: dict[str, int] = Field(default_factory=dict)
    projects_by_location: dict[str, int] = Field(default_factory=dict)  # top 15
    projects_by_promoter_type: dict[str, int] = Field(default_factory=dict)
    top_promoters: dict[str, int] = Field(default_factory=dict)  # top 10
    avg_booking_by_location: dict[str, float] = Field(default_factory=dict)
    financial_summary: FinancialSummary = Field(default_factory=FinancialSummary)
    sales_performance: SalesPerformance = Field(default_factory=SalesPerformance)
    project_velocity: ProjectVelocity = Field(default_factory=ProjectVelocity)
    financials: ProjectFinancials = Field(default_factory=ProjectFinancials)


class SummaryRequest(CamelModel):
    """Records posted for direct summarization."""

    records: list[ProjectRecord]
    total_count: int | None = Field(default=None, ge=0)


class ProjectList(CamelModel):
    """Filtered project listing."""

    projects: list[ProjectRecord]
    total_count: int


class YearlyDataPoint(CamelModel):
    """One point of a yearly series."""

    year: int
    value: float


class YearlyTrends(CamelModel):
    """Per-year approval counts and mean unit consideration."""

    projects_approved: list[YearlyDataPoint] = Field(default_factory=list)
    avg_unit_consideration: list[YearlyDataPoint] = Field(default_factory=list)


class FilterOption(CamelModel):
    """Selectable filter value."""

    value: str
    label: str


class FilterOptions(CamelModel):
    """Distinct values available for each filter dimension."""

    status: list[FilterOption] = Field(default_factory=list)
    type: list[FilterOption] = Field(default_factory=list)
    location: list[FilterOption] = Field(default_factory=list)

"""Domain models for RERA insights.

Pure Python dataclasses and literals, independent of SQLAlchemy
and pydantic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


# ============================================================================
# Status Domain
# ============================================================================

ProjectStatus = Literal["active", "completed", "delayed", "unreported"]


# ============================================================================
# Query Domain
# ============================================================================


@dataclass
class ProjectFilters:
    """Constraints applied when selecting projects.

    Empty lists and None bounds mean "no constraint".
    Price bounds apply to total value.
    """

    types: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    min_price: float | None = None
    max_price: float | None = None
    min_area: float | None = None
    max_area: float | None = None
    min_progress: float | None = None
    max_progress: float | None = None

    def is_empty(self) -> bool:
        """True when no constraint is set."""
        return not (self.types or self.statuses or self.locations) and all(
            bound is None
            for bound in (
                self.min_price,
                self.max_price,
                self.min_area,
                self.max_area,
                self.min_progress,
                self.max_progress,
            )
        )

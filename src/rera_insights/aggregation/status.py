"""Project status classification.

Maps a raw status (or progress) token to one of four canonical states:
- completed: "completed"
- delayed: "delayed"
- active: "ongoing"
- unreported: anything else, including empty or missing values

Matching is exact after lower-casing; rules are checked in the order above.
"""

from __future__ import annotations

from rera_insights.models.domain import ProjectStatus

# Exact-match rules, in priority order
STATUS_RULES: tuple[tuple[str, ProjectStatus], ...] = (
    ("completed", "completed"),
    ("delayed", "delayed"),
    ("ongoing", "active"),
)

# Display labels, in reporting order
STATUS_LABELS: dict[ProjectStatus, str] = {
    "active": "Active",
    "completed": "Completed",
    "delayed": "Delayed",
    "unreported": "Unreported",
}


def classify_status(raw_status: str | None) -> ProjectStatus:
    """Classify a raw status token.

    Args:
        raw_status: Status text as reported, or None.

    Returns:
        One of 'active', 'completed', 'delayed' or 'unreported'.
    """
    if raw_status is None:
        return "unreported"

    token = str(raw_status).lower()
    for match, status in STATUS_RULES:
        if token == match:
            return status

    return "unreported"


def status_label(status: ProjectStatus) -> str:
    """Display label for a canonical status."""
    return STATUS_LABELS[status]

#!/usr/bin/env python3
"""Smoke test for the demo database.

Validates that the demo projects were seeded and that the summary
and trend aggregations hold their invariants, then prints a report.

Usage:
    python scripts/smoke_demo.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rera_insights.aggregation.status import STATUS_LABELS  # noqa: E402
from rera_insights.aggregation.summary import (  # noqa: E402
    TOP_LOCATIONS_LIMIT,
    TOP_PROMOTERS_LIMIT,
    summarize,
)
from rera_insights.aggregation.yearly import yearly_trends  # noqa: E402
from rera_insights.core.formatting import (  # noqa: E402
    format_area,
    format_currency,
    format_percentage,
)
from rera_insights.db import repo  # noqa: E402
from rera_insights.db.session import get_session  # noqa: E402
from rera_insights.models.types import ProjectRecord, ProjectSummary  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"


def check_database_exists() -> bool:
    """Check that demo database exists."""
    if not DEMO_DB_PATH.exists():
        print(f"FAIL: Demo database not found: {DEMO_DB_PATH}")
        return False
    print(f"OK: Database exists: {DEMO_DB_PATH}")
    return True


def check_projects_seeded(records: list[ProjectRecord]) -> bool:
    """Check that projects were stored."""
    if not records:
        print("FAIL: No projects in database")
        return False
    print(f"OK: {len(records)} projects stored")
    return True


def check_summary_invariants(records: list[ProjectRecord], summary: ProjectSummary) -> bool:
    """Check counts and rankings of the summary."""
    ok = True

    if sum(summary.projects_by_type.values()) != len(records):
        print("FAIL: projects_by_type does not add up to the record count")
        ok = False

    if list(summary.projects_by_status) != list(STATUS_LABELS.values()):
        print(f"FAIL: Unexpected status keys: {list(summary.projects_by_status)}")
        ok = False
    elif sum(summary.projects_by_status.values()) != len(records):
        print("FAIL: projects_by_status does not add up to the record count")
        ok = False

    for name, ranking, limit in (
        ("top_promoters", summary.top_promoters, TOP_PROMOTERS_LIMIT),
        ("projects_by_location", summary.projects_by_location, TOP_LOCATIONS_LIMIT),
    ):
        counts = list(ranking.values())
        if len(counts) > limit or counts != sorted(counts, reverse=True):
            print(f"FAIL: {name} is not a top-{limit} ranking")
            ok = False

    if ok:
        print("OK: Summary invariants hold")
    return ok


def print_report(summary: ProjectSummary) -> None:
    """Print the headline figures."""
    print(f"    Projects: {summary.total_projects}")
    print(f"    Total value: {format_currency(summary.total_value)}")
    print(f"    Total area: {format_area(summary.total_area)}")
    print(f"    Avg booking: {format_percentage(summary.avg_booking_percentage)}")
    print(f"    Avg progress: {format_percentage(summary.avg_progress)}")
    print(f"    Avg collection: {format_percentage(summary.avg_collection_percentage)}")
    sales = summary.sales_performance
    print(f"    Booked units: {int(sales.booked_units)} of {int(sales.total_units)}")
    print(f"    Revenue per unit: {format_currency(sales.revenue_per_unit)}")
    print(f"    Avg duration: {summary.project_velocity.avg_project_duration:.0f} days")
    print(f"    Land cost: {format_currency(summary.financials.land_cost)}")
    for label, count in summary.projects_by_status.items():
        print(f"    {label}: {count}")


def main() -> int:
    """Run all smoke checks."""
    print("=" * 60)
    print("RERA Insights Demo Smoke Test")
    print("=" * 60)

    checks_passed = 0
    checks_failed = 0

    # Check 1: Database exists
    print("\n[1/4] Checking database...")
    if not check_database_exists():
        print("\n" + "=" * 60)
        print("RESULT: 0 passed, 1 failed")
        print("Run 'python scripts/seed_demo.py' first!")
        print("=" * 60)
        return 1
    checks_passed += 1

    session = get_session(DEMO_DB_PATH)
    try:
        records = repo.list_projects(session)
    finally:
        session.close()

    # Check 2: Projects seeded
    print("\n[2/4] Checking projects...")
    if check_projects_seeded(records):
        checks_passed += 1
    else:
        checks_failed += 1

    # Check 3: Summary invariants
    print("\n[3/4] Checking summary...")
    summary = summarize(records)
    if check_summary_invariants(records, summary):
        checks_passed += 1
        print_report(summary)
    else:
        checks_failed += 1

    # Check 4: Yearly trends
    print("\n[4/4] Checking yearly trends...")
    trends = yearly_trends(records)
    if trends.projects_approved:
        checks_passed += 1
        for point in trends.projects_approved:
            print(f"    {point.year}: {int(point.value)} approved")
    else:
        print("FAIL: No yearly trend points")
        checks_failed += 1

    # Summary
    print("\n" + "=" * 60)
    if checks_failed == 0:
        print(f"RESULT: ALL PASSED ({checks_passed} checks)")
        print("=" * 60)
        return 0
    else:
        print(f"RESULT: {checks_passed} passed, {checks_failed} failed")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main())

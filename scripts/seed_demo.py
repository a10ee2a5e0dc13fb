#!/usr/bin/env python3
"""Seed the demo database with project records.

Usage:
    python scripts/seed_demo.py [rows.json]

With a JSON file (a list of normalized rows, snake_case or camelCase
keys), those rows are loaded. Without one, a fixed demo portfolio is
generated.

This script:
1. Initializes the demo database
2. Normalizes the rows into project records
3. Inserts or replaces them
"""

from __future__ import annotations

import json
import sys
from datetime import date
from itertools import cycle
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rera_insights.db import repo  # noqa: E402
from rera_insights.db.session import get_db_session, init_db  # noqa: E402
from rera_insights.normalize.record import normalize_records  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
DEMO_PROJECT_COUNT = 60

DEMO_TYPES = ["Residential", "Commercial", "Mixed Development", "Plotted"]
DEMO_STATUSES = ["ongoing", "completed", "ongoing", "delayed", ""]
DEMO_LOCATIONS = ["Ahmedabad", "Surat", "Vadodara", "Rajkot", "Gandhinagar", "Bhavnagar"]
DEMO_PROMOTERS = [
    ("Shree Infra LLP", "Partnership"),
    ("Sanskruti Developers", "Company"),
    ("Patel Builders", "Individual"),
    ("Riverfront Realty Pvt Ltd", "Company"),
    ("Navkar Constructions", "Partnership"),
]


def build_demo_rows(count: int = DEMO_PROJECT_COUNT) -> list[dict]:
    """Build a deterministic demo portfolio."""
    rows = []
    types = cycle(DEMO_TYPES)
    statuses = cycle(DEMO_STATUSES)
    locations = cycle(DEMO_LOCATIONS)
    promoters = cycle(DEMO_PROMOTERS)

    for index in range(count):
        promoter, promoter_type = next(promoters)
        status = next(statuses)
        booking = (index * 7) % 101
        units = 40 + (index % 9) * 20
        start = date(2016 + index % 8, 1 + index % 12, 1)
        rows.append(
            {
                "id": f"PR/GJ/DEMO/{index + 1:04d}",
                "name": f"Demo Project {index + 1}",
                "type": next(types),
                "status": status,
                "location": next(locations),
                "promoter": promoter,
                "promoter_type": promoter_type,
                "progress": 100.0 if status == "completed" else float((index * 13) % 100),
                "total_value": 5_000_000 + index * 1_750_000,
                "received_amount": (5_000_000 + index * 1_750_000) * booking / 200,
                "total_area": 2_000 + index * 450,
                "booking_percentage": booking,
                "collection_percentage": booking / 2,
                "units_total": units,
                "units_booked": units * booking // 100,
                "land_cost": 1_000_000 + index * 250_000,
                "construction_cost": 3_000_000 + index * 1_000_000,
                "approved_on": date(2017 + index % 8, 1 + index % 12, 1),
                "submitted_on": date(2017 + index % 8, 1 + index % 12, 15),
                "start_on": start,
                "completion_on": date(start.year + 2 + index % 3, start.month, 28),
            }
        )
    return rows


def load_rows(path: Path) -> list[dict]:
    """Load normalized rows from a JSON file."""
    with path.open(encoding="utf-8") as handle:
        rows = json.load(handle)
    if not isinstance(rows, list):
        raise ValueError(f"Expected a JSON list of rows in {path}")
    return rows


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("RERA Insights Demo Seeding Script")
    print("=" * 60)

    # Step 1: Initialize database
    print("\n[1/3] Initializing database...")
    init_db(DEMO_DB_PATH)

    # Step 2: Normalize rows
    print("\n[2/3] Normalizing rows...")
    if len(sys.argv) > 1:
        source = Path(sys.argv[1])
        rows = load_rows(source)
        print(f"  Loaded {len(rows)} rows from {source}")
    else:
        rows = build_demo_rows()
        print(f"  Generated {len(rows)} demo rows")
    records = normalize_records(rows)

    # Step 3: Store records
    print("\n[3/3] Storing projects...")
    with get_db_session(DEMO_DB_PATH) as session:
        written = repo.add_projects(session, records)
    print(f"  Stored {written} projects")

    print("\n" + "=" * 60)
    print("Demo seeding complete!")
    print(f"Database: {DEMO_DB_PATH}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())

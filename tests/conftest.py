"""Shared test fixtures and data loading for daterange-intervals.

Scenario data lives in data/fixtures/scenarios/ as JSON files.  This module
loads that data and exposes helper functions + pytest fixtures for the tests.

All instants in the scenario files are ISO-8601 strings; ``utc()`` turns them
into the aware UTC datetimes the library produces.
"""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def utc(text: str) -> datetime:
    """Aware UTC datetime from an ISO string.

    >>> utc("2024-01-01T00:00:00Z")
    datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    """
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def pairs(spec_pairs: list[list[str]]) -> list[tuple[datetime, datetime]]:
    """Convert [["start", "end"], ...] to a list of datetime tuples."""
    return [(utc(s), utc(e)) for s, e in spec_pairs]


def traverse(intervals, visitor) -> None:
    """Run intervals.accept(visitor) to completion."""
    asyncio.run(intervals.accept(visitor))


def recording_visitor(descend=None, **kwargs):
    """Visitor that appends (depth, start, end) to its state for each visit.

    `descend(visitor, interval)` supplies the descend signal; default False.
    """
    from daterange_intervals.visitor import Visitor

    def record(visitor, interval):
        visitor.state.append((visitor.depth, interval.start, interval.end))
        return descend(visitor, interval) if descend else False

    return Visitor(record, state=[], **kwargs)


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def year_2024_quarters():
    """2024 partitioned into calendar quarters."""
    from daterange_intervals.intervals import IntervalSet

    return IntervalSet("2024-01-01T00:00:00Z", "2025-01-01T00:00:00Z", "quarter")


@pytest.fixture
def four_days():
    """2024-01-01 .. 2024-01-05 partitioned into days."""
    from daterange_intervals.intervals import IntervalSet

    return IntervalSet("2024-01-01", "2024-01-05", "day")

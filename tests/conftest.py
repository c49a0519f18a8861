"""Pytest configuration and fixtures for fuzzydate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so fuzzydate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fuzzydate import FuzzyDate  # noqa: E402

# One FuzzyDate per precision, coarsest first
DATES_BY_PRECISION = [
    {"year": 2023},
    {"year": 2023, "month": 5},
    {"year": 2023, "month": 5, "day": 15},
    {"year": 2023, "month": 5, "day": 15, "hour": 10},
    {"year": 2023, "month": 5, "day": 15, "hour": 10, "minute": 30},
    {"year": 2023, "month": 5, "day": 15, "hour": 10, "minute": 30, "second": 45},
    {
        "year": 2023,
        "month": 5,
        "day": 15,
        "hour": 10,
        "minute": 30,
        "second": 45,
        "millisecond": 500,
    },
]


@pytest.fixture(params=DATES_BY_PRECISION, ids=lambda o: f"{len(o)}-fields")
def options_by_precision(request: pytest.FixtureRequest) -> dict[str, int]:
    """Options for a valid FuzzyDate at each precision level."""
    return dict(request.param)


@pytest.fixture
def full_date() -> FuzzyDate:
    """A FuzzyDate with every field specified."""
    return FuzzyDate(2023, 6, 15, 10, 30, 45, 500)

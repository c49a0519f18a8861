"""Fuzzy value conversion utilities.

This module provides functions for converting fuzzy values to and from
other representations:
    - JSON serialization and deserialization
    - Standard library datetime interop

Examples:
    >>> from fuzzydate import FuzzyDate
    >>> from fuzzydate.convert import to_json, from_json

    >>> d = FuzzyDate(2024, 1, 15, 14)
    >>> data = to_json(d)
    >>> restored = from_json(data)
    >>> restored == d
    True

    >>> from fuzzydate.convert import to_datetime
    >>> to_datetime(d).hour
    14
"""

from __future__ import annotations

from fuzzydate.convert.json import from_json, to_json
from fuzzydate.convert.pydatetime import from_datetime, to_datetime

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # datetime
    "from_datetime",
    "to_datetime",
]

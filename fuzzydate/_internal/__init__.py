"""Internal utilities for fuzzydate.

This module contains private implementation details:
    - Constants and magic numbers
    - The proleptic Gregorian calendar oracle
    - Hierarchy and calendar validation predicates

Note: This module is not part of the public API.
"""

from __future__ import annotations

from fuzzydate._internal.calendar import (
    add_unit,
    is_valid_datetime,
    minus_millisecond,
)
from fuzzydate._internal.validation import (
    is_empty,
    is_filled_in_hierarchy,
    is_on_calendar,
)

__all__: list[str] = [
    "add_unit",
    "is_empty",
    "is_filled_in_hierarchy",
    "is_on_calendar",
    "is_valid_datetime",
    "minus_millisecond",
]

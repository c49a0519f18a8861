"""Validation predicates for fuzzydate.

This module provides the two independent checks a FuzzyDate must pass:

    - is_filled_in_hierarchy: defined fields form an unbroken prefix
    - is_on_calendar: the minimally padded fields are a real instant

Both are pure predicates over a raw options mapping; FuzzyDate composes
them and raises the matching error.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from fuzzydate._internal.calendar import is_valid_datetime
from fuzzydate._internal.constants import DATE_FIELDS, FLOOR_DEFAULTS


def is_empty(value: object) -> bool:
    """Return True if a field value counts as absent.

    ``None`` and float NaN are absent. Zero is a value.

    Examples:
        >>> is_empty(None)
        True
        >>> is_empty(float("nan"))
        True
        >>> is_empty(0)
        False
    """
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_filled_in_hierarchy(options: Mapping[str, Any]) -> bool:
    """Check that the defined fields form a prefix of the field order.

    Args:
        options: Mapping of field name to value; missing keys are empty.

    Returns:
        True if the year is defined and no defined field follows an
        empty one.

    Examples:
        >>> is_filled_in_hierarchy({"year": 2023, "month": 5})
        True
        >>> is_filled_in_hierarchy({"year": 2023, "day": 15})
        False
        >>> is_filled_in_hierarchy({"month": 5})
        False
    """
    empty = [is_empty(options.get(field)) for field in DATE_FIELDS]
    if empty[0]:
        return False
    if True not in empty:
        return True
    first_empty = empty.index(True)
    return all(empty[first_empty:])


def is_on_calendar(options: Mapping[str, Any]) -> bool:
    """Check that the fields, padded with floor defaults, are a valid instant.

    Args:
        options: Mapping of field name to value; missing keys are empty.

    Returns:
        True if the calendar accepts the minimally padded fields.

    Examples:
        >>> is_on_calendar({"year": 2024, "month": 2, "day": 29})
        True
        >>> is_on_calendar({"year": 2023, "month": 2, "day": 29})
        False
    """
    padded = [options.get("year")]
    for field in DATE_FIELDS[1:]:
        value = options.get(field)
        padded.append(FLOOR_DEFAULTS[field] if is_empty(value) else value)
    return is_valid_datetime(*padded)


__all__ = [
    "is_empty",
    "is_filled_in_hierarchy",
    "is_on_calendar",
]

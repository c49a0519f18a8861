"""JSON serialization and deserialization for fuzzy values.

This module provides functions for converting FuzzyDate and FuzzyDuration
values to and from JSON-serializable dictionaries.

Functions:
    to_json: Convert a fuzzy value to a JSON-serializable dict.
    from_json: Create a fuzzy value from a JSON dict.

The JSON format uses type tags for polymorphic deserialization. Dates are
stored in their string form; durations store the units up to and including
their precision, so the precision survives the round trip:

    {"_type": "FuzzyDate", "value": "2023-05-15T10"}
    {"_type": "FuzzyDuration", "value": {"years": 1, "months": 0}, "precision": "months"}

Examples:
    >>> from fuzzydate import FuzzyDate
    >>> from fuzzydate.convert import to_json, from_json

    >>> data = to_json(FuzzyDate(2023, 5))
    >>> data['_type']
    'FuzzyDate'

    >>> from_json(data) == FuzzyDate(2023, 5)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from fuzzydate._internal.constants import DURATION_FIELDS
from fuzzydate.errors import DeserializationError

if TYPE_CHECKING:
    from fuzzydate.core.fuzzy_date import FuzzyDate
    from fuzzydate.core.fuzzy_duration import FuzzyDuration

# Type alias for fuzzy values
FuzzyType = Union["FuzzyDate", "FuzzyDuration"]


def to_json(value: FuzzyType) -> dict[str, Any]:
    """Convert a fuzzy value to a JSON-serializable dictionary.

    Args:
        value: A FuzzyDate or FuzzyDuration to convert.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported fuzzy type.

    Examples:
        >>> from fuzzydate import FuzzyDate, FuzzyDuration

        >>> to_json(FuzzyDate(-44, 3, 15))
        {'_type': 'FuzzyDate', 'value': '-0044-03-15'}

        >>> to_json(FuzzyDuration(years=1, seconds=20))['precision']
        'seconds'
    """
    # Import here to avoid circular imports
    from fuzzydate.core.fuzzy_date import FuzzyDate
    from fuzzydate.core.fuzzy_duration import FuzzyDuration

    if isinstance(value, FuzzyDate):
        return value.to_json()
    elif isinstance(value, FuzzyDuration):
        units = value.as_dict()
        specified = DURATION_FIELDS[: DURATION_FIELDS.index(value.precision.value) + 1]
        return {
            "_type": "FuzzyDuration",
            "value": {field: units[field] for field in specified},
            "precision": value.precision.value,
        }
    else:
        raise TypeError(
            f"expected FuzzyDate or FuzzyDuration, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> FuzzyType:
    """Create a fuzzy value from a JSON dictionary.

    The dictionary must include a `_type` field specifying the type to create.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        A FuzzyDate or FuzzyDuration based on the `_type` field.

    Raises:
        DeserializationError: If the data is missing required fields or has
            an invalid format.
        TypeError: If `_type` is not a recognized fuzzy type.

    Examples:
        >>> from_json({'_type': 'FuzzyDate', 'value': '2023-05-15'})
        FuzzyDate(2023, 5, 15)

        >>> from_json({'_type': 'FuzzyDuration', 'value': {'years': 2}})
        FuzzyDuration(years=2)
    """
    if not isinstance(data, dict):
        raise DeserializationError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise DeserializationError("missing '_type' field in JSON data")

    if type_name == "FuzzyDate":
        return fuzzy_date_from_json(data)
    elif type_name == "FuzzyDuration":
        return fuzzy_duration_from_json(data)
    else:
        raise TypeError(f"unknown fuzzy type: {type_name!r}")


def fuzzy_date_from_json(data: dict[str, Any]) -> FuzzyDate:
    """Create a FuzzyDate from its JSON dictionary."""
    from fuzzydate.core.fuzzy_date import FuzzyDate

    if not isinstance(data, dict):
        raise DeserializationError(f"expected dict, got {type(data).__name__}")

    value = data.get("value")
    if not value:
        raise DeserializationError("missing 'value' field for FuzzyDate")

    return FuzzyDate.from_string(value)


def fuzzy_duration_from_json(data: dict[str, Any]) -> FuzzyDuration:
    """Create a FuzzyDuration from its JSON dictionary.

    The `precision` field is informational; the precision is recomputed
    from the units present in `value`.
    """
    from fuzzydate.core.fuzzy_duration import FuzzyDuration

    if not isinstance(data, dict):
        raise DeserializationError(f"expected dict, got {type(data).__name__}")

    value = data.get("value")
    if not isinstance(value, dict):
        raise DeserializationError("missing 'value' field for FuzzyDuration")

    unknown = set(value) - set(DURATION_FIELDS)
    if unknown:
        raise DeserializationError(f"unknown FuzzyDuration units: {sorted(unknown)}")

    return FuzzyDuration(**value)


__all__ = ["to_json", "from_json", "fuzzy_date_from_json", "fuzzy_duration_from_json"]

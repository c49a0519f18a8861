"""Fuzzydate exception hierarchy.

All fuzzydate exceptions inherit from FuzzyDateError. Each exception also
carries an ErrorKind tag, so callers can branch on ``error.kind`` instead of
on the concrete class.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Tag identifying which validation step rejected a value."""

    HIERARCHY = "hierarchy"
    CALENDAR = "calendar"
    DESERIALIZATION = "deserialization"


class FuzzyDateError(Exception):
    """Base exception for all fuzzydate errors.

    Attributes:
        kind: The ErrorKind tag of this error.
    """

    kind: ErrorKind


class HierarchyError(FuzzyDateError):
    """Fields were not filled in hierarchical order.

    Raised when the defined fields of a FuzzyDate do not form an unbroken
    prefix of year, month, day, hour, minute, second, millisecond.

    Examples:
        - Day given without month
        - Second given without minute
        - Month given without year
    """

    kind = ErrorKind.HIERARCHY

    def __init__(self, message: str = "FuzzyDate fields must be filled in order") -> None:
        super().__init__(message)


class CalendarError(FuzzyDateError):
    """Fields do not describe a valid calendar date.

    Raised when the minimally padded fields are rejected by the proleptic
    Gregorian calendar.

    Examples:
        - Month value outside 1-12
        - February 30, April 31
        - February 29 in a non-leap year
        - Hour value outside 0-23
    """

    kind = ErrorKind.CALENDAR

    def __init__(
        self, message: str = "FuzzyDate must represent a valid calendar date"
    ) -> None:
        super().__init__(message)


class DeserializationError(FuzzyDateError):
    """Failed to parse a serialized representation.

    Raised when a string does not match the fuzzy date grammar, when one of
    its numeric components is not a valid integer, or when a JSON dictionary
    is missing required fields.

    Attributes:
        reason: Human-readable reason, "Invalid format" by default.
    """

    kind = ErrorKind.DESERIALIZATION

    def __init__(self, reason: str = "Invalid format") -> None:
        super().__init__(reason)
        self.reason = reason


__all__ = [
    "ErrorKind",
    "FuzzyDateError",
    "HierarchyError",
    "CalendarError",
    "DeserializationError",
]

"""Fuzzydate: dates and durations known only to some precision.

A fuzzy date is a proleptic Gregorian date and time specified from the
year down to some field (month, day, hour, ...) and left open below it.
Fuzzydate validates such values, reports their precision, computes the
first and last instant they can stand for, and reads and writes a compact
sortable string form.

Core Types:
    FuzzyDate: Date and time known down to some precision
    FuzzyDuration: Duration in years through milliseconds with a precision
    PreciseDateOptions: Fully specified instant returned by padding

Units:
    Precision: Fields of a FuzzyDate (YEAR through MILLISECOND)
    DurationUnit: Units of a FuzzyDuration (YEARS through MILLISECONDS)
    Era: BCE/CE era designation

Format Functions:
    parse_fuzzy_date: Parse a fuzzy date string
    format_fuzzy_date: Format a FuzzyDate as a string

Conversion Functions:
    to_json: Convert a fuzzy value to a tagged JSON dict
    from_json: Create a fuzzy value from a tagged JSON dict

Exceptions:
    FuzzyDateError: Base exception, carries an ErrorKind tag
    HierarchyError: Fields not filled in order
    CalendarError: Fields not a valid calendar date
    DeserializationError: Failed to parse a serialized value

Example:
    >>> from fuzzydate import FuzzyDate
    >>> d = FuzzyDate.from_string("2024-02")
    >>> d.get_latest_padding_options().day
    29
"""

from __future__ import annotations

__version__ = "0.3.2"

# Core types
from fuzzydate.core.fuzzy_date import FuzzyDate, FuzzyDateOptions
from fuzzydate.core.fuzzy_duration import FuzzyDuration, FuzzyDurationOptions
from fuzzydate.core.precise import PreciseDateOptions

# Units
from fuzzydate.units.era import Era
from fuzzydate.units.precision import DurationUnit, Precision

# Exceptions
from fuzzydate.errors import (
    CalendarError,
    DeserializationError,
    ErrorKind,
    FuzzyDateError,
    HierarchyError,
)

# Format functions
from fuzzydate.format import format_fuzzy_date, parse_fuzzy_date

# Conversion functions
from fuzzydate.convert import from_json, to_json

__all__: list[str] = [
    "__version__",
    # Core types
    "FuzzyDate",
    "FuzzyDateOptions",
    "FuzzyDuration",
    "FuzzyDurationOptions",
    "PreciseDateOptions",
    # Units
    "DurationUnit",
    "Era",
    "Precision",
    # Exceptions
    "ErrorKind",
    "FuzzyDateError",
    "HierarchyError",
    "CalendarError",
    "DeserializationError",
    # Format functions
    "parse_fuzzy_date",
    "format_fuzzy_date",
    # Conversion functions
    "to_json",
    "from_json",
]

"""Fuzzy date formatting and parsing.

This module provides functions for converting FuzzyDate values to and from
their string representation.

Functions:
    parse_fuzzy_date: Parse a fuzzy date string.
    format_fuzzy_date: Format a FuzzyDate as a string.

Examples:
    >>> from fuzzydate import FuzzyDate
    >>> from fuzzydate.format import parse_fuzzy_date, format_fuzzy_date

    >>> d = parse_fuzzy_date("2024-01-15T14")
    >>> d.hour
    14

    >>> format_fuzzy_date(FuzzyDate(2024, 1))
    '2024-01'
"""

from __future__ import annotations

from fuzzydate.format.iso8601 import (
    MAX_FUZZY_DATE_STRING,
    MIN_FUZZY_DATE_STRING,
    format_fuzzy_date,
    parse_fuzzy_date,
)

__all__: list[str] = [
    "parse_fuzzy_date",
    "format_fuzzy_date",
    "MIN_FUZZY_DATE_STRING",
    "MAX_FUZZY_DATE_STRING",
]

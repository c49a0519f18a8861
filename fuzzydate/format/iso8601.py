"""Fuzzy date string formatting and parsing.

This module converts FuzzyDate values to and from a compact, sortable
subset of ISO 8601 that only writes the specified fields:

    fuzzy-date := year ( "-" month ( "-" day ( "T" hour ( ":" minute
                  ( ":" second ( "." ms )? )? )? )? )? )?

Years:
    - YYYY (zero-padded to at least 4 digits, never truncated)
    - -YYYY (negative years for BCE, magnitude padded to 4 digits)

Other fields:
    - month, day, hour, minute, second: exactly 2 digits
    - millisecond: exactly 3 digits

Examples:
    >>> from fuzzydate import FuzzyDate
    >>> from fuzzydate.format import parse_fuzzy_date, format_fuzzy_date

    >>> parse_fuzzy_date("2023-05-15T10:30")
    FuzzyDate(2023, 5, 15, 10, 30)

    >>> format_fuzzy_date(FuzzyDate(-44, 3, 15))
    '-0044-03-15'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from fuzzydate.errors import DeserializationError

if TYPE_CHECKING:
    from fuzzydate.core.fuzzy_date import FuzzyDate

logger = logging.getLogger(__name__)

FUZZY_DATE_RE = re.compile(
    r"-?[0-9]+"
    r"(?:-[0-9]{2}"
    r"(?:-[0-9]{2}"
    r"(?:T[0-9]{2}"
    r"(?::[0-9]{2}"
    r"(?::[0-9]{2}"
    r"(?:\.[0-9]{3})?)?)?)?)?)?"
)

# Earliest and latest strings the calendar accepts
MIN_FUZZY_DATE_STRING = "-100000-01-01T00:00:00.000"
MAX_FUZZY_DATE_STRING = "99999-12-31T23:59:59.999"


def format_fuzzy_date(value: FuzzyDate) -> str:
    """Format a FuzzyDate as a string.

    Args:
        value: The FuzzyDate to format.

    Returns:
        The specified fields, most significant first.

    Examples:
        >>> from fuzzydate import FuzzyDate
        >>> format_fuzzy_date(FuzzyDate(2023))
        '2023'

        >>> format_fuzzy_date(FuzzyDate(2023, 5, 15, 10, 30, 45, 500))
        '2023-05-15T10:30:45.500'

        >>> format_fuzzy_date(FuzzyDate(12345, 1))
        '12345-01'
    """
    # Import here to avoid circular imports
    from fuzzydate.core.fuzzy_date import FuzzyDate

    if not isinstance(value, FuzzyDate):
        raise TypeError(f"expected FuzzyDate, got {type(value).__name__}")

    year = value.year
    if year >= 0:
        result = f"{year:04d}"
    else:
        result = f"-{-year:04d}"

    if value.month is None:
        return result
    result += f"-{value.month:02d}"
    if value.day is None:
        return result
    result += f"-{value.day:02d}"
    if value.hour is None:
        return result
    result += f"T{value.hour:02d}"
    if value.minute is None:
        return result
    result += f":{value.minute:02d}"
    if value.second is None:
        return result
    result += f":{value.second:02d}"
    if value.millisecond is None:
        return result
    return result + f".{value.millisecond:03d}"


def parse_fuzzy_date(s: str) -> FuzzyDate:
    """Parse a string into a FuzzyDate.

    The whole string must match the format. The components are then handed
    to the FuzzyDate constructor, which performs the calendar check.

    Args:
        s: The string to parse.

    Returns:
        A FuzzyDate with the fields present in the string.

    Raises:
        DeserializationError: If the string does not match the format or a
            component is not a valid integer.
        CalendarError: If the string matches but names an impossible date.

    Examples:
        >>> parse_fuzzy_date("-2023-05")
        FuzzyDate(-2023, 5)

        >>> parse_fuzzy_date("2023-05-15T10:30:45.500-invalid")
        Traceback (most recent call last):
        ...
        DeserializationError: Invalid format
    """
    # Import here to avoid circular imports
    from fuzzydate.core.fuzzy_date import FuzzyDate

    if not isinstance(s, str) or FUZZY_DATE_RE.fullmatch(s) is None:
        logger.debug("Rejected fuzzy date string %r: invalid format", s)
        raise DeserializationError("Invalid format")

    date_part, _, time_part = s.partition("T")

    # A leading "-" is the year's sign, not a separator
    negative = date_part.startswith("-")
    year_str, *date_rest = date_part.lstrip("-").split("-")
    components = [("-" if negative else "") + year_str, *date_rest]

    if time_part:
        clock, _, millis = time_part.partition(".")
        components.extend(clock.split(":"))
        if millis:
            components.append(millis)

    return FuzzyDate(*(_parse_component(c) for c in components))


def _parse_component(component: str) -> int:
    """Parse one numeric component strictly.

    Raises:
        DeserializationError: If the component is not a plain integer.
    """
    try:
        return int(component, 10)
    except ValueError:
        logger.debug("Rejected fuzzy date component %r: not an integer", component)
        raise DeserializationError("Invalid format") from None


__all__ = [
    "FUZZY_DATE_RE",
    "MIN_FUZZY_DATE_STRING",
    "MAX_FUZZY_DATE_STRING",
    "format_fuzzy_date",
    "parse_fuzzy_date",
]

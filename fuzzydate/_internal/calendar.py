"""Calendar oracle for fuzzydate.

This module is the single collaborator that knows the proleptic Gregorian
calendar: leap years, month lengths and unit carrying. FuzzyDate only talks
to it through three operations:

    - is_valid_datetime: construct-and-validate a fully specified instant
    - add_unit: add N units of a precision, renormalizing the result
    - minus_millisecond: step one millisecond back

Instants are passed around as plain 7-tuples
(year, month, day, hour, minute, second, millisecond). Years use
astronomical numbering (year 0 = 1 BCE).

This module is not part of the public API.
"""

from __future__ import annotations

from fuzzydate._internal.constants import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_YEAR,
    UNIX_EPOCH_ORDINAL,
)
from fuzzydate.units.precision import Precision

DateTimeFields = tuple[int, int, int, int, int, int, int]

# Fixed-length units, in milliseconds
_UNIT_MILLIS: dict[Precision, int] = {
    Precision.DAY: MILLIS_PER_DAY,
    Precision.HOUR: MILLIS_PER_HOUR,
    Precision.MINUTE: MILLIS_PER_MINUTE,
    Precision.SECOND: MILLIS_PER_SECOND,
    Precision.MILLISECOND: 1,
}


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(0)  # 1 BCE
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Floor division keeps the leap-day count right for negative years
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Every 400-year cycle has the same 146097 days, and divmod floors, so
    the same decomposition works on both sides of year 1.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    n = ordinal - 1

    n400, n = divmod(n, 146097)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month = 1
    while doy > days_in_month(year, month):
        doy -= days_in_month(year, month)
        month += 1
    return (year, month, doy)


def is_valid_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> bool:
    """Check whether the fields name a real instant on the calendar.

    Every field must be an ``int`` (``bool`` is rejected) and lie within its
    range; the year must lie within MIN_YEAR and MAX_YEAR.

    Examples:
        >>> is_valid_datetime(2024, 2, 29, 0, 0, 0, 0)
        True
        >>> is_valid_datetime(2023, 2, 29, 0, 0, 0, 0)
        False
        >>> is_valid_datetime(2023, 5, 15, 24, 0, 0, 0)
        False
    """
    fields = (year, month, day, hour, minute, second, millisecond)
    if not all(isinstance(f, int) and not isinstance(f, bool) for f in fields):
        return False
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > days_in_month(year, month):
        return False
    return (
        0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 59
        and 0 <= millisecond <= 999
    )


def to_epoch_millis(fields: DateTimeFields) -> int:
    """Return milliseconds since 1970-01-01T00:00:00.000.

    Negative for instants before the epoch.

    Examples:
        >>> to_epoch_millis((1970, 1, 1, 0, 0, 0, 0))
        0
        >>> to_epoch_millis((1970, 1, 2, 0, 0, 0, 1))
        86400001
    """
    year, month, day, hour, minute, second, millisecond = fields
    days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
    return (
        days * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def from_epoch_millis(millis: int) -> DateTimeFields:
    """Inverse of to_epoch_millis.

    Examples:
        >>> from_epoch_millis(-1)
        (1969, 12, 31, 23, 59, 59, 999)
    """
    days, rem = divmod(millis, MILLIS_PER_DAY)
    hour, rem = divmod(rem, MILLIS_PER_HOUR)
    minute, rem = divmod(rem, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rem, MILLIS_PER_SECOND)
    year, month, day = ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)
    return (year, month, day, hour, minute, second, millisecond)


def add_unit(
    fields: DateTimeFields, unit: Precision, amount: int = 1
) -> DateTimeFields:
    """Add ``amount`` units of ``unit`` to an instant.

    YEAR and MONTH follow calendar rules: the month index is shifted and the
    day is clamped to the last day of the resulting month, so 2024-01-31
    plus one month is 2024-02-29. Fixed-length units are added on the
    millisecond timeline and carried into larger fields.

    The result is not range-checked; padding year MAX_YEAR may step past it.

    Args:
        fields: The starting instant.
        unit: The unit to add.
        amount: Number of units to add (can be negative).

    Returns:
        The renormalized instant.

    Examples:
        >>> add_unit((2023, 12, 1, 0, 0, 0, 0), Precision.MONTH)
        (2024, 1, 1, 0, 0, 0, 0)
        >>> add_unit((2023, 2, 28, 23, 0, 0, 0), Precision.HOUR)
        (2023, 3, 1, 0, 0, 0, 0)
    """
    if unit in (Precision.YEAR, Precision.MONTH):
        year, month, day, hour, minute, second, millisecond = fields
        months = amount * 12 if unit is Precision.YEAR else amount
        total_months = year * 12 + (month - 1) + months
        new_year, new_month = divmod(total_months, 12)
        new_month += 1
        new_day = min(day, days_in_month(new_year, new_month))
        return (new_year, new_month, new_day, hour, minute, second, millisecond)

    return from_epoch_millis(to_epoch_millis(fields) + amount * _UNIT_MILLIS[unit])


def minus_millisecond(fields: DateTimeFields) -> DateTimeFields:
    """Return the instant one millisecond before ``fields``."""
    return add_unit(fields, Precision.MILLISECOND, -1)


__all__ = [
    "DateTimeFields",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "is_valid_datetime",
    "to_epoch_millis",
    "from_epoch_millis",
    "add_unit",
    "minus_millisecond",
]

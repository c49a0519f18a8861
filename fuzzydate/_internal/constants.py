"""Internal constants for fuzzydate.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Year limits accepted by the calendar
MIN_YEAR: int = -100_000
MAX_YEAR: int = 99_999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163

# FuzzyDate fields, coarsest first
DATE_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)

# Smallest legal value of every field after year
FLOOR_DEFAULTS: dict[str, int] = {
    "month": 1,
    "day": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "millisecond": 0,
}

# FuzzyDuration fields, coarsest first
DURATION_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "DATE_FIELDS",
    "FLOOR_DEFAULTS",
    "DURATION_FIELDS",
]

"""Conversion between FuzzyDate and the standard library datetime.

This module lets applications move between FuzzyDate and
``datetime.datetime``:

    - from_datetime: keep the fields of a datetime down to a precision
    - to_datetime: the earliest or latest instant of a FuzzyDate

Time zones are ignored: aware datetimes contribute their wall-clock fields,
and results are always naive. The standard library only covers years 1 to
9999, so BCE and five-digit fuzzy dates cannot be converted to it.

Examples:
    >>> from datetime import datetime
    >>> from fuzzydate import Precision
    >>> from fuzzydate.convert import from_datetime, to_datetime

    >>> d = from_datetime(datetime(2023, 3, 15, 12, 30), Precision.MONTH)
    >>> d
    FuzzyDate(2023, 3)

    >>> to_datetime(d, latest=True)
    datetime.datetime(2023, 3, 31, 23, 59, 59, 999000)
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING

from fuzzydate.units.precision import Precision

if TYPE_CHECKING:
    from fuzzydate.core.fuzzy_date import FuzzyDate


def from_datetime(
    value: _dt.datetime | _dt.date,
    precision: Precision = Precision.MILLISECOND,
) -> FuzzyDate:
    """Create a FuzzyDate from a datetime, keeping fields down to precision.

    A plain ``date`` has no time fields, so precisions finer than DAY are
    capped at DAY for it.

    Args:
        value: The datetime or date to convert.
        precision: The finest field to keep.

    Returns:
        A FuzzyDate with fields year through ``precision``.

    Examples:
        >>> from_datetime(_dt.datetime(2024, 1, 15, 14, 30, 45, 123456))
        FuzzyDate(2024, 1, 15, 14, 30, 45, 123)

        >>> from_datetime(_dt.date(2024, 1, 15), Precision.HOUR)
        FuzzyDate(2024, 1, 15)
    """
    from fuzzydate.core.fuzzy_date import FuzzyDate

    fields = [value.year, value.month, value.day]
    if isinstance(value, _dt.datetime):
        fields += [value.hour, value.minute, value.second, value.microsecond // 1000]

    return FuzzyDate(*fields[: precision.index + 1])


def to_datetime(value: FuzzyDate, *, latest: bool = False) -> _dt.datetime:
    """Return a naive datetime at the earliest or latest padding.

    Args:
        value: The FuzzyDate to convert.
        latest: If True, use the last instant of the fuzzy range instead of
            the first.

    Returns:
        A naive ``datetime.datetime``.

    Raises:
        ValueError: If the year is outside the range datetime supports.

    Examples:
        >>> from fuzzydate import FuzzyDate
        >>> to_datetime(FuzzyDate(2023, 5, 15))
        datetime.datetime(2023, 5, 15, 0, 0)
    """
    padded = (
        value.get_latest_padding_options()
        if latest
        else value.get_earliest_padding_options()
    )
    return _dt.datetime(
        padded.year,
        padded.month,
        padded.day,
        padded.hour,
        padded.minute,
        padded.second,
        padded.millisecond * 1000,
    )


__all__ = ["from_datetime", "to_datetime"]

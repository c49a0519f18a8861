"""FuzzyDate class representing a date known only to some precision.

This module provides the FuzzyDate class: a proleptic Gregorian date and
time whose fields are filled from the year down to some precision and left
unspecified below it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypedDict

from fuzzydate._internal.calendar import add_unit, minus_millisecond
from fuzzydate._internal.constants import DATE_FIELDS, FLOOR_DEFAULTS
from fuzzydate._internal.validation import (
    is_empty,
    is_filled_in_hierarchy,
    is_on_calendar,
)
from fuzzydate.core.precise import PreciseDateOptions
from fuzzydate.errors import CalendarError, HierarchyError
from fuzzydate.units.era import Era
from fuzzydate.units.precision import Precision

logger = logging.getLogger(__name__)


class _FuzzyDateYear(TypedDict):
    year: int


class FuzzyDateOptions(_FuzzyDateYear, total=False):
    """Options mapping accepted by FuzzyDate.from_options."""

    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


class FuzzyDate:
    """A calendar date and time known down to some precision.

    The fields year, month, day, hour, minute, second and millisecond are
    filled in that order; every field after the first unspecified one must
    also be unspecified. Unspecified fields are None. The specified fields,
    padded with the smallest legal values, must be a valid date in the
    proleptic Gregorian calendar.

    Years use astronomical numbering: year 0 is 1 BCE, year -44 is 45 BCE.

    FuzzyDate is immutable. An instance always satisfies both rules; there
    is no way to construct an invalid one.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12) or None.
        day: The day of the month or None.
        hour: The hour (0-23) or None.
        minute: The minute (0-59) or None.
        second: The second (0-59) or None.
        millisecond: The millisecond (0-999) or None.

    Examples:
        >>> d = FuzzyDate(2023, 5)
        >>> d.get_precision()
        <Precision.MONTH: 'month'>
        >>> d.day is None
        True

        >>> FuzzyDate(2023, day=15)
        Traceback (most recent call last):
        ...
        HierarchyError: FuzzyDate fields must be filled in order

        >>> FuzzyDate(2023, 2, 30)
        Traceback (most recent call last):
        ...
        CalendarError: FuzzyDate must represent a valid calendar date
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_millisecond",
    )

    def __init__(
        self,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> None:
        """Create a FuzzyDate from its fields.

        Args:
            year: The year (can be 0 or negative for BCE dates).
            month: The month (1-12), or None if unknown.
            day: The day of the month, or None if unknown.
            hour: The hour (0-23), or None if unknown.
            minute: The minute (0-59), or None if unknown.
            second: The second (0-59), or None if unknown.
            millisecond: The millisecond (0-999), or None if unknown.

        Raises:
            HierarchyError: If the fields are not filled in order.
            CalendarError: If the fields do not form a valid calendar date.
        """
        options = {
            "year": year,
            "month": month,
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
            "millisecond": millisecond,
        }
        if not is_filled_in_hierarchy(options):
            logger.debug("Rejected fuzzy date %r: fields not filled in order", options)
            raise HierarchyError()
        if not is_on_calendar(options):
            logger.debug("Rejected fuzzy date %r: not on the calendar", options)
            raise CalendarError()

        # NaN is stored as None so the empty suffix reads uniformly
        self._year = year
        self._month = None if is_empty(month) else month
        self._day = None if is_empty(day) else day
        self._hour = None if is_empty(hour) else hour
        self._minute = None if is_empty(minute) else minute
        self._second = None if is_empty(second) else second
        self._millisecond = None if is_empty(millisecond) else millisecond

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FuzzyDate:
        """Create a FuzzyDate from an options mapping.

        Missing keys are unspecified fields. A mapping without a year is
        rejected as a hierarchy violation.

        Args:
            options: Mapping with a subset of the field names as keys.

        Returns:
            The validated FuzzyDate.

        Raises:
            HierarchyError: If the fields are not filled in order.
            CalendarError: If the fields do not form a valid calendar date.
            TypeError: If the mapping has keys that are not field names.

        Examples:
            >>> FuzzyDate.from_options({"year": 2023, "month": 5})
            FuzzyDate(2023, 5)
        """
        unknown = set(options) - set(DATE_FIELDS)
        if unknown:
            raise TypeError(f"unknown FuzzyDate fields: {sorted(unknown)}")
        return cls(
            options.get("year"),  # type: ignore[arg-type]
            options.get("month"),
            options.get("day"),
            options.get("hour"),
            options.get("minute"),
            options.get("second"),
            options.get("millisecond"),
        )

    @classmethod
    def from_string(cls, s: str) -> FuzzyDate:
        """Parse a FuzzyDate from its string form.

        Args:
            s: A string such as "2023", "-0044-03-15" or
                "2023-05-15T10:30:45.500".

        Returns:
            The parsed FuzzyDate.

        Raises:
            DeserializationError: If the string does not match the format.
            CalendarError: If the string is well formed but names an
                impossible date, such as "2023-02-30".

        Examples:
            >>> FuzzyDate.from_string("2023-05-15T10")
            FuzzyDate(2023, 5, 15, 10)
        """
        from fuzzydate.format.iso8601 import parse_fuzzy_date

        return parse_fuzzy_date(s)

    @classmethod
    def from_json(cls, data: dict) -> FuzzyDate:
        """Create a FuzzyDate from a JSON dictionary.

        Examples:
            >>> FuzzyDate.from_json({'_type': 'FuzzyDate', 'value': '2023-05'})
            FuzzyDate(2023, 5)
        """
        from fuzzydate.convert.json import fuzzy_date_from_json

        return fuzzy_date_from_json(data)

    @property
    def year(self) -> int:
        """Return the year (can be negative for BCE dates)."""
        return self._year

    @property
    def month(self) -> int | None:
        """Return the month (1-12), or None if unspecified."""
        return self._month

    @property
    def day(self) -> int | None:
        """Return the day of the month, or None if unspecified."""
        return self._day

    @property
    def hour(self) -> int | None:
        """Return the hour (0-23), or None if unspecified."""
        return self._hour

    @property
    def minute(self) -> int | None:
        """Return the minute (0-59), or None if unspecified."""
        return self._minute

    @property
    def second(self) -> int | None:
        """Return the second (0-59), or None if unspecified."""
        return self._second

    @property
    def millisecond(self) -> int | None:
        """Return the millisecond (0-999), or None if unspecified."""
        return self._millisecond

    @property
    def precision(self) -> Precision:
        """Return the finest specified field. Same as get_precision()."""
        return self.get_precision()

    @property
    def era(self) -> Era:
        """Return the era (BCE or CE) for this date.

        Year 0 and negative years are BCE; positive years are CE.

        Examples:
            >>> FuzzyDate(-44, 3, 15).era
            <Era.BCE: 'BCE'>
            >>> FuzzyDate(0).era  # Year 0 = 1 BCE
            <Era.BCE: 'BCE'>
        """
        return Era.for_year(self._year)

    def _fields(self) -> tuple[int | None, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._millisecond,
        )

    def get_precision(self) -> Precision:
        """Return the finest field that is specified.

        Zero is a specified value: an hour of 0 gives HOUR precision.

        Returns:
            The Precision of this date; YEAR if only the year is known.

        Examples:
            >>> FuzzyDate(2023).get_precision()
            <Precision.YEAR: 'year'>
            >>> FuzzyDate(2023, 5, 15, 0).get_precision()
            <Precision.HOUR: 'hour'>
        """
        fields = self._fields()
        for index in range(len(fields) - 1, 0, -1):
            if not is_empty(fields[index]):
                return Precision.from_index(index)
        return Precision.YEAR

    def as_options(self) -> dict[str, int]:
        """Return the specified fields as a dictionary.

        Unspecified fields are left out, so the result can be passed back
        to from_options.

        Examples:
            >>> FuzzyDate(2023, 5).as_options()
            {'year': 2023, 'month': 5}
        """
        return {
            field: value
            for field, value in zip(DATE_FIELDS, self._fields())
            if value is not None
        }

    def get_earliest_padding_options(self) -> PreciseDateOptions:
        """Return the first instant this FuzzyDate can stand for.

        Every unspecified field takes its smallest legal value.

        Returns:
            A fully specified PreciseDateOptions.

        Examples:
            >>> FuzzyDate(2023, 5).get_earliest_padding_options()
            PreciseDateOptions(year=2023, month=5, day=1, hour=0, minute=0, second=0, millisecond=0)
        """
        padded = [self._year]
        for field, value in zip(DATE_FIELDS[1:], self._fields()[1:]):
            padded.append(FLOOR_DEFAULTS[field] if value is None else value)
        return PreciseDateOptions(*padded)

    def get_latest_padding_options(self) -> PreciseDateOptions:
        """Return the last instant this FuzzyDate can stand for.

        The span of a FuzzyDate starts at its earliest padding and lasts one
        unit of its precision. The last instant is the start of the next
        span minus one millisecond, computed by the calendar so month
        lengths and leap years are respected.

        Returns:
            A fully specified PreciseDateOptions. A FuzzyDate with
            millisecond precision returns its own fields.

        Examples:
            >>> FuzzyDate(2024, 2).get_latest_padding_options()
            PreciseDateOptions(year=2024, month=2, day=29, hour=23, minute=59, second=59, millisecond=999)

            >>> FuzzyDate(2023, 5, 15, 10).get_latest_padding_options().as_tuple()
            (2023, 5, 15, 10, 59, 59, 999)
        """
        earliest = self.get_earliest_padding_options()
        precision = self.get_precision()
        if precision is Precision.MILLISECOND:
            return earliest

        next_span = add_unit(earliest.as_tuple(), precision)
        return PreciseDateOptions(*minus_millisecond(next_span))

    def to_string(self) -> str:
        """Return the string form of this FuzzyDate.

        Only the specified fields are written.

        Examples:
            >>> FuzzyDate(2023, 1, 1, 1, 1, 1, 1).to_string()
            '2023-01-01T01:01:01.001'
            >>> FuzzyDate(-2023, 5).to_string()
            '-2023-05'
        """
        from fuzzydate.format.iso8601 import format_fuzzy_date

        return format_fuzzy_date(self)

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> FuzzyDate(2023, 5).to_json()
            {'_type': 'FuzzyDate', 'value': '2023-05'}
        """
        return {"_type": "FuzzyDate", "value": self.to_string()}

    def __eq__(self, other: object) -> bool:
        """Check equality with another FuzzyDate.

        Two fuzzy dates are equal when the same fields are specified with
        the same values. FuzzyDate(2023) and FuzzyDate(2023, 1) differ.
        """
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'FuzzyDate(2023, 5)'.
        """
        args = ", ".join(str(value) for value in self.as_options().values())
        return f"FuzzyDate({args})"

    def __str__(self) -> str:
        """Return the string form, same as to_string()."""
        return self.to_string()


__all__ = ["FuzzyDate", "FuzzyDateOptions"]

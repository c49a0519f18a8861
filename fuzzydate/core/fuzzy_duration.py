"""FuzzyDuration class representing a duration known to some precision.

This module provides the FuzzyDuration class. Unlike FuzzyDate, every unit
of a FuzzyDuration holds a number; the precision records which units the
caller actually specified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

from fuzzydate._internal.constants import DURATION_FIELDS
from fuzzydate._internal.validation import is_empty
from fuzzydate.units.precision import DurationUnit


class FuzzyDurationOptions(TypedDict, total=False):
    """Options mapping accepted by FuzzyDuration.from_options."""

    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


class FuzzyDuration:
    """A duration in years through milliseconds, with a precision.

    Omitted units are stored as 0. The precision is the finest unit that
    was given, even when it was given as 0, so "1 year and 0 seconds" is
    known to the second while "1 year" is only known to the year.

    The components are stored as-is: no normalization, no validation, and
    negative or fractional values are accepted. Combining a duration with a
    FuzzyDate is left to the caller.

    Attributes:
        years: Number of years.
        months: Number of months.
        days: Number of days.
        hours: Number of hours.
        minutes: Number of minutes.
        seconds: Number of seconds.
        milliseconds: Number of milliseconds.
        precision: The finest unit that was specified.

    Examples:
        >>> d = FuzzyDuration(years=1, seconds=20)
        >>> d.precision
        <DurationUnit.SECONDS: 'seconds'>
        >>> d.minutes
        0

        >>> FuzzyDuration().precision
        <DurationUnit.YEARS: 'years'>
    """

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_milliseconds",
        "_precision",
    )

    def __init__(
        self,
        *,
        years: int | None = None,
        months: int | None = None,
        days: int | None = None,
        hours: int | None = None,
        minutes: int | None = None,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> None:
        """Create a FuzzyDuration from component parts.

        Args:
            years: Number of years, or None if not specified.
            months: Number of months, or None if not specified.
            days: Number of days, or None if not specified.
            hours: Number of hours, or None if not specified.
            minutes: Number of minutes, or None if not specified.
            seconds: Number of seconds, or None if not specified.
            milliseconds: Number of milliseconds, or None if not specified.
        """
        values = (years, months, days, hours, minutes, seconds, milliseconds)
        (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        ) = (0 if is_empty(value) else value for value in values)
        self._precision = self._calculate_precision(values)

    @staticmethod
    def _calculate_precision(values: tuple[Any, ...]) -> DurationUnit:
        """Return the finest unit whose raw input was not empty."""
        for field, value in reversed(list(zip(DURATION_FIELDS, values))):
            if not is_empty(value):
                return DurationUnit(field)
        return DurationUnit.YEARS

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FuzzyDuration:
        """Create a FuzzyDuration from an options mapping.

        Raises:
            TypeError: If the mapping has keys that are not unit names.

        Examples:
            >>> FuzzyDuration.from_options({"seconds": 10, "milliseconds": 500})
            FuzzyDuration(seconds=10, milliseconds=500)
        """
        unknown = set(options) - set(DURATION_FIELDS)
        if unknown:
            raise TypeError(f"unknown FuzzyDuration units: {sorted(unknown)}")
        return cls(**options)

    @classmethod
    def from_json(cls, data: dict) -> FuzzyDuration:
        """Create a FuzzyDuration from a JSON dictionary."""
        from fuzzydate.convert.json import fuzzy_duration_from_json

        return fuzzy_duration_from_json(data)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @property
    def precision(self) -> DurationUnit:
        """Return the finest unit that was specified."""
        return self._precision

    def as_dict(self) -> dict[str, int]:
        """Return all seven units as a dictionary.

        Examples:
            >>> FuzzyDuration(days=3).as_dict()["days"]
            3
        """
        return dict(zip(DURATION_FIELDS, self._values()))

    def _values(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    def to_json(self) -> dict:
        """Return the duration as a JSON-serializable dictionary.

        Examples:
            >>> FuzzyDuration(days=3).to_json()
            {'_type': 'FuzzyDuration', 'value': {'years': 0, 'months': 0, 'days': 3}, 'precision': 'days'}
        """
        from fuzzydate.convert.json import to_json

        return to_json(self)

    def __eq__(self, other: object) -> bool:
        """Check equality with another FuzzyDuration.

        Both the unit values and the precision must match.
        """
        if not isinstance(other, FuzzyDuration):
            return NotImplemented
        return (
            self._values() == other._values()
            and self._precision == other._precision
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._values(), self._precision))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Zero units are left out; the precision unit is always shown.

        Returns:
            String like 'FuzzyDuration(years=1, seconds=20)'.
        """
        parts = [
            f"{field}={value}"
            for field, value in zip(DURATION_FIELDS, self._values())
            if value != 0 or field == self._precision.value
        ]
        return f"FuzzyDuration({', '.join(parts)})"


__all__ = ["FuzzyDuration", "FuzzyDurationOptions"]

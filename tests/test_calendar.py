"""Tests for the calendar oracle."""

from __future__ import annotations

import datetime

import pytest

from fuzzydate._internal.calendar import (
    add_unit,
    days_in_month,
    days_in_year,
    from_epoch_millis,
    is_leap_year,
    is_valid_datetime,
    minus_millisecond,
    ordinal_to_ymd,
    to_epoch_millis,
    ymd_to_ordinal,
)
from fuzzydate.units.precision import Precision


class TestLeapYears:
    """Tests for leap year rules."""

    @pytest.mark.parametrize("year", [2000, 2024, 1600, 0, -4, -400])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4, but not by 100 unless by 400, are leap."""
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2023, 2100, -1, -100])
    def test_common_years(self, year: int) -> None:
        """Other years are common years."""
        assert not is_leap_year(year)

    def test_days_in_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Month 13 is not a month."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2023, 13)

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365


class TestOrdinals:
    """Tests for ordinal day numbers."""

    def test_matches_stdlib_for_common_era(self) -> None:
        """Ordinals agree with datetime.date.toordinal()."""
        for d in (
            datetime.date(1, 1, 1),
            datetime.date(1970, 1, 1),
            datetime.date(2000, 2, 29),
            datetime.date(2024, 12, 31),
            datetime.date(9999, 12, 31),
        ):
            assert ymd_to_ordinal(d.year, d.month, d.day) == d.toordinal()
            assert ordinal_to_ymd(d.toordinal()) == (d.year, d.month, d.day)

    def test_year_zero(self) -> None:
        """Ordinal 0 is the last day of year 0."""
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ordinal_to_ymd(-365) == (0, 1, 1)  # Year 0 is a leap year

    @pytest.mark.parametrize(
        "ymd",
        [(-1, 1, 1), (-44, 3, 15), (-400, 2, 29), (-100000, 1, 1), (99999, 12, 31)],
    )
    def test_round_trip_far_years(self, ymd: tuple[int, int, int]) -> None:
        """Ordinals round-trip far outside the stdlib range."""
        assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd


class TestValidity:
    """Tests for is_valid_datetime."""

    def test_valid_instant(self) -> None:
        """A normal instant is valid."""
        assert is_valid_datetime(2023, 5, 15, 10, 30, 45, 500)

    @pytest.mark.parametrize(
        "fields",
        [
            (2023, 13, 1, 0, 0, 0, 0),
            (2023, 0, 1, 0, 0, 0, 0),
            (2023, 2, 29, 0, 0, 0, 0),
            (2023, 4, 31, 0, 0, 0, 0),
            (2023, 1, 0, 0, 0, 0, 0),
            (2023, 1, 1, 24, 0, 0, 0),
            (2023, 1, 1, 0, 60, 0, 0),
            (2023, 1, 1, 0, 0, 60, 0),
            (2023, 1, 1, 0, 0, 0, 1000),
            (2023, 1, 1, -1, 0, 0, 0),
        ],
    )
    def test_out_of_range_fields(self, fields: tuple[int, ...]) -> None:
        """Out-of-range fields are rejected."""
        assert not is_valid_datetime(*fields)

    def test_year_limits(self) -> None:
        """Years are limited to -100000 through 99999."""
        assert is_valid_datetime(-100000, 1, 1, 0, 0, 0, 0)
        assert is_valid_datetime(99999, 12, 31, 23, 59, 59, 999)
        assert not is_valid_datetime(-100001, 1, 1, 0, 0, 0, 0)
        assert not is_valid_datetime(100000, 1, 1, 0, 0, 0, 0)

    def test_non_integers_rejected(self) -> None:
        """Floats, strings and booleans are not calendar fields."""
        assert not is_valid_datetime(2023, 5.5, 1, 0, 0, 0, 0)
        assert not is_valid_datetime(2023, "5", 1, 0, 0, 0, 0)
        assert not is_valid_datetime(2023, True, 1, 0, 0, 0, 0)


class TestEpochMillis:
    """Tests for the millisecond timeline."""

    def test_epoch_is_zero(self) -> None:
        """1970-01-01T00:00:00.000 is millisecond 0."""
        assert to_epoch_millis((1970, 1, 1, 0, 0, 0, 0)) == 0

    def test_before_epoch_is_negative(self) -> None:
        """One millisecond before the epoch is -1."""
        assert from_epoch_millis(-1) == (1969, 12, 31, 23, 59, 59, 999)

    def test_round_trip_bce(self) -> None:
        """Epoch millis round-trip for BCE instants."""
        fields = (-44, 3, 15, 12, 0, 0, 1)
        assert from_epoch_millis(to_epoch_millis(fields)) == fields


class TestAddUnit:
    """Tests for add_unit and minus_millisecond."""

    def test_add_year(self) -> None:
        """Adding a year keeps month and day."""
        assert add_unit((2023, 1, 1, 0, 0, 0, 0), Precision.YEAR) == (
            2024, 1, 1, 0, 0, 0, 0,
        )

    def test_add_month_rolls_year(self) -> None:
        """December plus one month is January of the next year."""
        assert add_unit((2023, 12, 1, 0, 0, 0, 0), Precision.MONTH) == (
            2024, 1, 1, 0, 0, 0, 0,
        )

    def test_add_month_clamps_day(self) -> None:
        """January 31 plus one month clamps to the end of February."""
        assert add_unit((2024, 1, 31, 0, 0, 0, 0), Precision.MONTH)[:3] == (2024, 2, 29)
        assert add_unit((2023, 1, 31, 0, 0, 0, 0), Precision.MONTH)[:3] == (2023, 2, 28)

    def test_add_negative_months(self) -> None:
        """Months can be subtracted across year boundaries."""
        assert add_unit((2023, 1, 15, 0, 0, 0, 0), Precision.MONTH, -2)[:3] == (
            2022, 11, 15,
        )

    def test_add_month_bce(self) -> None:
        """Month arithmetic works for negative years."""
        assert add_unit((-1, 12, 1, 0, 0, 0, 0), Precision.MONTH)[:3] == (0, 1, 1)

    def test_add_day_carries_month(self) -> None:
        """Adding a day to February 28 lands on March 1 in a common year."""
        assert add_unit((2023, 2, 28, 0, 0, 0, 0), Precision.DAY)[:3] == (2023, 3, 1)
        assert add_unit((2024, 2, 28, 0, 0, 0, 0), Precision.DAY)[:3] == (2024, 2, 29)

    def test_add_hour_carries_day(self) -> None:
        """Adding an hour at 23:00 carries into the next day."""
        assert add_unit((2023, 12, 31, 23, 0, 0, 0), Precision.HOUR) == (
            2024, 1, 1, 0, 0, 0, 0,
        )

    def test_add_minute_and_second(self) -> None:
        """Minutes and seconds carry into the next larger unit."""
        assert add_unit((2023, 5, 15, 10, 59, 0, 0), Precision.MINUTE)[3:5] == (11, 0)
        assert add_unit((2023, 5, 15, 10, 30, 59, 0), Precision.SECOND)[4:6] == (31, 0)

    def test_minus_millisecond(self) -> None:
        """Stepping back a millisecond from midnight lands on the previous day."""
        assert minus_millisecond((2024, 3, 1, 0, 0, 0, 0)) == (
            2024, 2, 29, 23, 59, 59, 999,
        )

    def test_arithmetic_past_max_year(self) -> None:
        """Arithmetic is not range checked."""
        assert add_unit((99999, 1, 1, 0, 0, 0, 0), Precision.YEAR)[0] == 100000

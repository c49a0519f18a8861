"""Tests for FuzzyDate string formatting and parsing."""

from __future__ import annotations

import pytest

from fuzzydate import (
    CalendarError,
    DeserializationError,
    FuzzyDate,
    format_fuzzy_date,
    parse_fuzzy_date,
)
from fuzzydate.format import MAX_FUZZY_DATE_STRING, MIN_FUZZY_DATE_STRING


class TestToString:
    """Tests for FuzzyDate.to_string()."""

    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            ((2023,), "2023"),
            ((2023, 5), "2023-05"),
            ((2023, 5, 15), "2023-05-15"),
            ((2023, 5, 15, 10), "2023-05-15T10"),
            ((2023, 5, 15, 10, 30), "2023-05-15T10:30"),
            ((2023, 5, 15, 10, 30, 45), "2023-05-15T10:30:45"),
            ((2023, 5, 15, 10, 30, 45, 500), "2023-05-15T10:30:45.500"),
        ],
    )
    def test_each_precision(self, fields: tuple[int, ...], expected: str) -> None:
        """Only specified fields are written."""
        assert FuzzyDate(*fields).to_string() == expected

    def test_zero_padding(self) -> None:
        """Small values are zero-padded to their field width."""
        assert FuzzyDate(2023, 1, 1, 1, 1, 1, 1).to_string() == "2023-01-01T01:01:01.001"

    def test_zero_values_written(self) -> None:
        """Zero-valued fields are still written."""
        assert FuzzyDate(2023, 5, 15, 0, 0).to_string() == "2023-05-15T00:00"

    def test_negative_year(self) -> None:
        """Negative years carry a leading minus sign."""
        assert FuzzyDate(-2023).to_string() == "-2023"
        assert FuzzyDate(-2023, 5, 15).to_string() == "-2023-05-15"

    def test_short_negative_year_padded(self) -> None:
        """The magnitude of a negative year is padded to four digits."""
        assert FuzzyDate(-44, 3, 15).to_string() == "-0044-03-15"

    def test_short_year_padded(self) -> None:
        """Years below 1000 are padded to four digits."""
        assert FuzzyDate(476).to_string() == "0476"
        assert FuzzyDate(0).to_string() == "0000"

    def test_five_digit_year(self) -> None:
        """Years beyond 9999 are not truncated."""
        assert FuzzyDate(12345, 6).to_string() == "12345-06"
        assert FuzzyDate(-12345).to_string() == "-12345"

    def test_str(self) -> None:
        """str() gives the string form."""
        assert str(FuzzyDate(2023, 5)) == "2023-05"

    def test_format_function(self) -> None:
        """format_fuzzy_date matches to_string()."""
        d = FuzzyDate(2023, 5, 15)
        assert format_fuzzy_date(d) == d.to_string()

    def test_format_rejects_other_types(self) -> None:
        """Only FuzzyDate values can be formatted."""
        with pytest.raises(TypeError, match="expected FuzzyDate"):
            format_fuzzy_date("2023")  # type: ignore[arg-type]

    def test_range_strings(self) -> None:
        """The range bounds format as documented."""
        assert FuzzyDate(-100000, 1, 1, 0, 0, 0, 0).to_string() == MIN_FUZZY_DATE_STRING
        assert FuzzyDate(99999, 12, 31, 23, 59, 59, 999).to_string() == MAX_FUZZY_DATE_STRING


class TestFromString:
    """Tests for FuzzyDate.from_string()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2023", FuzzyDate(2023)),
            ("2023-05", FuzzyDate(2023, 5)),
            ("2023-05-15", FuzzyDate(2023, 5, 15)),
            ("2023-05-15T10", FuzzyDate(2023, 5, 15, 10)),
            ("2023-05-15T10:30", FuzzyDate(2023, 5, 15, 10, 30)),
            ("2023-05-15T10:30:45", FuzzyDate(2023, 5, 15, 10, 30, 45)),
            ("2023-05-15T10:30:45.500", FuzzyDate(2023, 5, 15, 10, 30, 45, 500)),
            ("-2023", FuzzyDate(-2023)),
            ("-2023-05-15", FuzzyDate(-2023, 5, 15)),
            ("-0044-03-15", FuzzyDate(-44, 3, 15)),
            ("0000", FuzzyDate(0)),
            ("12345-01", FuzzyDate(12345, 1)),
        ],
    )
    def test_valid(self, text: str, expected: FuzzyDate) -> None:
        """Well-formed strings parse to the matching FuzzyDate."""
        assert FuzzyDate.from_string(text) == expected

    def test_zero_hour(self) -> None:
        """A written zero is a specified field."""
        d = FuzzyDate.from_string("2023-05-15T00")
        assert d.hour == 0
        assert d.minute is None

    def test_parse_function(self) -> None:
        """parse_fuzzy_date matches from_string()."""
        assert parse_fuzzy_date("2023-05") == FuzzyDate.from_string("2023-05")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "invalid-date",
            "2023-5",
            "2023-05-5",
            "2023/05/15",
            "2023-05-15 10:30",
            "2023-05-15T10:30:45.5",
            "2023-05-15T10:30:45.500Z",
            "2023-05-15T10:30:45.500-invalid",
            "2023-05T10",
            "2023T10",
            "+2023",
            "--2023",
            " 2023",
            "2023 ",
            "2023-05-",
            "２０２３",
        ],
    )
    def test_invalid_format(self, text: str) -> None:
        """Malformed strings raise DeserializationError."""
        with pytest.raises(DeserializationError, match="Invalid format"):
            FuzzyDate.from_string(text)

    def test_non_string_input(self) -> None:
        """Non-string input is a format error."""
        with pytest.raises(DeserializationError):
            FuzzyDate.from_string(2023)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "text",
        ["2023-13-01", "2023-02-30", "2023-04-31", "2023-00", "2023-05-15T24", "2023-02-29"],
    )
    def test_impossible_date(self, text: str) -> None:
        """Well-formed strings naming impossible dates raise CalendarError."""
        with pytest.raises(CalendarError):
            FuzzyDate.from_string(text)

    def test_year_out_of_range(self) -> None:
        """A year beyond the supported range raises CalendarError."""
        with pytest.raises(CalendarError):
            FuzzyDate.from_string("100000")

    def test_error_reason(self) -> None:
        """The error carries its reason."""
        with pytest.raises(DeserializationError) as exc_info:
            FuzzyDate.from_string("nope")
        assert exc_info.value.reason == "Invalid format"


class TestStringRoundTrip:
    """Tests for formatting then parsing."""

    def test_each_precision(self, options_by_precision: dict[str, int]) -> None:
        """Every precision survives the round trip."""
        d = FuzzyDate(**options_by_precision)
        assert FuzzyDate.from_string(d.to_string()) == d

    def test_each_precision_bce(self, options_by_precision: dict[str, int]) -> None:
        """Negative years survive the round trip."""
        options = {**options_by_precision, "year": -options_by_precision["year"]}
        d = FuzzyDate(**options)
        assert FuzzyDate.from_string(d.to_string()) == d

    def test_string_order_is_chronological(self) -> None:
        """Same-precision CE strings sort in calendar order."""
        dates = [FuzzyDate(2023, 11, 2), FuzzyDate(2023, 2, 11), FuzzyDate(476, 9, 4)]
        strings = sorted(d.to_string() for d in dates)
        assert strings == ["0476-09-04", "2023-02-11", "2023-11-02"]

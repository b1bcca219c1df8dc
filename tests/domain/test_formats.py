"""Tests for FormatMode and the per-mode duration renderers."""

import pytest

from elapsed.domain.duration import Duration
from elapsed.domain.formats import (
    FORMATTERS,
    MODE_CHOICES,
    FormatMode,
    format_duration,
    pluralize,
)


class TestPluralize:
    def test_zero_is_empty(self) -> None:
        assert pluralize(0, "day", "days") == ""

    def test_one_is_singular(self) -> None:
        assert pluralize(1, "month", "months") == "1 month"

    def test_many_is_plural(self) -> None:
        assert pluralize(12, "year", "years") == "12 years"


class TestFormatMode:
    def test_values(self) -> None:
        assert {mode.value for mode in FormatMode} == {
            "days",
            "year-month",
            "year-day",
            "default",
        }

    def test_every_mode_has_a_formatter(self) -> None:
        assert set(FORMATTERS) == set(FormatMode)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("days", FormatMode.DAYS),
            ("day", FormatMode.DAYS),
            ("DAY", FormatMode.DAYS),
            ("Year-Month", FormatMode.YEAR_MONTH),
            ("year-day", FormatMode.YEAR_DAY),
            (" default ", FormatMode.DEFAULT),
        ],
    )
    def test_parse(self, raw: str, expected: FormatMode) -> None:
        assert FormatMode.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            FormatMode.parse("weeks")

    def test_choices_include_alias(self) -> None:
        assert MODE_CHOICES == ["days", "year-month", "year-day", "default", "day"]


class TestZeroDuration:
    @pytest.mark.parametrize("mode", list(FormatMode))
    def test_zero_is_zero_days_in_every_mode(self, mode: FormatMode) -> None:
        assert format_duration(Duration(), mode) == "0 days"


class TestDaysMode:
    def test_singular(self) -> None:
        assert format_duration(Duration(days=1, total_days=1), FormatMode.DAYS) == "1 day"

    def test_ignores_calendar_breakdown(self) -> None:
        duration = Duration(years=1, months=2, days=3, total_days=430)
        assert format_duration(duration, FormatMode.DAYS) == "430 days"


class TestYearMonthMode:
    def test_skips_zero_components(self) -> None:
        duration = Duration(years=2, months=0, days=3, total_days=733)
        assert format_duration(duration, FormatMode.YEAR_MONTH) == "2 years 3 days"

    def test_only_months(self) -> None:
        duration = Duration(months=1, total_days=31)
        assert format_duration(duration, FormatMode.YEAR_MONTH) == "1 month"


class TestYearDayMode:
    def test_days_only_below_a_year(self) -> None:
        assert format_duration(Duration(total_days=364), FormatMode.YEAR_DAY) == "364 days"

    def test_exact_years(self) -> None:
        assert format_duration(Duration(total_days=730), FormatMode.YEAR_DAY) == "2 years"

    def test_years_and_days(self) -> None:
        assert format_duration(Duration(total_days=366), FormatMode.YEAR_DAY) == "1 year 1 day"

    def test_fixed_365_day_year(self) -> None:
        # A leap year span of 365 days is still reported as a whole year.
        duration = Duration(years=1, total_days=365)
        assert format_duration(duration, FormatMode.YEAR_DAY) == "1 year"


class TestDefaultMode:
    def test_pure_day_span_has_no_parenthetical(self) -> None:
        duration = Duration(days=5, total_days=5)
        assert format_duration(duration, FormatMode.DEFAULT) == "5 days"

    def test_parenthetical_with_years(self) -> None:
        duration = Duration(years=1, total_days=365)
        assert format_duration(duration, FormatMode.DEFAULT) == "1 year (365 days)"

    def test_parenthetical_singular(self) -> None:
        duration = Duration(months=1, total_days=1)
        assert format_duration(duration, FormatMode.DEFAULT) == "1 month (1 day)"

    def test_no_parenthetical_without_total(self) -> None:
        duration = Duration(years=1, total_days=0)
        assert format_duration(duration, FormatMode.DEFAULT) == "1 year"

    def test_default_argument(self) -> None:
        duration = Duration(months=1, days=1, total_days=30)
        assert format_duration(duration) == "1 month 1 day (30 days)"

    def test_accepts_string_mode(self) -> None:
        duration = Duration(months=1, days=1, total_days=30)
        assert format_duration(duration, "days") == "30 days"  # type: ignore[arg-type]

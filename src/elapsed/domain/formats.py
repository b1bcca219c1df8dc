"""Duration formatting modes and their renderers.

The mode set is closed, so dispatch is a plain table of pure functions
keyed by :class:`FormatMode`.  Every Duration renders in every mode.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from elapsed.domain.duration import Duration

ZERO_DAYS = "0 days"
YEAR_DAY_COUNT = 365


class FormatMode(StrEnum):
    """How a Duration is rendered."""

    DAYS = "days"
    YEAR_MONTH = "year-month"
    YEAR_DAY = "year-day"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: str) -> FormatMode:
        """Resolve a CLI/config value, accepting ``day`` for ``days``."""
        normalized = value.strip().lower()
        normalized = MODE_ALIASES.get(normalized, normalized)
        return cls(normalized)


MODE_ALIASES: dict[str, str] = {"day": "days"}

# Everything the CLI accepts, canonical values first.
MODE_CHOICES: list[str] = [mode.value for mode in FormatMode] + list(MODE_ALIASES)


def pluralize(n: int, singular: str, plural: str) -> str:
    """``""`` for 0, ``"1 <singular>"`` for 1, ``"<n> <plural>"`` otherwise."""
    if n == 0:
        return ""
    if n == 1:
        return f"1 {singular}"
    return f"{n} {plural}"


def _join(*tokens: str) -> str:
    return " ".join(token for token in tokens if token)


def format_days(duration: Duration) -> str:
    if duration.total_days == 0:
        return ZERO_DAYS
    return pluralize(duration.total_days, "day", "days")


def format_year_month(duration: Duration) -> str:
    if duration.years == 0 and duration.months == 0 and duration.days == 0:
        return ZERO_DAYS
    return _join(
        pluralize(duration.years, "year", "years"),
        pluralize(duration.months, "month", "months"),
        pluralize(duration.days, "day", "days"),
    )


def format_year_day(duration: Duration) -> str:
    """Split ``total_days`` into fixed 365-day years plus remaining days.

    Leap days are deliberately ignored, so this can disagree with the
    calendar-aware year/month breakdown.
    """
    if duration.total_days == 0:
        return ZERO_DAYS
    years, days = divmod(duration.total_days, YEAR_DAY_COUNT)
    return _join(
        pluralize(years, "year", "years"),
        pluralize(days, "day", "days"),
    )


def format_default(duration: Duration) -> str:
    """Year/month breakdown with the total day count in parentheses.

    The parenthetical is dropped for pure-day spans and for empty spans.
    """
    if (duration.years == 0 and duration.months == 0) or duration.total_days == 0:
        return format_year_month(duration)
    return _join(format_year_month(duration), f"({format_days(duration)})")


FORMATTERS: dict[FormatMode, Callable[[Duration], str]] = {
    FormatMode.DAYS: format_days,
    FormatMode.YEAR_MONTH: format_year_month,
    FormatMode.YEAR_DAY: format_year_day,
    FormatMode.DEFAULT: format_default,
}


def format_duration(duration: Duration, mode: FormatMode = FormatMode.DEFAULT) -> str:
    """Render *duration* in the requested *mode*."""
    return FORMATTERS[FormatMode(mode)](duration)

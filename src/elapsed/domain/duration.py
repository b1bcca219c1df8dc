"""Calendar difference between two dates.

Exclusive-endpoint semantics: neither the 'from' day nor the 'to' day is
counted, only the whole days strictly between them.  Equal dates and
consecutive dates both yield a zero Duration.

INVARIANT: ``Duration.months < 12``; overflow is carried into ``years``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from elapsed.domain.dates import CalendarDate
from elapsed.domain.errors import OrderingError
from elapsed.domain.formats import FormatMode, format_duration


class Duration(BaseModel):
    """Elapsed span between two dates.

    Attributes:
        years: Whole calendar years strictly between the two years.
        months: Whole months strictly between, after carry (0-11).
        days: Day remainder; may exceed a month's length.
        total_days: Days strictly between the two dates on the time line.
    """

    model_config = {"frozen": True}

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0, lt=12)
    days: int = Field(default=0, ge=0)
    total_days: int = Field(default=0, ge=0)

    def format(self, mode: FormatMode = FormatMode.DEFAULT) -> str:
        return format_duration(self, mode)

    def __str__(self) -> str:
        return self.format(FormatMode.DEFAULT)


def month_difference(from_date: CalendarDate, to_date: CalendarDate) -> int:
    """Months strictly between the from-month and the to-month (uncarried)."""
    if from_date.year == to_date.year:
        return max(0, to_date.month - from_date.month - 1)
    return max(0, 12 - from_date.month) + max(0, to_date.month - 1)


def year_difference(from_date: CalendarDate, to_date: CalendarDate) -> int:
    return max(0, to_date.year - from_date.year - 1)


def day_difference(from_date: CalendarDate, to_date: CalendarDate) -> int:
    """Days after from.day to the end of its month, plus days before to.day."""
    if from_date.year == to_date.year and from_date.month == to_date.month:
        return max(0, to_date.day - from_date.day - 1)
    rest_of_month = max(0, from_date.days_in_month() - from_date.day)
    return rest_of_month + max(0, to_date.day - 1)


def total_day_difference(from_date: CalendarDate, to_date: CalendarDate) -> int:
    """Whole days strictly between the two dates, clamped at zero."""
    return max(0, (to_date - from_date) - 1)


def elapsed(from_date: CalendarDate, to_date: CalendarDate) -> Duration:
    """Compute the Duration from *from_date* to *to_date*.

    Raises:
        OrderingError: If *from_date* is strictly after *to_date*.
    """
    if from_date > to_date:
        raise OrderingError()

    years = year_difference(from_date, to_date)
    months = month_difference(from_date, to_date)
    if months >= 12:
        years += 1
        months -= 12

    return Duration(
        years=years,
        months=months,
        days=day_difference(from_date, to_date),
        total_days=total_day_difference(from_date, to_date),
    )

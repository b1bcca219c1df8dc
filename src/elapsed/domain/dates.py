"""Gregorian calendar dates with no time component.

:class:`CalendarDate` is an immutable ``(year, month, day)`` value ordered
lexicographically.  Day arithmetic goes through proleptic Gregorian
ordinals, so leap years and month/year rollover come for free.

Only the strict ``YYYY-MM-DD`` shape is accepted by :meth:`CalendarDate.parse`.
"""

from __future__ import annotations

import calendar
import datetime as _dt
import re
from dataclasses import dataclass

from elapsed.domain.errors import DateParseError

DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A proleptic Gregorian date.

    Field order matters: ``order=True`` compares ``(year, month, day)``
    tuples, which is exactly chronological order.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not _dt.MINYEAR <= self.year <= _dt.MAXYEAR or not 1 <= self.month <= 12:
            raise DateParseError(f"{self.year}-{self.month}-{self.day}")
        if not 1 <= self.day <= calendar.monthrange(self.year, self.month)[1]:
            raise DateParseError(f"{self.year}-{self.month}-{self.day}")

    # --- Construction ---

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse a strict ``YYYY-MM-DD`` string.

        Only ASCII digits are accepted and the whole string must match;
        surrounding whitespace is rejected.

        Raises:
            DateParseError: On any other shape or on an impossible date
                (month 13, day 32, Feb 30, ...).
        """
        match = DATE_PATTERN.fullmatch(text)
        if match is None:
            raise DateParseError(text)
        year, month, day = (int(part) for part in match.groups())
        try:
            return cls(year, month, day)
        except DateParseError as exc:
            raise DateParseError(text) from exc

    @classmethod
    def from_date(cls, value: _dt.date) -> CalendarDate:
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        return cls.from_date(_dt.date.fromordinal(ordinal))

    @classmethod
    def today(cls, *, utc: bool = True) -> CalendarDate:
        """Return the current date, in UTC by default."""
        if utc:
            return cls.from_date(_dt.datetime.now(_dt.timezone.utc).date())
        return cls.from_date(_dt.date.today())

    # --- Calendar queries ---

    def is_leap_year(self) -> bool:
        return calendar.isleap(self.year)

    def days_in_month(self) -> int:
        """Number of days in this date's month (28, 29, 30 or 31)."""
        return calendar.monthrange(self.year, self.month)[1]

    def ordinal(self) -> int:
        """Proleptic Gregorian ordinal, where 0001-01-01 is day 1."""
        return self.to_date().toordinal()

    def previous_day(self) -> CalendarDate:
        """The day before, crossing month and year boundaries.

        Raises:
            ValueError: On 0001-01-01, the first representable date.
        """
        if self.ordinal() == 1:
            raise ValueError("0001-01-01 has no previous day")
        return CalendarDate.from_ordinal(self.ordinal() - 1)

    def first_of_next_month(self) -> CalendarDate:
        """Day 1 of the following month; December rolls into January.

        Raises:
            ValueError: In December 9999, the last representable month.
        """
        if self.month == 12:
            if self.year == _dt.MAXYEAR:
                raise ValueError(f"{_dt.MAXYEAR}-12 has no following month")
            return CalendarDate(self.year + 1, 1, 1)
        return CalendarDate(self.year, self.month + 1, 1)

    def last_of_month(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.days_in_month())

    # --- Conversion ---

    def to_date(self) -> _dt.date:
        return _dt.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def __sub__(self, other: CalendarDate) -> int:
        """Signed whole-day distance ``self - other``."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.ordinal() - other.ordinal()

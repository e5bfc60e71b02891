"""Calendar date arithmetic for the circulation tracker.

Loans and fines are computed on a small ``CalendarDate`` value rather than
``datetime.date``.  The tracker only ever needs whole days, a forward
``advance`` and a cheap "distance" between two dates.  That distance is the
linear approximation ``year*365 + month*30 + day``; fine amounts are defined
in terms of it, so it must not be replaced with real calendar subtraction.
"""

from __future__ import annotations

from dataclasses import dataclass


MIN_YEAR = 1900

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidDate(ValueError):
    """Raised when a (day, month, year) triple is not a real calendar day."""

    def __init__(self, day: object, month: object, year: object) -> None:
        super().__init__(f"Invalid date: day={day} month={month} year={year}")
        self.day = day
        self.month = month
        self.year = year


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the length of ``month`` in ``year``.

    Months outside 1..12 yield 0 instead of raising; callers are expected to
    pass a valid month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    if 1 <= month <= 12:
        return _DAYS_PER_MONTH[month - 1]
    return 0


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated day of the Gregorian calendar.

    Fields are declared year first so the generated ordering compares
    (year, month, day) lexicographically.

    Attributes:
        year: four digit year, 1900 or later.
        month: 1..12.
        day: 1..days_in_month(month, year).
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not _is_valid(self.day, self.month, self.year):
            raise InvalidDate(self.day, self.month, self.year)

    @classmethod
    def create(cls, day: int, month: int, year: int) -> "CalendarDate":
        """Build a date from a (day, month, year) triple or raise ``InvalidDate``."""
        return cls(year=year, month=month, day=day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """Parse the canonical ``YYYY-MM-DD`` form produced by ``format``."""
        parts = text.strip().split("-")
        if len(parts) != 3:
            raise InvalidDate(text, None, None)
        try:
            year, month, day = (int(p) for p in parts)
        except ValueError:
            raise InvalidDate(*reversed(parts)) from None
        return cls(year=year, month=month, day=day)

    def advance(self, days: int) -> "CalendarDate":
        """Return the date ``days`` days later.

        The date is stepped one day at a time, so every month length is taken
        from the month being crossed.  Negative values are not supported and
        leave the date unchanged.
        """
        day, month, year = self.day, self.month, self.year
        for _ in range(days):
            day += 1
            if day > days_in_month(month, year):
                day = 1
                month += 1
                if month > 12:
                    month = 1
                    year += 1
        return CalendarDate(year=year, month=month, day=day)

    def days_since(self, other: "CalendarDate") -> int:
        return days_between(self, other)

    def format(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.format()


def _is_valid(day: int, month: int, year: int) -> bool:
    # bool is an int subclass but never a meaningful date component
    for value in (day, month, year):
        if not isinstance(value, int) or isinstance(value, bool):
            return False
    return year >= MIN_YEAR and 1 <= month <= 12 and 1 <= day <= days_in_month(month, year)


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Approximate number of days from ``b`` to ``a`` (positive when ``a`` is later).

    Every year counts as 365 days and every month as 30, so the result is
    only exact within a single month.
    """
    return (a.year * 365 + a.month * 30 + a.day) - (b.year * 365 + b.month * 30 + b.day)

"""Danish calendar helpers.

Months are 1-indexed. Weekdays follow ``date.weekday()``: Monday=0 ... Sunday=6,
so the ``calendar.MONDAY`` ... ``calendar.SUNDAY`` constants can be passed directly.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta


class OutOfRangeError(ValueError):
    """The requested weekday occurrence does not exist in the month."""


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Ugyldig maaned: {month!r}")


def _check_weekday(weekday: int) -> None:
    if not 0 <= weekday <= 6:
        raise ValueError(f"Ugyldig ugedag: {weekday!r} (mandag=0 ... soendag=6)")


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for the given year (Gregorian calendar)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    _check_month(month)
    _check_weekday(weekday)
    last = date(year, month, calendar.monthrange(year, month)[1])
    back = (last.weekday() - weekday) % 7
    return last - timedelta(days=back)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Return the n-th (1-indexed) occurrence of ``weekday`` in the month."""
    _check_month(month)
    _check_weekday(weekday)
    if n < 1:
        raise OutOfRangeError(f"Forekomst skal vaere mindst 1, fik {n}")
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    day = 1 + offset + 7 * (n - 1)
    if day > calendar.monthrange(year, month)[1]:
        raise OutOfRangeError(
            f"{year}-{month:02d} har ingen {n}. forekomst af ugedag {weekday}"
        )
    return date(year, month, day)


def first_weekday_of_month(year: int, month: int, weekday: int) -> date:
    return nth_weekday_of_month(year, month, weekday, 1)


def weekday_on_or_before(day: date, weekday: int) -> date:
    _check_weekday(weekday)
    return day - timedelta(days=(day.weekday() - weekday) % 7)


def iso_week_monday(year: int, week: int) -> date:
    return date.fromisocalendar(year, week, 1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def month_days(ym: str) -> list[date]:
    year_str, month_str = ym.split("-", 1)
    year = int(year_str)
    month = int(month_str)
    _check_month(month)
    last = calendar.monthrange(year, month)[1]
    return [date(year, month, day) for day in range(1, last + 1)]

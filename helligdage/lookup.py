"""Per-day and per-month lookups used by calendar views."""

from __future__ import annotations

from datetime import date

from helligdage import calendar_dk
from helligdage.domain import Category, HolidayRecord, Settings
from helligdage.engine import compute_holidays
from helligdage.logging_config import get_logger

logger = get_logger(__name__)


class YearHolidayCache:
    """Memoizes ``compute_holidays`` per year for one ``Settings``."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._by_year: dict[int, tuple[HolidayRecord, ...]] = {}

    def get(self, year: int) -> tuple[HolidayRecord, ...]:
        records = self._by_year.get(year)
        if records is None:
            logger.debug("Cache miss for %s", year)
            records = tuple(compute_holidays(year, self.settings))
            self._by_year[year] = records
        return records

    def clear(self) -> None:
        self._by_year.clear()

    def __len__(self) -> int:
        return len(self._by_year)


_default_cache = YearHolidayCache()


def _records_for(year: int, cache: YearHolidayCache | None) -> tuple[HolidayRecord, ...]:
    if cache is None:
        cache = _default_cache
    return cache.get(year)


def holidays_on(
    day: date,
    cache: YearHolidayCache | None = None,
    show_holidays: bool = True,
) -> list[HolidayRecord]:
    if not show_holidays:
        return []
    return [record for record in _records_for(day.year, cache) if record.date == day]


def holidays_in_month(
    year: int,
    month: int,
    cache: YearHolidayCache | None = None,
    show_holidays: bool = True,
) -> list[HolidayRecord]:
    if not 1 <= month <= 12:
        raise ValueError(f"Ugyldig maaned: {month!r}")
    if not show_holidays:
        return []
    return [
        record
        for record in _records_for(year, cache)
        if record.date.year == year and record.date.month == month
    ]


def is_holiday(day: date, cache: YearHolidayCache | None = None) -> bool:
    return any(record.category == Category.HOLIDAY for record in holidays_on(day, cache))


def is_bank_closed(day: date, cache: YearHolidayCache | None = None) -> bool:
    return calendar_dk.is_weekend(day) or is_holiday(day, cache)

"""Assembles the holiday list for one year."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from helligdage import calendar_dk, table
from helligdage.domain import (
    Category,
    HolidayRecord,
    HolidayTableError,
    Settings,
    validate_year,
)
from helligdage.logging_config import get_logger

logger = get_logger(__name__)

CARRYOVER_KEY = "nytaar"
CARRYOVER_TITLE = "Nytår"


def _record(
    year: int,
    key: str,
    title: str,
    day: date,
    category: Category,
    color: str | None,
    theme: str | None,
    settings: Settings,
) -> HolidayRecord:
    return HolidayRecord(
        id=f"{key}-{year}",
        key=key,
        title=title,
        date=day,
        category=category,
        color=settings.color_for(category, color),
        theme=theme,
    )


def _easter_records(year: int, settings: Settings) -> list[HolidayRecord]:
    easter = calendar_dk.easter_sunday(year)
    records: list[HolidayRecord] = []
    for offset in table.EASTER_OFFSETS:
        category = offset.category
        if offset.key == "store-bededag" and year > table.STORE_BEDEDAG_LAST_OFFICIAL_YEAR:
            category = Category.OBSERVANCE
        records.append(
            _record(
                year,
                offset.key,
                offset.title,
                easter + timedelta(days=offset.days),
                category,
                offset.color,
                offset.theme,
                settings,
            )
        )
    return records


def _weekday_rule_records(year: int, settings: Settings) -> list[HolidayRecord]:
    records: list[HolidayRecord] = []
    for rule in table.WEEKDAY_RULES:
        if rule.n is None:
            day = calendar_dk.last_weekday_of_month(year, rule.month, rule.weekday)
        else:
            day = calendar_dk.nth_weekday_of_month(year, rule.month, rule.weekday, rule.n)
        records.append(
            _record(year, rule.key, rule.title, day, rule.category, rule.color, rule.theme, settings)
        )
    return records


def _advent_records(year: int, settings: Settings) -> list[HolidayRecord]:
    fourth = calendar_dk.weekday_on_or_before(date(year, 12, 24), calendar.SUNDAY)
    records: list[HolidayRecord] = []
    for index, title in enumerate(table.ADVENT_TITLES, start=1):
        day = fourth - timedelta(weeks=len(table.ADVENT_TITLES) - index)
        records.append(
            _record(
                year,
                f"advent-{index}",
                title,
                day,
                Category.OBSERVANCE,
                table.CHURCH_PURPLE,
                "advent",
                settings,
            )
        )
    return records


def _school_vacation_records(year: int, settings: Settings) -> list[HolidayRecord]:
    return [
        _record(
            year,
            rule.key,
            rule.title,
            calendar_dk.iso_week_monday(year, rule.week),
            rule.category,
            rule.color,
            None,
            settings,
        )
        for rule in table.SCHOOL_VACATION_WEEKS
    ]


def _fixed_records(year: int, settings: Settings) -> list[HolidayRecord]:
    return [
        _record(
            year,
            entry.key,
            entry.title,
            entry.on(year),
            entry.category,
            entry.color,
            entry.theme,
            settings,
        )
        for entry in table.FIXED_DAYS
    ]


def _carryover_record(year: int, settings: Settings) -> HolidayRecord:
    # Dated in the previous year: the eve leading into ``year``.
    return _record(
        year,
        CARRYOVER_KEY,
        CARRYOVER_TITLE,
        date(year - 1, 12, 31),
        Category.HOLIDAY,
        table.HOLIDAY_RED,
        "nytaar",
        settings,
    )


def _ensure_unique_ids(records: list[HolidayRecord]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for record in records:
        if record.id in seen:
            duplicates.append(record.id)
        seen.add(record.id)
    if duplicates:
        raise HolidayTableError(f"Dublerede helligdags-id'er: {', '.join(sorted(duplicates))}")


def compute_holidays(year: int, settings: Settings | None = None) -> list[HolidayRecord]:
    """Return all holidays and special days of ``year`` sorted by date.

    Records sharing a date keep their assembly order. The result is a new list on
    every call; memoizing per year is left to the caller.
    """
    year = validate_year(year)
    if settings is None:
        settings = Settings()

    records: list[HolidayRecord] = []
    if settings.include_previous_new_years_eve:
        records.append(_carryover_record(year, settings))
    records.extend(_fixed_records(year, settings))
    records.extend(_easter_records(year, settings))
    records.extend(_weekday_rule_records(year, settings))
    records.extend(_advent_records(year, settings))
    records.extend(_school_vacation_records(year, settings))

    _ensure_unique_ids(records)
    selected = [record for record in records if settings.includes(record.category)]
    selected.sort(key=lambda record: record.date)
    logger.debug("Computed %d holidays for %d", len(selected), year)
    return selected

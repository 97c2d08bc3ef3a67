"""Reporting helpers."""

from __future__ import annotations

from collections import Counter
from datetime import date

from helligdage import calendar_dk
from helligdage.domain import Category, HolidayRecord
from helligdage.engine import compute_holidays

MONTH_NAMES_DA = (
    "januar",
    "februar",
    "marts",
    "april",
    "maj",
    "juni",
    "juli",
    "august",
    "september",
    "oktober",
    "november",
    "december",
)

WEEKDAY_NAMES_DA = (
    "mandag",
    "tirsdag",
    "onsdag",
    "torsdag",
    "fredag",
    "lørdag",
    "søndag",
)

CATEGORY_COLUMNS: dict[Category, str] = {
    Category.HOLIDAY: "helligdage",
    Category.OBSERVANCE: "maerkedage",
    Category.SPECIAL: "temadage",
    Category.BIRTHDAY: "foedselsdage",
    Category.VACATION: "ferier",
}


def official_holiday_dates(records: list[HolidayRecord]) -> set[date]:
    return {record.date for record in records if record.category == Category.HOLIDAY}


def count_workdays(days: list[date], holiday_dates: set[date]) -> int:
    return sum(
        1
        for day in days
        if not calendar_dk.is_weekend(day) and day not in holiday_dates
    )


def summarize_year(
    year: int,
    records: list[HolidayRecord] | None = None,
) -> list[dict[str, object]]:
    if records is None:
        records = compute_holidays(year)
    in_year = [record for record in records if record.date.year == year]
    holiday_dates = official_holiday_dates(in_year)

    rows: list[dict[str, object]] = []
    totals: Counter[str] = Counter()
    for month, month_name in enumerate(MONTH_NAMES_DA, start=1):
        days = calendar_dk.month_days(f"{year}-{month:02d}")
        month_records = [record for record in in_year if record.date.month == month]
        counts = Counter(record.category for record in month_records)
        row: dict[str, object] = {"maaned": month_name}
        for category, column in CATEGORY_COLUMNS.items():
            row[column] = counts.get(category, 0)
        row["helligdage_paa_hverdage"] = sum(
            1
            for day in holiday_dates
            if day.month == month and not calendar_dk.is_weekend(day)
        )
        row["arbejdsdage"] = count_workdays(days, holiday_dates)
        for key, value in row.items():
            if isinstance(value, int):
                totals[key] += value
        rows.append(row)

    total_row: dict[str, object] = {"maaned": "i alt"}
    for key in rows[0]:
        if key != "maaned":
            total_row[key] = totals[key]
    rows.append(total_row)
    return rows

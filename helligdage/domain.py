"""Domain models for Danish holidays and special days."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

MIN_YEAR = 1583
MAX_YEAR = 9999

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class InvalidYearError(ValueError):
    def __init__(self, year: Any) -> None:
        super().__init__(
            f"Ugyldigt aar: {year!r} (skal vaere et heltal mellem {MIN_YEAR} og {MAX_YEAR})"
        )
        self.year = year


class HolidayTableError(ValueError):
    """Raised when the assembled holiday list is internally inconsistent."""


class Category(str, Enum):
    HOLIDAY = "holiday"
    SPECIAL = "special"
    OBSERVANCE = "observance"
    BIRTHDAY = "birthday"
    VACATION = "vacation"


def normalize_category(value: Any) -> Category:
    if isinstance(value, Category):
        return value
    if value is None:
        raise ValueError("Kategori er paakraevet")
    text = str(value).strip().casefold()
    mapping = {
        "helligdag": Category.HOLIDAY,
        "church": Category.OBSERVANCE,
        "kirke": Category.OBSERVANCE,
        "mærkedag": Category.OBSERVANCE,
        "maerkedag": Category.OBSERVANCE,
        "temadag": Category.SPECIAL,
        "fødselsdag": Category.BIRTHDAY,
        "ferie": Category.VACATION,
    }
    if text in mapping:
        return mapping[text]
    for category in Category:
        if text == category.value:
            return category
    raise ValueError(f"Ugyldig kategori: {value!r}")


DEFAULT_CATEGORY_COLORS: dict[Category, str] = {
    Category.HOLIDAY: "#dc2626",
    Category.SPECIAL: "#f59e0b",
    Category.OBSERVANCE: "#7c3aed",
    Category.BIRTHDAY: "#3b82f6",
    Category.VACATION: "#0ea5e9",
}


def _parse_color(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if not _HEX_COLOR.match(text):
        raise ValueError(f"Ugyldig farve (#rrggbb): {value!r}")
    return text.lower()


def validate_year(year: Any) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(year)
    return year


class HolidayRecord(BaseModel):
    id: str
    key: str
    title: str
    date: date
    category: Category
    color: str
    theme: str | None = None

    model_config = {"frozen": True}

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Category:
        return normalize_category(value)

    @field_validator("color", mode="before")
    @classmethod
    def _validate_color(cls, value: Any) -> str:
        color = _parse_color(value)
        if color is None:
            raise ValueError("Farve er paakraevet")
        return color


class FixedDay(BaseModel):
    """A holiday on the same month/day every year."""

    key: str
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    title: str
    category: Category
    color: str | None = None
    theme: str | None = None

    model_config = {"frozen": True}

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Category:
        return normalize_category(value)

    @field_validator("color", mode="before")
    @classmethod
    def _validate_color(cls, value: Any) -> str | None:
        return _parse_color(value)

    @model_validator(mode="after")
    def _validate_month_day(self) -> "FixedDay":
        # 2001 is not a leap year, so Feb 29 is rejected along with Feb 30.
        try:
            date(2001, self.month, self.day)
        except ValueError as exc:
            raise ValueError(
                f"{self.key}: {self.day}/{self.month} findes ikke i alle aar"
            ) from exc
        return self

    def on(self, year: int) -> date:
        return date(year, self.month, self.day)


class Settings(BaseModel):
    include_observances: bool = True
    include_specials: bool = True
    include_birthdays: bool = True
    include_vacations: bool = True
    include_previous_new_years_eve: bool = False
    # Overrides every entry color of the given category.
    category_colors: dict[Category, str] = Field(default_factory=dict)

    @field_validator("category_colors", mode="before")
    @classmethod
    def _parse_colors(cls, value: Any) -> dict[Category, str]:
        colors: dict[Category, str] = {}
        for raw_category, raw_color in dict(value or {}).items():
            color = _parse_color(raw_color)
            if color is None:
                raise ValueError(f"Farve mangler for kategori {raw_category!r}")
            colors[normalize_category(raw_category)] = color
        return colors

    def includes(self, category: Category) -> bool:
        if category == Category.OBSERVANCE:
            return self.include_observances
        if category == Category.SPECIAL:
            return self.include_specials
        if category == Category.BIRTHDAY:
            return self.include_birthdays
        if category == Category.VACATION:
            return self.include_vacations
        return True

    def color_for(self, category: Category, entry_color: str | None = None) -> str:
        if category in self.category_colors:
            return self.category_colors[category]
        return entry_color or DEFAULT_CATEGORY_COLORS[category]

    @classmethod
    def official_only(cls) -> "Settings":
        return cls(
            include_observances=False,
            include_specials=False,
            include_birthdays=False,
            include_vacations=False,
        )

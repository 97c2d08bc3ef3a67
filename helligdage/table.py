"""Static holiday tables."""

from __future__ import annotations

import calendar
from dataclasses import dataclass

from helligdage.domain import Category, FixedDay

HOLIDAY_RED = "#dc2626"
EASTER_BLUE = "#3b82f6"
ROYAL_BLUE = "#3b82f6"
CHURCH_PURPLE = "#7c3aed"
SPECIAL_AMBER = "#f59e0b"
WOMEN_PINK = "#ec4899"


def _fixed(
    key: str,
    month: int,
    day: int,
    title: str,
    category: Category,
    color: str,
    theme: str | None = None,
) -> FixedDay:
    return FixedDay(
        key=key,
        month=month,
        day=day,
        title=title,
        category=category,
        color=color,
        theme=theme,
    )


FIXED_DAYS: tuple[FixedDay, ...] = (
    _fixed("nytaarsdag", 1, 1, "Nytårsdag", Category.HOLIDAY, HOLIDAY_RED),
    _fixed("dronning-mary", 2, 5, "Dronning Marys fødselsdag", Category.BIRTHDAY, ROYAL_BLUE),
    _fixed("pizzadag", 2, 9, "International Pizzadag", Category.SPECIAL, SPECIAL_AMBER, "pizzadag"),
    _fixed("valentinsdag", 2, 14, "Valentinsdag", Category.SPECIAL, SPECIAL_AMBER, "valentinsdag"),
    _fixed(
        "kvindernes-kampdag", 3, 8, "Kvindernes Internationale Kampdag",
        Category.OBSERVANCE, WOMEN_PINK,
    ),
    _fixed(
        "dronning-margrethe", 4, 16, "Dronning Margrethe II's fødselsdag",
        Category.BIRTHDAY, ROYAL_BLUE,
    ),
    _fixed(
        "arbejdernes-kampdag", 5, 1, "Arbejdernes Internationale Kampdag",
        Category.OBSERVANCE, SPECIAL_AMBER, "kampdag",
    ),
    _fixed("star-wars-dag", 5, 4, "Star Wars dag (May the 4th)", Category.SPECIAL, SPECIAL_AMBER, "star-wars"),
    _fixed(
        "befrielsesdag", 5, 5, "Danmarks Befrielsesdag",
        Category.OBSERVANCE, SPECIAL_AMBER, "befrielsesdag",
    ),
    _fixed("kong-frederik", 5, 26, "Kong Frederik X's fødselsdag", Category.BIRTHDAY, ROYAL_BLUE),
    _fixed("grundlovsdag", 6, 5, "Grundlovsdag", Category.HOLIDAY, HOLIDAY_RED, "grundlovsdag"),
    _fixed("fars-dag", 6, 5, "Fars dag", Category.OBSERVANCE, SPECIAL_AMBER, "fars-dag"),
    _fixed("valdemarsdag", 6, 15, "Valdemarsdag", Category.OBSERVANCE, SPECIAL_AMBER, "valdemarsdag"),
    _fixed("sommersolhverv", 6, 21, "Sommersolhverv", Category.OBSERVANCE, SPECIAL_AMBER),
    _fixed("yogadag", 6, 21, "International Yogadag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed("sankt-hans", 6, 23, "Sankt Hans aften", Category.OBSERVANCE, SPECIAL_AMBER, "sankt-hans"),
    _fixed("emojidag", 7, 17, "International Emojidag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed("oeldag", 8, 1, "International Øldag", Category.SPECIAL, SPECIAL_AMBER, "oeldag"),
    _fixed("kattedag", 8, 8, "International Kattedag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed("slapdag", 8, 15, "International Slapdag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed("hundedag", 8, 26, "International Hundedag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed(
        "udsendte", 9, 5, "Danmarks Udsendte",
        Category.OBSERVANCE, SPECIAL_AMBER, "de-udsendte",
    ),
    _fixed(
        "piratdag", 9, 19, "International Talk Like a Pirate Day",
        Category.SPECIAL, SPECIAL_AMBER, "piratdag",
    ),
    _fixed("kaffedag", 10, 1, "International Kaffedag", Category.SPECIAL, SPECIAL_AMBER, "kaffedag"),
    _fixed("kronprins-christian", 10, 15, "Kronprins Christians fødselsdag", Category.BIRTHDAY, ROYAL_BLUE),
    _fixed("madspildsdag", 10, 16, "Internationale Madspildsdag", Category.SPECIAL, SPECIAL_AMBER),
    _fixed(
        "chokoladedag", 10, 28, "International Chokoladedag",
        Category.SPECIAL, SPECIAL_AMBER, "chokoladedag",
    ),
    _fixed("halloween", 10, 31, "Halloween", Category.SPECIAL, SPECIAL_AMBER, "halloween"),
    _fixed("allehelgensdag", 11, 1, "Allehelgensdag", Category.OBSERVANCE, CHURCH_PURPLE, "allehelgen"),
    _fixed("mortens-aften", 11, 10, "Mortens aften", Category.OBSERVANCE, SPECIAL_AMBER, "mortens-aften"),
    _fixed("mortensdag", 11, 11, "Mortensdag", Category.OBSERVANCE, SPECIAL_AMBER),
    _fixed("vintersolhverv", 12, 21, "Vintersolhverv", Category.OBSERVANCE, SPECIAL_AMBER),
    _fixed("juleferie", 12, 23, "Juleferie", Category.VACATION, "#ef4444"),
    _fixed("juleaften", 12, 24, "Juleaften", Category.HOLIDAY, HOLIDAY_RED, "jul"),
    _fixed("juledag", 12, 25, "1. juledag", Category.HOLIDAY, HOLIDAY_RED, "jul"),
    _fixed("anden-juledag", 12, 26, "2. juledag", Category.HOLIDAY, HOLIDAY_RED, "jul"),
    _fixed("nytaarsaften", 12, 31, "Nytårsaften", Category.HOLIDAY, HOLIDAY_RED, "nytaar"),
)


@dataclass(frozen=True)
class EasterOffset:
    key: str
    days: int
    title: str
    category: Category
    color: str
    theme: str | None = None


EASTER_OFFSETS: tuple[EasterOffset, ...] = (
    EasterOffset("fastelavn", -49, "Fastelavn", Category.OBSERVANCE, SPECIAL_AMBER, "fastelavn"),
    EasterOffset("pandekagedag", -47, "Pandekagedag", Category.SPECIAL, SPECIAL_AMBER, "pandekagedag"),
    EasterOffset("palmesoendag", -7, "Palmesøndag", Category.OBSERVANCE, EASTER_BLUE, "palmesoendag"),
    EasterOffset("skaertorsdag", -3, "Skærtorsdag", Category.HOLIDAY, EASTER_BLUE, "paaske"),
    EasterOffset("langfredag", -2, "Langfredag", Category.HOLIDAY, EASTER_BLUE, "paaske"),
    EasterOffset("paaskedag", 0, "Påskedag", Category.HOLIDAY, EASTER_BLUE, "paaske"),
    EasterOffset("anden-paaskedag", 1, "2. påskedag", Category.HOLIDAY, EASTER_BLUE, "paaske"),
    EasterOffset("store-bededag", 26, "Store bededag", Category.HOLIDAY, HOLIDAY_RED, "store-bededag"),
    EasterOffset(
        "kristi-himmelfartsdag", 39, "Kristi himmelfartsdag",
        Category.HOLIDAY, HOLIDAY_RED, "kristi-himmelfart",
    ),
    EasterOffset("pinsedag", 49, "Pinsedag", Category.HOLIDAY, HOLIDAY_RED, "pinse"),
    EasterOffset("anden-pinsedag", 50, "2. pinsedag", Category.HOLIDAY, HOLIDAY_RED, "pinse"),
)

# Store bededag was abolished as a public holiday from 2024 on.
STORE_BEDEDAG_LAST_OFFICIAL_YEAR = 2023


@dataclass(frozen=True)
class WeekdayRule:
    """``n`` is the 1-indexed occurrence in the month; ``None`` means the last one."""

    key: str
    month: int
    weekday: int
    n: int | None
    title: str
    category: Category
    color: str
    theme: str | None = None


WEEKDAY_RULES: tuple[WeekdayRule, ...] = (
    WeekdayRule(
        "sommertid", 3, calendar.SUNDAY, None, "Sommertid starter",
        Category.OBSERVANCE, SPECIAL_AMBER, "tidsskift",
    ),
    WeekdayRule("mors-dag", 5, calendar.SUNDAY, 2, "Mors dag", Category.OBSERVANCE, SPECIAL_AMBER, "mors-dag"),
    WeekdayRule("sommerferie", 6, calendar.SATURDAY, None, "Sommerferie", Category.VACATION, "#eab308"),
    WeekdayRule(
        "vintertid", 10, calendar.SUNDAY, None, "Vintertid starter",
        Category.OBSERVANCE, SPECIAL_AMBER, "tidsskift",
    ),
    WeekdayRule("j-dag", 11, calendar.FRIDAY, 1, "J-dag", Category.SPECIAL, SPECIAL_AMBER, "j-dag"),
)


@dataclass(frozen=True)
class IsoWeekRule:
    key: str
    week: int
    title: str
    category: Category
    color: str


SCHOOL_VACATION_WEEKS: tuple[IsoWeekRule, ...] = (
    IsoWeekRule("vinterferie", 7, "Vinterferie", Category.VACATION, "#60a5fa"),
    IsoWeekRule("efteraarsferie", 42, "Efterårsferie", Category.VACATION, "#f97316"),
)

ADVENT_TITLES: tuple[str, ...] = (
    "1. søndag i advent",
    "2. søndag i advent",
    "3. søndag i advent",
    "4. søndag i advent",
)


def all_keys() -> list[str]:
    keys = [entry.key for entry in FIXED_DAYS]
    keys.extend(offset.key for offset in EASTER_OFFSETS)
    keys.extend(rule.key for rule in WEEKDAY_RULES)
    keys.extend(rule.key for rule in SCHOOL_VACATION_WEEKS)
    keys.extend(f"advent-{index}" for index in range(1, len(ADVENT_TITLES) + 1))
    keys.append("nytaar")
    return keys

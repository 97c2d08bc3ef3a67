import calendar
import unittest
from datetime import date

from helligdage import calendar_dk


class EasterTests(unittest.TestCase):
    def test_reference_dates(self) -> None:
        self.assertEqual(calendar_dk.easter_sunday(2024), date(2024, 3, 31))
        self.assertEqual(calendar_dk.easter_sunday(2025), date(2025, 4, 20))
        self.assertEqual(calendar_dk.easter_sunday(2026), date(2026, 4, 5))
        self.assertEqual(calendar_dk.easter_sunday(2019), date(2019, 4, 21))

    def test_century_boundaries(self) -> None:
        self.assertEqual(calendar_dk.easter_sunday(2000), date(2000, 4, 23))  # leap century
        self.assertEqual(calendar_dk.easter_sunday(2100), date(2100, 3, 28))  # non-leap century

    def test_earliest_and_latest_possible(self) -> None:
        self.assertEqual(calendar_dk.easter_sunday(2285), date(2285, 3, 22))
        self.assertEqual(calendar_dk.easter_sunday(2038), date(2038, 4, 25))

    def test_always_a_sunday(self) -> None:
        for year in range(1583, 3000, 7):
            self.assertEqual(calendar_dk.easter_sunday(year).weekday(), calendar.SUNDAY, year)


class WeekdayResolverTests(unittest.TestCase):
    def test_daylight_saving_sundays(self) -> None:
        self.assertEqual(
            calendar_dk.last_weekday_of_month(2024, 3, calendar.SUNDAY), date(2024, 3, 31)
        )
        self.assertEqual(
            calendar_dk.last_weekday_of_month(2024, 10, calendar.SUNDAY), date(2024, 10, 27)
        )

    def test_last_weekday_in_december(self) -> None:
        self.assertEqual(
            calendar_dk.last_weekday_of_month(2025, 12, calendar.WEDNESDAY), date(2025, 12, 31)
        )

    def test_second_sunday_of_may(self) -> None:
        self.assertEqual(
            calendar_dk.nth_weekday_of_month(2024, 5, calendar.SUNDAY, 2), date(2024, 5, 12)
        )
        self.assertEqual(
            calendar_dk.nth_weekday_of_month(2025, 5, calendar.SUNDAY, 2), date(2025, 5, 11)
        )

    def test_first_weekday_on_the_first(self) -> None:
        self.assertEqual(
            calendar_dk.first_weekday_of_month(2024, 11, calendar.FRIDAY), date(2024, 11, 1)
        )

    def test_fifth_occurrence_when_it_exists(self) -> None:
        self.assertEqual(
            calendar_dk.nth_weekday_of_month(2024, 3, calendar.SUNDAY, 5), date(2024, 3, 31)
        )

    def test_missing_occurrence(self) -> None:
        with self.assertRaises(calendar_dk.OutOfRangeError):
            calendar_dk.nth_weekday_of_month(2024, 2, calendar.SUNDAY, 5)
        with self.assertRaises(calendar_dk.OutOfRangeError):
            calendar_dk.nth_weekday_of_month(2024, 3, calendar.MONDAY, 6)
        with self.assertRaises(calendar_dk.OutOfRangeError):
            calendar_dk.nth_weekday_of_month(2024, 3, calendar.MONDAY, 0)

    def test_out_of_range_is_value_error(self) -> None:
        self.assertTrue(issubclass(calendar_dk.OutOfRangeError, ValueError))

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            calendar_dk.last_weekday_of_month(2024, 13, calendar.SUNDAY)
        with self.assertRaises(ValueError):
            calendar_dk.first_weekday_of_month(2024, 1, 7)

    def test_weekday_on_or_before(self) -> None:
        self.assertEqual(
            calendar_dk.weekday_on_or_before(date(2024, 12, 24), calendar.SUNDAY),
            date(2024, 12, 22),
        )
        self.assertEqual(
            calendar_dk.weekday_on_or_before(date(2023, 12, 24), calendar.SUNDAY),
            date(2023, 12, 24),
        )

    def test_iso_week_monday(self) -> None:
        self.assertEqual(calendar_dk.iso_week_monday(2025, 7), date(2025, 2, 10))
        self.assertEqual(calendar_dk.iso_week_monday(2025, 42), date(2025, 10, 13))


class CalendarHelpersTests(unittest.TestCase):
    def test_month_days_length(self) -> None:
        days = calendar_dk.month_days("2026-02")
        self.assertEqual(len(days), 28)
        self.assertEqual(days[0], date(2026, 2, 1))
        self.assertEqual(days[-1], date(2026, 2, 28))

    def test_month_days_leap_february(self) -> None:
        self.assertEqual(len(calendar_dk.month_days("2024-02")), 29)

    def test_month_days_december(self) -> None:
        days = calendar_dk.month_days("2025-12")
        self.assertEqual(days[-1], date(2025, 12, 31))

    def test_weekend(self) -> None:
        self.assertTrue(calendar_dk.is_weekend(date(2026, 1, 3)))  # Saturday
        self.assertFalse(calendar_dk.is_weekend(date(2026, 1, 5)))  # Monday


if __name__ == "__main__":
    unittest.main()

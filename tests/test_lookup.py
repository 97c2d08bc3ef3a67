import unittest
from datetime import date

from helligdage import lookup
from helligdage.domain import Settings


class YearHolidayCacheTests(unittest.TestCase):
    def test_memoizes_per_year(self) -> None:
        cache = lookup.YearHolidayCache()
        self.assertEqual(len(cache), 0)
        first = cache.get(2025)
        self.assertIs(cache.get(2025), first)
        cache.get(2026)
        self.assertEqual(len(cache), 2)
        cache.clear()
        self.assertEqual(len(cache), 0)

    def test_uses_its_settings(self) -> None:
        cache = lookup.YearHolidayCache(Settings.official_only())
        self.assertEqual(len(cache.get(2025)), 13)


class LookupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.cache = lookup.YearHolidayCache()

    def test_holidays_on_shared_day(self) -> None:
        titles = [r.title for r in lookup.holidays_on(date(2024, 6, 5), self.cache)]
        self.assertEqual(titles, ["Grundlovsdag", "Fars dag"])

    def test_holidays_on_plain_day(self) -> None:
        self.assertEqual(lookup.holidays_on(date(2024, 6, 4), self.cache), [])

    def test_show_holidays_toggle(self) -> None:
        self.assertEqual(
            lookup.holidays_on(date(2024, 12, 24), self.cache, show_holidays=False), []
        )
        self.assertEqual(
            lookup.holidays_in_month(2024, 12, self.cache, show_holidays=False), []
        )

    def test_holidays_in_month(self) -> None:
        keys = [r.key for r in lookup.holidays_in_month(2024, 3, self.cache)]
        self.assertIn("sommertid", keys)
        self.assertIn("paaskedag", keys)
        self.assertNotIn("anden-paaskedag", keys)  # 1 April 2024

    def test_holidays_in_month_invalid(self) -> None:
        with self.assertRaises(ValueError):
            lookup.holidays_in_month(2024, 0, self.cache)

    def test_is_holiday(self) -> None:
        self.assertTrue(lookup.is_holiday(date(2025, 4, 18), self.cache))  # Langfredag
        self.assertFalse(lookup.is_holiday(date(2025, 2, 14), self.cache))  # Valentinsdag

    def test_is_bank_closed(self) -> None:
        self.assertTrue(lookup.is_bank_closed(date(2025, 12, 24), self.cache))  # Wednesday
        self.assertTrue(lookup.is_bank_closed(date(2025, 6, 7), self.cache))  # Saturday
        self.assertFalse(lookup.is_bank_closed(date(2025, 6, 4), self.cache))  # Wednesday

    def test_default_cache(self) -> None:
        self.assertTrue(lookup.is_holiday(date(2026, 1, 1)))


if __name__ == "__main__":
    unittest.main()

import unittest
from datetime import date

from helligdage import report
from helligdage.domain import Category, Settings
from helligdage.engine import compute_holidays


class SummarizeYearTests(unittest.TestCase):
    def test_month_rows_and_total(self) -> None:
        rows = report.summarize_year(2025)
        self.assertEqual(len(rows), 13)
        self.assertEqual(rows[0]["maaned"], "januar")
        self.assertEqual(rows[-1]["maaned"], "i alt")

    def test_totals_2025(self) -> None:
        total = report.summarize_year(2025)[-1]
        self.assertEqual(total["helligdage"], 13)
        self.assertEqual(total["helligdage_paa_hverdage"], 11)
        self.assertEqual(total["arbejdsdage"], 250)

    def test_total_matches_records(self) -> None:
        records = compute_holidays(2025)
        total = report.summarize_year(2025, records)[-1]
        self.assertEqual(
            total["temadage"],
            sum(1 for record in records if record.category == Category.SPECIAL),
        )

    def test_carryover_not_counted(self) -> None:
        records = compute_holidays(2025, Settings(include_previous_new_years_eve=True))
        total = report.summarize_year(2025, records)[-1]
        self.assertEqual(total["helligdage"], 13)


class CountWorkdaysTests(unittest.TestCase):
    def test_skips_weekends_and_holidays(self) -> None:
        days = [date(2025, 12, day) for day in range(22, 29)]
        holiday_dates = {date(2025, 12, 24), date(2025, 12, 25), date(2025, 12, 26)}
        self.assertEqual(report.count_workdays(days, holiday_dates), 2)


if __name__ == "__main__":
    unittest.main()

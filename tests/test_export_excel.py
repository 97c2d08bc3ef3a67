import tempfile
import unittest
from datetime import date
from pathlib import Path

from openpyxl import load_workbook

from helligdage.engine import compute_holidays
from helligdage.export_excel import export_holidays_excel, holiday_rows
from helligdage.report import summarize_year


class ExportHolidaysExcelTests(unittest.TestCase):
    def test_holiday_rows(self) -> None:
        records = [r for r in compute_holidays(2025) if r.key == "grundlovsdag"]
        row = holiday_rows(records)[0]
        self.assertEqual(row["dato"], date(2025, 6, 5))
        self.assertEqual(row["ugedag"], "torsdag")
        self.assertEqual(row["kategori"], "holiday")
        self.assertEqual(row["id"], "grundlovsdag-2025")

    def test_workbook_sheets(self) -> None:
        records = compute_holidays(2025)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "helligdage.xlsx"
            export_holidays_excel(path, 2025, records, summarize_year(2025, records))
            workbook = load_workbook(path)
            self.assertEqual(workbook.sheetnames, ["helligdage", "oversigt"])
            sheet = workbook["helligdage"]
            header = [cell.value for cell in sheet[1]]
            self.assertEqual(header, ["dato", "ugedag", "titel", "kategori", "farve", "id"])
            self.assertEqual(sheet.max_row, len(records) + 1)
            self.assertEqual(sheet.freeze_panes, "A2")
            workbook.close()


if __name__ == "__main__":
    unittest.main()

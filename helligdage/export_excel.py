"""Excel export helpers."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from helligdage.domain import HolidayRecord
from helligdage.logging_config import get_logger
from helligdage.report import WEEKDAY_NAMES_DA

logger = get_logger(__name__)

HOLIDAY_SHEET = "helligdage"
SUMMARY_SHEET = "oversigt"


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def holiday_rows(records: list[HolidayRecord]) -> list[dict[str, object]]:
    return [
        {
            "dato": record.date,
            "ugedag": WEEKDAY_NAMES_DA[record.date.weekday()],
            "titel": record.title,
            "kategori": record.category.value,
            "farve": record.color,
            "id": record.id,
        }
        for record in records
    ]


def export_holidays_excel(
    path: str | Path,
    year: int,
    records: list[HolidayRecord],
    summary: list[dict[str, object]],
) -> None:
    output_path = Path(path)
    holidays_df = pd.DataFrame(
        holiday_rows(records),
        columns=["dato", "ugedag", "titel", "kategori", "farve", "id"],
    )
    summary_df = pd.DataFrame(summary)

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        holidays_df.to_excel(writer, sheet_name=HOLIDAY_SHEET, index=False)
        summary_df.to_excel(writer, sheet_name=SUMMARY_SHEET, index=False)

        for sheet_name in (HOLIDAY_SHEET, SUMMARY_SHEET):
            worksheet = writer.sheets[sheet_name]
            _apply_sheet_formatting(worksheet)

    logger.info("Wrote %d holidays for %d to %s", len(records), year, output_path)

"""CLI for listing and exporting Danish holidays."""

from __future__ import annotations

import argparse

import pandas as pd

from helligdage.domain import InvalidYearError, Settings
from helligdage.engine import compute_holidays
from helligdage.export_excel import export_holidays_excel, holiday_rows
from helligdage.logging_config import get_logger, setup_logging
from helligdage.report import summarize_year

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Danske helligdage og mærkedage")
    parser.add_argument("--year", required=True, help="Year, e.g. 2025")
    parser.add_argument("--out", help="Path to output Excel file")
    parser.add_argument(
        "--print-holidays",
        action="store_true",
        help="Print the holidays of the year",
    )
    parser.add_argument(
        "--print-summary",
        action="store_true",
        help="Print the per-month summary",
    )
    parser.add_argument(
        "--only-official",
        action="store_true",
        help="Only include official holidays",
    )
    parser.add_argument(
        "--include-previous-new-years-eve",
        action="store_true",
        help="Add the previous year's New Year's Eve as 'Nytår'",
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.official_only() if args.only_official else Settings()
    if args.include_previous_new_years_eve:
        settings = settings.model_copy(update={"include_previous_new_years_eve": True})
    return settings


def _parse_year(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidYearError(text) from exc


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)
    settings = _build_settings(args)
    try:
        year = _parse_year(args.year)
        records = compute_holidays(year, settings)
    except InvalidYearError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    logger.info("Computed %d holidays for %d", len(records), year)
    if args.print_holidays:
        print(_render_table(holiday_rows(records)))
    summary = summarize_year(year, records)
    if args.print_summary:
        print(_render_table(summary))
    if args.out:
        export_holidays_excel(args.out, year, records, summary)
        print(f"OK: {args.out}")


if __name__ == "__main__":
    main()

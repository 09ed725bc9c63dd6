import argparse
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from src.adapters.clock import SystemClock
from src.adapters.rules_port import RulesPortAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteInspectionNumberRepo
from src.components.fiscal_calendar import (
    FiscalLookupInput,
    WeekRangeInput,
    YearMonthInput,
    run_lookup,
    run_week_range,
    run_year_month,
)
from src.components.inspection_numbering import GenerateNumberInput, run_generate
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

DB_PATH = "qc.db"
MIGRATIONS_PATH = "migrations"
RULES_PATH = "rules.yaml"


def get_rules_port(rules_path: Path) -> RulesPortAdapter:
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)

    return RulesPortAdapter(load_rules(rules_path))


def _fail(errors: list[Any]) -> NoReturn:
    for error in errors:
        logger.error(f"{error.code}: {error.message}")
    sys.exit(1)


def handle_week(rules: RulesPortAdapter, args: argparse.Namespace) -> None:
    result = run_lookup(
        FiscalLookupInput(date=args.date, week_start_day=args.start_day), rules=rules
    )
    if not result.success or result.fiscal_week is None:
        _fail(result.errors)

    print(f"Fiscal week: {result.label} (code {result.fiscal_week.code})")
    if result.week_range:
        print(f"Week span:   {result.week_range.start} to {result.week_range.end}")


def handle_range(rules: RulesPortAdapter, args: argparse.Namespace) -> None:
    result = run_week_range(
        WeekRangeInput(fiscal_year=args.fy, week=args.week, week_start_day=args.start_day),
        rules=rules,
    )
    if not result.success or result.week_range is None:
        _fail(result.errors)

    print(f"FY{args.fy} week {args.week:02d}: {result.week_range.start} to {result.week_range.end}")


def handle_yearmonth(rules: RulesPortAdapter, args: argparse.Namespace) -> None:
    result = run_year_month(YearMonthInput(code=args.code), rules=rules)
    if not result.success:
        _fail(result.errors)

    print(f"{result.yearmonth} ({result.month_label})")


def handle_next_number(rules: RulesPortAdapter, args: argparse.Namespace) -> None:
    SQLiteMigrator(args.db, MIGRATIONS_PATH).run_migrations()
    repo = SQLiteInspectionNumberRepo(args.db)

    result = run_generate(
        GenerateNumberInput(
            station=args.station, date=args.date, week=args.ww, reserve=not args.dry_run
        ),
        repo=repo,
        clock=SystemClock(),
        rules=rules,
    )
    if not result.success:
        _fail(result.errors)

    print(result.inspection_no)


def main() -> None:
    parser = argparse.ArgumentParser(description="QC Fiscal Calendar CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # week
    week_parser = subparsers.add_parser("week", help="Fiscal week for a date")
    week_parser.add_argument("date", help="ISO date, e.g. 2025-01-15")
    week_parser.add_argument("--start-day", type=int, help="0=Sunday ... 6=Saturday")

    # range
    range_parser = subparsers.add_parser("range", help="Calendar span of a fiscal week")
    range_parser.add_argument("fy", type=int, help="Fiscal year, e.g. 2025")
    range_parser.add_argument("week", type=int, help="Work week 1-52")
    range_parser.add_argument("--start-day", type=int, help="0=Sunday ... 6=Saturday")

    # yearmonth
    ym_parser = subparsers.add_parser("yearmonth", help="YYYYWW code to YYMM")
    ym_parser.add_argument("code", help="Fiscal year-week code, e.g. 202501")

    # next-number
    number_parser = subparsers.add_parser("next-number", help="Issue the next inspection number")
    number_parser.add_argument("station", help="Station code, e.g. OQA")
    number_parser.add_argument("--date", help="Inspection date (defaults to today)")
    number_parser.add_argument("--ww", help="Work week override")
    number_parser.add_argument("--db", default=DB_PATH, help="SQLite database path")
    number_parser.add_argument(
        "--dry-run", action="store_true", help="Show the number without recording it"
    )

    args = parser.parse_args()

    rules = get_rules_port(Path(args.rules))

    if args.command == "week":
        handle_week(rules, args)
    elif args.command == "range":
        handle_range(rules, args)
    elif args.command == "yearmonth":
        handle_yearmonth(rules, args)
    elif args.command == "next-number":
        handle_next_number(rules, args)


if __name__ == "__main__":
    main()

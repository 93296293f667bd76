"""CLI interface for crop yield cleaning and exploratory analysis."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url

from ...application.services.crop_yield_cleaning_service import CropYieldCleaningService
from ...application.services.crop_yield_eda_service import CropYieldEdaService
from ...infrastructure.repositories.sql_crop_yield_repository import SqlCropYieldRepository
from ...config.settings import (
    CLEANED_DATA_FILE,
    CLEANED_TABLE,
    DATABASE_URL,
    EDA_SETTINGS,
    EXPORT_DIR,
    EXTREME_YIELD_THRESHOLD,
    NUMERICAL_VARIABLES,
    PLOT_DIR,
    PLOT_SETTINGS,
    QUERY_SETTINGS,
    RAW_DATA_FILE,
    RAW_TABLE,
)

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def sqlite_parent_dir(db_url: str) -> Optional[Path]:
    """Create the directory holding a SQLite database file; None for other URLs."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return None
    parent = Path(url.database).parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crop yield data cleaning and EDA")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === clean: raw CSV -> raw table -> cleaned table -> exports ===
    clean_parser = subparsers.add_parser(
        "clean",
        help="Load raw data, flag and trim it, run validation queries and export CSVs",
    )
    clean_parser.add_argument(
        "--raw-csv",
        type=str,
        default=str(RAW_DATA_FILE),
        help="Raw dataset CSV (use --no-ingest to keep the current raw table)",
    )
    clean_parser.add_argument(
        "--no-ingest", action="store_true", help="Skip loading the raw CSV into the database"
    )
    clean_parser.add_argument(
        "--db-url", type=str, default=DATABASE_URL, help="SQLAlchemy database URL"
    )
    clean_parser.add_argument(
        "--export-dir", type=str, default=str(EXPORT_DIR), help="Directory for exported CSVs"
    )

    # === analyze: cleaned CSV -> statistics, charts, summary CSVs ===
    analyze_parser = subparsers.add_parser("analyze", help="Run exploratory analysis on the cleaned CSV")
    analyze_parser.add_argument(
        "--cleaned-csv", type=str, default=str(CLEANED_DATA_FILE), help="Cleaned dataset CSV"
    )
    analyze_parser.add_argument(
        "--plot-dir", type=str, default=str(PLOT_DIR), help="Directory for charts and summaries"
    )
    return parser


def run_clean(args: argparse.Namespace) -> None:
    sqlite_parent_dir(args.db_url)
    repository = SqlCropYieldRepository(
        db_url=args.db_url, raw_table=RAW_TABLE, cleaned_table=CLEANED_TABLE
    )
    service = CropYieldCleaningService(
        repository,
        extreme_threshold=EXTREME_YIELD_THRESHOLD,
        query_settings=QUERY_SETTINGS,
        iqr_multiplier=EDA_SETTINGS["iqr_multiplier"],
    )
    result = service.run(None if args.no_ingest else args.raw_csv, args.export_dir)

    print("\n" + "=" * 60)
    print(" CLEANING COMPLETED ")
    print("=" * 60)
    flag_summary = result["validation"]["flag_summary"]
    for _, row in flag_summary.iterrows():
        print(f" {row['data_quality_flag']:<15} {row['record_count']:>8} ({row['percentage']}%)")
    print(f" Clean export:   {result['exports']['clean']}")
    print(f" Flagged export: {result['exports']['flagged']}")
    print("=" * 60)


def run_analyze(args: argparse.Namespace) -> None:
    service = CropYieldEdaService(
        output_dir=args.plot_dir,
        numerical_variables=NUMERICAL_VARIABLES,
        eda_settings=EDA_SETTINGS,
        plot_settings=PLOT_SETTINGS,
    )
    result = service.run(args.cleaned_csv)

    print("\n" + "=" * 60)
    print(" EDA COMPLETED ")
    print("=" * 60)
    print(f" Records analyzed: {result['summary']['dataset_info']['total_records']}")
    print(f" Charts written:   {len(result['charts'])}")
    print(f" Output directory: {args.plot_dir}")
    print("=" * 60)


def main(argv=None):
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        if args.command == "clean":
            run_clean(args)
        elif args.command == "analyze":
            run_analyze(args)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

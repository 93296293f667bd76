"""Service orchestrating the crop yield cleaning pipeline."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ...domain.entities.crop_yield_record import CropYieldRecord
from ...domain.repositories.crop_yield_repository import CropYieldRepository
from ...domain.use_cases.clean_crop_yield import CleanCropYieldUseCase
from ...domain.use_cases.collect_crop_yield_data import CollectCropYieldDataUseCase
from ...domain.use_cases.export_cleaned_data import ExportCleanedDataUseCase
from ...domain.use_cases.profile_raw_data import ProfileRawDataUseCase
from ...domain.use_cases.validate_cleaned_data import ValidateCleanedDataUseCase
from ...infrastructure.repositories.csv_crop_yield_repository import load_raw_csv

logger = logging.getLogger(__name__)

CLEAN_EXPORT_FILE = "crop_yield_cleaned.csv"
FLAGGED_EXPORT_FILE = "crop_yield_flagged.csv"


def _log_report(title: str, report: Dict[str, Any]) -> None:
    logger.info(f"=== {title} ===")
    for name, result in report.items():
        if isinstance(result, pd.DataFrame):
            logger.info(f"{name} ({len(result)} rows)\n{result.to_string(index=False)}")
        else:
            logger.info(f"{name}: {result}")


class CropYieldCleaningService:
    """Raw table -> trim/flag -> cleaned table -> validation -> exports."""

    def __init__(
        self,
        repository: CropYieldRepository,
        extreme_threshold: float = 1000.0,
        query_settings: Optional[Dict[str, Any]] = None,
        iqr_multiplier: float = 1.5,
    ):
        query_settings = query_settings or {}
        self.repository = repository

        self.collect_uc = CollectCropYieldDataUseCase(repository)
        self.clean_uc = CleanCropYieldUseCase(extreme_threshold=extreme_threshold)
        self.profile_uc = ProfileRawDataUseCase(
            extreme_threshold=extreme_threshold,
            zero_yield_limit=query_settings.get("zero_yield_limit", 20),
            iqr_multiplier=iqr_multiplier,
        )
        self.validate_uc = ValidateCleanedDataUseCase(
            top_crops_min_records=query_settings.get("top_crops_min_records", 10),
            top_crops_limit=query_settings.get("top_crops_limit", 15),
            top_states_limit=query_settings.get("top_states_limit", 15),
        )
        self.export_uc = ExportCleanedDataUseCase()

    def ingest_raw(self, csv_path: str) -> int:
        """Load a raw CSV into the raw table, replacing its contents."""
        records = load_raw_csv(csv_path)
        self.repository.save_raw_data(records)
        return len(records)

    def profile_raw(self) -> Dict[str, Any]:
        report = self.profile_uc.execute(self.collect_uc.execute())
        _log_report("RAW DATA QUALITY", report)
        return report

    def clean(self) -> List[CropYieldRecord]:
        """Rebuild the cleaned table from the raw table."""
        raw = self.collect_uc.execute()
        cleaned = self.clean_uc.execute(raw)
        if len(cleaned) != len(raw):
            raise RuntimeError(
                f"Row count changed during cleaning: {len(raw)} raw vs {len(cleaned)} cleaned"
            )
        self.repository.replace_cleaned_data(cleaned)
        return cleaned

    def validate(self) -> Dict[str, Any]:
        report = self.validate_uc.execute(self.collect_uc.execute(cleaned=True))
        _log_report("POST-CLEANING VALIDATION", report)
        return report

    def export(self, export_dir: str) -> Dict[str, Path]:
        """Write the clean and flagged exports as CSV."""
        export_dir = Path(export_dir)
        export_dir.mkdir(parents=True, exist_ok=True)

        exports = self.export_uc.execute(self.collect_uc.execute(cleaned=True))
        paths = {
            "clean": export_dir / CLEAN_EXPORT_FILE,
            "flagged": export_dir / FLAGGED_EXPORT_FILE,
        }
        for key, path in paths.items():
            exports[key].to_csv(path, index=False)
            logger.info(f"Exported {len(exports[key])} {key} records to {path}")
        return paths

    def run(self, raw_csv: Optional[str], export_dir: str) -> Dict[str, Any]:
        """
        Run the full cleaning pipeline.

        Args:
            raw_csv: Raw CSV to ingest first; None keeps the current raw table
            export_dir: Directory for the clean / flagged CSV exports

        Returns:
            Dict with the raw profile, validation report and export paths
        """
        logger.info("=== Starting crop yield cleaning pipeline ===")
        if raw_csv is not None:
            self.ingest_raw(raw_csv)

        profile = self.profile_raw()
        cleaned = self.clean()
        validation = self.validate()
        paths = self.export(export_dir)

        logger.info(f"=== Cleaning pipeline completed: {len(cleaned)} records ===")
        return {"profile": profile, "validation": validation, "exports": paths}

"""Use case for building the clean and flagged export tables."""

import logging
from typing import Dict, List

import pandas as pd

from ..entities.crop_yield_record import CropYieldRecord, records_to_frame
from ..entities.data_quality_flag import DataQualityFlag

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "crop",
    "crop_year",
    "season",
    "state",
    "area",
    "production",
    "annual_rainfall",
    "fertilizer",
    "pesticide",
    "yield",
]
FLAGGED_COLUMNS = EXPORT_COLUMNS + ["data_quality_flag", "cleaning_notes"]


class ExportCleanedDataUseCase:
    """Use case to split the cleaned table into analysis and review exports."""

    def clean_export(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean rows only, for analysis."""
        clean = df.loc[df["data_quality_flag"] == DataQualityFlag.CLEAN.value, EXPORT_COLUMNS]
        return clean.sort_values(["crop_year", "state", "crop"], kind="mergesort").reset_index(
            drop=True
        )

    def flagged_export(self, df: pd.DataFrame) -> pd.DataFrame:
        """Everything not clean, for manual review."""
        flagged = df.loc[df["data_quality_flag"] != DataQualityFlag.CLEAN.value, FLAGGED_COLUMNS]
        return flagged.sort_values(
            ["data_quality_flag", "crop_year"], ascending=[True, False], kind="mergesort"
        ).reset_index(drop=True)

    def execute(self, data: List[CropYieldRecord]) -> Dict[str, pd.DataFrame]:
        """
        Build both exports.

        Args:
            data: List of classified CropYieldRecord entities

        Returns:
            Dict with "clean" and "flagged" DataFrames
        """
        df = records_to_frame(data)
        exports = {
            "clean": self.clean_export(df),
            "flagged": self.flagged_export(df),
        }
        logger.info(
            f"Prepared exports: {len(exports['clean'])} clean, {len(exports['flagged'])} flagged"
        )
        return exports

"""Use case for post-cleaning validation queries."""

import logging
from typing import Any, Dict, List

import pandas as pd

from ..entities.crop_yield_record import CropYieldRecord, records_to_frame
from ..entities.data_quality_flag import DataQualityFlag
from .aggregates import yield_summary

logger = logging.getLogger(__name__)

NATURAL_KEY = ["crop", "crop_year", "season", "state"]


class ValidateCleanedDataUseCase:
    """Summaries and consistency checks over the cleaned table."""

    def __init__(
        self,
        top_crops_min_records: int = 10,
        top_crops_limit: int = 15,
        top_states_limit: int = 15,
    ):
        self.top_crops_min_records = top_crops_min_records
        self.top_crops_limit = top_crops_limit
        self.top_states_limit = top_states_limit

    @staticmethod
    def _clean_rows(df: pd.DataFrame) -> pd.DataFrame:
        return df[df["data_quality_flag"] == DataQualityFlag.CLEAN.value]

    def flag_summary(self, df: pd.DataFrame) -> pd.DataFrame:
        if df.empty:
            return pd.DataFrame(columns=["data_quality_flag", "record_count", "percentage"])
        counts = df.groupby("data_quality_flag").size().reset_index(name="record_count")
        counts["percentage"] = (counts["record_count"] * 100.0 / len(df)).round(2)
        return counts.sort_values("record_count", ascending=False, kind="mergesort").reset_index(
            drop=True
        )

    def clean_statistics(self, df: pd.DataFrame) -> Dict[str, Any]:
        clean = self._clean_rows(df)
        result = {
            "clean_records": len(clean),
            "unique_crops": int(clean["crop"].nunique()),
            "unique_states": int(clean["state"].nunique()),
        }
        result.update(yield_summary(clean["yield"], ddof=0))
        return result

    def season_standardization(self, df: pd.DataFrame) -> pd.DataFrame:
        return (
            df.groupby("season", dropna=False)
            .size()
            .reset_index(name="frequency")
            .sort_values("season", na_position="first")
            .reset_index(drop=True)
        )

    def top_crops_by_yield(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["crop", "records", "avg_yield", "min_yield", "max_yield"]
        clean = self._clean_rows(df)
        if clean.empty:
            return pd.DataFrame(columns=columns)
        grouped = clean.groupby("crop").agg(
            records=("yield", "size"),
            avg_yield=("yield", "mean"),
            min_yield=("yield", "min"),
            max_yield=("yield", "max"),
        )
        grouped = grouped[grouped["records"] >= self.top_crops_min_records].copy()
        grouped[["avg_yield", "min_yield", "max_yield"]] = grouped[
            ["avg_yield", "min_yield", "max_yield"]
        ].round(2)
        grouped = grouped.sort_values("avg_yield", ascending=False, kind="mergesort")
        return grouped.head(self.top_crops_limit).reset_index()[columns]

    def state_productivity(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["state", "records", "avg_yield", "total_production"]
        clean = self._clean_rows(df)
        if clean.empty:
            return pd.DataFrame(columns=columns)
        grouped = clean.groupby("state").agg(
            records=("yield", "size"),
            avg_yield=("yield", "mean"),
            total_production=("production", "sum"),
        )
        grouped["avg_yield"] = grouped["avg_yield"].round(2)
        grouped = grouped.sort_values("avg_yield", ascending=False, kind="mergesort")
        return grouped.head(self.top_states_limit).reset_index()[columns]

    def duplicate_check(self, df: pd.DataFrame) -> pd.DataFrame:
        """Natural-key groups (crop, crop_year, season, state) appearing more than once."""
        if df.empty:
            return pd.DataFrame(columns=NATURAL_KEY + ["duplicate_count"])
        groups = df.groupby(NATURAL_KEY, dropna=False).size().reset_index(name="duplicate_count")
        groups = groups[groups["duplicate_count"] > 1]
        return groups.sort_values("duplicate_count", ascending=False, kind="mergesort").reset_index(
            drop=True
        )

    def area_production_consistency(self, df: pd.DataFrame) -> Dict[str, int]:
        area, production, yields = df["area"], df["production"], df["yield"]
        return {
            "total_records": len(df),
            "zero_production_with_area": int(((area > 0) & (production == 0)).sum()),
            "production_without_area": int(((area == 0) & (production > 0)).sum()),
            "zero_yield_with_production": int(
                ((area > 0) & (production > 0) & (yields == 0)).sum()
            ),
        }

    def year_coverage(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["crop_year", "records", "states_covered", "crops_covered"]
        if df.empty:
            return pd.DataFrame(columns=columns)
        coverage = df.groupby("crop_year").agg(
            records=("crop_year", "size"),
            states_covered=("state", "nunique"),
            crops_covered=("crop", "nunique"),
        )
        return coverage.sort_index().reset_index()[columns]

    def execute(self, data: List[CropYieldRecord]) -> Dict[str, Any]:
        """
        Run every validation query over the cleaned table.

        Args:
            data: List of classified CropYieldRecord entities

        Returns:
            Query results keyed by query name
        """
        logger.info(f"Validating {len(data)} cleaned records")
        df = records_to_frame(data)

        report = {
            "flag_summary": self.flag_summary(df),
            "clean_statistics": self.clean_statistics(df),
            "season_standardization": self.season_standardization(df),
            "top_crops_by_yield": self.top_crops_by_yield(df),
            "state_productivity": self.state_productivity(df),
            "duplicate_check": self.duplicate_check(df),
            "area_production_consistency": self.area_production_consistency(df),
            "year_coverage": self.year_coverage(df),
        }

        if not report["duplicate_check"].empty:
            logger.warning(
                f"Found {len(report['duplicate_check'])} duplicated crop/year/season/state keys"
            )
        logger.info(f"Clean records: {report['clean_statistics']['clean_records']}")
        return report

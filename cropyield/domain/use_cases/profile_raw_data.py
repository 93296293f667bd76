"""Use case for profiling the raw crop yield table before cleaning."""

import logging
from typing import Any, Dict, List

import pandas as pd

from ..entities.crop_yield_record import CropYieldRecord, records_to_frame
from ..entities.iqr_bounds import IqrBounds
from .aggregates import scalar, yield_summary

logger = logging.getLogger(__name__)

ZERO_YIELD_COLUMNS = [
    "crop",
    "state",
    "season",
    "crop_year",
    "area",
    "production",
    "annual_rainfall",
    "fertilizer",
    "pesticide",
]


class ProfileRawDataUseCase:
    """Data quality analysis queries run against the raw table."""

    def __init__(
        self,
        extreme_threshold: float = 1000.0,
        zero_yield_limit: int = 20,
        iqr_multiplier: float = 1.5,
    ):
        """
        Initialize use case.

        Args:
            extreme_threshold: Yields above this count as extreme highs
            zero_yield_limit: Maximum rows returned by the zero yield listing
            iqr_multiplier: Fence width for the IQR outlier analysis
        """
        self.extreme_threshold = extreme_threshold
        self.zero_yield_limit = zero_yield_limit
        self.iqr_multiplier = iqr_multiplier

    def overview(self, df: pd.DataFrame) -> Dict[str, Any]:
        return {
            "total_records": len(df),
            "unique_crops": int(df["crop"].nunique()),
            "unique_states": int(df["state"].nunique()),
            "unique_seasons": int(df["season"].nunique()),
            "earliest_year": scalar(df["crop_year"].min()),
            "latest_year": scalar(df["crop_year"].max()),
        }

    def season_name_issues(self, df: pd.DataFrame) -> pd.DataFrame:
        """Distinct raw season names with their length; trailing spaces show up here."""
        result = (
            df.groupby("season", dropna=False)
            .size()
            .reset_index(name="frequency")
            .sort_values("season", na_position="first")
            .reset_index(drop=True)
        )
        result.insert(1, "length", result["season"].map(lambda s: len(s) if isinstance(s, str) else None))
        return result

    def yield_distribution(self, df: pd.DataFrame) -> Dict[str, Any]:
        yields = df["yield"]
        result = {"total_records": len(df)}
        result.update(yield_summary(yields, ddof=0))
        result["zero_yield_count"] = int((yields == 0).sum())
        result["extreme_high_yield_count"] = int((yields > self.extreme_threshold).sum())
        return result

    def outlier_analysis(self, df: pd.DataFrame) -> Dict[str, Any]:
        """IQR bounds over positive yields; the count runs over every row."""
        yields = df["yield"]
        bounds = IqrBounds.from_values(yields[yields > 0], multiplier=self.iqr_multiplier)
        return {
            "lower_bound": bounds.lower_bound,
            "upper_bound": bounds.upper_bound,
            "outlier_count": int(bounds.outlier_mask(yields).sum()),
        }

    def zero_yield_investigation(self, df: pd.DataFrame) -> pd.DataFrame:
        zero = df.loc[df["yield"] == 0, ZERO_YIELD_COLUMNS]
        zero = zero.sort_values(
            ["crop_year", "state", "crop"], ascending=[False, True, True], kind="mergesort"
        )
        return zero.head(self.zero_yield_limit).reset_index(drop=True)

    def execute(self, data: List[CropYieldRecord]) -> Dict[str, Any]:
        """
        Run every raw profiling query.

        Args:
            data: List of raw CropYieldRecord entities

        Returns:
            Query results keyed by query name
        """
        logger.info(f"Profiling {len(data)} raw records")
        df = records_to_frame(data)

        report = {
            "overview": self.overview(df),
            "season_name_issues": self.season_name_issues(df),
            "yield_distribution": self.yield_distribution(df),
            "outlier_analysis": self.outlier_analysis(df),
            "zero_yield_investigation": self.zero_yield_investigation(df),
        }

        dist = report["yield_distribution"]
        logger.info(
            f"Raw yield: zero={dist['zero_yield_count']} "
            f"extreme={dist['extreme_high_yield_count']} "
            f"iqr_outliers={report['outlier_analysis']['outlier_count']}"
        )
        return report

"""Use case for descriptive statistics of the cleaned dataset."""

import logging
from typing import Any, Dict, List

import pandas as pd

from .aggregates import scalar

logger = logging.getLogger(__name__)


class DescribeDatasetUseCase:
    """Overview, data quality and descriptive statistics of a loaded dataset."""

    def __init__(self, numerical_variables: List[str]):
        """
        Initialize use case.

        Args:
            numerical_variables: Columns to describe numerically
        """
        self.numerical_variables = numerical_variables

    def overview(self, df: pd.DataFrame) -> Dict[str, Any]:
        return {
            "rows": df.shape[0],
            "columns": df.shape[1],
            "column_names": list(df.columns),
            "dtypes": {col: str(dtype) for col, dtype in df.dtypes.items()},
        }

    def missing_values(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = df.isna().sum().reset_index()
        missing.columns = ["variable", "missing_count"]
        return missing.sort_values("missing_count", ascending=False, kind="mergesort").reset_index(
            drop=True
        )

    def duplicate_count(self, df: pd.DataFrame) -> int:
        return int(df.duplicated().sum())

    def detailed_statistics(self, df: pd.DataFrame) -> pd.DataFrame:
        """mean/median/sd/min/max/q25/q75 per numeric variable, NaN ignored, 2 dp."""
        numeric = df[self.numerical_variables]
        stats = pd.DataFrame(
            {
                "mean": numeric.mean(),
                "median": numeric.median(),
                "sd": numeric.std(ddof=1),
                "min": numeric.min(),
                "max": numeric.max(),
                "q25": numeric.quantile(0.25),
                "q75": numeric.quantile(0.75),
            }
        )
        return stats.round(2)

    def categorical_summary(self, df: pd.DataFrame) -> Dict[str, Any]:
        return {
            "unique_crops": int(df["crop"].nunique()),
            "unique_states": int(df["state"].nunique()),
            "unique_seasons": int(df["season"].nunique()),
            "year_min": scalar(df["crop_year"].min()),
            "year_max": scalar(df["crop_year"].max()),
        }

    def execute(self, df: pd.DataFrame) -> Dict[str, Any]:
        logger.info("=== DATASET OVERVIEW ===")
        overview = self.overview(df)
        logger.info(f"Dataset dimensions: {overview['rows']} x {overview['columns']}")
        logger.info(f"Column names: {overview['column_names']}")

        missing = self.missing_values(df)
        duplicates = self.duplicate_count(df)
        logger.info(f"Missing values: {int(missing['missing_count'].sum())} cells")
        logger.info(f"Duplicate records: {duplicates}")

        categorical = self.categorical_summary(df)
        logger.info(
            f"Unique crops: {categorical['unique_crops']} | "
            f"states: {categorical['unique_states']} | "
            f"seasons: {categorical['unique_seasons']} | "
            f"years: {categorical['year_min']} to {categorical['year_max']}"
        )

        return {
            "overview": overview,
            "missing_values": missing,
            "duplicate_count": duplicates,
            "detailed_statistics": self.detailed_statistics(df),
            "categorical_summary": categorical,
        }

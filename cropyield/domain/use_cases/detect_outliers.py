"""Use case for IQR-based yield outlier detection."""

import logging
from typing import Any, Dict

import pandas as pd

from ..entities.iqr_bounds import IqrBounds
from .aggregates import scalar

logger = logging.getLogger(__name__)


class DetectOutliersUseCase:
    """Flag values outside Q1 - k*IQR .. Q3 + k*IQR."""

    def __init__(self, column: str = "yield", multiplier: float = 1.5):
        self.column = column
        self.multiplier = multiplier

    def execute(self, df: pd.DataFrame) -> Dict[str, Any]:
        values = df[self.column]
        bounds = IqrBounds.from_values(values, multiplier=self.multiplier)
        mask = bounds.outlier_mask(values)

        outlier_count = int(mask.sum())
        percentage = round(outlier_count / len(df) * 100, 2) if len(df) else 0.0
        outliers = values[mask]

        summary = {
            "min_yield": scalar(outliers.min()),
            "max_yield": scalar(outliers.max()),
            "avg_yield": scalar(outliers.mean()),
            "count": outlier_count,
        }

        logger.info("=== OUTLIER ANALYSIS ===")
        logger.info(f"Yield outliers (IQR method): {outlier_count} ({percentage}%)")
        return {
            "bounds": bounds,
            "mask": mask,
            "outlier_count": outlier_count,
            "percentage": percentage,
            "summary": summary,
        }

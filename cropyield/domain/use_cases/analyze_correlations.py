"""Use case for the correlation analysis of numeric variables."""

import logging
from typing import List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


class AnalyzeCorrelationsUseCase:
    """Pearson correlations over complete observations."""

    def __init__(self, numerical_variables: List[str], target: str = "yield"):
        self.numerical_variables = numerical_variables
        self.target = target

    def execute(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Compute the correlation matrix and the target's correlations.

        Args:
            df: Loaded dataset

        Returns:
            (correlation matrix, target correlations ordered by |r| desc, 3 dp)
        """
        numeric = df[self.numerical_variables].dropna()
        matrix = numeric.corr(method="pearson")

        target_corr = matrix[self.target]
        order = target_corr.abs().sort_values(ascending=False, kind="mergesort").index
        target_corr = target_corr.reindex(order).round(3)

        logger.info(f"=== CORRELATION WITH {self.target.upper()} ===")
        for name, value in target_corr.items():
            logger.info(f"  {name}: {value}")
        return matrix, target_corr

"""IQR outlier bounds entity."""

from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd


@dataclass(frozen=True)
class IqrBounds:
    """Tukey fences around the interquartile range of a sample."""

    q1: Optional[float]
    q3: Optional[float]
    multiplier: float = 1.5

    @property
    def iqr(self) -> Optional[float]:
        if self.q1 is None or self.q3 is None:
            return None
        return self.q3 - self.q1

    @property
    def lower_bound(self) -> Optional[float]:
        if self.iqr is None:
            return None
        return self.q1 - self.multiplier * self.iqr

    @property
    def upper_bound(self) -> Optional[float]:
        if self.iqr is None:
            return None
        return self.q3 + self.multiplier * self.iqr

    def is_outlier(self, value: Optional[float]) -> bool:
        """True when value lies outside the fences. Missing values never are."""
        if value is None or pd.isna(value) or self.iqr is None:
            return False
        return value < self.lower_bound or value > self.upper_bound

    def outlier_mask(self, values: pd.Series) -> pd.Series:
        """Vectorised is_outlier; NaN rows are False."""
        if self.iqr is None:
            return pd.Series(False, index=values.index)
        return (values < self.lower_bound) | (values > self.upper_bound)

    @classmethod
    def from_values(cls, values: Iterable[float], multiplier: float = 1.5) -> "IqrBounds":
        """
        Compute bounds from a sample, ignoring missing values.

        Quartiles use linear interpolation between order statistics, which
        matches SQL PERCENTILE_CONT.
        """
        series = pd.Series(list(values), dtype=float).dropna()
        if series.empty:
            return cls(q1=None, q3=None, multiplier=multiplier)
        return cls(
            q1=float(series.quantile(0.25)),
            q3=float(series.quantile(0.75)),
            multiplier=multiplier,
        )

    def to_dict(self) -> dict:
        return {
            "q1": self.q1,
            "q3": self.q3,
            "iqr": self.iqr,
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
        }

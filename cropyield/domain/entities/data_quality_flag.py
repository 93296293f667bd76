"""Data quality flag enumeration."""

from enum import Enum
from typing import Optional


class DataQualityFlag(str, Enum):
    """Enumeration for the data quality classification of a cleaned record."""

    CLEAN = "clean"
    OUTLIER = "outlier"
    ZERO_YIELD = "zero_yield"
    EXTREME_VALUE = "extreme_value"

    @property
    def notes(self) -> str:
        """Cleaning note attached to records carrying this flag."""
        mapping = {
            DataQualityFlag.ZERO_YIELD: "Zero yield - investigate crop failure or data entry error",
            DataQualityFlag.EXTREME_VALUE: "Extreme yield value - requires validation",
            DataQualityFlag.OUTLIER: "Negative yield - data error",
            DataQualityFlag.CLEAN: "Clean data",
        }
        return mapping[self]

    @classmethod
    def classify(
        cls, yield_value: Optional[float], extreme_threshold: float = 1000.0
    ) -> "DataQualityFlag":
        """
        Classify a record by its yield alone.

        A missing or NaN yield matches none of the checks and is CLEAN.

        Args:
            yield_value: Yield of the record
            extreme_threshold: Yields above this value are EXTREME_VALUE

        Returns:
            The flag for the yield value
        """
        if yield_value is None:
            return cls.CLEAN
        if yield_value == 0:
            return cls.ZERO_YIELD
        if yield_value > extreme_threshold:
            return cls.EXTREME_VALUE
        if yield_value < 0:
            return cls.OUTLIER
        return cls.CLEAN

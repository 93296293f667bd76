"""Aggregate helpers with SQL-style NULL semantics over pandas objects."""

from typing import Any, Optional

import pandas as pd


def scalar(value: Any) -> Any:
    """Convert a pandas/numpy scalar to a plain Python value, NaN to None."""
    if value is None or pd.isna(value):
        return None
    if hasattr(value, "item"):
        return value.item()
    return value


def rounded(value: Any, ndigits: int = 2) -> Optional[float]:
    value = scalar(value)
    return None if value is None else round(float(value), ndigits)


def yield_summary(values: pd.Series, ddof: int = 0) -> dict:
    """min/max/avg/stddev of a numeric series; NaN ignored, empty gives None."""
    values = values.dropna()
    return {
        "min_yield": scalar(values.min()),
        "max_yield": scalar(values.max()),
        "avg_yield": scalar(values.mean()),
        "std_dev_yield": scalar(values.std(ddof=ddof)) if len(values) > ddof else None,
    }


def top_by(
    df: pd.DataFrame,
    by: str,
    limit: int,
    min_count: int = 0,
    count_column: str = "count",
) -> pd.DataFrame:
    """Filter groups by size, sort descending by a column and keep the head."""
    if min_count:
        df = df[df[count_column] >= min_count]
    return df.sort_values(by, ascending=False, kind="mergesort").head(limit).reset_index(drop=True)

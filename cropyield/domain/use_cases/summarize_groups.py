"""Use case for grouped yield summaries (season, state, crop, year)."""

import logging
from typing import Any, Dict

import pandas as pd

from .aggregates import top_by

logger = logging.getLogger(__name__)


class SummarizeGroupsUseCase:
    """Seasonal, geographical, crop and yearly breakdowns of yield."""

    def __init__(
        self,
        detail_min_count: int = 50,
        detail_limit: int = 10,
        chart_crop_min_count: int = 50,
        chart_state_min_count: int = 100,
        chart_limit: int = 15,
    ):
        self.detail_min_count = detail_min_count
        self.detail_limit = detail_limit
        self.chart_crop_min_count = chart_crop_min_count
        self.chart_state_min_count = chart_state_min_count
        self.chart_limit = chart_limit

    def seasonal_summary(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["season", "count", "avg_yield", "median_yield", "sd_yield", "min_yield", "max_yield"]
        if df.empty:
            return pd.DataFrame(columns=columns)
        summary = (
            df.groupby("season")
            .agg(
                count=("yield", "size"),
                avg_yield=("yield", "mean"),
                median_yield=("yield", "median"),
                sd_yield=("yield", "std"),
                min_yield=("yield", "min"),
                max_yield=("yield", "max"),
            )
            .reset_index()
        )
        return top_by(summary, "avg_yield", limit=len(summary))[columns]

    def top_states(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["state", "count", "avg_yield", "total_production", "total_area"]
        if df.empty:
            return pd.DataFrame(columns=columns)
        summary = (
            df.groupby("state")
            .agg(
                count=("yield", "size"),
                avg_yield=("yield", "mean"),
                total_production=("production", "sum"),
                total_area=("area", "sum"),
            )
            .reset_index()
        )
        return top_by(summary, "avg_yield", self.detail_limit, self.detail_min_count)[columns]

    def top_crops(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["crop", "count", "avg_yield", "total_production", "total_area", "avg_rainfall"]
        if df.empty:
            return pd.DataFrame(columns=columns)
        summary = (
            df.groupby("crop")
            .agg(
                count=("yield", "size"),
                avg_yield=("yield", "mean"),
                total_production=("production", "sum"),
                total_area=("area", "sum"),
                avg_rainfall=("annual_rainfall", "mean"),
            )
            .reset_index()
        )
        return top_by(summary, "avg_yield", self.detail_limit, self.detail_min_count)[columns]

    def yearly_trend(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = ["crop_year", "avg_yield", "median_yield", "count"]
        if df.empty:
            return pd.DataFrame(columns=columns)
        trend = df.groupby("crop_year").agg(
            avg_yield=("yield", "mean"),
            median_yield=("yield", "median"),
            count=("yield", "size"),
        )
        return trend.sort_index().reset_index()[columns]

    def chart_rankings(self, df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
        """Top crops and states by average yield, as drawn in the bar charts."""
        rankings = {}
        for key, min_count in (
            ("crop", self.chart_crop_min_count),
            ("state", self.chart_state_min_count),
        ):
            if df.empty:
                rankings[key] = pd.DataFrame(columns=[key, "avg_yield", "count"])
                continue
            grouped = (
                df.groupby(key)
                .agg(avg_yield=("yield", "mean"), count=("yield", "size"))
                .reset_index()
            )
            rankings[key] = top_by(grouped, "avg_yield", self.chart_limit, min_count)
        return rankings

    def execute(self, df: pd.DataFrame) -> Dict[str, Any]:
        result = {
            "seasonal_summary": self.seasonal_summary(df),
            "top_states": self.top_states(df),
            "top_crops": self.top_crops(df),
            "yearly_trend": self.yearly_trend(df),
            "chart_rankings": self.chart_rankings(df),
        }
        logger.info(
            f"Summarized {len(result['seasonal_summary'])} seasons, "
            f"{len(result['top_states'])} top states, {len(result['top_crops'])} top crops"
        )
        return result

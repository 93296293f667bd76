"""Use case for rendering the EDA charts to PNG files."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression

logger = logging.getLogger(__name__)

YIELD_LABEL = "Yield (tonnes/hectare)"

SCATTER_CHARTS = [
    # (column, title, x label, point colour, file name)
    ("area", "Yield vs Area", "Area (hectares)", "blue", "yield_vs_area.png"),
    ("annual_rainfall", "Yield vs Annual Rainfall", "Annual Rainfall (mm)", "green", "yield_vs_rainfall.png"),
    ("fertilizer", "Yield vs Fertilizer Usage", "Fertilizer (kg)", "orange", "yield_vs_fertilizer.png"),
]


def log_yield(values: pd.Series) -> pd.Series:
    """log(yield + 1) with non-finite results dropped."""
    logged = np.log1p(values[values > -1])
    return logged[np.isfinite(logged)]


class RenderChartsUseCase:
    """Draw the distribution, ranking, trend, correlation and scatter charts."""

    def __init__(self, output_dir: Path, plot_settings: Dict[str, Any]):
        """
        Initialize use case.

        Args:
            output_dir: Directory the PNG files are written to
            plot_settings: dpi, histogram bins and figure sizes
        """
        self.output_dir = Path(output_dir)
        self.settings = plot_settings

    def _save(self, fig, name: str) -> Path:
        path = self.output_dir / name
        fig.tight_layout()
        fig.savefig(path, dpi=self.settings["dpi"])
        plt.close(fig)
        logger.info(f"Saved chart {path}")
        return path

    def _skip(self, name: str) -> None:
        logger.warning(f"No data to plot for {name}, skipping")

    def histogram(self, values: pd.Series, title: str, xlabel: str, color: str, name: str) -> Optional[Path]:
        values = values.dropna()
        if values.empty:
            self._skip(name)
            return None
        fig, ax = plt.subplots(figsize=self.settings["wide_figsize"])
        ax.hist(values, bins=self.settings["histogram_bins"], color=color, edgecolor="black", alpha=0.7)
        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel("Frequency")
        return self._save(fig, name)

    def ranking_bar(self, ranking: pd.DataFrame, key: str, title: str, ylabel: str, color: str, name: str) -> Optional[Path]:
        if ranking.empty:
            self._skip(name)
            return None
        ordered = ranking.sort_values("avg_yield")
        fig, ax = plt.subplots(figsize=self.settings["bar_figsize"])
        ax.barh(ordered[key].astype(str), ordered["avg_yield"], color=color, alpha=0.8)
        ax.set_title(title)
        ax.set_xlabel("Average " + YIELD_LABEL)
        ax.set_ylabel(ylabel)
        return self._save(fig, name)

    def season_boxplot(self, df: pd.DataFrame) -> Optional[Path]:
        name = "yield_by_season.png"
        data = df.dropna(subset=["season", "yield"])
        if data.empty:
            self._skip(name)
            return None
        seasons = sorted(data["season"].unique())
        groups = [data.loc[data["season"] == s, "yield"].values for s in seasons]
        fig, ax = plt.subplots(figsize=self.settings["wide_figsize"])
        ax.boxplot(groups, patch_artist=True)
        ax.set_xticks(range(1, len(seasons) + 1))
        ax.set_xticklabels(seasons)
        ax.set_title("Yield Distribution by Season")
        ax.set_xlabel("Season")
        ax.set_ylabel(YIELD_LABEL)
        return self._save(fig, name)

    def yearly_trend(self, trend: pd.DataFrame) -> Optional[Path]:
        name = "yield_trends.png"
        if trend.empty:
            self._skip(name)
            return None
        first, last = int(trend["crop_year"].min()), int(trend["crop_year"].max())
        fig, ax = plt.subplots(figsize=self.settings["trend_figsize"])
        ax.plot(trend["crop_year"], trend["avg_yield"], color="blue", linewidth=1.2, label="Average")
        ax.plot(trend["crop_year"], trend["median_yield"], color="red", linewidth=1.2, label="Median")
        ax.set_title(f"Crop Yield Trends Over Time ({first}-{last})")
        ax.set_xlabel("Year")
        ax.set_ylabel(YIELD_LABEL)
        ax.legend(title="Metric")
        return self._save(fig, name)

    def correlation_heatmap(self, matrix: pd.DataFrame) -> Optional[Path]:
        name = "correlation_matrix.png"
        if matrix.empty or matrix.isna().all().all():
            self._skip(name)
            return None
        upper = matrix.where(np.triu(np.ones(matrix.shape, dtype=bool)))
        fig, ax = plt.subplots(figsize=self.settings["correlation_figsize"])
        image = ax.imshow(upper.values, cmap="RdBu_r", vmin=-1, vmax=1)
        ax.set_xticks(range(len(matrix.columns)))
        ax.set_xticklabels(matrix.columns, rotation=45, ha="right")
        ax.set_yticks(range(len(matrix.index)))
        ax.set_yticklabels(matrix.index)
        fig.colorbar(image, ax=ax)
        ax.set_title("Correlation Matrix of Numerical Variables")
        return self._save(fig, name)

    def scatter_with_fit(self, df: pd.DataFrame, column: str, title: str, xlabel: str, color: str, name: str) -> Optional[Path]:
        data = df[[column, "yield"]].dropna()
        if data.empty:
            self._skip(name)
            return None
        fig, ax = plt.subplots(figsize=self.settings["wide_figsize"])
        ax.scatter(data[column], data["yield"], alpha=0.5, color=color, s=8)

        # Least-squares fit line
        if data[column].nunique() > 1:
            model = LinearRegression()
            model.fit(data[[column]].values, data["yield"].values)
            xs = np.linspace(data[column].min(), data[column].max(), 100).reshape(-1, 1)
            ax.plot(xs.ravel(), model.predict(xs), color="red")

        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(YIELD_LABEL)
        return self._save(fig, name)

    def execute(
        self,
        df: pd.DataFrame,
        rankings: Dict[str, pd.DataFrame],
        yearly_trend: pd.DataFrame,
        correlation_matrix: pd.DataFrame,
    ) -> List[Path]:
        """
        Render every chart.

        Args:
            df: Loaded dataset
            rankings: Output of SummarizeGroupsUseCase.chart_rankings
            yearly_trend: Output of SummarizeGroupsUseCase.yearly_trend
            correlation_matrix: Output of AnalyzeCorrelationsUseCase

        Returns:
            Paths of the charts written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        yields = df["yield"]

        paths = [
            self.histogram(
                yields, "Distribution of Crop Yield", YIELD_LABEL, "skyblue", "yield_distribution.png"
            ),
            self.histogram(
                log_yield(yields),
                "Distribution of Log-Transformed Yield",
                "Log(Yield + 1)",
                "lightgreen",
                "yield_log_distribution.png",
            ),
            self.ranking_bar(
                rankings["crop"], "crop", "Average Yield by Crop Type (Top 15)", "Crop Type", "coral", "yield_by_crop.png"
            ),
            self.ranking_bar(
                rankings["state"], "state", "Average Yield by State (Top 15)", "State", "lightblue", "yield_by_state.png"
            ),
            self.season_boxplot(df),
            self.yearly_trend(yearly_trend),
            self.correlation_heatmap(correlation_matrix),
        ]
        for column, title, xlabel, color, name in SCATTER_CHARTS:
            paths.append(self.scatter_with_fit(df, column, title, xlabel, color, name))

        written = [p for p in paths if p is not None]
        logger.info(f"Rendered {len(written)} charts into {self.output_dir}")
        return written

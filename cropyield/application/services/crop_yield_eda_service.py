"""Service orchestrating the exploratory data analysis of the cleaned export."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ...domain.use_cases.aggregates import rounded, scalar
from ...domain.use_cases.analyze_correlations import AnalyzeCorrelationsUseCase
from ...domain.use_cases.describe_dataset import DescribeDatasetUseCase
from ...domain.use_cases.detect_outliers import DetectOutliersUseCase
from ...domain.use_cases.render_charts import RenderChartsUseCase
from ...domain.use_cases.summarize_groups import SummarizeGroupsUseCase
from ...infrastructure.repositories.csv_crop_yield_repository import normalize_columns

logger = logging.getLogger(__name__)


def _json_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """Rows as plain dicts; NaN becomes null."""
    return [{k: scalar(v) for k, v in row.items()} for row in frame.to_dict(orient="records")]


class CropYieldEdaService:
    """Cleaned CSV -> statistics -> charts -> summary CSVs."""

    def __init__(
        self,
        output_dir: str,
        numerical_variables: List[str],
        eda_settings: Dict[str, Any],
        plot_settings: Dict[str, Any],
    ):
        self.output_dir = Path(output_dir)
        self.numerical_variables = numerical_variables
        self.df: Optional[pd.DataFrame] = None

        self.describe_uc = DescribeDatasetUseCase(numerical_variables)
        self.correlation_uc = AnalyzeCorrelationsUseCase(numerical_variables)
        self.outlier_uc = DetectOutliersUseCase(multiplier=eda_settings["iqr_multiplier"])
        self.groups_uc = SummarizeGroupsUseCase(
            detail_min_count=eda_settings["detail_min_count"],
            detail_limit=eda_settings["detail_limit"],
            chart_crop_min_count=eda_settings["chart_crop_min_count"],
            chart_state_min_count=eda_settings["chart_state_min_count"],
            chart_limit=eda_settings["chart_limit"],
        )
        self.charts_uc = RenderChartsUseCase(self.output_dir, plot_settings)

    def load(self, csv_path: str) -> pd.DataFrame:
        """Load the cleaned export. A missing file is fatal."""
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Cleaned crop yield file not found: {csv_path}")

        logger.info(f"Loading cleaned dataset from {path}")
        try:
            df = pd.read_csv(path)
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        df = normalize_columns(df)
        # Malformed numbers become NaN and flow through the aggregates
        for col in self.numerical_variables:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col], errors="coerce")
        self.df = df
        logger.info(f"Loaded {len(self.df)} records")
        return self.df

    def export_summaries(self, groups: Dict[str, Any], summary: Dict[str, Any]) -> Dict[str, Path]:
        paths = {
            "seasonal_summary": self.output_dir / "seasonal_summary.csv",
            "top_states": self.output_dir / "top_states_analysis.csv",
            "top_crops": self.output_dir / "top_crops_analysis.csv",
        }
        for key, path in paths.items():
            groups[key].to_csv(path, index=False)
            logger.info(f"Exported {path}")

        paths["eda_summary"] = self.output_dir / "eda_summary.json"
        with open(paths["eda_summary"], "w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2, allow_nan=False)
        logger.info(f"Exported {paths['eda_summary']}")
        return paths

    def build_summary(
        self,
        description: Dict[str, Any],
        yield_correlations: pd.Series,
        groups: Dict[str, Any],
    ) -> Dict[str, Any]:
        df = self.df
        categorical = description["categorical_summary"]
        yields = df["yield"]
        return {
            "dataset_info": {
                "total_records": len(df),
                "total_columns": df.shape[1],
                "unique_crops": categorical["unique_crops"],
                "unique_states": categorical["unique_states"],
                "year_range": f"{categorical['year_min']} to {categorical['year_max']}",
            },
            "yield_statistics": {k: scalar(v) for k, v in yields.describe().items()},
            "correlation_with_yield": {k: scalar(v) for k, v in yield_correlations.items()},
            "seasonal_summary": _json_records(groups["seasonal_summary"]),
            "top_states": _json_records(groups["top_states"]),
            "top_crops": _json_records(groups["top_crops"]),
        }

    def log_key_findings(self, groups: Dict[str, Any]) -> None:
        yields = self.df["yield"]

        def first(frame: pd.DataFrame, column: str) -> Any:
            return frame[column].iloc[0] if not frame.empty else None

        logger.info("=== EDA COMPLETED ===")
        logger.info(f"Total records analyzed: {len(self.df)}")
        logger.info(f"- Average yield: {rounded(yields.mean())} tonnes/hectare")
        logger.info(
            f"- Yield range: {rounded(yields.min())} to {rounded(yields.max())} tonnes/hectare"
        )
        logger.info(f"- Most productive season: {first(groups['seasonal_summary'], 'season')}")
        logger.info(f"- Top performing state: {first(groups['top_states'], 'state')}")
        logger.info(f"- Top performing crop: {first(groups['top_crops'], 'crop')}")

    def run(self, csv_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the full analysis.

        Args:
            csv_path: Cleaned CSV to load; may be omitted when load() was called

        Returns:
            Dict with every intermediate result, chart paths and export paths
        """
        if csv_path is not None:
            self.load(csv_path)
        if self.df is None:
            raise RuntimeError("No dataset loaded. Call load() first.")

        self.output_dir.mkdir(parents=True, exist_ok=True)

        description = self.describe_uc.execute(self.df)
        matrix, yield_correlations = self.correlation_uc.execute(self.df)
        outliers = self.outlier_uc.execute(self.df)
        groups = self.groups_uc.execute(self.df)
        charts = self.charts_uc.execute(
            self.df,
            rankings=groups["chart_rankings"],
            yearly_trend=groups["yearly_trend"],
            correlation_matrix=matrix,
        )

        summary = self.build_summary(description, yield_correlations, groups)
        exports = self.export_summaries(groups, summary)
        self.log_key_findings(groups)

        return {
            "description": description,
            "correlation_matrix": matrix,
            "yield_correlations": yield_correlations,
            "outliers": outliers,
            "groups": groups,
            "charts": charts,
            "summary": summary,
            "exports": exports,
        }

"""Use cases - core business operations."""

from .collect_crop_yield_data import CollectCropYieldDataUseCase
from .clean_crop_yield import CleanCropYieldUseCase
from .profile_raw_data import ProfileRawDataUseCase
from .validate_cleaned_data import ValidateCleanedDataUseCase
from .export_cleaned_data import ExportCleanedDataUseCase
from .describe_dataset import DescribeDatasetUseCase
from .analyze_correlations import AnalyzeCorrelationsUseCase
from .detect_outliers import DetectOutliersUseCase
from .summarize_groups import SummarizeGroupsUseCase
from .render_charts import RenderChartsUseCase

__all__ = [
    "CollectCropYieldDataUseCase",
    "CleanCropYieldUseCase",
    "ProfileRawDataUseCase",
    "ValidateCleanedDataUseCase",
    "ExportCleanedDataUseCase",
    "DescribeDatasetUseCase",
    "AnalyzeCorrelationsUseCase",
    "DetectOutliersUseCase",
    "SummarizeGroupsUseCase",
    "RenderChartsUseCase",
]

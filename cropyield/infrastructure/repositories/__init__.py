"""Concrete repository implementations."""

from .csv_crop_yield_repository import CsvCropYieldRepository, load_raw_csv
from .sql_crop_yield_repository import SqlCropYieldRepository

__all__ = [
    "CsvCropYieldRepository",
    "SqlCropYieldRepository",
    "load_raw_csv",
]

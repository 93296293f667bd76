"""Application services."""

from .crop_yield_cleaning_service import CropYieldCleaningService
from .crop_yield_eda_service import CropYieldEdaService

__all__ = [
    "CropYieldCleaningService",
    "CropYieldEdaService",
]

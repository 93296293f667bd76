"""Repository interfaces."""

from .crop_yield_repository import CropYieldRepository

__all__ = [
    "CropYieldRepository",
]

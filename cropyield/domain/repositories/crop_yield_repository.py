"""Crop yield repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.crop_yield_record import CropYieldRecord
from ..entities.data_quality_flag import DataQualityFlag


class CropYieldRepository(ABC):
    """Abstract repository for the raw and cleaned crop yield tables."""

    @abstractmethod
    def get_raw_data(self) -> List[CropYieldRecord]:
        """
        Retrieve all raw records.

        Returns:
            List of unclassified CropYieldRecord entities
        """
        pass

    @abstractmethod
    def save_raw_data(self, data: List[CropYieldRecord]) -> None:
        """
        Replace the raw table contents.

        Args:
            data: List of CropYieldRecord entities to save
        """
        pass

    @abstractmethod
    def get_cleaned_data(
        self, flag: Optional[DataQualityFlag] = None
    ) -> List[CropYieldRecord]:
        """
        Retrieve cleaned records.

        Args:
            flag: Only return records carrying this flag (optional)

        Returns:
            List of classified CropYieldRecord entities
        """
        pass

    @abstractmethod
    def replace_cleaned_data(self, data: List[CropYieldRecord]) -> None:
        """
        Replace the cleaned table contents.

        Args:
            data: List of classified CropYieldRecord entities
        """
        pass

"""Use case for collecting crop yield data."""

import logging
from typing import List, Optional
from ..entities.crop_yield_record import CropYieldRecord
from ..entities.data_quality_flag import DataQualityFlag
from ..repositories.crop_yield_repository import CropYieldRepository

logger = logging.getLogger(__name__)


class CollectCropYieldDataUseCase:
    """Use case to collect raw or cleaned crop yield data from a repository."""

    def __init__(self, repository: CropYieldRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for crop yield data access
        """
        self.repository = repository

    def execute(
        self,
        cleaned: bool = False,
        flag: Optional[DataQualityFlag] = None,
    ) -> List[CropYieldRecord]:
        """
        Execute the use case.

        Args:
            cleaned: Read the cleaned table instead of the raw one
            flag: Optional flag filter, cleaned table only

        Returns:
            List of CropYieldRecord entities
        """
        if cleaned:
            logger.info(f"Collecting cleaned crop yield data: flag={flag}")
            data = self.repository.get_cleaned_data(flag=flag)
        else:
            logger.info("Collecting raw crop yield data")
            data = self.repository.get_raw_data()
        logger.info(f"Collected {len(data)} crop yield records")
        return data

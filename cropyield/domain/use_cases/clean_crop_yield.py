"""Use case for trimming and flagging crop yield records."""

import logging
from collections import Counter
from dataclasses import replace
from typing import List, Optional
from ..entities.crop_yield_record import CropYieldRecord
from ..entities.data_quality_flag import DataQualityFlag

logger = logging.getLogger(__name__)


def trim(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace, leaving missing values alone."""
    return value.strip() if isinstance(value, str) else value


class CleanCropYieldUseCase:
    """Use case to copy raw records into their cleaned, classified form."""

    def __init__(self, extreme_threshold: float = 1000.0):
        """
        Initialize use case.

        Args:
            extreme_threshold: Yields above this value are flagged extreme_value
        """
        self.extreme_threshold = extreme_threshold

    def clean_record(self, record: CropYieldRecord) -> CropYieldRecord:
        flag = DataQualityFlag.classify(record.crop_yield, self.extreme_threshold)
        return replace(
            record,
            crop=trim(record.crop),
            season=trim(record.season),
            state=trim(record.state),
            data_quality_flag=flag,
            cleaning_notes=flag.notes,
        )

    def execute(self, data: List[CropYieldRecord]) -> List[CropYieldRecord]:
        """
        Execute the cleaning transform.

        Args:
            data: List of raw CropYieldRecord entities

        Returns:
            One cleaned record per input record, in input order
        """
        logger.info(f"Cleaning {len(data)} crop yield records")

        result = [self.clean_record(record) for record in data]

        counts = Counter(record.data_quality_flag.value for record in result)
        for flag in DataQualityFlag:
            logger.info(f"  {flag.value}: {counts.get(flag.value, 0)}")

        logger.info(f"Cleaned {len(result)} records")
        return result

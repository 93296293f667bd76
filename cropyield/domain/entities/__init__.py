"""Domain entities."""

from .data_quality_flag import DataQualityFlag
from .crop_yield_record import CropYieldRecord, RECORD_COLUMNS, NUMERIC_COLUMNS, records_to_frame
from .iqr_bounds import IqrBounds

__all__ = [
    "DataQualityFlag",
    "CropYieldRecord",
    "IqrBounds",
    "RECORD_COLUMNS",
    "NUMERIC_COLUMNS",
    "records_to_frame",
]

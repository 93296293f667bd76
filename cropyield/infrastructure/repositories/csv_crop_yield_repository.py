"""CSV file crop yield repository implementation."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ...domain.entities.crop_yield_record import (
    NUMERIC_COLUMNS,
    RECORD_COLUMNS,
    CropYieldRecord,
    records_to_frame,
)
from ...domain.entities.data_quality_flag import DataQualityFlag
from ...domain.repositories.crop_yield_repository import CropYieldRepository

logger = logging.getLogger(__name__)

RAW_COLUMNS = [c for c in RECORD_COLUMNS if c not in ("data_quality_flag", "cleaning_notes")]


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lower-case, underscore-separated headers (Crop_Year -> crop_year)."""
    df = df.copy()
    df.columns = (
        df.columns.str.strip().str.lower().str.replace(" ", "_").str.replace("-", "_")
    )
    return df


def frame_to_records(df: pd.DataFrame) -> List[CropYieldRecord]:
    """
    Convert a frame with dataset column names to entities.

    Numeric columns are coerced so that malformed values become missing.
    Text values are kept exactly as read, surrounding whitespace included.
    """
    df = normalize_columns(df)
    for col in RECORD_COLUMNS:
        if col not in df.columns:
            df[col] = None
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return [CropYieldRecord.from_row(row) for row in df[RECORD_COLUMNS].to_dict(orient="records")]


def read_csv_frame(path: Union[str, Path]) -> pd.DataFrame:
    # Everything as str so text whitespace survives; numerics are coerced later
    return pd.read_csv(path, dtype=str)


def load_raw_csv(path: Union[str, Path]) -> List[CropYieldRecord]:
    """
    Read a raw dataset CSV into unclassified records.

    Args:
        path: CSV with the ten dataset columns (any header case)

    Returns:
        List of CropYieldRecord entities
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raw crop yield file not found: {path}")

    logger.info(f"Loading raw crop yield data from {path}")
    try:
        df = read_csv_frame(path)
    except Exception as e:
        logger.error(f"Error reading CSV file: {e}")
        raise

    records = frame_to_records(df)
    logger.info(f"Loaded {len(records)} raw records")
    return records


class CsvCropYieldRepository(CropYieldRepository):
    """Repository keeping the raw and cleaned tables as CSV files."""

    def __init__(self, raw_file: str, cleaned_file: str):
        """
        Initialize repository.

        Args:
            raw_file: Path to CSV file with the raw dataset
            cleaned_file: Path the cleaned table is written to
        """
        self.raw_file = Path(raw_file)
        self.cleaned_file = Path(cleaned_file)
        if not self.raw_file.exists():
            raise FileNotFoundError(f"Raw crop yield file not found: {raw_file}")

    def get_raw_data(self) -> List[CropYieldRecord]:
        return load_raw_csv(self.raw_file)

    def save_raw_data(self, data: List[CropYieldRecord]) -> None:
        logger.info(f"Saving {len(data)} raw records to {self.raw_file}")
        records_to_frame(data)[RAW_COLUMNS].to_csv(self.raw_file, index=False)

    def get_cleaned_data(
        self, flag: Optional[DataQualityFlag] = None
    ) -> List[CropYieldRecord]:
        if not self.cleaned_file.exists():
            logger.warning(f"Cleaned file {self.cleaned_file} does not exist yet")
            return []

        logger.info(f"Loading cleaned crop yield data from {self.cleaned_file}")
        try:
            df = read_csv_frame(self.cleaned_file)
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        if flag is not None:
            df = df[df["data_quality_flag"] == DataQualityFlag(flag).value]
        return frame_to_records(df)

    def replace_cleaned_data(self, data: List[CropYieldRecord]) -> None:
        logger.info(f"Replacing cleaned table at {self.cleaned_file} with {len(data)} records")
        self.cleaned_file.parent.mkdir(parents=True, exist_ok=True)
        records_to_frame(data).to_csv(self.cleaned_file, index=False)
        logger.info("Cleaned data saved successfully")

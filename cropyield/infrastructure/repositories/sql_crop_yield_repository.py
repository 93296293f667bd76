"""SQL database crop yield repository implementation (SQLAlchemy)."""

import logging
from typing import List, Optional

import pandas as pd
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine

from ...domain.entities.crop_yield_record import CropYieldRecord, records_to_frame
from ...domain.entities.data_quality_flag import DataQualityFlag
from ...domain.repositories.crop_yield_repository import CropYieldRepository
from .csv_crop_yield_repository import RAW_COLUMNS, frame_to_records

logger = logging.getLogger(__name__)


class SqlCropYieldRepository(CropYieldRepository):
    """Repository for the crop_yield_raw / crop_yield_cleaned tables."""

    def __init__(
        self,
        db_url: str = "sqlite:///crop_yield.db",
        raw_table: str = "crop_yield_raw",
        cleaned_table: str = "crop_yield_cleaned",
        engine: Optional[Engine] = None,
    ):
        """
        Initialize repository.

        Args:
            db_url: SQLAlchemy database URL
            raw_table: Name of the raw table
            cleaned_table: Name of the cleaned table
            engine: Existing engine to use instead of db_url
        """
        self.engine = engine if engine is not None else create_engine(db_url, future=True)
        self.raw_table = raw_table
        self.cleaned_table = cleaned_table

    def _has_table(self, table: str) -> bool:
        return inspect(self.engine).has_table(table)

    def _replace_table(self, table: str, df: pd.DataFrame) -> None:
        # id mirrors the AUTO_INCREMENT primary key: 1..n in insertion order
        df = df.reset_index(drop=True)
        df.index = df.index + 1
        df.to_sql(table, self.engine, if_exists="replace", index=True, index_label="id")

    def _read_table(self, table: str, flag: Optional[DataQualityFlag] = None) -> pd.DataFrame:
        with self.engine.connect() as conn:
            df = pd.read_sql_table(table, conn)
        if flag is not None:
            df = df[df["data_quality_flag"] == DataQualityFlag(flag).value]
        return df.sort_values("id", kind="mergesort").reset_index(drop=True)

    def get_raw_data(self) -> List[CropYieldRecord]:
        if not self._has_table(self.raw_table):
            logger.warning(f"Table {self.raw_table} does not exist yet")
            return []
        logger.info(f"Loading raw crop yield data from table {self.raw_table}")
        df = self._read_table(self.raw_table)
        records = frame_to_records(df.drop(columns=["id"]))
        logger.info(f"Loaded {len(records)} raw records")
        return records

    def save_raw_data(self, data: List[CropYieldRecord]) -> None:
        logger.info(f"Saving {len(data)} raw records to table {self.raw_table}")
        self._replace_table(self.raw_table, records_to_frame(data)[RAW_COLUMNS])

    def get_cleaned_data(
        self, flag: Optional[DataQualityFlag] = None
    ) -> List[CropYieldRecord]:
        if not self._has_table(self.cleaned_table):
            logger.warning(f"Table {self.cleaned_table} does not exist yet")
            return []
        logger.info(f"Loading cleaned crop yield data from table {self.cleaned_table}")
        df = self._read_table(self.cleaned_table, flag=flag)
        return frame_to_records(df.drop(columns=["id"]))

    def replace_cleaned_data(self, data: List[CropYieldRecord]) -> None:
        logger.info(f"Replacing table {self.cleaned_table} with {len(data)} records")
        self._replace_table(self.cleaned_table, records_to_frame(data))
        logger.info("Cleaned data saved successfully")

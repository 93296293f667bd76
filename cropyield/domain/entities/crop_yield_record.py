"""Crop yield record entity."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

import pandas as pd

from .data_quality_flag import DataQualityFlag


def _optional_float(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    value = _optional_float(value)
    return None if value is None else int(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    return str(value)


@dataclass(frozen=True)
class CropYieldRecord:
    """Represents one crop-season-state-year row of the yield dataset."""

    crop: Optional[str]
    crop_year: Optional[int]
    season: Optional[str]
    state: Optional[str]
    area: Optional[float] = None  # in hectares
    production: Optional[int] = None  # in tonnes
    annual_rainfall: Optional[float] = None  # in mm
    fertilizer: Optional[float] = None  # in kg
    pesticide: Optional[float] = None  # in kg
    crop_yield: Optional[float] = None  # "yield" column, tonnes/hectare
    data_quality_flag: Optional[DataQualityFlag] = None
    cleaning_notes: Optional[str] = None

    @property
    def is_classified(self) -> bool:
        return self.data_quality_flag is not None

    def to_dict(self) -> Dict[str, Any]:
        """Render the record with the dataset's column names."""
        return {
            "crop": self.crop,
            "crop_year": self.crop_year,
            "season": self.season,
            "state": self.state,
            "area": self.area,
            "production": self.production,
            "annual_rainfall": self.annual_rainfall,
            "fertilizer": self.fertilizer,
            "pesticide": self.pesticide,
            "yield": self.crop_yield,
            "data_quality_flag": self.data_quality_flag.value if self.data_quality_flag else None,
            "cleaning_notes": self.cleaning_notes,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CropYieldRecord":
        """Create a record from a mapping keyed by the dataset's column names."""
        flag = _optional_str(row.get("data_quality_flag"))
        return cls(
            crop=_optional_str(row.get("crop")),
            crop_year=_optional_int(row.get("crop_year")),
            season=_optional_str(row.get("season")),
            state=_optional_str(row.get("state")),
            area=_optional_float(row.get("area")),
            production=_optional_int(row.get("production")),
            annual_rainfall=_optional_float(row.get("annual_rainfall")),
            fertilizer=_optional_float(row.get("fertilizer")),
            pesticide=_optional_float(row.get("pesticide")),
            crop_yield=_optional_float(row.get("yield")),
            data_quality_flag=DataQualityFlag(flag) if flag else None,
            cleaning_notes=_optional_str(row.get("cleaning_notes")),
        )

    def __str__(self) -> str:
        return f"{self.crop}_{self.crop_year}_{self.season}_{self.state}"


RECORD_COLUMNS = [
    "crop",
    "crop_year",
    "season",
    "state",
    "area",
    "production",
    "annual_rainfall",
    "fertilizer",
    "pesticide",
    "yield",
    "data_quality_flag",
    "cleaning_notes",
]

NUMERIC_COLUMNS = [
    "crop_year",
    "area",
    "production",
    "annual_rainfall",
    "fertilizer",
    "pesticide",
    "yield",
]

# Whole-number columns, kept as nullable integers
INTEGER_COLUMNS = ["crop_year", "production"]


def records_to_frame(records: Iterable[CropYieldRecord]) -> pd.DataFrame:
    """Build a DataFrame with the full column layout and numeric dtypes."""
    df = pd.DataFrame([r.to_dict() for r in records], columns=RECORD_COLUMNS)
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in INTEGER_COLUMNS:
        df[col] = df[col].astype("Int64")
    return df

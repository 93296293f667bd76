"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Data paths
DATA_DIR = Path(os.getenv("CROP_YIELD_DATA_DIR", BASE_DIR / "data"))
RAW_DATA_FILE = DATA_DIR / "crop_yield.csv"
EXPORT_DIR = DATA_DIR / "exports"
CLEANED_DATA_FILE = EXPORT_DIR / "crop_yield_cleaned.csv"

# EDA output directory (plots + summary CSVs)
PLOT_DIR = Path(os.getenv("CROP_YIELD_PLOT_DIR", BASE_DIR / "EDA_Plots"))

# Database holding crop_yield_raw / crop_yield_cleaned
DATABASE_URL = os.getenv("CROP_YIELD_DATABASE_URL", f"sqlite:///{DATA_DIR / 'crop_yield.db'}")

RAW_TABLE = "crop_yield_raw"
CLEANED_TABLE = "crop_yield_cleaned"

# Yields above this are flagged as extreme_value
EXTREME_YIELD_THRESHOLD = 1000.0

# Numeric columns analysed by the EDA
NUMERICAL_VARIABLES = [
    "crop_year",
    "area",
    "production",
    "annual_rainfall",
    "fertilizer",
    "pesticide",
    "yield",
]

# Reporting query settings
QUERY_SETTINGS = {
    "zero_yield_limit": 20,
    "top_crops_min_records": 10,
    "top_crops_limit": 15,
    "top_states_limit": 15,
}

# EDA settings
EDA_SETTINGS = {
    "iqr_multiplier": 1.5,
    "detail_min_count": 50,
    "detail_limit": 10,
    "chart_crop_min_count": 50,
    "chart_state_min_count": 100,
    "chart_limit": 15,
}

# Chart settings
PLOT_SETTINGS = {
    "dpi": 300,
    "histogram_bins": 50,
    "wide_figsize": (10, 6),
    "bar_figsize": (12, 8),
    "trend_figsize": (12, 6),
    "correlation_figsize": (10, 8),
}

"""Example usage of the crop yield cleaning and analysis pipelines."""

import logging
from cropyield.application.services.crop_yield_cleaning_service import CropYieldCleaningService
from cropyield.application.services.crop_yield_eda_service import CropYieldEdaService
from cropyield.infrastructure.repositories.sql_crop_yield_repository import SqlCropYieldRepository
from cropyield.config.settings import (
    RAW_DATA_FILE,
    DATABASE_URL,
    DATA_DIR,
    EXPORT_DIR,
    PLOT_DIR,
    EXTREME_YIELD_THRESHOLD,
    QUERY_SETTINGS,
    NUMERICAL_VARIABLES,
    EDA_SETTINGS,
    PLOT_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    repository = SqlCropYieldRepository(DATABASE_URL)

    # Example 1: Clean the raw dataset
    print("=" * 60)
    print("Example 1: Cleaning the raw dataset")
    print("=" * 60)
    cleaning = CropYieldCleaningService(
        repository,
        extreme_threshold=EXTREME_YIELD_THRESHOLD,
        query_settings=QUERY_SETTINGS,
    )
    try:
        result = cleaning.run(str(RAW_DATA_FILE), str(EXPORT_DIR))
        print("\nFlag summary:")
        print(result["validation"]["flag_summary"].to_string(index=False))
    except Exception as e:
        logger.error(f"Cleaning failed: {e}", exc_info=True)
        return

    # Example 2: Explore the clean export
    print("\n" + "=" * 60)
    print("Example 2: Exploratory analysis")
    print("=" * 60)
    eda = CropYieldEdaService(
        output_dir=str(PLOT_DIR),
        numerical_variables=NUMERICAL_VARIABLES,
        eda_settings=EDA_SETTINGS,
        plot_settings=PLOT_SETTINGS,
    )
    try:
        analysis = eda.run(str(result["exports"]["clean"]))
        print("\nCorrelation with yield:")
        print(analysis["yield_correlations"].to_string())
        print(f"\nOutliers (IQR): {analysis['outliers']['outlier_count']}")
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()

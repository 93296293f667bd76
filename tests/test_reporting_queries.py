"""Tests for the raw profiling, validation and export queries."""

import pytest
from cropyield.domain.entities.data_quality_flag import DataQualityFlag
from cropyield.domain.use_cases.clean_crop_yield import CleanCropYieldUseCase
from cropyield.domain.use_cases.export_cleaned_data import (
    EXPORT_COLUMNS,
    FLAGGED_COLUMNS,
    ExportCleanedDataUseCase,
)
from cropyield.domain.use_cases.profile_raw_data import ProfileRawDataUseCase
from cropyield.domain.use_cases.validate_cleaned_data import ValidateCleanedDataUseCase


@pytest.fixture
def cleaned_records(raw_records):
    return CleanCropYieldUseCase().execute(raw_records)


def test_profile_overview(raw_records):
    """Test the raw data overview counts untrimmed values separately."""
    report = ProfileRawDataUseCase().execute(raw_records)
    overview = report["overview"]

    assert overview["total_records"] == 5
    assert overview["unique_crops"] == 5  # "Rice " and "Rice" differ before trimming
    assert overview["unique_states"] == 3
    assert overview["unique_seasons"] == 4
    assert overview["earliest_year"] == 2000
    assert overview["latest_year"] == 2001


def test_profile_season_name_issues(raw_records):
    """Test trailing-space season variants are listed with their length."""
    issues = ProfileRawDataUseCase().execute(raw_records)["season_name_issues"]

    assert list(issues["season"]) == ["Kharif", "Kharif     ", "Rabi       ", "Whole Year "]
    assert list(issues["length"]) == [6, 11, 11, 11]
    assert list(issues["frequency"]) == [1, 2, 1, 1]


def test_profile_yield_distribution(raw_records):
    """Test the yield distribution query."""
    dist = ProfileRawDataUseCase().execute(raw_records)["yield_distribution"]

    assert dist["total_records"] == 5
    assert dist["min_yield"] == -2.0
    assert dist["max_yield"] == 1500.0
    assert dist["avg_yield"] == pytest.approx(300.66)
    assert dist["zero_yield_count"] == 1
    assert dist["extreme_high_yield_count"] == 1


def test_profile_outlier_analysis_uses_positive_yields(make_record):
    """Test IQR bounds come from positive yields while every row is counted."""
    yields = [1, 2, 3, 4, 5, 6, 7, 8, 9, 100, 0, -5]
    records = [make_record(crop_yield=y) for y in yields]

    outliers = ProfileRawDataUseCase().execute(records)["outlier_analysis"]

    assert outliers["lower_bound"] == pytest.approx(-3.5)
    assert outliers["upper_bound"] == pytest.approx(14.5)
    assert outliers["outlier_count"] == 2  # 100 and -5


def test_profile_zero_yield_investigation(make_record):
    """Test zero yield rows are ordered by year desc, state, crop and limited."""
    records = [
        make_record(crop="B", year=2000, state="X", crop_yield=0),
        make_record(crop="A", year=2001, state="Y", crop_yield=0),
        make_record(crop="A", year=2001, state="X", crop_yield=0),
        make_record(crop="C", year=2002, state="X", crop_yield=1.0),
    ]
    zero = ProfileRawDataUseCase(zero_yield_limit=2).execute(records)["zero_yield_investigation"]

    assert len(zero) == 2
    assert list(zero["state"]) == ["X", "Y"]
    assert list(zero["crop_year"]) == [2001, 2001]
    assert "yield" not in zero.columns


def test_profile_empty_table():
    """Test aggregates over an empty table return zero counts and nulls."""
    report = ProfileRawDataUseCase().execute([])

    assert report["overview"]["total_records"] == 0
    assert report["overview"]["unique_crops"] == 0
    assert report["overview"]["earliest_year"] is None
    dist = report["yield_distribution"]
    assert dist["total_records"] == 0
    assert dist["min_yield"] is None
    assert dist["max_yield"] is None
    assert dist["avg_yield"] is None
    assert dist["std_dev_yield"] is None
    assert dist["zero_yield_count"] == 0
    assert report["outlier_analysis"] == {
        "lower_bound": None,
        "upper_bound": None,
        "outlier_count": 0,
    }
    assert report["season_name_issues"].empty
    assert report["zero_yield_investigation"].empty


def test_validate_flag_summary(cleaned_records):
    """Test post-cleaning flag summary."""
    summary = ValidateCleanedDataUseCase().execute(cleaned_records)["flag_summary"]

    assert summary.iloc[0]["data_quality_flag"] == "clean"
    assert summary.iloc[0]["record_count"] == 2
    assert summary.iloc[0]["percentage"] == 40.0
    assert set(summary["data_quality_flag"]) == {f.value for f in DataQualityFlag}
    assert summary["record_count"].sum() == 5


def test_validate_clean_statistics(cleaned_records):
    """Test statistics over clean rows only."""
    stats = ValidateCleanedDataUseCase().execute(cleaned_records)["clean_statistics"]

    assert stats["clean_records"] == 2
    assert stats["unique_crops"] == 2
    assert stats["unique_states"] == 2
    assert stats["min_yield"] == 2.1
    assert stats["max_yield"] == 3.2
    assert stats["avg_yield"] == pytest.approx(2.65)
    assert stats["std_dev_yield"] == pytest.approx(0.55)


def test_validate_season_standardization(cleaned_records):
    """Test seasons collapse after trimming."""
    seasons = ValidateCleanedDataUseCase().execute(cleaned_records)["season_standardization"]

    assert list(seasons["season"]) == ["Kharif", "Rabi", "Whole Year"]
    assert list(seasons["frequency"]) == [3, 1, 1]


def test_validate_top_crops_and_states(cleaned_records):
    """Test grouped clean-data rankings."""
    use_case = ValidateCleanedDataUseCase(top_crops_min_records=1)
    report = use_case.execute(cleaned_records)

    crops = report["top_crops_by_yield"]
    assert list(crops["crop"]) == ["Wheat", "Rice"]
    assert list(crops["avg_yield"]) == [3.2, 2.1]

    states = report["state_productivity"]
    assert list(states["state"]) == ["Punjab", "Assam"]
    assert list(states["total_production"]) == [150, 150]


def test_validate_top_crops_minimum_records(cleaned_records):
    """Test crops with fewer than 10 clean rows are excluded by default."""
    crops = ValidateCleanedDataUseCase().execute(cleaned_records)["top_crops_by_yield"]
    assert crops.empty
    assert list(crops.columns) == ["crop", "records", "avg_yield", "min_yield", "max_yield"]


def test_validate_duplicate_check(make_record):
    """Test duplicates by crop, year, season and state."""
    records = CleanCropYieldUseCase().execute(
        [
            make_record(crop="Rice"),
            make_record(crop="Rice "),
            make_record(crop="Rice", crop_yield=9.0),
            make_record(crop="Wheat"),
        ]
    )
    duplicates = ValidateCleanedDataUseCase().execute(records)["duplicate_check"]

    assert len(duplicates) == 1
    assert duplicates.iloc[0]["crop"] == "Rice"
    assert duplicates.iloc[0]["duplicate_count"] == 3


def test_validate_area_production_consistency(make_record):
    """Test area/production consistency counters."""
    records = CleanCropYieldUseCase().execute(
        [
            make_record(area=10.0, production=0, crop_yield=0.0),
            make_record(area=0.0, production=5, crop_yield=1.0),
            make_record(area=10.0, production=5, crop_yield=0.0),
            make_record(area=10.0, production=5, crop_yield=0.5),
        ]
    )
    consistency = ValidateCleanedDataUseCase().execute(records)["area_production_consistency"]

    assert consistency == {
        "total_records": 4,
        "zero_production_with_area": 1,
        "production_without_area": 1,
        "zero_yield_with_production": 1,
    }


def test_validate_year_coverage(cleaned_records):
    """Test per-year coverage."""
    coverage = ValidateCleanedDataUseCase().execute(cleaned_records)["year_coverage"]

    assert list(coverage["crop_year"]) == [2000, 2001]
    assert list(coverage["records"]) == [4, 1]
    assert list(coverage["states_covered"]) == [3, 1]
    assert list(coverage["crops_covered"]) == [4, 1]


def test_validate_empty_table():
    """Test validation queries over an empty cleaned table."""
    report = ValidateCleanedDataUseCase().execute([])

    assert report["flag_summary"].empty
    assert report["clean_statistics"]["clean_records"] == 0
    assert report["clean_statistics"]["avg_yield"] is None
    assert report["area_production_consistency"]["total_records"] == 0
    assert report["duplicate_check"].empty
    assert report["year_coverage"].empty


def test_export_clean_and_flagged(cleaned_records):
    """Test the clean and flagged exports."""
    exports = ExportCleanedDataUseCase().execute(cleaned_records)

    clean = exports["clean"]
    assert list(clean.columns) == EXPORT_COLUMNS
    assert list(clean["crop"]) == ["Wheat", "Rice"]  # 2000/Punjab before 2001/Assam

    flagged = exports["flagged"]
    assert list(flagged.columns) == FLAGGED_COLUMNS
    assert list(flagged["data_quality_flag"]) == ["extreme_value", "outlier", "zero_yield"]
    assert len(clean) + len(flagged) == len(cleaned_records)

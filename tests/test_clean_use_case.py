"""Tests for CleanCropYieldUseCase."""

from cropyield.domain.entities.data_quality_flag import DataQualityFlag
from cropyield.domain.use_cases.clean_crop_yield import CleanCropYieldUseCase, trim


def test_clean_zero_yield_example(make_record):
    """Test the zero yield example row."""
    use_case = CleanCropYieldUseCase()

    result = use_case.execute([make_record(crop="Rice ", crop_yield=0)])

    assert len(result) == 1
    assert result[0].crop == "Rice"
    assert result[0].data_quality_flag == DataQualityFlag.ZERO_YIELD
    assert result[0].cleaning_notes == "Zero yield - investigate crop failure or data entry error"


def test_clean_extreme_value(make_record):
    """Test yields above 1000 are flagged extreme."""
    result = CleanCropYieldUseCase().execute([make_record(crop_yield=1500)])
    assert result[0].data_quality_flag == DataQualityFlag.EXTREME_VALUE
    assert result[0].cleaning_notes == "Extreme yield value - requires validation"


def test_clean_flags_every_row(raw_records):
    """Test row count, order and flags are preserved."""
    result = CleanCropYieldUseCase().execute(raw_records)

    assert len(result) == len(raw_records)
    assert [r.data_quality_flag for r in result] == [
        DataQualityFlag.ZERO_YIELD,
        DataQualityFlag.CLEAN,
        DataQualityFlag.EXTREME_VALUE,
        DataQualityFlag.OUTLIER,
        DataQualityFlag.CLEAN,
    ]
    for raw, cleaned in zip(raw_records, result):
        assert cleaned.crop_year == raw.crop_year
        assert cleaned.area == raw.area
        assert cleaned.crop_yield == raw.crop_yield
        assert cleaned.cleaning_notes == cleaned.data_quality_flag.notes


def test_clean_trims_text_fields(raw_records):
    """Test crop, season and state are trimmed."""
    result = CleanCropYieldUseCase().execute(raw_records)

    assert result[1].season == "Rabi"
    assert result[1].state == "Punjab"
    assert result[2].crop == "Coconut"
    assert result[2].season == "Whole Year"


def test_clean_is_idempotent(raw_records):
    """Test cleaning already cleaned records changes nothing."""
    use_case = CleanCropYieldUseCase()
    once = use_case.execute(raw_records)
    twice = use_case.execute(once)
    assert once == twice


def test_clean_does_not_mutate_input(raw_records):
    """Test raw records are left untouched."""
    CleanCropYieldUseCase().execute(raw_records)
    assert raw_records[0].crop == "Rice "
    assert raw_records[0].data_quality_flag is None


def test_clean_missing_yield_is_clean(make_record):
    """Test missing yield passes through as clean."""
    result = CleanCropYieldUseCase().execute([make_record(crop_yield=None, crop=None)])
    assert result[0].data_quality_flag == DataQualityFlag.CLEAN
    assert result[0].crop is None


def test_trim():
    """Test trim helper."""
    assert trim("  Kharif  ") == "Kharif"
    assert trim(trim("Rabi ")) == trim("Rabi ")
    assert trim(None) is None


def test_clean_empty():
    """Test empty input."""
    assert CleanCropYieldUseCase().execute([]) == []

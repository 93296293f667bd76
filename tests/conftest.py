"""Shared fixtures."""

import pytest
from cropyield.domain.entities.crop_yield_record import CropYieldRecord


def _make_record(crop="Rice", year=2000, season="Kharif", state="Assam", crop_yield=1.5, **kwargs):
    fields = dict(
        crop=crop,
        crop_year=year,
        season=season,
        state=state,
        area=100.0,
        production=150,
        annual_rainfall=2000.0,
        fertilizer=5000.0,
        pesticide=20.0,
        crop_yield=crop_yield,
    )
    fields.update(kwargs)
    return CropYieldRecord(**fields)


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""
    return _make_record


@pytest.fixture
def raw_records(make_record):
    """Raw rows with untrimmed text and one of each flag."""
    return [
        make_record(crop="Rice ", season="Kharif     ", crop_yield=0.0, production=0),
        make_record(crop="Wheat", season="Rabi       ", state=" Punjab", crop_yield=3.2),
        make_record(crop="Coconut ", season="Whole Year ", state="Kerala", crop_yield=1500.0),
        make_record(crop="Maize", season="Kharif     ", crop_yield=-2.0),
        make_record(crop="Rice", season="Kharif", year=2001, crop_yield=2.1),
    ]

"""Tests for the command line interface."""

import pandas as pd
import pytest
from cropyield.presentation.cli.main import build_parser, main, sqlite_parent_dir


def test_parser_requires_command():
    """Test a subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_clean_command(tmp_path, capsys):
    """Test the clean command ingests, cleans and exports."""
    raw = tmp_path / "crop_yield.csv"
    pd.DataFrame(
        {
            "Crop": ["Rice ", "Wheat"],
            "Crop_Year": [1997, 1998],
            "Season": ["Kharif     ", "Rabi       "],
            "State": ["Assam", "Punjab"],
            "Area": [100, 50],
            "Production": [0, 80],
            "Annual_Rainfall": [2051.4, 650.2],
            "Fertilizer": [9000.5, 4000.0],
            "Pesticide": [30.2, 12.5],
            "Yield": [0.0, 1.6],
        }
    ).to_csv(raw, index=False)
    export_dir = tmp_path / "exports"

    main(
        [
            "clean",
            "--raw-csv",
            str(raw),
            "--db-url",
            f"sqlite:///{tmp_path / 'crop.db'}",
            "--export-dir",
            str(export_dir),
        ]
    )

    assert "CLEANING COMPLETED" in capsys.readouterr().out
    clean = pd.read_csv(export_dir / "crop_yield_cleaned.csv")
    assert list(clean["crop"]) == ["Wheat"]


def test_analyze_missing_file_exits(tmp_path):
    """Test a missing cleaned CSV exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        main(["analyze", "--cleaned-csv", str(tmp_path / "missing.csv"), "--plot-dir", str(tmp_path)])
    assert exc_info.value.code == 1


def test_sqlite_parent_dir(tmp_path):
    """Test the SQLite database directory is created from the URL."""
    target = tmp_path / "nested" / "db"
    assert sqlite_parent_dir(f"sqlite:///{target / 'crop.db'}?timeout=5") == target
    assert target.is_dir()


def test_sqlite_parent_dir_ignores_other_urls():
    """Test in-memory and non-SQLite URLs are left alone."""
    assert sqlite_parent_dir("sqlite:///:memory:") is None
    assert sqlite_parent_dir("sqlite://") is None
    assert sqlite_parent_dir("postgresql://user:pw@localhost/crops") is None

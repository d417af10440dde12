"""
Tests for the census name table builder.

Run with: pytest tests/test_census.py
"""

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'scripts'))

import build_name_tables  # noqa: E402

from rndrec import sampler_from_file  # noqa: E402


CENSUS_LAST = """\
SMITH          1.006  1.006      1
JOHNSON        0.810  1.816      2
OBRIEN         0.015 60.211   1043
MCDONALD       0.048 40.133    231
RARE           0.002 90.000  88799
"""

CENSUS_FEMALE = """\
MARY           2.629  2.629      1
PATRICIA       1.073  3.702      2
"""

CENSUS_MALE = """\
JAMES          3.318  3.318      1
JOHN           3.271  6.589      2
"""


@pytest.fixture
def census_dir(tmp_path):
    """Directory with the three census input files"""
    directory = tmp_path / 'census'
    directory.mkdir()
    (directory / 'dist.all.last').write_text(CENSUS_LAST)
    (directory / 'dist.female.first').write_text(CENSUS_FEMALE)
    (directory / 'dist.male.first').write_text(CENSUS_MALE)
    return directory


@pytest.fixture
def corrections_file(tmp_path):
    path = tmp_path / 'corrections.txt'
    path.write_text("O'Brien\nMcDonald\n\n")
    return path


def test_parse_census_line():
    """Test parsing the fixed-width census layout"""
    assert build_name_tables.parse_census_line("JAMES          3.318  3.318      1") == ("JAMES", 3.318)
    assert build_name_tables.parse_census_line("not a census line") is None
    assert build_name_tables.parse_census_line("JAMES 3 3 1") is None


def test_normalize_name():
    """Test capitalization and corrections"""
    corrections = {"OBRIEN": "O'Brien"}

    assert build_name_tables.normalize_name("JAMES", corrections) == "James"
    assert build_name_tables.normalize_name("OBRIEN", corrections) == "O'Brien"
    assert build_name_tables.normalize_name("J", corrections) == "J"


def test_load_corrections(corrections_file):
    """Test that corrections are keyed by census spelling"""
    corrections = build_name_tables.load_corrections(corrections_file)

    assert corrections == {"OBRIEN": "O'Brien", "MCDONALD": "McDonald"}


def test_build_table_filters_rare_names():
    """Test that names at or below the frequency threshold are dropped"""
    table = build_name_tables.build_table(CENSUS_LAST.splitlines(), {})

    assert list(table['name']) == ["Smith", "Johnson", "Obrien", "Mcdonald"]
    assert list(table['weight']) == [1.006, 0.810, 0.015, 0.048]


def test_build_table_skips_bad_lines():
    """Test that lines without the census layout are skipped"""
    lines = ["SMITH          1.006  1.006      1", "garbage", ""]
    table = build_name_tables.build_table(lines, {})

    assert list(table['name']) == ["Smith"]


def test_process_file(census_dir, corrections_file, tmp_path):
    """Test that output rows are name|weight with three decimals"""
    corrections = build_name_tables.load_corrections(corrections_file)
    out_path = tmp_path / 'out' / 'name_last.csv'

    count = build_name_tables.process_file(census_dir / 'dist.all.last', out_path, corrections)

    assert count == 4
    assert out_path.read_text().splitlines() == [
        "Smith|1.006",
        "Johnson|0.810",
        "O'Brien|0.015",
        "McDonald|0.048",
    ]


def test_output_feeds_sampler(census_dir, tmp_path):
    """Test that a built table loads into a sampler"""
    out_path = tmp_path / 'name_first_male.csv'
    build_name_tables.process_file(census_dir / 'dist.male.first', out_path, {})

    sampler = sampler_from_file(out_path, weight_col=1, field_sep='|', seed=0)

    assert sampler.total == pytest.approx(6.589)
    assert sampler.draw()[0] in ("James", "John")


def test_main(census_dir, corrections_file, tmp_path):
    """Test the full conversion"""
    out_dir = tmp_path / 'us'
    exit_code = build_name_tables.main([
        '--input-dir', str(census_dir),
        '--output-dir', str(out_dir),
        '--corrections', str(corrections_file),
    ])

    assert exit_code == 0
    for name in ('name_last.csv', 'name_first_female.csv', 'name_first_male.csv'):
        assert (out_dir / name).exists()


def test_main_missing_input(tmp_path):
    """Test that a missing census file fails the run"""
    exit_code = build_name_tables.main([
        '--input-dir', str(tmp_path / 'nowhere'),
        '--output-dir', str(tmp_path / 'us'),
    ])

    assert exit_code == 1

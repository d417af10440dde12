"""
Tests for frequency reports.
"""

import re

import pytest

from rndrec import WeightedSampler, expected_frequencies, format_report, frequency_report


def test_population_report(population_records, population_shares):
    """Test observed frequencies keyed by continent"""
    sampler = WeightedSampler(population_records, weight_col=1, seed=42)
    report = frequency_report(sampler, draws=100_000)

    assert list(report.index) == sorted(population_shares)
    assert report.sum() == pytest.approx(1.0)
    for continent, share in population_shares.items():
        assert report[continent] == pytest.approx(share, abs=0.01)


def test_report_is_sorted_by_key(weighted_records):
    """Test deterministic key ordering"""
    sampler = WeightedSampler(weighted_records, weight_col=1, seed=42)
    report = frequency_report(sampler, draws=10_000)

    assert list(report.index) == ["10%", "20%", "30%", "40%"]


def test_report_key_field():
    """Test keying on a field other than the first"""
    records = [["1", "north", "5"], ["2", "south", "5"]]
    sampler = WeightedSampler(records, weight_col=2, seed=1)
    report = frequency_report(sampler, draws=10_000, key_field=1)

    assert list(report.index) == ["north", "south"]


def test_report_requires_draws(weighted_records):
    """Test that a report needs at least one draw"""
    sampler = WeightedSampler(weighted_records, weight_col=1)

    with pytest.raises(ValueError):
        frequency_report(sampler, draws=0)


def test_expected_frequencies(population_records):
    """Test theoretical shares, including a zero-weight key"""
    sampler = WeightedSampler(population_records, weight_col=1)
    expected = expected_frequencies(sampler)

    assert expected["Antarctica"] == 0.0
    assert expected["Asia"] == pytest.approx(4_157_300_000 / 6_814_814_000)
    assert expected.sum() == pytest.approx(1.0)


def test_format_report(weighted_records):
    """Test "key: 0.20" rendering"""
    sampler = WeightedSampler(weighted_records, weight_col=1, seed=42)
    lines = format_report(frequency_report(sampler, draws=100_000))

    assert [line.split(": ")[0] for line in lines] == ["10%", "20%", "30%", "40%"]
    for line, share in zip(lines, [0.10, 0.20, 0.30, 0.40]):
        assert re.fullmatch(r"\d+%: \d\.\d\d", line)
        assert float(line.split(": ")[1]) == pytest.approx(share, abs=0.011)

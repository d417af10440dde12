"""
Empirical frequency reports.

Draws from a sampler many times and tallies how often each record came up,
keyed by one of its fields. Useful for checking that a frequency table
behaves the way its weights say it should.
"""

import logging
from typing import List

import pandas as pd

from .sampler import WeightedSampler

logger = logging.getLogger(__name__)

DEFAULT_DRAWS = 100_000


def frequency_report(
    sampler: WeightedSampler,
    draws: int = DEFAULT_DRAWS,
    key_field: int = 0
) -> pd.Series:
    """
    Observed frequency of each key over a number of draws.

    Args:
        sampler: Sampler to draw from
        draws: Number of draws
        key_field: Index of the field used as the key (assumed unique)

    Returns:
        Series of frequencies indexed by key, sorted by key. Keys that were
        never drawn are absent.
    """
    if draws <= 0:
        raise ValueError(f"Number of draws must be positive, got {draws}")

    keys = [fields[key_field] for fields in sampler.sample(draws)]
    counts = pd.Series(keys, dtype=str).value_counts(normalize=True)
    counts = counts.sort_index()
    counts.name = 'frequency'

    logger.debug(f"Tallied {draws} draws into {len(counts)} keys")
    return counts


def expected_frequencies(sampler: WeightedSampler, key_field: int = 0) -> pd.Series:
    """Theoretical weight / total share of each key, sorted by key"""
    shares = pd.Series(
        [sampler.probability(j) for j in range(len(sampler))],
        index=[entry.fields[key_field] for entry in sampler.entries],
        name='expected',
    )
    return shares.groupby(level=0).sum().sort_index()


def format_report(frequencies: pd.Series) -> List[str]:
    """Render a report as "key: 0.20" lines"""
    return [f"{key}: {value:.2f}" for key, value in frequencies.items()]

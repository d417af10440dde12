"""
Pytest fixtures for sampler testing.
"""

from pathlib import Path

import pytest
import pandas as pd

from rndrec.config import get_settings


REPO_ROOT = Path(__file__).parent.parent
DATA_DIR = REPO_ROOT / 'data'


@pytest.fixture(autouse=True)
def fresh_settings():
    """
    Settings are cached per process; reload them for every test so that
    monkeypatched environment variables take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def weighted_records():
    """Four records whose weights are their percentage share"""
    return [
        ["20%", "20"],
        ["30%", "30"],
        ["10%", "10"],
        ["40%", "40"],
    ]


@pytest.fixture
def color_records():
    """Records without a weight column"""
    return [
        ["red"],
        ["green"],
        ["blue"],
    ]


@pytest.fixture
def population_records():
    """World population by continent, with digit grouping"""
    return [
        ["Africa", "1,030,400,000"],
        ["Antarctica", "0"],
        ["Asia", "4,157,300,000"],
        ["Australia", "36,700,000"],
        ["Europe", "738,600,000"],
        ["North America", "461,114,000"],
        ["South America", "390,700,000"],
    ]


@pytest.fixture
def population_shares():
    """Expected frequency of each continent, rounded to two places"""
    return {
        "Africa": 0.15,
        "Asia": 0.61,
        "Australia": 0.01,
        "Europe": 0.11,
        "North America": 0.07,
        "South America": 0.06,
    }


@pytest.fixture
def population_file():
    """Pipe-delimited copy of population_records shipped with the repo"""
    return DATA_DIR / 'continent_population.csv'


@pytest.fixture
def names_dir():
    """Sample census name tables shipped with the repo"""
    return DATA_DIR / 'us'


@pytest.fixture
def population_frame():
    """population_records as a DataFrame, with a percentage share column"""
    return pd.DataFrame({
        'continent': ['Africa', 'Antarctica', 'Asia', 'Australia',
                      'Europe', 'North America', 'South America'],
        'population': [1_030_400_000, 0, 4_157_300_000, 36_700_000,
                       738_600_000, 461_114_000, 390_700_000],
        'share': [15.1, 0.0, 61.0, 0.5, 10.8, 6.8, 5.7],
    })

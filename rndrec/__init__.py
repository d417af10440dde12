"""
Random Record Package

Draws records from a weighted list so that each record comes up in proportion
to its relative weight. Used to generate plausible test data, for example
names weighted by census frequency or regions weighted by population.
"""

from .models import Record, WeightEntry, UNIFORM_WEIGHT
from .errors import (
    RecordSourceError,
    OutOfRangeColumnError,
    InvalidWeightError,
    EmptyInputError,
    NonPositiveTotalError,
    IngestionError,
    WeightOverflowError,
)
from .sampler import WeightedSampler, parse_weight
from .loader import read_records, sampler_from_reader, sampler_from_file, sampler_from_frame
from .report import frequency_report, expected_frequencies, format_report
from .names import NameGenerator

__version__ = "1.0.0"

__all__ = [
    # Main classes
    'WeightedSampler',
    'NameGenerator',

    # Data models
    'Record',
    'WeightEntry',
    'UNIFORM_WEIGHT',

    # Errors
    'RecordSourceError',
    'OutOfRangeColumnError',
    'InvalidWeightError',
    'EmptyInputError',
    'NonPositiveTotalError',
    'IngestionError',
    'WeightOverflowError',

    # Loading
    'read_records',
    'sampler_from_reader',
    'sampler_from_file',
    'sampler_from_frame',

    # Reports and utilities
    'frequency_report',
    'expected_frequencies',
    'format_report',
    'parse_weight',
]

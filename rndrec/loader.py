"""
Record loading from delimited text.

Reads pipe- or comma-separated tables (one record per line, standard double
quote rules) into lists of string fields and builds samplers from them.

File format, e.g. data/continent_population.csv:
    Africa|1,030,400,000
    Antarctica|0
    Asia|4,157,300,000
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

import pandas as pd

from .errors import IngestionError, OutOfRangeColumnError
from .models import UNIFORM_WEIGHT
from .sampler import WeightedSampler

logger = logging.getLogger(__name__)

DEFAULT_FIELD_SEP = '|'


def read_records(stream: TextIO, field_sep: str = DEFAULT_FIELD_SEP) -> List[List[str]]:
    """
    Parse delimited text into records.

    Every field is kept as a string; there is no header row and no NA
    conversion. Blank lines are skipped. Every record must have as many
    fields as the first one.

    A double quote only starts a quoted field at the beginning of a field;
    elsewhere (a"b) it is kept as a literal character.

    Args:
        stream: Text stream to read
        field_sep: Single-character field separator

    Returns:
        List of records (possibly empty)

    Raises:
        IngestionError: Unbalanced quotes, text after a closing quote, or a
                        line whose field count differs from the first line
    """
    if len(field_sep) != 1:
        raise ValueError(f"Field separator must be a single character, got {field_sep!r}")

    reader = csv.reader(stream, delimiter=field_sep, quotechar='"', strict=True)
    records: List[List[str]] = []

    try:
        for fields in reader:
            if not fields:
                continue
            if records and len(fields) != len(records[0]):
                raise IngestionError(
                    f"Malformed delimited text: line {reader.line_num} has "
                    f"{len(fields)} fields, expected {len(records[0])}"
                )
            records.append(fields)
    except (csv.Error, UnicodeDecodeError) as e:
        raise IngestionError(f"Malformed delimited text: {e}") from e

    return records


def sampler_from_reader(
    stream: TextIO,
    weight_col: Optional[int] = UNIFORM_WEIGHT,
    field_sep: str = DEFAULT_FIELD_SEP,
    seed: Optional[int] = 0
) -> WeightedSampler:
    """
    Build a sampler from a delimited text stream.

    Args:
        stream: Text stream, one record per line
        weight_col: Index of the weight field, or UNIFORM_WEIGHT
        field_sep: Single-character field separator
        seed: Random seed

    Returns:
        Ready-to-use WeightedSampler
    """
    records = read_records(stream, field_sep)
    return WeightedSampler(records, weight_col=weight_col, seed=seed)


def sampler_from_file(
    path: Union[str, Path],
    weight_col: Optional[int] = UNIFORM_WEIGHT,
    field_sep: str = DEFAULT_FIELD_SEP,
    seed: Optional[int] = 0
) -> WeightedSampler:
    """
    Build a sampler from a delimited text file.

    See sampler_from_reader() for the arguments.
    """
    path = Path(path)

    try:
        with path.open('r', encoding='utf-8', newline='') as f:
            records = read_records(f, field_sep)
    except OSError as e:
        raise IngestionError(f"Could not read {path}: {e}") from e

    logger.info(f"Loaded {len(records)} records from {path}")
    return WeightedSampler(records, weight_col=weight_col, seed=seed)


def sampler_from_frame(
    frame: pd.DataFrame,
    weight_col: Optional[Union[int, str]] = UNIFORM_WEIGHT,
    seed: Optional[int] = 0
) -> WeightedSampler:
    """
    Build a sampler from the rows of a DataFrame.

    Every value is converted to its string form, so records look the same as
    records read from text.

    Args:
        frame: Distribution table, one row per record
        weight_col: Column name or position of the weight column,
                    or UNIFORM_WEIGHT
        seed: Random seed
    """
    if isinstance(weight_col, str):
        if weight_col not in frame.columns:
            raise OutOfRangeColumnError(weight_col, 0, len(frame.columns))
        weight_col = frame.columns.get_loc(weight_col)

    records = frame.astype(str).to_numpy().tolist()
    return WeightedSampler(records, weight_col=weight_col, seed=seed)

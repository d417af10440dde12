"""
Weighted record sampling.

A WeightedSampler holds a list of records and a parallel array of cumulative
weights. Each draw picks a uniform value in [0, total) and binary searches
the cumulative array for the first entry greater than it, so a record with
twice the weight of another is returned twice as often on average.
"""

import logging
import math
import re
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    EmptyInputError,
    InvalidWeightError,
    NonPositiveTotalError,
    OutOfRangeColumnError,
    WeightOverflowError,
)
from .models import Record, UNIFORM_WEIGHT, WeightEntry

logger = logging.getLogger(__name__)

# Digit grouping characters removed before a weight is parsed ("4,157,300_000")
GROUPING_CHARS = re.compile(r"[,_]")

_SEED_MODULUS = 2 ** 64


def parse_weight(text: str, record_index: int = 0) -> float:
    """
    Parse a weight field like "1,030,400,000" or "3.318" to a float.

    Commas and underscores are removed, then surrounding whitespace is
    stripped, so " 1,000 " parses as 1000.0.

    Args:
        text: Raw field text
        record_index: Position of the record, used in error messages

    Returns:
        Non-negative, finite weight

    Raises:
        InvalidWeightError: If the cleaned text is not a finite number >= 0
    """
    cleaned = GROUPING_CHARS.sub('', str(text)).strip()

    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidWeightError(text, record_index) from None

    if math.isnan(value) or math.isinf(value):
        raise InvalidWeightError(text, record_index, "not finite")
    if value < 0:
        raise InvalidWeightError(text, record_index, "negative")

    return value


def record_weight(fields: Record, weight_col: Optional[int], record_index: int = 0) -> float:
    """
    Extract the raw weight of a single record.

    Args:
        fields: Record fields
        weight_col: Index of the weight field, or UNIFORM_WEIGHT
        record_index: Position of the record, used in error messages

    Returns:
        The record's weight (1.0 for uniform weighting)
    """
    if weight_col is UNIFORM_WEIGHT:
        return 1.0

    if weight_col < 0 or weight_col >= len(fields):
        raise OutOfRangeColumnError(weight_col, record_index, len(fields))

    return parse_weight(fields[weight_col], record_index)


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Private generator; any Python int is folded into numpy's seed range"""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed) % _SEED_MODULUS)


class WeightedSampler:
    """
    Draws records with probability proportional to their weight.

    Records are returned as the same objects passed in at construction,
    not copies; treat them as read-only. The underlying list must not be
    mutated while the sampler is in use.

    A sampler is not thread-safe: every draw advances its private random
    generator. Use one sampler per thread or serialize calls to draw().
    """

    def __init__(
        self,
        records: Sequence[Record],
        weight_col: Optional[int] = UNIFORM_WEIGHT,
        seed: Optional[int] = 0
    ):
        """
        Build the cumulative weight index.

        Args:
            records: Multi-field records, each a sequence of strings
            weight_col: Index of the field holding the record's relative
                        weight. Grouping commas and underscores are ignored.
                        UNIFORM_WEIGHT (None) weighs every record equally.
            seed: Seed for the sampler's private random generator. The same
                  seed always yields the same sequence of draws.

        Raises:
            OutOfRangeColumnError: weight_col is not a field of some record
            InvalidWeightError: a weight field is not a non-negative number
            EmptyInputError: records is empty
            NonPositiveTotalError: the weights sum to zero
            WeightOverflowError: the weights sum past the largest float
        """
        weights = [
            record_weight(fields, weight_col, j)
            for j, fields in enumerate(records)
        ]

        if not weights:
            raise EmptyInputError()

        with np.errstate(over='ignore'):
            cumulative = np.cumsum(np.asarray(weights, dtype=float))
        total = float(cumulative[-1])

        if not math.isfinite(total):
            raise WeightOverflowError(len(weights))
        if total <= 0:
            raise NonPositiveTotalError(total)

        self._records: List[Record] = list(records)
        self._cumulative = cumulative
        self._total = total
        # First entry that reaches the total, i.e. the last drawable record
        self._last = int(np.searchsorted(cumulative, total, side='left'))
        self._rng = make_rng(seed)

        logger.debug(
            f"Built sampler over {len(self._records)} records "
            f"(total weight {total:,.2f}, seed {seed})"
        )

    @classmethod
    def build(
        cls,
        records: Sequence[Record],
        weight_col: Optional[int] = UNIFORM_WEIGHT,
        seed: Optional[int] = 0
    ) -> "WeightedSampler":
        """Alias for the constructor"""
        return cls(records, weight_col=weight_col, seed=seed)

    @property
    def total(self) -> float:
        """Sum of all weights"""
        return self._total

    @property
    def entries(self) -> Tuple[WeightEntry, ...]:
        """Records with their cumulative weights, in construction order"""
        return tuple(
            WeightEntry(float(cf), fields)
            for cf, fields in zip(self._cumulative, self._records)
        )

    def __len__(self) -> int:
        return len(self._records)

    def probability(self, index: int) -> float:
        """Probability that a single draw returns the record at index"""
        previous = float(self._cumulative[index - 1]) if index > 0 else 0.0
        return (float(self._cumulative[index]) - previous) / self._total

    def _locate(self, x: float) -> int:
        pos = int(np.searchsorted(self._cumulative, x, side='right'))
        return min(pos, self._last)

    def draw(self) -> Record:
        """
        Return a random record based on its relative weight.

        A record with weight 40 is returned, on average, four times as often
        as one with weight 10. Records with weight 0 are never returned.
        """
        x = self._rng.random() * self._total  # 0 <= x < total
        return self._records[self._locate(x)]

    def sample(self, n: int) -> List[Record]:
        """
        Draw n records at once.

        Args:
            n: Number of draws

        Returns:
            List of records, in draw order
        """
        if n < 0:
            raise ValueError(f"Number of draws must be non-negative, got {n}")

        xs = self._rng.random(n) * self._total
        positions = np.minimum(
            np.searchsorted(self._cumulative, xs, side='right'),
            self._last
        )
        return [self._records[int(pos)] for pos in positions]

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        return self.draw()

    def __str__(self) -> str:
        lines = [f"Cumulative frequency maximum: {self._total:.2f}"]
        for j, (cf, fields) in enumerate(zip(self._cumulative, self._records)):
            lines.append(f"{j:2d}: [{cf:10.2f}] {list(fields)}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"WeightedSampler(records={len(self._records)}, total={self._total:.2f})"

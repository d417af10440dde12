"""
Data models for weighted record sampling.

Defines the structures shared by the sampler, the loaders and the reports.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


# A record is an ordered sequence of string fields. The sampler only looks
# at the field selected as the weight column.
Record = Sequence[str]

# Passed as the weight column when every record should weigh the same.
UNIFORM_WEIGHT: Optional[int] = None


@dataclass(frozen=True)
class WeightEntry:
    """
    A record paired with its cumulative weight.

    The cumulative weight is the record's own weight plus the weights of
    every record before it, in construction order. An entry whose cumulative
    value equals its predecessor's has weight zero and is never drawn.
    """
    cumulative: float
    fields: Record

    def weight(self, previous: float = 0.0) -> float:
        """Standalone weight given the preceding entry's cumulative value"""
        return self.cumulative - previous

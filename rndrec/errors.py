"""
Exceptions raised while building a record sampler.

Every error is raised at construction time; drawing from a built sampler
never fails.
"""

from typing import Union


class RecordSourceError(ValueError):
    """Base class for all sampler construction errors"""


class OutOfRangeColumnError(RecordSourceError):
    """The weight column does not exist in some record"""

    def __init__(self, column: Union[int, str], record_index: int, field_count: int):
        self.column = column
        self.record_index = record_index
        self.field_count = field_count
        super().__init__(
            f"specified weight column ({column}) is out of range "
            f"(record {record_index} has {field_count} fields)"
        )


class InvalidWeightError(RecordSourceError):
    """A weight field is not a finite, non-negative number"""

    def __init__(self, text: str, record_index: int, reason: str = "not a number"):
        self.text = text
        self.record_index = record_index
        super().__init__(f"invalid weight {text!r} in record {record_index}: {reason}")


class EmptyInputError(RecordSourceError):
    """No records were supplied"""

    def __init__(self):
        super().__init__("number of records must be greater than zero")


class NonPositiveTotalError(RecordSourceError):
    """The weights add up to zero"""

    def __init__(self, total: float):
        self.total = total
        super().__init__(f"cumulative frequency must be greater than zero (got {total})")


class IngestionError(RecordSourceError):
    """Delimited text could not be read or parsed"""


class WeightOverflowError(RecordSourceError):
    """The weights are finite but their sum is not"""

    def __init__(self, record_count: int):
        self.record_count = record_count
        super().__init__(
            f"cumulative frequency of {record_count} records overflows a float"
        )

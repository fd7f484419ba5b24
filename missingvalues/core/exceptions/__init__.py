"""Exceptions package."""

from missingvalues.core.exceptions.data.algorithm import (
    AlgorithmError,
    CapabilityError,
    InvalidRangeError,
    StageError,
    UninitializedError,
)
from missingvalues.core.exceptions.models.dataset import (
    DatasetError,
    DuplicateLabelError,
    SchemaMismatchError,
    UnknownLabelError,
)

__all__ = [
    "AlgorithmError",
    "CapabilityError",
    "InvalidRangeError",
    "StageError",
    "UninitializedError",
    "DatasetError",
    "DuplicateLabelError",
    "SchemaMismatchError",
    "UnknownLabelError",
]

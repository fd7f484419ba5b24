"""Batch filters around missing values algorithms."""

from missingvalues.filters.missing_values_filter import (
    MissingValuesFilter,
    MissingValuesImputationFilter,
    MissingValuesInjectionFilter,
)

__all__ = [
    "MissingValuesFilter",
    "MissingValuesImputationFilter",
    "MissingValuesInjectionFilter",
]

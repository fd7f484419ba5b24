"""Instance (row) model for tabular datasets."""

# Standard Library Imports
from typing import Any, List, Sequence

# Third Party Imports
import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Internal Imports
from missingvalues.utils.constants import MISSING_VALUE


def is_missing(value: float) -> bool:
    """Check whether a value is the missing value sentinel."""
    return bool(np.isnan(value))


class Instance(BaseModel):
    """A single row of a dataset.

    Values are stored as floats, one slot per attribute of the owning schema:
    real numbers for numeric attributes, POSIX seconds for dates and label
    indices for nominal and string attributes. Missing values are NaN.

    Attributes:
        values: The values of the row
        weight: The non-negative weight of the row
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: np.ndarray = Field(..., description="One value per attribute, NaN if missing.")
    weight: float = Field(default=1.0, description="The weight of the row.")

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, values: Any) -> np.ndarray:
        array = np.array(values, dtype=float)
        if array.ndim != 1:
            raise ValueError(f"Row values must be one-dimensional, got shape {array.shape}")
        return array

    @field_validator("weight")
    @classmethod
    def _validate_weight(cls, weight: float) -> float:
        if weight < 0:
            raise ValueError(f"Row weight must be non-negative, got {weight}")
        return weight

    @classmethod
    def missing(cls, num_values: int, weight: float = 1.0) -> "Instance":
        """Create a row with every value missing."""
        return cls(values=np.full(num_values, MISSING_VALUE), weight=weight)

    @property
    def num_values(self) -> int:
        return int(self.values.shape[0])

    def value(self, index: int) -> float:
        return float(self.values[index])

    def is_missing(self, index: int) -> bool:
        return is_missing(self.values[index])

    def has_missing(self) -> bool:
        """Whether at least one value of the row is missing."""
        return bool(np.isnan(self.values).any())

    def missing_indices(self) -> List[int]:
        """Get the indices of all missing values, in ascending order."""
        return [int(i) for i in np.flatnonzero(np.isnan(self.values))]

    def set_value(self, index: int, value: float) -> None:
        self.values[index] = value

    def set_missing(self, index: int) -> None:
        self.values[index] = MISSING_VALUE

    def clone(self) -> "Instance":
        """Create an independent copy of the row."""
        return Instance(values=self.values, weight=self.weight)

    def with_values(self, values: Sequence[float]) -> "Instance":
        """Create a row with the same weight and the given values."""
        return Instance(values=values, weight=self.weight)

    def __len__(self) -> int:
        return self.num_values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instance):
            return NotImplemented
        return self.weight == other.weight and np.array_equal(
            self.values, other.values, equal_nan=True
        )

    def __repr__(self) -> str:
        return f"Instance(values={self.values.tolist()}, weight={self.weight})"

"""Capability model: which datasets an algorithm can process."""

# Standard Library Imports
from typing import FrozenSet

# Third Party Imports
import numpy as np
from pydantic import BaseModel, Field

# Internal Imports
from missingvalues.core.exceptions.data.algorithm import CapabilityError
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.utils.constants import AttributeType

ALL_TYPES: FrozenSet[AttributeType] = frozenset(AttributeType)
BASIC_TYPES: FrozenSet[AttributeType] = frozenset(
    {AttributeType.NUMERIC, AttributeType.DATE, AttributeType.NOMINAL}
)


class Capabilities(BaseModel):
    """Declared compatibility requirements of an algorithm.

    Attributes:
        owner: Name of the algorithm the capabilities belong to
        attribute_types: Accepted types of non-class attributes
        class_types: Accepted types of the class attribute
        missing_values: Whether non-class attributes may contain missing values
        missing_class_values: Whether the class attribute may contain missing values
        no_class: Whether datasets without class attribute are accepted
        min_instances: Minimum number of rows
    """

    owner: str = Field(..., description="Name of the owning algorithm.")
    attribute_types: FrozenSet[AttributeType] = Field(default=ALL_TYPES)
    class_types: FrozenSet[AttributeType] = Field(default=ALL_TYPES)
    missing_values: bool = Field(default=True)
    missing_class_values: bool = Field(default=True)
    no_class: bool = Field(default=True)
    min_instances: int = Field(default=0)

    def handles(self, attribute_type: AttributeType) -> bool:
        """Whether the given type is accepted for non-class attributes."""
        return attribute_type in self.attribute_types

    def test(self, data: Dataset) -> None:
        """Test a dataset against the capabilities.

        Args:
            data: The dataset to test

        Raises:
            CapabilityError: Naming the first unmet requirement
        """
        if data.class_index is None:
            if not self.no_class:
                raise CapabilityError(self.owner, "Cannot handle data without class attribute!")
        else:
            att = data.attribute(data.class_index)
            if att.type not in self.class_types:
                raise CapabilityError(
                    self.owner, f"Cannot handle {att.type.value} class attribute '{att.name}'!"
                )
            if not self.missing_class_values and data.missing_count(data.class_index) > 0:
                raise CapabilityError(self.owner, "Cannot handle missing class values!")

        for i, att in enumerate(data.attributes):
            if i == data.class_index:
                continue
            if att.type not in self.attribute_types:
                raise CapabilityError(
                    self.owner, f"Cannot handle {att.type.value} attribute '{att.name}'!"
                )

        if not self.missing_values and data.num_instances > 0:
            matrix = data.to_matrix()
            if data.class_index is not None:
                matrix = np.delete(matrix, data.class_index, axis=1)
            if np.isnan(matrix).any():
                raise CapabilityError(self.owner, "Cannot handle missing values!")

        if data.num_instances < self.min_instances:
            raise CapabilityError(
                self.owner,
                f"Not enough training instances (required: {self.min_instances}, "
                f"provided: {data.num_instances})!",
            )

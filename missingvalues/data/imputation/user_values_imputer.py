"""Imputation with user-supplied replacement values."""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from missingvalues.core.exceptions.data.algorithm import InvalidRangeError
from missingvalues.core.models.attribute_range import AttributeRange
from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.attribute import parse_date
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.imputation.base_imputer import BaseImputer, basic_capabilities
from missingvalues.utils.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATE_REPLACEMENT,
    DEFAULT_NOMINAL_REPLACEMENT,
    DEFAULT_NUMERIC_REPLACEMENT,
)


@dataclass
class UserSuppliedValuesConfig(RangeConfig):
    """Configuration for imputation with fixed values.

    Attributes:
        numeric: Replacement for numeric attributes
        date: Replacement for date attributes, parsed with ``date_format``
        date_format: strptime format of ``date``
        nominal: Label index of the replacement for nominal attributes
            ('first', 'last' or a 1-based number)
        attribute_range: The attributes to impute
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    numeric: float = DEFAULT_NUMERIC_REPLACEMENT
    date: str = DEFAULT_DATE_REPLACEMENT
    date_format: str = DEFAULT_DATE_FORMAT
    nominal: str = DEFAULT_NOMINAL_REPLACEMENT

    def __post_init__(self) -> None:
        super().__post_init__()
        if "," in self.nominal or "-" in self.nominal:
            raise InvalidRangeError(f"Nominal replacement must be a single index: '{self.nominal}'")
        AttributeRange(ranges=self.nominal)


@dataclass(frozen=True)
class UserSuppliedValuesState:
    indices: FrozenSet[int]
    date: float


class UserSuppliedValuesImputer(BaseImputer[UserSuppliedValuesState]):
    """Imputes missing values with user-supplied values."""

    def __init__(self, config: Optional[UserSuppliedValuesConfig] = None):
        super().__init__(config or UserSuppliedValuesConfig())
        self.config: UserSuppliedValuesConfig

    def get_capabilities(self) -> Capabilities:
        return basic_capabilities(self.name)

    def _create_state(self, data: Dataset) -> UserSuppliedValuesState:
        return UserSuppliedValuesState(
            indices=frozenset(self.config.resolve(data)),
            date=parse_date(self.config.date, self.config.date_format),
        )

    def _nominal_index(self, num_values: int) -> Optional[int]:
        """Resolve the nominal replacement, None for an empty domain."""
        resolved = AttributeRange(ranges=self.config.nominal).resolve(num_values)
        return resolved[0] if resolved else None

    def _apply_instance(
        self, instance: Instance, state: UserSuppliedValuesState, context: ApplyContext
    ) -> Instance:
        if not instance.has_missing():
            return instance.clone()

        values = instance.values.copy()
        for i in instance.missing_indices():
            if i not in state.indices:
                continue
            att = context.source.attribute(i)
            if att.is_date:
                values[i] = state.date
            elif att.is_numeric:
                values[i] = self.config.numeric
            elif att.is_nominal:
                index = self._nominal_index(att.num_values)
                if index is not None:
                    values[i] = index
            else:
                raise ValueError(
                    f"Unhandled attribute type for '{att.name}': {att.type.value}"
                )
        return instance.with_values(values)

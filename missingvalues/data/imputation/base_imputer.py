"""
Base imputation module for handling missing data.

This module provides the base class for imputation algorithms, which fill in
missing values using the state learned from training data.
"""

from dataclasses import dataclass
from typing import Optional, Union

from missingvalues.core.models.capabilities import BASIC_TYPES, Capabilities
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import BaseAlgorithm, BaseAlgorithmConfig, StateT
from missingvalues.utils.constants import Direction


@dataclass
class BaseImputerConfig(BaseAlgorithmConfig):
    """Base configuration for imputation algorithms.

    Attributes:
        verbose: Whether to emit debug messages
    """


def basic_capabilities(owner: str) -> Capabilities:
    """Capabilities of imputers handling numeric, date and nominal attributes."""
    return Capabilities(owner=owner, attribute_types=BASIC_TYPES)


class BaseImputer(BaseAlgorithm[StateT]):
    """Abstract base class for imputation algorithms."""

    direction = Direction.IMPUTATION

    def __init__(self, config: Optional[BaseImputerConfig] = None):
        """Initialize the base imputer.

        Args:
            config: Configuration for imputation
        """
        super().__init__(config)

    def _default_config(self) -> BaseImputerConfig:
        return BaseImputerConfig()

    def build_imputation(self, data: Dataset) -> Dataset:
        """Build the imputation on training data, see ``build``."""
        return self.build(data)

    def impute(self, data: Union[Dataset, Instance]) -> Union[Dataset, Instance]:
        """Impute missing values of a row or dataset, see ``apply``."""
        return self.apply(data)

"""
Base injection module for simulating missing data.

This module provides the base class for injection algorithms, which turn
present values into missing values.
"""

from dataclasses import dataclass
from typing import Optional, Union

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import BaseAlgorithm, BaseAlgorithmConfig, StateT
from missingvalues.utils.constants import Direction


@dataclass
class BaseInjectorConfig(BaseAlgorithmConfig):
    """Base configuration for injection algorithms.

    Attributes:
        verbose: Whether to emit debug messages
    """


class BaseInjector(BaseAlgorithm[StateT]):
    """Abstract base class for injection algorithms."""

    direction = Direction.INJECTION

    def __init__(self, config: Optional[BaseInjectorConfig] = None):
        super().__init__(config)

    def _default_config(self) -> BaseInjectorConfig:
        return BaseInjectorConfig()

    def build_injection(self, data: Dataset) -> Dataset:
        """Build the injection on training data, see ``build``."""
        return self.build(data)

    def inject(self, data: Union[Dataset, Instance]) -> Union[Dataset, Instance]:
        """Inject missing values into a row or dataset, see ``apply``."""
        return self.apply(data)

"""
Injection of missing values at random.

Every selected attribute has its own random stream, seeded from a master
generator, so masking an attribute does not depend on how many other
attributes are selected after it.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.injection.base_injector import BaseInjector
from missingvalues.utils.constants import DEFAULT_PERCENTAGE, DEFAULT_SEED, MAX_CHILD_SEED
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RandomPercentageConfig(RangeConfig):
    """Configuration for random injection.

    Attributes:
        seed: Seed of the master generator
        percentage: Probability (0-1) of a value being replaced
        attribute_range: The attributes to inject missing values into
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    seed: int = DEFAULT_SEED
    percentage: float = DEFAULT_PERCENTAGE

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0.0 <= self.percentage <= 1.0:
            raise ValueError(f"Percentage must be within 0-1, provided: {self.percentage}")


@dataclass(frozen=True)
class RandomPercentageState:
    """Selected attributes and the seeds of their random streams."""

    indices: Tuple[int, ...]
    seeds: Tuple[int, ...]

    def streams(self) -> List[np.random.Generator]:
        return [np.random.default_rng(seed) for seed in self.seeds]


class RandomPercentageInjector(BaseInjector[RandomPercentageState]):
    """Replaces the specified percentage of values in the selected attributes
    with missing values."""

    def __init__(self, config: Optional[RandomPercentageConfig] = None):
        super().__init__(config or RandomPercentageConfig())
        self.config: RandomPercentageConfig
        self._streams: Optional[List[np.random.Generator]] = None

    def _create_state(self, data: Dataset) -> RandomPercentageState:
        indices = tuple(self.config.resolve(data))
        master = np.random.default_rng(self.config.seed)
        seeds = tuple(int(master.integers(0, MAX_CHILD_SEED)) for _ in indices)
        logger.debug(f"Seeds per attribute: {dict(zip(indices, seeds))}")
        return RandomPercentageState(indices=indices, seeds=seeds)

    def build(self, data: Dataset) -> Dataset:
        header = super().build(data)
        self._streams = self._state.streams()
        return header

    def _mask(
        self, instance: Instance, state: RandomPercentageState, streams: List[np.random.Generator]
    ) -> Instance:
        result = instance.clone()
        for index, stream in zip(state.indices, streams):
            if stream.random() < self.config.percentage:
                result.set_missing(index)
        return result

    def _apply_instance(
        self, instance: Instance, state: RandomPercentageState, context: ApplyContext
    ) -> Instance:
        return self._mask(instance, state, self._streams)

    def _apply_dataset(self, data: Dataset, state: RandomPercentageState) -> Dataset:
        self._streams = state.streams()
        return super()._apply_dataset(data, state)

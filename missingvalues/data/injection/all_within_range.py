"""Injection that replaces all values within a range of attributes."""

from dataclasses import dataclass
from typing import Optional, Tuple

from missingvalues.core.models.attribute_range import indices_to_range_list
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.injection.base_injector import BaseInjector
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RangeState:
    indices: Tuple[int, ...]


class AllWithinRangeInjector(BaseInjector[RangeState]):
    """Injects missing values in all the attributes of the range."""

    def __init__(self, config: Optional[RangeConfig] = None):
        super().__init__(config or RangeConfig())
        self.config: RangeConfig

    def _create_state(self, data: Dataset) -> RangeState:
        indices = tuple(self.config.resolve(data))
        logger.debug(f"Masking attributes {indices_to_range_list(indices)}")
        return RangeState(indices=indices)

    def _apply_instance(self, instance: Instance, state: RangeState, context: ApplyContext) -> Instance:
        result = instance.clone()
        for index in state.indices:
            result.set_missing(index)
        return result

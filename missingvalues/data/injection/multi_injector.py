"""Sequential composition of injection algorithms."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.injection.base_injector import BaseInjector, BaseInjectorConfig
from missingvalues.data.injection.null_injector import NullInjector
from missingvalues.data.sequential import apply_stages, build_stages, check_direction
from missingvalues.utils.constants import Direction


@dataclass
class MultiInjectorConfig(BaseInjectorConfig):
    """Configuration for sequential injection.

    Attributes:
        algorithms: The injectors to apply in order (a single no-op if empty)
        verbose: Whether to emit debug messages
    """

    algorithms: List[BaseInjector] = field(default_factory=lambda: [NullInjector()])

    def __post_init__(self) -> None:
        if not self.algorithms:
            self.algorithms = [NullInjector()]
        self.algorithms = check_direction(self.algorithms, Direction.INJECTION)


class MultiInjector(BaseInjector[Tuple[BaseInjector, ...]]):
    """Applies the specified injection algorithms sequentially."""

    def __init__(self, config: Optional[MultiInjectorConfig] = None):
        super().__init__(config or MultiInjectorConfig())
        self.config: MultiInjectorConfig

    def _create_state(self, data: Dataset) -> Tuple[BaseInjector, ...]:
        stages, _ = build_stages(self.config.algorithms, data)
        return stages

    def _create_output_format(self, data: Dataset, state: Tuple[BaseInjector, ...]) -> Dataset:
        return state[-1].output_format.header()

    def _apply_instance(
        self, instance: Instance, state: Tuple[BaseInjector, ...], context: ApplyContext
    ) -> Instance:
        return apply_stages(state, instance)

    def _apply_dataset(self, data: Dataset, state: Tuple[BaseInjector, ...]) -> Dataset:
        return apply_stages(state, data)

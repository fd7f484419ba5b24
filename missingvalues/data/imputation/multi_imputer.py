"""Sequential composition of imputation algorithms."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.imputation.base_imputer import BaseImputer, BaseImputerConfig
from missingvalues.data.imputation.null_imputer import NullImputer
from missingvalues.data.sequential import apply_stages, build_stages, check_direction
from missingvalues.utils.constants import Direction


@dataclass
class MultiImputerConfig(BaseImputerConfig):
    """Configuration for sequential imputation.

    Attributes:
        algorithms: The imputers to apply in order (a single no-op if empty)
        verbose: Whether to emit debug messages
    """

    algorithms: List[BaseImputer] = field(default_factory=lambda: [NullImputer()])

    def __post_init__(self) -> None:
        if not self.algorithms:
            self.algorithms = [NullImputer()]
        self.algorithms = check_direction(self.algorithms, Direction.IMPUTATION)


class MultiImputer(BaseImputer[Tuple[BaseImputer, ...]]):
    """Applies the specified imputation algorithms sequentially.

    The configured imputers are templates: build creates copies of them, each
    built on the output format of its predecessor, and keeps the copies as
    state once all of them succeeded. A failing imputer is reported as
    ``StageError`` with its 1-based position.
    """

    def __init__(self, config: Optional[MultiImputerConfig] = None):
        super().__init__(config or MultiImputerConfig())
        self.config: MultiImputerConfig

    def _create_state(self, data: Dataset) -> Tuple[BaseImputer, ...]:
        stages, _ = build_stages(self.config.algorithms, data)
        return stages

    def _create_output_format(self, data: Dataset, state: Tuple[BaseImputer, ...]) -> Dataset:
        return state[-1].output_format.header()

    def _apply_instance(
        self, instance: Instance, state: Tuple[BaseImputer, ...], context: ApplyContext
    ) -> Instance:
        return apply_stages(state, instance)

    def _apply_dataset(self, data: Dataset, state: Tuple[BaseImputer, ...]) -> Dataset:
        return apply_stages(state, data)

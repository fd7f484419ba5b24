"""
K-Nearest Neighbors imputation.

This module provides an imputation algorithm that determines the neighborhood
of a row with a pluggable nearest neighbor search and fills each missing value
from the neighbors:

- the most common label (nominal attributes), ties going to the
  alphabetically smaller label
- the average in the neighborhood (numeric/date attributes)
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.attribute import Attribute
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.core.services.search.nearest_neighbor import (
    LinearNNSearch,
    NearestNeighborSearch,
)
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.imputation.base_imputer import (
    BaseImputer,
    BaseImputerConfig,
    basic_capabilities,
)
from missingvalues.utils.constants import DEFAULT_NUM_NEIGHBORS
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class KNNImputerConfig(BaseImputerConfig):
    """Configuration for KNN imputation.

    Attributes:
        num_neighbors: The size of the neighborhood to use
        search: The nearest neighbor search; copied and indexed at build time
        verbose: Whether to emit debug messages
    """

    num_neighbors: int = DEFAULT_NUM_NEIGHBORS
    search: NearestNeighborSearch = field(default_factory=LinearNNSearch)

    def __post_init__(self) -> None:
        if self.num_neighbors <= 0:
            raise ValueError(
                f"Size of neighborhood must be > 0, provided: {self.num_neighbors}"
            )


@dataclass(frozen=True)
class KNNState:
    """Training data and the search indexing it."""

    training: Dataset
    search: NearestNeighborSearch


def mean(values: List[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    if not values:
        return 0.0
    return float(np.mean(values))


def majority_label(att: Attribute, labels: List[int]) -> Optional[int]:
    """Most common label index; ties go to the alphabetically smaller label.

    Returns None if the attribute has an empty domain.
    """
    if att.num_values == 0:
        return None
    counts = {att.value(n): 0 for n in range(att.num_values)}
    for label in labels:
        counts[att.value(label)] += 1
    best = min(counts, key=lambda label: (-counts[label], label))
    return att.index_of(best)


class KNNImputerService(BaseImputer[KNNState]):
    """Service class for performing nearest neighbor imputation."""

    def __init__(self, config: Optional[KNNImputerConfig] = None):
        """Initialize the KNN imputer service.

        Args:
            config: Configuration for KNN imputation
        """
        super().__init__(config or KNNImputerConfig())
        self.config: KNNImputerConfig

    def get_capabilities(self) -> Capabilities:
        return basic_capabilities(self.name)

    def _create_state(self, data: Dataset) -> KNNState:
        training = data.clone()
        search = copy.deepcopy(self.config.search)
        search.set_instances(training)
        return KNNState(training=training, search=search)

    def _apply_instance(self, instance: Instance, state: KNNState, context: ApplyContext) -> Instance:
        missing = instance.missing_indices()
        if not missing:
            return instance.clone()

        result = instance.clone()
        closest = state.search.k_nearest_neighbors(instance, self.config.num_neighbors)
        for index in missing:
            att = state.training.attribute(index)
            present = [n.values[index] for n in closest if not n.is_missing(index)]
            if att.is_numeric:
                result.set_value(index, mean(present))
            elif att.is_nominal:
                label = majority_label(att, [int(v) for v in present])
                if label is not None:
                    result.set_value(index, label)
        return result

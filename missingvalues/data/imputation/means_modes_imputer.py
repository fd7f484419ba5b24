"""
Means and modes imputation.

Replaces missing values of nominal and numeric attributes with the modes and
means of the training data.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import ApplyContext
from missingvalues.data.imputation.base_imputer import BaseImputer
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MeansModesState:
    """Replacement value per attribute.

    Attributes:
        replacements: Mean (numeric/date) or label index of the mode (nominal);
            None where no replacement takes place
    """

    replacements: Tuple[Optional[float], ...]


def weighted_mean(values: np.ndarray, weights: np.ndarray) -> float:
    """Weighted mean of the present values, 0.0 if there are none."""
    present = ~np.isnan(values)
    total = weights[present].sum()
    if total <= 0:
        return 0.0
    return float(np.dot(values[present], weights[present]) / total)


def weighted_mode(values: np.ndarray, weights: np.ndarray, num_labels: int) -> Optional[int]:
    """Label index with the highest summed weight; the lowest index wins ties.

    Returns None if no value is present.
    """
    present = ~np.isnan(values)
    if num_labels == 0 or not present.any():
        return None
    counts = np.bincount(
        values[present].astype(int), weights=weights[present], minlength=num_labels
    )
    return int(np.argmax(counts))


class MeansModesImputer(BaseImputer[MeansModesState]):
    """Replaces all missing values for nominal and numeric attributes in a
    dataset with the modes and means from the training data.

    The class attribute as well as string and relational attributes are never
    touched.
    """

    def _create_state(self, data: Dataset) -> MeansModesState:
        weights = data.weights()
        matrix = data.to_matrix()
        replacements = []
        for i, att in enumerate(data.attributes):
            if i == data.class_index:
                replacements.append(None)
            elif att.is_nominal:
                replacements.append(weighted_mode(matrix[:, i], weights, att.num_values))
            elif att.is_numeric:
                replacements.append(weighted_mean(matrix[:, i], weights))
            else:
                replacements.append(None)
        logger.debug(f"Replacement values: {replacements}")
        return MeansModesState(replacements=tuple(replacements))

    def _apply_instance(
        self, instance: Instance, state: MeansModesState, context: ApplyContext
    ) -> Instance:
        values = instance.values.copy()
        class_index = context.source.class_index
        for i in instance.missing_indices():
            if i == class_index:
                continue
            if state.replacements[i] is not None:
                values[i] = state.replacements[i]
        return instance.with_values(values)

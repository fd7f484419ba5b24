"""
Iterative robust model-based imputation (IRMI).

This module provides an imputation service that bootstraps missing values with
medians and modes and then repeatedly models every attribute with missing
values from the other attributes, refining the imputed values epoch by epoch
until the predictions stabilize.

Reference:
    Templ, M., Kowarik, A., Filzmoser, P. (2011). Iterative stepwise
    regression imputation using standard and robust methods.
    Computational Statistics & Data Analysis, 55(10), 2793-2806.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

import numpy as np

from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.core.services.modeling.estimator_model import (
    ModelFactory,
    TrainedModel,
    default_classifier,
    default_regressor,
    train_attribute_model,
)
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.imputation.base_imputer import BaseImputer, basic_capabilities
from missingvalues.utils.constants import DEFAULT_EPSILON, DEFAULT_NUM_EPOCHS
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class IRMIConfig(RangeConfig):
    """Configuration for IRMI imputation.

    Attributes:
        num_epochs: Maximum number of epochs
        epsilon: Threshold for the summed squared differences between two
            consecutive imputations of an attribute, below which the
            attribute is considered stable
        nominal_model: Model factory for nominal attributes
        numeric_model: Model factory for numeric and date attributes
        attribute_range: The predictor attributes used by the models
        invert_selection: Whether to invert the predictor selection
        verbose: Whether to emit debug messages
    """

    num_epochs: int = DEFAULT_NUM_EPOCHS
    epsilon: float = DEFAULT_EPSILON
    nominal_model: ModelFactory = field(default_factory=lambda: ModelFactory(default_classifier()))
    numeric_model: ModelFactory = field(default_factory=lambda: ModelFactory(default_regressor()))

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.num_epochs < 0:
            raise ValueError(f"Number of epochs must be >= 0, provided: {self.num_epochs}")
        if not self.nominal_model.is_classification:
            raise ValueError("The nominal model must be a classifier")
        if self.numeric_model.is_classification:
            raise ValueError("The numeric model must be a regressor")


@dataclass(frozen=True)
class IRMIState:
    """Models learned during the build.

    Attributes:
        header: The training schema without class designation
        models: The last model trained per attribute
        class_index: The class attribute at build time, never imputed
        order: The processing order of the attributes
        stable: The attributes marked stable
        epochs: The number of epochs run
    """

    header: Dataset
    models: Dict[int, TrainedModel]
    class_index: Optional[int]
    order: Tuple[int, ...]
    stable: FrozenSet[int]
    epochs: int


def median(values: np.ndarray) -> float:
    """Median of the present values, 0.0 if there are none."""
    present = np.sort(values[~np.isnan(values)])
    if present.size == 0:
        return 0.0
    middle = present.size // 2
    if present.size % 2 == 1:
        return float(present[middle])
    return float((present[middle - 1] + present[middle]) / 2)


def first_seen_mode(values: np.ndarray, weights: np.ndarray) -> float:
    """Most frequent present value (weighted), 0.0 if there are none.

    Ties are won by the value seen first in a left-to-right scan.
    """
    counts: Dict[float, float] = {}
    for value, weight in zip(values, weights):
        if np.isnan(value):
            continue
        counts[value] = counts.get(value, 0.0) + weight
    best, best_count = 0.0, -1.0
    for value, count in counts.items():
        if count > best_count:
            best, best_count = value, count
    return float(best)


class IRMIImputerService(BaseImputer[IRMIState]):
    """Service class for iterative robust model-based imputation.

    Nominal attributes are modelled with a classifier, numeric and date
    attributes with a regressor. Attributes that had no missing values at build
    time never get a model and are therefore left missing at apply time.
    Missing values of a row are predicted in attribute order, each prediction
    feeding into the following ones.
    """

    def __init__(self, config: Optional[IRMIConfig] = None):
        """Initialize the IRMI imputer service.

        Args:
            config: Configuration for IRMI imputation
        """
        super().__init__(config or IRMIConfig())
        self.config: IRMIConfig

    def get_capabilities(self) -> Capabilities:
        return basic_capabilities(self.name)

    def _bootstrap(self, data: Dataset, matrix: np.ndarray, weights: np.ndarray) -> None:
        """Fill all missing cells with medians (numeric) and modes (nominal)."""
        for i, att in enumerate(data.attributes):
            if i == data.class_index:
                continue
            column = matrix[:, i]
            if att.is_nominal:
                if att.num_values == 0:
                    continue
                baseline = first_seen_mode(column, weights)
            elif att.is_numeric:
                baseline = median(column)
            else:
                continue
            column[np.isnan(column)] = baseline
            logger.debug(f"Bootstrap value for '{att.name}': {baseline}")

    def _create_state(self, data: Dataset) -> IRMIState:
        class_index = data.class_index
        header = data.header()
        header.class_index = None
        predictors = self.config.resolve(data)

        matrix = data.to_matrix().copy()
        weights = data.weights()
        missing = np.isnan(matrix)
        missing_rows = [np.flatnonzero(missing[:, i]) for i in range(data.num_attributes)]
        observed_rows = [np.flatnonzero(~missing[:, i]) for i in range(data.num_attributes)]
        missing_counts = missing.sum(axis=0)
        order = tuple(sorted(range(data.num_attributes), key=lambda i: -missing_counts[i]))

        eligible = {
            i
            for i in order
            if i != class_index
            and missing_counts[i] > 0
            and observed_rows[i].size > 0
            and (data.attribute(i).is_numeric or data.attribute(i).is_nominal)
        }
        logger.debug(f"Processing order: {order}, attributes to model: {sorted(eligible)}")

        self._bootstrap(data, matrix, weights)

        models: Dict[int, TrainedModel] = {}
        stable = set()
        epochs = 0
        for epoch in range(self.config.num_epochs):
            epochs += 1
            for i in order:
                if i not in eligible or i in stable:
                    continue
                rows = observed_rows[i]
                model = train_attribute_model(
                    header,
                    matrix[rows],
                    weights[rows],
                    i,
                    [p for p in predictors if p != i],
                    self.config.nominal_model,
                    self.config.numeric_model,
                )
                models[i] = model

                targets = missing_rows[i]
                previous = matrix[targets, i].copy()
                predictions = model.predict_many(matrix[targets])
                matrix[targets, i] = predictions
                error = float(np.sum((previous - predictions) ** 2))
                logger.debug(
                    f"Epoch {epoch + 1}, attribute '{data.attribute(i).name}': "
                    f"squared error {error}"
                )
                if error < self.config.epsilon:
                    stable.add(i)
                    logger.debug(f"Attribute '{data.attribute(i).name}' is stable")

            if eligible <= stable:
                logger.debug(f"All attributes stable after {epoch + 1} epoch(s)")
                break

        logger.info(
            f"IRMI ran {epochs} epoch(s), {len(stable)}/{len(eligible)} attribute(s) stable"
        )
        return IRMIState(
            header=header,
            models=models,
            class_index=class_index,
            order=order,
            stable=frozenset(stable),
            epochs=epochs,
        )

    def _apply_instance(self, instance: Instance, state: IRMIState, context: ApplyContext) -> Instance:
        if not instance.has_missing():
            return instance.clone()

        values = instance.values.copy()
        for i in instance.missing_indices():
            if i == context.source.class_index or i not in state.models:
                continue
            values[i] = state.models[i].predict_many(values[np.newaxis, :])[0]
        return instance.with_values(values)

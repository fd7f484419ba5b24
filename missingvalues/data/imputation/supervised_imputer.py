"""
Single-pass supervised imputation.

Trains one model per attribute with missing values, using the other
attributes of the configured range as predictors: regressors for numeric and
date attributes, classifiers for nominal ones.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from missingvalues.core.models.attribute_range import indices_to_range_list
from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.core.services.modeling.estimator_model import (
    ModelFactory,
    TrainedModel,
    default_forest,
    default_regressor,
    train_attribute_model,
)
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.imputation.base_imputer import BaseImputer, basic_capabilities
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SupervisedPredictionConfig(RangeConfig):
    """Configuration for supervised prediction imputation.

    Attributes:
        attribute_range: The attributes to impute and use as predictors
        invert_selection: Whether to invert the attribute selection
        regression: Model factory for numeric and date attributes
        classification: Model factory for nominal attributes
        debug_info: Whether to log the models being built
        verbose: Whether to emit debug messages
    """

    regression: ModelFactory = field(default_factory=lambda: ModelFactory(default_regressor()))
    classification: ModelFactory = field(default_factory=lambda: ModelFactory(default_forest()))
    debug_info: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        self.verbose = self.verbose or self.debug_info


@dataclass(frozen=True)
class SupervisedPredictionState:
    """One trained model per imputed attribute."""

    models: Dict[int, TrainedModel]


class SupervisedPredictionImputer(BaseImputer[SupervisedPredictionState]):
    """Uses a classifier for nominal and a regressor for numeric attributes to
    predict missing values, in a single pass."""

    def __init__(self, config: Optional[SupervisedPredictionConfig] = None):
        super().__init__(config or SupervisedPredictionConfig())
        self.config: SupervisedPredictionConfig

    def get_capabilities(self) -> Capabilities:
        return basic_capabilities(self.name)

    def _create_state(self, data: Dataset) -> SupervisedPredictionState:
        indices = self.config.resolve(data)
        header = data.header()
        header.class_index = None
        matrix = data.to_matrix()
        weights = data.weights()

        targets = []
        for index in indices:
            att = data.attribute(index)
            if index == data.class_index:
                logger.debug(f"Skipping class attribute '{att.name}'")
                continue
            if att.is_nominal:
                factory = self.config.classification
            elif att.is_numeric:
                factory = self.config.regression
            else:
                logger.debug(f"Skipping attribute '{att.name}' of type {att.type.value}")
                continue
            if not factory.handles(att.type):
                logger.debug(f"{factory!r} cannot handle attribute '{att.name}'")
                continue
            column = matrix[:, index]
            if not np.isnan(column).any():
                continue
            if np.isnan(column).all():
                logger.debug(f"Skipping attribute '{att.name}' without observed values")
                continue
            targets.append(index)
        logger.debug(f"Actual range: {indices_to_range_list(targets)}")

        models = {}
        for index in targets:
            logger.debug(f"Building model for attribute '{data.attribute(index).name}'")
            models[index] = train_attribute_model(
                header,
                matrix,
                weights,
                index,
                [i for i in indices if i != index],
                self.config.classification,
                self.config.regression,
            )
        return SupervisedPredictionState(models=models)

    def _apply_instance(
        self, instance: Instance, state: SupervisedPredictionState, context: ApplyContext
    ) -> Instance:
        row = instance.values[np.newaxis, :]
        values = instance.values.copy()
        for index, model in state.models.items():
            if np.isnan(values[index]):
                values[index] = model.predict_many(row)[0]
        return instance.with_values(values)

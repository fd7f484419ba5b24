"""Predictive model services."""

from missingvalues.core.services.modeling.estimator_model import (
    ModelFactory,
    TrainedModel,
    default_classifier,
    default_forest,
    default_regressor,
    train_attribute_model,
)

__all__ = [
    "ModelFactory",
    "TrainedModel",
    "default_classifier",
    "default_forest",
    "default_regressor",
    "train_attribute_model",
]

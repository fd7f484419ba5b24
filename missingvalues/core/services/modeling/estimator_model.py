"""
Model collaborators built on scikit-learn estimators.

A model factory trains a predictive model for one target attribute of a
dataset, using a selection of the remaining attributes as features. Missing
feature values are filled inside the model pipeline (means for numeric,
most frequent label for nominal features), so trained models accept rows
that still contain missing values.
"""

# Standard Library Imports
from logging import Logger
from typing import List, Optional, Sequence

# Third Party Imports
import numpy as np
from sklearn.base import BaseEstimator, clone, is_classifier
from sklearn.compose import ColumnTransformer
from sklearn.dummy import DummyClassifier
from sklearn.ensemble import RandomForestClassifier
from sklearn.impute import SimpleImputer
from sklearn.linear_model import LinearRegression, LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder, StandardScaler
from sklearn.utils.validation import has_fit_parameter

# Internal Imports
from missingvalues.core.models.dataset.attribute import Attribute
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.utils.constants import (
    AttributeType,
    DEFAULT_MAX_ITER,
    DEFAULT_RANDOM_STATE,
)
from missingvalues.utils.logging import get_logger

# Initialize logger
logger: Logger = get_logger(__name__)

ESTIMATOR_STEP = "estimator"


def default_classifier() -> BaseEstimator:
    """Default model for nominal targets."""
    return LogisticRegression(max_iter=DEFAULT_MAX_ITER)


def default_regressor() -> BaseEstimator:
    """Default model for numeric targets."""
    return LinearRegression()


def default_forest() -> BaseEstimator:
    """Random forest classifier with a fixed seed."""
    return RandomForestClassifier(random_state=DEFAULT_RANDOM_STATE)


class TrainedModel:
    """A fitted model predicting one attribute from the other attributes.

    Attributes:
        target_index: Index of the predicted attribute
        feature_indices: Indices of the attributes used as features
        target_attribute: Copy of the predicted attribute
    """

    def __init__(
        self,
        pipeline: Pipeline,
        target_index: int,
        feature_indices: List[int],
        target_attribute: Attribute,
    ):
        self.pipeline = pipeline
        self.target_index = target_index
        self.feature_indices = feature_indices
        self.target_attribute = target_attribute

    def _features(self, matrix: np.ndarray) -> np.ndarray:
        if not self.feature_indices:
            return np.zeros((matrix.shape[0], 1))
        return matrix[:, self.feature_indices]

    def predict_many(self, matrix: np.ndarray) -> np.ndarray:
        """Predict the target for every row of a (rows x attributes) matrix."""
        if matrix.shape[0] == 0:
            return np.empty(0)
        return np.asarray(self.pipeline.predict(self._features(matrix)), dtype=float)

    def predict(self, instance: Instance) -> float:
        """Predict the target value of a single row."""
        return float(self.predict_many(instance.values[np.newaxis, :])[0])

    def __repr__(self) -> str:
        return (
            f"TrainedModel(target={self.target_attribute.name}, "
            f"features={self.feature_indices}, estimator={self.pipeline[-1]!r})"
        )


class ModelFactory:
    """Trains models around a template scikit-learn estimator.

    Classifiers handle nominal targets, regressors numeric and date targets.
    The template is cloned for every model.

    Attributes:
        estimator: The template estimator
    """

    def __init__(self, estimator: BaseEstimator):
        """Initialize the factory.

        Args:
            estimator: Unfitted scikit-learn classifier or regressor
        """
        self.estimator = estimator

    @property
    def is_classification(self) -> bool:
        return is_classifier(self.estimator)

    def handles(self, attribute_type: AttributeType) -> bool:
        """Whether the estimator can predict attributes of the given type."""
        if self.is_classification:
            return attribute_type == AttributeType.NOMINAL
        return attribute_type in (AttributeType.NUMERIC, AttributeType.DATE)

    @staticmethod
    def usable_features(header: Dataset, feature_indices: Sequence[int]) -> List[int]:
        """Restrict candidate features to numeric, date and nominal attributes."""
        return [
            i
            for i in feature_indices
            if header.attribute(i).is_numeric
            or (header.attribute(i).is_nominal and header.attribute(i).num_values > 0)
        ]

    def _preprocessor(self, header: Dataset, features: List[int]) -> ColumnTransformer:
        numeric = [pos for pos, i in enumerate(features) if header.attribute(i).is_numeric]
        nominal = [pos for pos, i in enumerate(features) if header.attribute(i).is_nominal]
        transformers = []
        if numeric:
            transformers.append(
                (
                    "numeric",
                    Pipeline(
                        [
                            ("impute", SimpleImputer(strategy="mean", keep_empty_features=True)),
                            ("scale", StandardScaler()),
                        ]
                    ),
                    numeric,
                )
            )
        if nominal:
            categories = [
                np.arange(header.attribute(features[pos]).num_values, dtype=float)
                for pos in nominal
            ]
            transformers.append(
                (
                    "nominal",
                    Pipeline(
                        [
                            (
                                "impute",
                                SimpleImputer(
                                    strategy="most_frequent", keep_empty_features=True
                                ),
                            ),
                            (
                                "encode",
                                OneHotEncoder(
                                    categories=categories,
                                    handle_unknown="ignore",
                                    sparse_output=False,
                                ),
                            ),
                        ]
                    ),
                    nominal,
                )
            )
        return ColumnTransformer(transformers, remainder="drop")

    def train(
        self,
        header: Dataset,
        matrix: np.ndarray,
        weights: np.ndarray,
        target_index: int,
        feature_indices: Sequence[int],
    ) -> TrainedModel:
        """Train a model for one attribute.

        Args:
            header: Schema of the rows
            matrix: The training rows as a (rows x attributes) matrix
            weights: Row weights
            target_index: Index of the attribute to predict
            feature_indices: Candidate predictor attributes

        Returns:
            TrainedModel: The fitted model

        Raises:
            ValueError: If no row has a known target value
        """
        features = self.usable_features(
            header, [i for i in feature_indices if i != target_index]
        )
        y = matrix[:, target_index]
        known = ~np.isnan(y)
        if not known.any():
            raise ValueError(
                f"No training rows with a known value for attribute "
                f"'{header.attribute(target_index).name}'"
            )
        rows = matrix[known]
        y = y[known]
        sample_weight = weights[known]

        estimator = clone(self.estimator)
        if self.is_classification:
            y = y.astype(int)
            if np.unique(y).size < 2:
                estimator = DummyClassifier(strategy="most_frequent")

        steps = []
        if features:
            steps.append(("preprocess", self._preprocessor(header, features)))
        steps.append((ESTIMATOR_STEP, estimator))
        pipeline = Pipeline(steps)

        model = TrainedModel(
            pipeline, target_index, features, header.attribute(target_index).copy_attribute()
        )
        fit_params = {}
        if has_fit_parameter(estimator, "sample_weight"):
            fit_params[f"{ESTIMATOR_STEP}__sample_weight"] = sample_weight
        pipeline.fit(model._features(rows), y, **fit_params)
        logger.debug(f"Trained {model!r} on {rows.shape[0]} rows")
        return model

    def train_on_dataset(
        self,
        data: Dataset,
        target_index: int,
        feature_indices: Optional[Sequence[int]] = None,
    ) -> TrainedModel:
        """Train a model on all rows of a dataset.

        Args:
            data: The training data
            target_index: Index of the attribute to predict
            feature_indices: Predictor attributes, all other attributes if None

        Returns:
            TrainedModel: The fitted model
        """
        if feature_indices is None:
            feature_indices = range(data.num_attributes)
        return self.train(
            data, data.to_matrix(), data.weights(), target_index, list(feature_indices)
        )

    def __repr__(self) -> str:
        return f"ModelFactory({self.estimator!r})"


def train_attribute_model(
    header: Dataset,
    matrix: np.ndarray,
    weights: np.ndarray,
    target_index: int,
    feature_indices: Sequence[int],
    nominal_factory: ModelFactory,
    numeric_factory: ModelFactory,
) -> TrainedModel:
    """Train the model for one attribute, picking the factory by attribute type.

    Args:
        header: Schema of the rows
        matrix: The training rows as a (rows x attributes) matrix
        weights: Row weights
        target_index: Index of the attribute to predict
        feature_indices: Candidate predictor attributes
        nominal_factory: Factory used for nominal targets
        numeric_factory: Factory used for numeric and date targets

    Returns:
        TrainedModel: The fitted model
    """
    if header.attribute(target_index).is_nominal:
        factory = nominal_factory
    else:
        factory = numeric_factory
    return factory.train(header, matrix, weights, target_index, feature_indices)

"""
Batch filters wrapping missing values algorithms.

A filter builds its algorithm on the first batch it receives and applies it to
that batch and every following batch until it is reset.
"""

from typing import Generic, Optional, TypeVar

from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.data.base_algorithm import BaseAlgorithm
from missingvalues.data.imputation.base_imputer import BaseImputer
from missingvalues.data.imputation.null_imputer import NullImputer
from missingvalues.data.injection.base_injector import BaseInjector
from missingvalues.data.injection.null_injector import NullInjector
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)

AlgorithmT = TypeVar("AlgorithmT", bound=BaseAlgorithm)


class MissingValuesFilter(Generic[AlgorithmT]):
    """Processes batches of data with a missing values algorithm.

    Attributes:
        algorithm: The wrapped algorithm
    """

    def __init__(self, algorithm: AlgorithmT):
        self.algorithm = algorithm
        self._first_batch_done = False

    @property
    def is_first_batch_done(self) -> bool:
        return self._first_batch_done

    def get_capabilities(self) -> Capabilities:
        """Get the capabilities of the wrapped algorithm."""
        return self.algorithm.get_capabilities()

    def process(self, data: Dataset) -> Dataset:
        """Process a batch of data.

        Args:
            data: The batch to process, left unchanged

        Returns:
            Dataset: The processed batch
        """
        if not self._first_batch_done:
            self.algorithm.build(data)
            self._first_batch_done = True
            logger.debug(f"Built {self.algorithm.name} on first batch")
        return self.algorithm.apply(data)

    def reset(self) -> None:
        """Reset the filter, the next batch builds the algorithm again."""
        self._first_batch_done = False


class MissingValuesImputationFilter(MissingValuesFilter[BaseImputer]):
    """Filter for imputing missing values."""

    def __init__(self, algorithm: Optional[BaseImputer] = None):
        super().__init__(algorithm or NullImputer())


class MissingValuesInjectionFilter(MissingValuesFilter[BaseInjector]):
    """Filter for injecting missing values."""

    def __init__(self, algorithm: Optional[BaseInjector] = None):
        super().__init__(algorithm or NullInjector())

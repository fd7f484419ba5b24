"""
Base module for missing values algorithms.

This module provides the build/apply contract shared by imputation and
injection algorithms: capability testing, state handling, dataset application
and the collection of missing value statistics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union, overload

import numpy as np

from missingvalues.core.exceptions.data.algorithm import UninitializedError
from missingvalues.core.models.attribute_range import AttributeRange
from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.utils.constants import DEFAULT_ATTRIBUTE_RANGE, Direction
from missingvalues.utils.logging import get_logger, set_verbose
from missingvalues.utils.performance import timed_execution

logger = get_logger(__name__)

StateT = TypeVar("StateT")


@dataclass
class BaseAlgorithmConfig:
    """Base configuration for missing values algorithms.

    Attributes:
        verbose: Whether to emit debug messages
    """

    verbose: bool = False


@dataclass
class RangeConfig(BaseAlgorithmConfig):
    """Configuration for algorithms working on a range of attributes.

    Attributes:
        attribute_range: The attributes to work on, e.g. 'first-last' or 'first-3,5-last'
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    attribute_range: str = DEFAULT_ATTRIBUTE_RANGE
    invert_selection: bool = False

    def __post_init__(self) -> None:
        # fails early on malformed ranges
        self.get_range()

    def get_range(self) -> AttributeRange:
        return AttributeRange(ranges=self.attribute_range, invert=self.invert_selection)

    def resolve(self, data: Dataset) -> List[int]:
        """Resolve the attribute range against the schema of a dataset."""
        return self.get_range().resolve(data.num_attributes)


@dataclass
class ApplyContext:
    """Schemas involved when applying an algorithm to a row.

    Attributes:
        source: Schema the incoming row conforms to
        target: Schema the resulting row is bound to
    """

    source: Dataset
    target: Dataset


class BaseAlgorithm(ABC, Generic[StateT]):
    """Abstract base class for imputation and injection algorithms.

    An algorithm is built once on training data, which produces an immutable
    state object and the output format, and then applied to any number of rows
    or datasets. Building again replaces the state.
    """

    direction: Direction

    def __init__(self, config: Optional[BaseAlgorithmConfig] = None):
        """Initialize the algorithm.

        Args:
            config: Configuration of the algorithm
        """
        self.config = config or self._default_config()
        self._state: Optional[StateT] = None
        self._input_format: Optional[Dataset] = None
        self._output_format: Optional[Dataset] = None
        self._statistics: Dict[str, Any] = {}
        set_verbose(get_logger(type(self).__module__), self.config.verbose)

    def _default_config(self) -> BaseAlgorithmConfig:
        return BaseAlgorithmConfig()

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def is_built(self) -> bool:
        return self._output_format is not None

    @property
    def state(self) -> Optional[StateT]:
        """The state produced by the last successful build."""
        return self._state

    @property
    def output_format(self) -> Optional[Dataset]:
        return self._output_format

    def get_capabilities(self) -> Capabilities:
        """Get the capabilities of the algorithm (default: everything)."""
        return Capabilities(owner=self.name)

    def get_capabilities_for(self, data: Dataset) -> Capabilities:
        """Narrow the class capabilities to the class configuration of a dataset.

        Without class attribute only 'no class' remains acceptable, with a class
        attribute 'no class' is not.
        """
        caps = self.get_capabilities()
        if data.class_index is None:
            return caps.model_copy(update={"class_types": frozenset()})
        return caps.model_copy(update={"no_class": False})

    @abstractmethod
    def _create_state(self, data: Dataset) -> StateT:
        """Learn the state of the algorithm from the training data.

        Args:
            data: The training data

        Returns:
            The state used by subsequent apply calls
        """
        pass

    def _create_output_format(self, data: Dataset, state: StateT) -> Dataset:
        """Determine the output format, the input header by default."""
        return data.header()

    @timed_execution
    def build(self, data: Dataset) -> Dataset:
        """Build the algorithm on training data.

        Args:
            data: The training data, left unchanged

        Returns:
            Dataset: The output format (zero rows) of subsequent apply calls

        Raises:
            CapabilityError: If the data does not meet the capabilities
        """
        self.get_capabilities_for(data).test(data)
        state = self._create_state(data)
        output_format = self._create_output_format(data, state)
        statistics = self._collect_statistics(data)

        self._state = state
        self._input_format = data.header()
        self._output_format = output_format
        self._statistics = statistics
        logger.info(
            f"Built {self.name} on {data.num_instances} rows and "
            f"{data.num_attributes} attributes"
        )
        return output_format.header()

    def _check_built(self) -> None:
        if not self.is_built:
            raise UninitializedError(self.name)

    @abstractmethod
    def _apply_instance(self, instance: Instance, state: StateT, context: ApplyContext) -> Instance:
        """Apply the algorithm to a single row.

        Args:
            instance: The row to process, must not be modified
            state: The state produced by build
            context: The schemas of the incoming and resulting row

        Returns:
            Instance: A new row
        """
        pass

    def _apply_dataset(self, data: Dataset, state: StateT) -> Dataset:
        result = self._output_format.header()
        context = ApplyContext(source=data, target=result)
        for instance in data.instances:
            processed = self._apply_instance(instance, state, context)
            result.add(self._encode_strings(processed, context))
        return result

    @staticmethod
    def _encode_strings(instance: Instance, context: ApplyContext) -> Instance:
        """Re-register the string values of a row with the target string tables.

        String values index the string table of the source schema, which need
        not be the one the target was built with.
        """
        indices = [
            i
            for i, att in enumerate(context.target.attributes)
            if att.is_string and not instance.is_missing(i)
        ]
        if not indices:
            return instance
        values = instance.values.copy()
        for i in indices:
            label = context.source.string_value(instance, i)
            values[i] = context.target.attribute(i).add_string_value(label)
        return instance.with_values(values)

    @overload
    def apply(self, data: Dataset) -> Dataset: ...

    @overload
    def apply(self, data: Instance) -> Instance: ...

    def apply(self, data: Union[Dataset, Instance]) -> Union[Dataset, Instance]:
        """Apply the built algorithm to a row or a whole dataset.

        Datasets are processed row by row, in order.

        Args:
            data: The row or dataset to process, left unchanged

        Returns:
            A new row or dataset bound to the output format

        Raises:
            UninitializedError: If the algorithm has not been built
        """
        self._check_built()
        if isinstance(data, Dataset):
            return self._apply_dataset(data, self._state)
        context = ApplyContext(source=self._input_format, target=self._output_format)
        return self._apply_instance(data, self._state, context)

    def _collect_statistics(self, data: Dataset) -> Dict[str, Any]:
        """Collect statistics about the missing values in the training data."""
        if data.num_instances == 0:
            return {
                "total_missing_values": 0,
                "missing_by_attribute": {name: 0 for name in data.attribute_names},
                "missing_percentage": {name: 0.0 for name in data.attribute_names},
            }
        mask = np.isnan(data.to_matrix())
        counts = mask.sum(axis=0)
        return {
            "total_missing_values": int(mask.sum()),
            "missing_by_attribute": {
                name: int(count) for name, count in zip(data.attribute_names, counts)
            },
            "missing_percentage": {
                name: float(count) / data.num_instances * 100
                for name, count in zip(data.attribute_names, counts)
            },
        }

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the missing values seen by the last build.

        Returns:
            Dictionary containing missing value statistics
        """
        return self._statistics

    def __repr__(self) -> str:
        return f"{self.name}({self.config!r})"

"""
Injection of missing values based on matching labels.

Nominal and string values whose label matches are replaced with missing
values. When the header gets updated, matching labels are also removed from
the nominal domains of the output format and nominal values are remapped
against the shrunk domains; string tables are kept.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

import numpy as np

from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance, is_missing
from missingvalues.data.base_algorithm import ApplyContext, RangeConfig
from missingvalues.data.injection.base_injector import BaseInjector
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MatchingConfig(RangeConfig):
    """Configuration for label matching injection.

    Attributes:
        update_header: Whether to remove matching labels from the nominal
            domains of the output format
        attribute_range: The attributes to inject missing values into
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    update_header: bool = False


@dataclass(frozen=True)
class MatchingState:
    """Attributes to check and, when rewriting the header, the label remapping.

    Attributes:
        indices: The nominal and string attributes within the range
        rewrite: Whether rows get re-encoded against a rewritten header
        mapping: Old to new label index per nominal attribute in the range;
            None for removed labels
    """

    indices: FrozenSet[int]
    rewrite: bool
    mapping: Dict[int, Dict[int, Optional[int]]]


class MatchingInjector(BaseInjector[MatchingState]):
    """Abstract base class for injectors replacing matching labels."""

    def __init__(self, config: Optional[MatchingConfig] = None):
        super().__init__(config or self._default_config())
        self.config: MatchingConfig

    @abstractmethod
    def matches(self, label: str) -> bool:
        """Whether a label gets replaced with a missing value."""
        pass

    def _can_rewrite(self) -> bool:
        return True

    def _create_state(self, data: Dataset) -> MatchingState:
        indices = frozenset(
            i
            for i in self.config.resolve(data)
            if data.attribute(i).is_nominal or data.attribute(i).is_string
        )
        can_rewrite = self._can_rewrite()
        rewrite = self.config.update_header and can_rewrite
        mapping = {}
        if rewrite:
            for i in sorted(indices):
                att = data.attribute(i)
                if not att.is_nominal:
                    continue
                kept, _ = att.without_labels(self.matches)
                mapping[i] = {n: kept.index_of(label) for n, label in enumerate(att.labels)}
        return MatchingState(indices=indices, rewrite=rewrite, mapping=mapping)

    def _create_output_format(self, data: Dataset, state: MatchingState) -> Dataset:
        header = data.header()
        if not state.rewrite:
            return header

        removed_any = False
        for i in state.mapping:
            att = header.attribute(i)
            header.attributes[i], removed = att.without_labels(self.matches)
            if removed:
                removed_any = True
                logger.debug(f"Removed labels {removed} from attribute '{att.name}'")
        if not removed_any:
            logger.warning("Header not modified, no labels matched!")
        return header

    def _apply_instance(
        self, instance: Instance, state: MatchingState, context: ApplyContext
    ) -> Instance:
        values = instance.values.copy()
        for i in state.indices:
            if is_missing(values[i]):
                continue
            if self.matches(context.source.string_value(instance, i)):
                values[i] = np.nan
            elif i in state.mapping:
                values[i] = state.mapping[i][int(values[i])]
        return instance.with_values(values)

"""Injection replacing a set of literal labels with missing values."""

from dataclasses import dataclass, field
from typing import List, Optional

from missingvalues.data.injection.matching_injector import MatchingConfig, MatchingInjector
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ValuesInjectorConfig(MatchingConfig):
    """Configuration for literal value injection.

    Attributes:
        values: The labels to replace with missing values
        update_header: Whether to remove the labels from the nominal domains
        attribute_range: The attributes to inject missing values into
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    values: List[str] = field(default_factory=list)


class ValuesInjector(MatchingInjector):
    """Replaces the specified nominal/string values with missing values."""

    def __init__(self, config: Optional[ValuesInjectorConfig] = None):
        super().__init__(config)
        self.config: ValuesInjectorConfig

    def _default_config(self) -> ValuesInjectorConfig:
        return ValuesInjectorConfig()

    def _can_rewrite(self) -> bool:
        if not self.config.values:
            logger.warning("No values to replace specified, header not updated!")
            return False
        return True

    def matches(self, label: str) -> bool:
        return label in self.config.values

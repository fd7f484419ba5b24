"""Injection replacing labels that match a regular expression with missing values."""

import re
from dataclasses import dataclass, field
from typing import Optional, Pattern

from missingvalues.data.injection.matching_injector import MatchingConfig, MatchingInjector
from missingvalues.utils.constants import DEFAULT_EXPRESSION


@dataclass
class RegexInjectorConfig(MatchingConfig):
    """Configuration for regular expression injection.

    Attributes:
        expression: The regular expression that labels must match in full
        update_header: Whether to remove matching labels from the nominal domains
        attribute_range: The attributes to inject missing values into
        invert_selection: Whether to invert the attribute selection
        verbose: Whether to emit debug messages
    """

    expression: str = DEFAULT_EXPRESSION
    pattern: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.pattern = re.compile(self.expression)


class RegexInjector(MatchingInjector):
    """Replaces nominal/string values that match the regular expression with
    missing values."""

    def __init__(self, config: Optional[RegexInjectorConfig] = None):
        super().__init__(config)
        self.config: RegexInjectorConfig

    def _default_config(self) -> RegexInjectorConfig:
        return RegexInjectorConfig()

    def matches(self, label: str) -> bool:
        return self.config.pattern.fullmatch(label) is not None

"""Injection algorithms: turn present values into missing values."""

from missingvalues.data.injection.all_within_range import AllWithinRangeInjector
from missingvalues.data.injection.base_injector import BaseInjector, BaseInjectorConfig
from missingvalues.data.injection.class_only import ClassOnlyInjector
from missingvalues.data.injection.multi_injector import MultiInjector, MultiInjectorConfig
from missingvalues.data.injection.null_injector import NullInjector
from missingvalues.data.injection.random_percentage import (
    RandomPercentageConfig,
    RandomPercentageInjector,
)
from missingvalues.data.injection.regex import RegexInjector, RegexInjectorConfig
from missingvalues.data.injection.values import ValuesInjector, ValuesInjectorConfig

__all__ = [
    "AllWithinRangeInjector",
    "BaseInjector",
    "BaseInjectorConfig",
    "ClassOnlyInjector",
    "MultiInjector",
    "MultiInjectorConfig",
    "NullInjector",
    "RandomPercentageConfig",
    "RandomPercentageInjector",
    "RegexInjector",
    "RegexInjectorConfig",
    "ValuesInjector",
    "ValuesInjectorConfig",
]

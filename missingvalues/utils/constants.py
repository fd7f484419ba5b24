# missingvalues/utils/constants.py
"""
Constants for the toolkit.

This module contains the default parameter values of the algorithms and the
enumerations shared by the dataset model.
"""

# Standard Library Imports
from enum import Enum
from typing import Final


# Missing value sentinel
MISSING_VALUE: Final[float] = float("nan")


# Dataset model enums
class AttributeType(str, Enum):
    """Attribute types supported by the dataset model."""

    NUMERIC = "numeric"
    NOMINAL = "nominal"
    STRING = "string"
    DATE = "date"
    RELATIONAL = "relational"


class Direction(str, Enum):
    """Direction of a missing values algorithm."""

    IMPUTATION = "imputation"
    INJECTION = "injection"


# Attribute ranges
RANGE_FIRST: Final[str] = "first"
RANGE_LAST: Final[str] = "last"
DEFAULT_ATTRIBUTE_RANGE: Final[str] = "first-last"

# Nearest neighbor imputation
DEFAULT_NUM_NEIGHBORS: Final[int] = 100

# IRMI
DEFAULT_NUM_EPOCHS: Final[int] = 100
DEFAULT_EPSILON: Final[float] = 5.0

# Model collaborators
DEFAULT_RANDOM_STATE: Final[int] = 137
DEFAULT_MAX_ITER: Final[int] = 1000

# User supplied values
DEFAULT_NUMERIC_REPLACEMENT: Final[float] = 0.0
DEFAULT_DATE_REPLACEMENT: Final[str] = "2000-01-01"
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_NOMINAL_REPLACEMENT: Final[str] = RANGE_FIRST

# Random percentage injection
DEFAULT_SEED: Final[int] = 1
DEFAULT_PERCENTAGE: Final[float] = 0.2
MAX_CHILD_SEED: Final[int] = 2**31 - 1

# Pattern injection
DEFAULT_EXPRESSION: Final[str] = r"\?"

# missingvalues/core/exceptions/data/algorithm.py
"""
Exceptions for the imputation and injection algorithms.

Classes:
    AlgorithmError: Base class for algorithm-related exceptions.
    CapabilityError: Raised when a dataset violates an algorithm's capabilities.
    UninitializedError: Raised when an algorithm is applied before it was built.
    InvalidRangeError: Raised when an attribute range cannot be resolved.
    StageError: Raised when a stage of a sequential composition fails.
"""

from typing import Optional


class AlgorithmError(Exception):
    """Base class for algorithm-related exceptions."""

    pass


class CapabilityError(AlgorithmError):
    """Raised when a dataset does not meet the capabilities of an algorithm."""

    def __init__(self, algorithm: str, reason: str):
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"{algorithm}: {reason}")


class UninitializedError(AlgorithmError):
    """Raised when apply is called before a successful build."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Algorithm '{algorithm}' not initialized!")


class InvalidRangeError(AlgorithmError):
    """Raised when an attribute range is malformed or outside the schema width."""

    pass


class StageError(AlgorithmError):
    """Raised when a sub-algorithm of a sequential composition fails."""

    def __init__(self, stage: int, cause: Optional[BaseException] = None):
        self.stage = stage
        self.cause = cause
        message = f"Algorithm #{stage} failed!"
        if cause is not None:
            message += f" ({type(cause).__name__}: {cause})"
        super().__init__(message)

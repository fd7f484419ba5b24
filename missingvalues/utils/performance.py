# missingvalues/utils/performance.py
"""
Performance utilities for the toolkit.

Methods:
    timed_execution: Decorator to time function execution.
"""

# Standard Library Imports
import time
from functools import wraps
from logging import Logger
from typing import Any, Callable

# Internal Imports
from missingvalues.utils.logging import get_logger

# Initialize Logger
logger: Logger = get_logger(__name__)


def timed_execution(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to time function execution.

    When the wrapped callable is a method, the owning class name is included
    in the log message.

    Args:
        func: Function to time

    Returns:
        Wrapped function that logs execution time
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time: float = time.perf_counter()
        result: Any = func(*args, **kwargs)
        elapsed: float = time.perf_counter() - start_time
        is_method = bool(args) and hasattr(type(args[0]), func.__name__)
        owner: str = type(args[0]).__name__ + "." if is_method else ""
        logger.debug(f"{owner}{func.__name__} executed in {elapsed:.4f} seconds")
        return result

    return wrapper

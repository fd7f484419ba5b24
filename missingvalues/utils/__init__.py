"""
Utility functions and classes for the toolkit.
"""

from missingvalues.utils.logging import get_logger, set_verbose, setup_logging
from missingvalues.utils.performance import timed_execution

__all__ = [
    # Logging
    "get_logger",
    "set_verbose",
    "setup_logging",
    # Performance
    "timed_execution",
]

"""
Toolkit for imputing and injecting missing values in tabular datasets.
"""

__version__ = "0.1.0"

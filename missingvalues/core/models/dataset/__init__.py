"""Dataset models package."""

from missingvalues.core.models.dataset.attribute import Attribute, format_date, parse_date
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance, is_missing

__all__ = ["Attribute", "Dataset", "Instance", "format_date", "is_missing", "parse_date"]

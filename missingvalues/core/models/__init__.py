"""Core models package."""

from missingvalues.core.models.attribute_range import AttributeRange, indices_to_range_list
from missingvalues.core.models.capabilities import Capabilities
from missingvalues.core.models.dataset import Attribute, Dataset, Instance, is_missing

__all__ = [
    "Attribute",
    "AttributeRange",
    "Capabilities",
    "Dataset",
    "Instance",
    "indices_to_range_list",
    "is_missing",
]

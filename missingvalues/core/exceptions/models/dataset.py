# missingvalues/core/exceptions/models/dataset.py
"""
Exceptions for the dataset model.

Classes:
    DatasetError: Base exception for the dataset model.
    DuplicateLabelError: Raised when a domain would contain a label twice.
    UnknownLabelError: Raised when a label is not part of an attribute's domain.
    SchemaMismatchError: Raised when a row does not conform to a schema.
"""


class DatasetError(Exception):
    """Base exception for the dataset model."""

    pass


class DuplicateLabelError(DatasetError):
    """Raised when attempting to create a domain with a duplicate label."""

    def __init__(self, attribute: str, label: str):
        self.attribute = attribute
        self.label = label
        super().__init__(f"Label '{label}' occurs more than once in attribute '{attribute}'.")


class UnknownLabelError(DatasetError):
    """Raised when a label is not part of an attribute's domain."""

    def __init__(self, attribute: str, label: str):
        self.attribute = attribute
        self.label = label
        super().__init__(f"Label '{label}' not found in attribute '{attribute}'.")


class SchemaMismatchError(DatasetError):
    """Raised when a row does not conform to the dataset schema."""

    pass

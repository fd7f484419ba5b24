"""Attribute model for tabular datasets."""

# Standard Library Imports
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

# Third Party Imports
from pydantic import BaseModel, Field, PrivateAttr, ValidationInfo, field_validator

# Internal Imports
from missingvalues.core.exceptions.models.dataset import (
    DatasetError,
    DuplicateLabelError,
    UnknownLabelError,
)
from missingvalues.utils.constants import AttributeType


def parse_date(text: str, date_format: str) -> float:
    """Parse a date string into POSIX seconds (UTC).

    Args:
        text: The date to parse.
        date_format: A ``datetime.strptime`` format string.

    Returns:
        float: Seconds since the epoch.
    """
    parsed = datetime.strptime(text, date_format)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def format_date(value: float) -> str:
    """Render POSIX seconds as an ISO 8601 string (UTC)."""
    return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()


class Attribute(BaseModel):
    """A column of a dataset.

    Nominal attributes carry an ordered domain of category labels, string
    attributes a growing table of the strings seen so far. Row values refer
    to both by index.

    Attributes:
        name: The name of the attribute
        type: The type of the attribute
        labels: The nominal domain or string table of the attribute
    """

    name: str = Field(..., description="The name of the attribute.")
    type: AttributeType = Field(
        default=AttributeType.NUMERIC, description="The type of the attribute."
    )
    labels: List[str] = Field(
        default_factory=list,
        description="Ordered nominal domain or string table of the attribute.",
    )

    _index: Dict[str, int] = PrivateAttr(default_factory=dict)

    @field_validator("labels")
    @classmethod
    def _validate_unique_labels(cls, labels: List[str], info: ValidationInfo) -> List[str]:
        seen = set()
        for label in labels:
            if label in seen:
                raise DuplicateLabelError(info.data.get("name", "?"), label)
            seen.add(label)
        return labels

    def model_post_init(self, __context) -> None:
        self._index = {label: i for i, label in enumerate(self.labels)}

    @property
    def is_numeric(self) -> bool:
        """Whether the attribute holds real numbers (numeric or date)."""
        return self.type in (AttributeType.NUMERIC, AttributeType.DATE)

    @property
    def is_nominal(self) -> bool:
        return self.type == AttributeType.NOMINAL

    @property
    def is_string(self) -> bool:
        return self.type == AttributeType.STRING

    @property
    def is_date(self) -> bool:
        return self.type == AttributeType.DATE

    @property
    def is_relational(self) -> bool:
        return self.type == AttributeType.RELATIONAL

    @property
    def num_values(self) -> int:
        """Number of labels in the domain (or string table)."""
        return len(self.labels)

    def value(self, index: int) -> str:
        """Get the label stored at the given index.

        Args:
            index: 0-based label index.

        Returns:
            str: The label.
        """
        return self.labels[int(index)]

    def index_of(self, label: str) -> Optional[int]:
        """Get the index of a label, or None if it is not part of the domain."""
        return self._index.get(label)

    def encode(self, label: str) -> int:
        """Get the index of a label.

        Raises:
            UnknownLabelError: If the label is not part of the domain.
        """
        index = self._index.get(label)
        if index is None:
            raise UnknownLabelError(self.name, label)
        return index

    def add_string_value(self, text: str) -> int:
        """Register a string with a string attribute.

        Args:
            text: The string to register.

        Returns:
            int: The index of the string in the string table.

        Raises:
            DatasetError: If the attribute is not a string attribute.
        """
        if not self.is_string:
            raise DatasetError(
                f"Cannot add string values to {self.type.value} attribute '{self.name}'."
            )
        index = self._index.get(text)
        if index is None:
            index = len(self.labels)
            self.labels.append(text)
            self._index[text] = index
        return index

    def without_labels(self, predicate: Callable[[str], bool]) -> Tuple["Attribute", List[str]]:
        """Create a copy of the attribute whose domain lacks the matching labels.

        Args:
            predicate: Returns True for labels to remove.

        Returns:
            Tuple[Attribute, List[str]]: The rewritten attribute and the removed labels.
        """
        kept = [label for label in self.labels if not predicate(label)]
        removed = [label for label in self.labels if predicate(label)]
        return Attribute(name=self.name, type=self.type, labels=kept), removed

    def copy_attribute(self) -> "Attribute":
        """Create an independent copy of the attribute."""
        return Attribute(name=self.name, type=self.type, labels=list(self.labels))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return (
            self.name == other.name
            and self.type == other.type
            and self.labels == other.labels
        )

    def __str__(self) -> str:
        if self.is_nominal:
            return f"{self.name} {{{','.join(self.labels)}}}"
        return f"{self.name} {self.type.value}"

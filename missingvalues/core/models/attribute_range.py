"""Attribute range model: column selections over a 1-based column space."""

# Standard Library Imports
from typing import List, Optional, Sequence, Tuple

# Third Party Imports
from pydantic import BaseModel, Field, field_validator

# Internal Imports
from missingvalues.core.exceptions.data.algorithm import InvalidRangeError
from missingvalues.utils.constants import DEFAULT_ATTRIBUTE_RANGE, RANGE_FIRST, RANGE_LAST


def _parse_endpoint(token: str, num_attributes: Optional[int]) -> Optional[int]:
    """Turn 'first', 'last' or a 1-based number into a 1-based index.

    Returns None for symbolic endpoints when no width is known yet.
    """
    if token == RANGE_FIRST:
        return 1
    if token == RANGE_LAST:
        return num_attributes
    if not token.isdigit():
        raise InvalidRangeError(f"Invalid range endpoint: '{token}'")
    index = int(token)
    if index < 1:
        raise InvalidRangeError(f"Range indices are 1-based, got: {index}")
    return index


def _split_tokens(ranges: str) -> List[Tuple[str, str]]:
    """Split a range string into (start, end) endpoint pairs."""
    result = []
    for token in ranges.split(","):
        token = token.strip().lower()
        if not token:
            continue
        if "-" in token:
            start, _, end = token.partition("-")
            result.append((start.strip(), end.strip()))
        else:
            result.append((token, token))
    return result


def indices_to_range_list(indices: Sequence[int]) -> str:
    """Render 0-based indices in compact 1-based range notation, e.g. '1-3,5'."""
    parts = []
    ordered = sorted(set(indices))
    i = 0
    while i < len(ordered):
        j = i
        while j + 1 < len(ordered) and ordered[j + 1] == ordered[j] + 1:
            j += 1
        if j > i:
            parts.append(f"{ordered[i] + 1}-{ordered[j] + 1}")
        else:
            parts.append(f"{ordered[i] + 1}")
        i = j + 1
    return ",".join(parts)


class AttributeRange(BaseModel):
    """A selection of attributes, e.g. 'first-3,5,last'.

    The range is stored in its textual form and resolved against a concrete
    number of attributes whenever a dataset is processed.

    Attributes:
        ranges: Comma-separated 1-based indices and inclusive spans
        invert: Whether the selection is complemented after resolution
    """

    ranges: str = Field(
        default=DEFAULT_ATTRIBUTE_RANGE,
        description="Comma-separated 1-based indices/spans; 'first' and 'last' are valid.",
    )
    invert: bool = Field(default=False, description="Whether to invert the selection.")

    @field_validator("ranges")
    @classmethod
    def _validate_syntax(cls, ranges: str) -> str:
        for start, end in _split_tokens(ranges):
            _parse_endpoint(start, None)
            _parse_endpoint(end, None)
        return ranges

    def resolve(self, num_attributes: int) -> List[int]:
        """Resolve the range against a schema width.

        Args:
            num_attributes: The number of attributes of the schema

        Returns:
            List[int]: Ascending, deduplicated 0-based indices

        Raises:
            InvalidRangeError: If an index lies outside 1..num_attributes
        """
        selected = set()
        for start_token, end_token in _split_tokens(self.ranges):
            if num_attributes == 0 and {start_token, end_token} <= {RANGE_FIRST, RANGE_LAST}:
                continue
            start = _parse_endpoint(start_token, num_attributes)
            end = _parse_endpoint(end_token, num_attributes)
            for index in (start, end):
                if index > num_attributes:
                    raise InvalidRangeError(
                        f"Index {index} in range '{self.ranges}' exceeds the "
                        f"{num_attributes} available attributes"
                    )
            low, high = min(start, end), max(start, end)
            selected.update(range(low - 1, high))

        if self.invert:
            selected = set(range(num_attributes)) - selected
        return sorted(selected)

    def __str__(self) -> str:
        return f"{'!' if self.invert else ''}{self.ranges}"

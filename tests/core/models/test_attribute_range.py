"""Tests for attribute range resolution."""

import pytest

from missingvalues.core.exceptions import InvalidRangeError
from missingvalues.core.models.attribute_range import AttributeRange, indices_to_range_list


class TestResolve:
    """Resolution of ranges against a schema width."""

    @pytest.mark.parametrize(
        "ranges, num_attributes, expected",
        [
            ("first-last", 4, [0, 1, 2, 3]),
            ("1,3", 4, [0, 2]),
            ("first-3,5-last", 6, [0, 1, 2, 4, 5]),
            ("3-1", 3, [0, 1, 2]),
            (" 2 , 4 ", 4, [1, 3]),
            ("last", 5, [4]),
            ("1,1,1-2", 3, [0, 1]),
            ("", 3, []),
        ],
    )
    def test_resolve(self, ranges: str, num_attributes: int, expected) -> None:
        """Indices are 0-based, ascending and deduplicated."""
        assert AttributeRange(ranges=ranges).resolve(num_attributes) == expected

    def test_invert_complements_selection(self) -> None:
        """Inverted ranges select all other attributes."""
        assert AttributeRange(ranges="1,3", invert=True).resolve(4) == [1, 3]
        assert AttributeRange(ranges="first-last", invert=True).resolve(4) == []

    def test_index_beyond_width_raises(self) -> None:
        """Indices outside 1..n are rejected at resolution time."""
        with pytest.raises(InvalidRangeError):
            AttributeRange(ranges="5").resolve(3)

    def test_symbolic_range_on_empty_schema(self) -> None:
        """'first-last' selects nothing on a schema without attributes."""
        assert AttributeRange().resolve(0) == []

    def test_same_range_resolves_per_width(self) -> None:
        """The textual range is resolved anew for every schema."""
        selection = AttributeRange(ranges="2-last")
        assert selection.resolve(3) == [1, 2]
        assert selection.resolve(5) == [1, 2, 3, 4]


class TestSyntax:
    """Malformed ranges are rejected on construction."""

    @pytest.mark.parametrize("ranges", ["a-b", "0", "1-x", "first-lst"])
    def test_malformed(self, ranges: str) -> None:
        with pytest.raises(InvalidRangeError):
            AttributeRange(ranges=ranges)


def test_indices_to_range_list() -> None:
    """Indices are rendered as compact 1-based notation."""
    assert indices_to_range_list([0, 1, 2, 4]) == "1-3,5"
    assert indices_to_range_list([3]) == "4"
    assert indices_to_range_list([]) == ""

"""Tests for the dataset model."""

import numpy as np
import pandas as pd
import pytest

from conftest import NAN, build_dataset, nominal, numeric, string
from missingvalues.core.exceptions import (
    DatasetError,
    DuplicateLabelError,
    SchemaMismatchError,
    UnknownLabelError,
)
from missingvalues.core.models.dataset import Attribute, Dataset, Instance
from missingvalues.utils.constants import AttributeType


class TestAttribute:
    """Nominal domains and string tables."""

    def test_duplicate_labels_rejected(self) -> None:
        with pytest.raises(DuplicateLabelError) as info:
            nominal("color", ["red", "green", "red"])
        assert info.value.label == "red"
        assert info.value.attribute == "color"

    def test_label_lookup(self) -> None:
        att = nominal("color", ["red", "green"])
        assert att.index_of("green") == 1
        assert att.index_of("blue") is None
        assert att.value(0) == "red"
        with pytest.raises(UnknownLabelError):
            att.encode("blue")

    def test_string_table_grows(self) -> None:
        att = string("comment")
        assert att.add_string_value("foo") == 0
        assert att.add_string_value("bar") == 1
        assert att.add_string_value("foo") == 0
        assert att.labels == ["foo", "bar"]

    def test_nominal_domain_does_not_grow(self) -> None:
        with pytest.raises(DatasetError):
            nominal("color", ["red"]).add_string_value("blue")

    def test_without_labels(self) -> None:
        """Removing labels returns a new attribute and the removed labels."""
        att = nominal("color", ["red", "?", "green"])
        rewritten, removed = att.without_labels(lambda label: label == "?")
        assert rewritten.labels == ["red", "green"]
        assert rewritten.index_of("green") == 1
        assert removed == ["?"]
        assert att.labels == ["red", "?", "green"]

    def test_date_is_numeric(self) -> None:
        att = Attribute(name="when", type=AttributeType.DATE)
        assert att.is_numeric and att.is_date and not att.is_nominal


class TestInstance:
    """Rows and missing values."""

    def test_missing_values(self) -> None:
        inst = Instance(values=[1.0, NAN, 3.0])
        assert inst.is_missing(1)
        assert inst.has_missing()
        assert inst.missing_indices() == [1]

    def test_equality_treats_missing_as_equal(self) -> None:
        assert Instance(values=[1.0, NAN]) == Instance(values=[1.0, NAN])
        assert Instance(values=[1.0, NAN]) != Instance(values=[1.0, 2.0])
        assert Instance(values=[1.0], weight=2.0) != Instance(values=[1.0])

    def test_clone_is_independent(self) -> None:
        inst = Instance(values=[1.0, 2.0])
        copy = inst.clone()
        copy.set_missing(0)
        assert inst.value(0) == 1.0

    def test_values_are_copied(self) -> None:
        values = np.array([1.0, 2.0])
        inst = Instance(values=values)
        values[0] = 5.0
        assert inst.value(0) == 1.0

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValueError):
            Instance(values=[1.0], weight=-1.0)


class TestDataset:
    """Schema invariants and accessors."""

    def test_arity_checked(self) -> None:
        data = Dataset(attributes=[numeric("a"), numeric("b")])
        with pytest.raises(SchemaMismatchError):
            data.add(Instance(values=[1.0]))

    def test_label_index_checked(self) -> None:
        data = Dataset(attributes=[nominal("c", ["x", "y"])])
        with pytest.raises(SchemaMismatchError):
            data.add(Instance(values=[2.0]))

    def test_class_index_checked(self) -> None:
        with pytest.raises(SchemaMismatchError):
            Dataset(attributes=[numeric("a")], class_index=1)

    def test_header_is_empty_copy(self, weather: Dataset) -> None:
        header = weather.header()
        assert header.num_instances == 0
        assert header.attributes == weather.attributes
        assert header.class_index == 4
        header.attributes[0].labels.append("foggy")
        assert weather.attribute(0).num_values == 3

    def test_statistics(self, weather: Dataset) -> None:
        assert weather.missing_count(0) == 2
        assert weather.missing_count(4) == 1
        assert weather.sum_of_weights() == 14.0
        assert weather.class_attribute().name == "play"
        assert weather.index_of_attribute("humidity") == 2

    def test_string_value(self, weather: Dataset) -> None:
        assert weather.string_value(weather[0], 0) == "sunny"
        assert weather.string_value(weather[4], 0) == "?"
        assert weather.string_value(weather[0], 1) == "85.0"

    def test_clone_equals_original(self, weather: Dataset) -> None:
        copy = weather.clone()
        assert copy == weather
        copy[0].set_missing(1)
        assert copy != weather


class TestDataFrameBridge:
    """Conversion from and to pandas."""

    def test_from_dataframe(self) -> None:
        df = pd.DataFrame(
            {
                "size": [1.5, None, 3.0],
                "color": ["red", "blue", None],
                "note": ["a", "b", "a"],
                "label": ["yes", "no", "yes"],
            }
        )
        data = Dataset.from_dataframe(df, class_column="label", string_columns=["note"])
        assert data.class_index == 3
        assert data.attribute(0).type == AttributeType.NUMERIC
        assert data.attribute(1).labels == ["blue", "red"]
        assert data.attribute(2).type == AttributeType.STRING
        assert data.attribute(2).labels == ["a", "b"]
        assert data[1].is_missing(0)
        assert data[2].is_missing(1)
        assert data.string_value(data[0], 1) == "red"

    def test_round_trip(self) -> None:
        df = pd.DataFrame({"size": [1.5, None], "color": pd.Categorical(["red", None])})
        result = Dataset.from_dataframe(df).to_dataframe()
        assert result["size"].isna().tolist() == [False, True]
        assert result["color"].tolist()[0] == "red"
        assert pd.isna(result["color"].tolist()[1])


def test_build_dataset_helper_encodes_labels() -> None:
    """Rows given as labels are stored as label indices."""
    data = build_dataset([nominal("c", ["x", "y"]), numeric("n")], [["y", None]])
    assert data[0].value(0) == 1.0
    assert data[0].is_missing(1)

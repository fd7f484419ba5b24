"""Tests for the null and user-supplied values imputers."""

import pytest

from conftest import NAN, build_dataset, nominal, numeric
from missingvalues.core.exceptions import InvalidRangeError
from missingvalues.core.models.dataset import Attribute, Instance
from missingvalues.data.imputation import (
    NullImputer,
    UserSuppliedValuesConfig,
    UserSuppliedValuesImputer,
)
from missingvalues.utils.constants import AttributeType


@pytest.fixture
def mixed():
    attributes = [
        numeric("n"),
        Attribute(name="d", type=AttributeType.DATE),
        nominal("c", ["x", "y", "z"]),
    ]
    return build_dataset(attributes, [[1, 0, "x"], [None, None, None]])


def test_null_imputer(mixed) -> None:
    imputer = NullImputer()
    imputer.build(mixed)
    result = imputer.apply(mixed)
    assert result == mixed
    assert result is not mixed


class TestUserSuppliedValues:
    """Fixed replacement values."""

    def test_defaults(self, mixed) -> None:
        imputer = UserSuppliedValuesImputer()
        imputer.build(mixed)
        result = imputer.apply(mixed[1])
        assert result.value(0) == 0.0
        assert mixed.string_value(result, 1).startswith("2000-01-01T00:00:00")
        assert result.value(1) == 946684800.0
        assert mixed.string_value(result, 2) == "x"

    def test_configured_values(self, mixed) -> None:
        config = UserSuppliedValuesConfig(
            numeric=-1.0, date="31.12.1999", date_format="%d.%m.%Y", nominal="last"
        )
        imputer = UserSuppliedValuesImputer(config)
        imputer.build(mixed)
        result = imputer.apply(mixed)[1]
        assert result.value(0) == -1.0
        assert result.value(1) == 946598400.0
        assert mixed.string_value(result, 2) == "z"

    def test_numbered_label(self, mixed) -> None:
        imputer = UserSuppliedValuesImputer(UserSuppliedValuesConfig(nominal="2"))
        imputer.build(mixed)
        assert imputer.apply(mixed[1]).value(2) == 1.0

    def test_range(self, mixed) -> None:
        imputer = UserSuppliedValuesImputer(UserSuppliedValuesConfig(attribute_range="first"))
        imputer.build(mixed)
        result = imputer.apply(mixed[1])
        assert result.value(0) == 0.0
        assert result.is_missing(1) and result.is_missing(2)

    def test_complete_rows_unchanged(self, mixed) -> None:
        imputer = UserSuppliedValuesImputer()
        imputer.build(mixed)
        assert imputer.apply(mixed[0]) == mixed[0]

    def test_label_out_of_domain(self, mixed) -> None:
        imputer = UserSuppliedValuesImputer(UserSuppliedValuesConfig(nominal="4"))
        imputer.build(mixed)
        with pytest.raises(InvalidRangeError):
            imputer.apply(Instance(values=[1.0, 0.0, NAN]))

    def test_nominal_must_be_single_index(self) -> None:
        with pytest.raises(InvalidRangeError):
            UserSuppliedValuesConfig(nominal="1-2")

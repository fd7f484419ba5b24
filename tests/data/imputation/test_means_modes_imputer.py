"""Tests for means/modes imputation."""

import numpy as np
import pytest

from conftest import build_dataset, nominal, numeric, string
from missingvalues.core.exceptions import UninitializedError
from missingvalues.core.models.dataset import Dataset, Instance
from missingvalues.data.imputation import MeansModesImputer
from missingvalues.data.imputation.means_modes_imputer import weighted_mean, weighted_mode


class TestStatistics:
    """Means and modes learned from the training data."""

    def test_mean_fills_missing(self, make_dataset) -> None:
        data = make_dataset([numeric("a")], [[2], [None], [4], [None], [6]])
        imputer = MeansModesImputer()
        imputer.build_imputation(data)
        assert imputer.state.replacements == (4.0,)
        result = imputer.impute(data)
        assert result.column(0).tolist() == [2.0, 4.0, 4.0, 4.0, 6.0]

    def test_mode_tie_goes_to_first_label(self, make_dataset) -> None:
        rows = [["A"], ["B"], ["A"], ["B"], ["A"], ["B"], [None]]
        data = make_dataset([nominal("c", ["A", "B"])], rows)
        imputer = MeansModesImputer()
        imputer.build(data)
        assert imputer.apply(data)[6].value(0) == 0.0

    def test_weights_count(self, make_dataset) -> None:
        data = make_dataset(
            [nominal("c", ["A", "B"]), numeric("n")],
            [["A", 0], ["A", 0], ["B", 10], [None, None]],
            weights=[1.0, 1.0, 3.0, 1.0],
        )
        imputer = MeansModesImputer()
        imputer.build(data)
        assert imputer.state.replacements == (1, 6.0)

    def test_nothing_observed(self, make_dataset) -> None:
        """Numeric attributes fall back to 0, nominal ones stay missing."""
        data = make_dataset([numeric("n"), nominal("c", ["A"])], [[None, None]])
        imputer = MeansModesImputer()
        imputer.build(data)
        result = imputer.apply(data[0])
        assert result.value(0) == 0.0
        assert result.is_missing(1)

    def test_helpers(self) -> None:
        weights = np.ones(4)
        assert weighted_mean(np.array([1.0, np.nan, 3.0, np.nan]), weights) == 2.0
        assert weighted_mode(np.array([1.0, 0.0, np.nan, np.nan]), weights, 2) == 0
        assert weighted_mode(np.full(4, np.nan), weights, 2) is None


class TestUntouched:
    """Attributes that are never imputed."""

    def test_class_attribute(self, weather: Dataset) -> None:
        imputer = MeansModesImputer()
        imputer.build(weather)
        result = imputer.apply(weather)
        assert result.missing_count(4) == 1
        assert all(result.missing_count(i) == 0 for i in range(4))

    def test_string_attribute(self) -> None:
        data = build_dataset([string("s", ["foo"]), numeric("n")], [[None, 1], ["foo", None]])
        imputer = MeansModesImputer()
        imputer.build(data)
        result = imputer.apply(data)
        assert result[0].is_missing(0)
        assert result[1].value(1) == 1.0

    def test_foreign_string_table(self) -> None:
        """Strings keep their labels when the applied data has its own string table."""
        train = build_dataset([string("s"), numeric("n")], [["a", 1], ["b", None]])
        test = build_dataset([string("s"), numeric("n")], [["c", None], ["d", 2], ["e", 3]])
        imputer = MeansModesImputer()
        imputer.build(train)
        result = imputer.apply(test)
        assert [result.string_value(row, 0) for row in result] == ["c", "d", "e"]
        assert result[0].value(1) == 1.0
        assert train.attribute(0).labels == ["a", "b"]
        assert imputer.output_format.attribute(0).labels == ["a", "b"]


def test_apply_before_build(weather: Dataset) -> None:
    with pytest.raises(UninitializedError):
        MeansModesImputer().apply(weather)


def test_rows_use_training_format(weather: Dataset) -> None:
    """Single rows are imputed with the statistics of the training data."""
    imputer = MeansModesImputer()
    imputer.build(weather)
    row = Instance.missing(5)
    result = imputer.apply(row)
    assert result.value(0) == 0.0  # all outlooks tie, the first label wins
    assert result.value(3) == 0.0
    assert result.is_missing(4)
    assert row.has_missing()


def test_statistics_recorded(weather: Dataset) -> None:
    imputer = MeansModesImputer()
    imputer.build(weather)
    statistics = imputer.get_statistics()
    assert statistics["total_missing_values"] == 8
    assert statistics["missing_by_attribute"]["humidity"] == 2

"""Tests for the batch filters."""

from conftest import numeric
from missingvalues.core.models.capabilities import BASIC_TYPES
from missingvalues.data.imputation import KNNImputerService, MeansModesImputer, NullImputer
from missingvalues.data.injection import ClassOnlyInjector, NullInjector
from missingvalues.filters import MissingValuesImputationFilter, MissingValuesInjectionFilter


def test_first_batch_builds(make_dataset) -> None:
    """Later batches are processed with the statistics of the first batch."""
    first = make_dataset([numeric("a")], [[1], [3], [None]])
    second = make_dataset([numeric("a")], [[100], [None]])
    imputation = MissingValuesImputationFilter(MeansModesImputer())
    assert imputation.process(first)[2].value(0) == 2.0
    assert imputation.is_first_batch_done
    assert imputation.process(second)[1].value(0) == 2.0


def test_reset_rebuilds(make_dataset) -> None:
    first = make_dataset([numeric("a")], [[1], [3], [None]])
    second = make_dataset([numeric("a")], [[100], [None]])
    imputation = MissingValuesImputationFilter(MeansModesImputer())
    imputation.process(first)
    imputation.reset()
    assert not imputation.is_first_batch_done
    assert imputation.process(second)[1].value(0) == 100.0


def test_defaults() -> None:
    assert isinstance(MissingValuesImputationFilter().algorithm, NullImputer)
    assert isinstance(MissingValuesInjectionFilter().algorithm, NullInjector)


def test_capabilities_of_wrapped_algorithm() -> None:
    imputation = MissingValuesImputationFilter(KNNImputerService())
    assert imputation.get_capabilities().attribute_types == BASIC_TYPES


def test_injection(weather) -> None:
    injection = MissingValuesInjectionFilter(ClassOnlyInjector())
    result = injection.process(weather)
    assert result.missing_count(4) == weather.num_instances
    assert weather.missing_count(4) == 1

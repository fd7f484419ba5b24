"""Tests for random injection."""

import numpy as np
import pytest

from conftest import build_dataset, numeric
from missingvalues.data.injection import RandomPercentageConfig, RandomPercentageInjector
from missingvalues.utils.constants import MAX_CHILD_SEED


def complete(num_rows: int, num_attributes: int = 3):
    attributes = [numeric(f"a{i}") for i in range(num_attributes)]
    return build_dataset(attributes, [[n] * num_attributes for n in range(num_rows)])


def mask(data) -> np.ndarray:
    return np.isnan(data.to_matrix())


def test_repeated_dataset_applications_match() -> None:
    data = complete(200)
    injector = RandomPercentageInjector(RandomPercentageConfig(percentage=0.3))
    injector.build(data)
    first = injector.apply(data)
    second = injector.apply(data)
    assert mask(first).any()
    assert np.array_equal(mask(first), mask(second))


def test_fraction_converges_to_percentage() -> None:
    data = complete(10000, num_attributes=1)
    injector = RandomPercentageInjector(RandomPercentageConfig(seed=42, percentage=0.2))
    injector.build(data)
    assert mask(injector.apply(data)).mean() == pytest.approx(0.2, abs=0.02)


def test_seed_derivation() -> None:
    """Each attribute gets its own stream, seeded from the master generator in order."""
    data = complete(50)
    config = RandomPercentageConfig(seed=7, percentage=0.5, attribute_range="1,3")
    injector = RandomPercentageInjector(config)
    injector.build(data)

    master = np.random.default_rng(7)
    seeds = [int(master.integers(0, MAX_CHILD_SEED)) for _ in range(2)]
    assert injector.state.indices == (0, 2)
    assert injector.state.seeds == tuple(seeds)

    result = mask(injector.apply(data))
    for column, seed in zip((0, 2), seeds):
        stream = np.random.default_rng(seed)
        expected = [stream.random() < 0.5 for _ in range(50)]
        assert result[:, column].tolist() == expected
    assert not result[:, 1].any()


def test_rows_continue_the_streams() -> None:
    data = complete(5)
    injector = RandomPercentageInjector(RandomPercentageConfig(percentage=0.5))
    injector.build(data)
    rows = [injector.apply(inst) for inst in data]
    expected = injector.apply(data)
    assert rows == list(expected)


def test_percentage_extremes() -> None:
    data = complete(20)
    injector = RandomPercentageInjector(RandomPercentageConfig(percentage=0.0))
    injector.build(data)
    assert not mask(injector.apply(data)).any()

    injector = RandomPercentageInjector(RandomPercentageConfig(percentage=1.0))
    injector.build(data)
    assert mask(injector.apply(data)).all()


def test_percentage_validated() -> None:
    with pytest.raises(ValueError):
        RandomPercentageConfig(percentage=1.5)
    with pytest.raises(ValueError):
        RandomPercentageConfig(percentage=-0.1)

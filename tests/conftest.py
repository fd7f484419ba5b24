"""Shared fixtures for the missing values toolkit tests."""

from typing import List, Optional, Sequence

import numpy as np
import pytest

from missingvalues.core.models.dataset import Attribute, Dataset, Instance
from missingvalues.utils.constants import AttributeType

NAN = float("nan")


def numeric(name: str) -> Attribute:
    return Attribute(name=name, type=AttributeType.NUMERIC)


def nominal(name: str, labels: Sequence[str]) -> Attribute:
    return Attribute(name=name, type=AttributeType.NOMINAL, labels=list(labels))


def string(name: str, labels: Sequence[str] = ()) -> Attribute:
    return Attribute(name=name, type=AttributeType.STRING, labels=list(labels))


def build_dataset(
    attributes: List[Attribute],
    rows: Sequence[Sequence],
    class_index: Optional[int] = None,
    weights: Optional[Sequence[float]] = None,
) -> Dataset:
    """Create a dataset from rows given as numbers, labels or None (missing)."""
    data = Dataset(relation_name="test", attributes=attributes, class_index=class_index)
    for n, row in enumerate(rows):
        values = []
        for att, value in zip(attributes, row):
            if value is None:
                values.append(NAN)
            elif att.is_nominal:
                values.append(att.encode(value))
            elif att.is_string:
                values.append(att.add_string_value(value))
            else:
                values.append(float(value))
        weight = 1.0 if weights is None else weights[n]
        data.add(Instance(values=values, weight=weight))
    return data


@pytest.fixture
def make_dataset():
    """Factory for small datasets."""
    return build_dataset


@pytest.fixture
def weather() -> Dataset:
    """Mixed nominal/numeric data with missing values and a nominal class."""
    attributes = [
        nominal("outlook", ["sunny", "overcast", "rainy"]),
        numeric("temperature"),
        numeric("humidity"),
        nominal("windy", ["FALSE", "TRUE"]),
        nominal("play", ["yes", "no"]),
    ]
    rows = [
        ["sunny", 85, 85, "FALSE", "no"],
        ["sunny", 80, 90, "TRUE", "no"],
        ["overcast", 83, None, "FALSE", "yes"],
        ["rainy", 70, 96, "FALSE", "yes"],
        [None, 68, 80, "FALSE", "yes"],
        ["rainy", 65, 70, None, "no"],
        ["overcast", None, 65, "TRUE", "yes"],
        ["sunny", 72, 95, "FALSE", None],
        ["sunny", 69, 70, "FALSE", "yes"],
        ["rainy", 75, None, "FALSE", "yes"],
        [None, 75, 70, "TRUE", "yes"],
        ["overcast", 72, 90, "TRUE", "yes"],
        ["overcast", 81, 75, None, "yes"],
        ["rainy", 71, 91, "TRUE", "no"],
    ]
    return build_dataset(attributes, rows, class_index=4)


@pytest.fixture
def linear() -> Dataset:
    """y = 2x + 1 with three missing y values, x complete."""
    rows = [[x, 2 * x + 1] for x in range(1, 21)]
    for index in (3, 7, 12):
        rows[index][1] = None
    return build_dataset([numeric("x"), numeric("y")], rows)


@pytest.fixture
def separable() -> Dataset:
    """Nominal 'size' determined by x (lo up to 10, hi above), two values missing."""
    rows = [[x, "lo" if x <= 10 else "hi"] for x in range(1, 21)]
    rows[1][1] = None
    rows[18][1] = None
    return build_dataset([numeric("x"), nominal("size", ["lo", "hi"])], rows)


def missing_mask(data: Dataset) -> np.ndarray:
    return np.isnan(data.to_matrix())

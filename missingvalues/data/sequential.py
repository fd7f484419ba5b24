"""
Sequential composition of algorithms.

Copies of the stages of a composition are built one after another, each on
the output format of its predecessor, and applied in the same order. Failures of a stage
are reported with its 1-based position.
"""

import copy
from typing import List, Sequence, Tuple, Union

from missingvalues.core.exceptions.data.algorithm import StageError
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.data.base_algorithm import BaseAlgorithm
from missingvalues.utils.constants import Direction
from missingvalues.utils.logging import get_logger

logger = get_logger(__name__)


def check_direction(stages: Sequence[BaseAlgorithm], direction: Direction) -> List[BaseAlgorithm]:
    """Check that all stages work in the given direction.

    Raises:
        ValueError: If a stage is not an algorithm of that direction
    """
    for i, stage in enumerate(stages, start=1):
        if getattr(stage, "direction", None) != direction:
            raise ValueError(
                f"Algorithm #{i} ({type(stage).__name__}) is not an {direction.value} algorithm"
            )
    return list(stages)


def build_stages(
    stages: Sequence[BaseAlgorithm], data: Dataset
) -> Tuple[Tuple[BaseAlgorithm, ...], Dataset]:
    """Build copies of the stages in order, threading the output formats.

    The given stages serve as templates and are left untouched, so a failing
    stage does not leave a mix of old and new states behind.

    Args:
        stages: The algorithms to build
        data: Training data of the first stage

    Returns:
        The built copies and the output format of the last stage

    Raises:
        StageError: If a stage fails to build
    """
    built = []
    current = data
    for i, template in enumerate(stages, start=1):
        stage = copy.deepcopy(template)
        try:
            current = stage.build(current)
        except Exception as e:
            raise StageError(i, e) from e
        logger.debug(f"Built algorithm #{i}: {stage!r}")
        built.append(stage)
    return tuple(built), current


def apply_stages(
    stages: Sequence[BaseAlgorithm], data: Union[Dataset, Instance]
) -> Union[Dataset, Instance]:
    """Apply the stages in order, feeding each stage the output of its predecessor.

    Raises:
        StageError: If a stage fails to apply
    """
    current = data
    for i, stage in enumerate(stages, start=1):
        try:
            current = stage.apply(current)
        except Exception as e:
            raise StageError(i, e) from e
    return current

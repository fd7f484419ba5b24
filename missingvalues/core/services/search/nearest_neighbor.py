"""Nearest neighbor search over dataset rows."""

# Standard Library Imports
from abc import ABC, abstractmethod
from logging import Logger
from typing import List, Optional, Tuple

# Third Party Imports
import numpy as np
from sklearn.metrics.pairwise import nan_euclidean_distances

# Internal Imports
from missingvalues.core.models.dataset.dataset import Dataset
from missingvalues.core.models.dataset.instance import Instance
from missingvalues.utils.logging import get_logger

# Initialize logger
logger: Logger = get_logger(__name__)


class NearestNeighborSearch(ABC):
    """Abstract base class for nearest neighbor searches."""

    @abstractmethod
    def set_instances(self, data: Dataset) -> None:
        """Index the rows to search.

        Args:
            data: The rows to index
        """
        pass

    @abstractmethod
    def k_nearest_neighbors(self, instance: Instance, k: int) -> List[Instance]:
        """Get the k rows closest to the query row.

        Args:
            instance: The query row, may contain missing values
            k: The size of the neighborhood

        Returns:
            List[Instance]: Indexed rows ordered by increasing distance
        """
        pass


class RowEncoder:
    """Encodes rows as points for distance computations.

    Numeric and date attributes are min-max normalized using the ranges of the
    indexed rows, nominal attributes are one-hot encoded. String and
    relational attributes (and optionally the class) are ignored. Missing
    values stay NaN so that distances only use the coordinates present.
    """

    def __init__(self, data: Dataset, skip_class: bool = True):
        self.blocks: List[Tuple[int, str, int]] = []
        self._minimum = {}
        self._span = {}
        matrix = data.to_matrix()
        for i, att in enumerate(data.attributes):
            if skip_class and i == data.class_index:
                continue
            if att.is_numeric:
                column = matrix[:, i]
                present = column[~np.isnan(column)]
                low = float(present.min()) if present.size else 0.0
                high = float(present.max()) if present.size else 0.0
                self._minimum[i] = low
                self._span[i] = high - low
                self.blocks.append((i, "numeric", 1))
            elif att.is_nominal and att.num_values > 0:
                self.blocks.append((i, "nominal", att.num_values))

    @property
    def width(self) -> int:
        return sum(size for _, _, size in self.blocks)

    def transform(self, matrix: np.ndarray) -> np.ndarray:
        """Encode a (rows x attributes) matrix."""
        encoded = np.full((matrix.shape[0], self.width), np.nan)
        offset = 0
        for index, kind, size in self.blocks:
            column = matrix[:, index]
            present = ~np.isnan(column)
            if kind == "numeric":
                if self._span[index] > 0:
                    scaled = (column - self._minimum[index]) / self._span[index]
                else:
                    scaled = np.zeros_like(column)
                encoded[present, offset] = scaled[present]
            else:
                block = np.zeros((matrix.shape[0], size))
                labels = column[present].astype(int)
                inside = (labels >= 0) & (labels < size)
                rows = np.flatnonzero(present)[inside]
                block[rows, labels[inside]] = 1.0
                block[~present, :] = np.nan
                encoded[:, offset : offset + size] = block
            offset += size
        return encoded


class LinearNNSearch(NearestNeighborSearch):
    """Brute force nearest neighbor search using a NaN-tolerant Euclidean distance.

    Attributes:
        skip_class: Whether the class attribute is ignored in distance computations
    """

    def __init__(self, skip_class: bool = True):
        """Initialize the search.

        Args:
            skip_class: Whether to ignore the class attribute (default: True)
        """
        self.skip_class = skip_class
        self._data: Optional[Dataset] = None
        self._encoder: Optional[RowEncoder] = None
        self._points: Optional[np.ndarray] = None

    def set_instances(self, data: Dataset) -> None:
        self._data = data
        self._encoder = RowEncoder(data, skip_class=self.skip_class)
        self._points = self._encoder.transform(data.to_matrix())
        logger.debug(
            f"Indexed {data.num_instances} rows using {self._encoder.width} coordinates"
        )

    def distances(self, instance: Instance) -> np.ndarray:
        """Compute the distances between the query row and all indexed rows.

        Rows without any coordinate in common with the query are infinitely far.
        """
        if self._data is None:
            raise ValueError("No instances set, call set_instances first")
        if self._encoder.width == 0 or self._data.num_instances == 0:
            return np.zeros(self._data.num_instances)
        query = self._encoder.transform(instance.values[np.newaxis, :])
        result = nan_euclidean_distances(query, self._points)[0]
        return np.where(np.isnan(result), np.inf, result)

    def k_nearest_neighbors(self, instance: Instance, k: int) -> List[Instance]:
        distances = self.distances(instance)
        order = np.argsort(distances, kind="stable")[:k]
        return [self._data.instances[i] for i in order]

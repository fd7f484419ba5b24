"""Nearest neighbor search services."""

from missingvalues.core.services.search.nearest_neighbor import (
    LinearNNSearch,
    NearestNeighborSearch,
    RowEncoder,
)

__all__ = ["LinearNNSearch", "NearestNeighborSearch", "RowEncoder"]

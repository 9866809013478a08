"""Graph ports - Abstractions for graph queries and dataset loading.

These protocols define the contracts between the graph core and the
code around it: what a query needs from a graph, and where raw
datasets come from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..domain.models import GraphDataset, Neighbor


@runtime_checkable
class GraphLike(Protocol):
    """Read-only capability set required by range queries.

    Implementation: graph/city_graph.py (Graph)

    Being runtime checkable, ``isinstance(obj, GraphLike)`` is a
    structural check: any object exposing both methods qualifies.
    """

    def neighbors(self, name: str) -> Sequence[Neighbor]:
        """Return the adjacency records of ``name`` (empty if unknown)."""
        ...

    def has_city(self, name: str) -> bool:
        """Return True if ``name`` is a city of the graph."""
        ...


class DatasetRepositoryPort(Protocol):
    """Port for loading raw graph datasets.

    Implementations: adapters/dataset/ (sample, JSON, CSV)

    The repository is responsible for reading and caching a dataset
    from wherever it lives. It does not build the graph.
    """

    def load(self) -> GraphDataset:
        """Load the raw dataset.

        Returns:
            The cities and edges as found in the source.

        Raises:
            DatasetLoadError: If the source cannot be read.
        """
        ...

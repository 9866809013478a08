"""Nearby cities service - Load, validate, build and query.

This service wires a dataset repository to the graph core. The graph is
built once per dataset load and shared by every query; queries never
mutate it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import DatasetValidationError
from ..domain.models import Neighbor, ValidationResult
from ..graph.build import build_graph_from_dataset
from ..graph.city_graph import Graph
from ..graph.nearby import get_nearby_cities
from ..graph.validation import validate_graph_data
from ..ports.graph import DatasetRepositoryPort


@dataclass
class NearbyCitiesService:
    """Main service for nearby-city lookups.

    Attributes:
        repository: Where the raw dataset comes from
        default_max_distance: Bound used when a query gives none
    """

    repository: DatasetRepositoryPort
    default_max_distance: Optional[float] = None

    _graph: Optional[Graph] = field(default=None, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate(self) -> ValidationResult:
        """Validate the repository's dataset without building anything.

        Raises:
            DatasetLoadError: If the repository cannot read its source.
            DatasetValidationError: If the repository validates on load.
        """
        return validate_graph_data(self.repository.load())

    def graph(self) -> Graph:
        """Return the graph, building it on first use.

        Raises:
            DatasetLoadError: If the dataset cannot be read.
            DatasetValidationError: If the dataset is invalid.
        """
        with self._lock:
            if self._graph is not None:
                return self._graph

            dataset = self.repository.load()
            result = validate_graph_data(dataset)
            if not result.ok:
                self._logger.warning(
                    "Dataset rejected",
                    extra={"error_count": len(result.errors)},
                )
                raise DatasetValidationError(
                    f"Dataset is invalid ({len(result.errors)} problem(s))",
                    errors=result.errors,
                )

            self._graph = build_graph_from_dataset(dataset)
            self._logger.info(
                "Graph built",
                extra={
                    "cities": len(self._graph),
                    "edges": self._graph.edge_count(),
                },
            )
            return self._graph

    def nearby(
        self, origin: str, max_distance: Optional[float] = None
    ) -> List[Neighbor]:
        """Return the direct neighbors of ``origin`` sorted by distance.

        ``max_distance`` falls back to ``default_max_distance``.
        """
        if max_distance is None:
            max_distance = self.default_max_distance

        result = get_nearby_cities(self.graph(), origin, max_distance)
        self._logger.debug(
            "Nearby query",
            extra={
                "origin": origin,
                "max_distance": max_distance,
                "results": len(result),
            },
        )
        return result

    def reload(self) -> None:
        """Drop the cached graph so the next query rebuilds it.

        The repository keeps its own cache; swap the repository to read
        a changed file again.
        """
        with self._lock:
            self._graph = None

"""Bulk graph construction from city and edge lists.

``build_graph`` does not validate: it lets the Graph raise on the first
bad city or edge. Callers that want a full report should run
``validate_graph_data`` first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Iterable, Mapping, Union

from ..domain.errors import InvalidInputError
from ..domain.models import EdgeRecord, GraphDataset
from .city_graph import Graph

logger = logging.getLogger(__name__)

EdgeLike = Union[EdgeRecord, Mapping[str, Any]]


def _as_edge_record(edge: EdgeLike) -> EdgeRecord:
    if isinstance(edge, EdgeRecord):
        return edge
    if isinstance(edge, MappingABC):
        try:
            return EdgeRecord.from_mapping(edge)
        except KeyError as e:
            raise InvalidInputError(
                f"Edge is missing key {e.args[0]!r}", value=edge, cause=e
            ) from e
    raise InvalidInputError(f"Edge must be a mapping, got {edge!r}", value=edge)


def build_graph(cities: Iterable[str], edges: Iterable[EdgeLike]) -> Graph:
    """Build a Graph from cities and edges.

    Every city is added before any edge, then edges are added in input
    order.

    Raises:
        InvalidInputError: On a bad city name, a self-loop or a malformed edge.
        UnknownCityError: If an edge references a city not in ``cities``.
        InvalidDistanceError: If an edge distance is not a finite number > 0.
    """
    graph = Graph()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        record = _as_edge_record(edge)
        graph.add_edge(record.from_city, record.to_city, record.distance)

    logger.debug(
        "Graph built",
        extra={"cities": len(graph), "edges": graph.edge_count()},
    )
    return graph


def build_graph_from_dataset(dataset: GraphDataset) -> Graph:
    return build_graph(dataset.cities, dataset.edges)

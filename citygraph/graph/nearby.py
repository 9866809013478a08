"""One-hop range query over the city graph.

This module answers "which cities are directly connected to this one,
within a given distance?". It does not traverse beyond direct
neighbors.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Optional

from ..domain.errors import InvalidDistanceError, InvalidInputError
from ..domain.models import Neighbor
from ..ports.graph import GraphLike


def _check_max_distance(max_distance: Any) -> None:
    if max_distance is None:
        return
    if (
        isinstance(max_distance, bool)
        or not isinstance(max_distance, Real)
        or math.isnan(max_distance)
        or max_distance < 0
    ):
        raise InvalidDistanceError(
            f"max_distance must be a non-negative number, got {max_distance!r}",
            distance=max_distance,
        )


def get_nearby_cities(
    graph: GraphLike, origin: str, max_distance: Optional[float] = None
) -> List[Neighbor]:
    """Return the direct neighbors of ``origin`` sorted by distance.

    Parameters
    ----------
    graph:
        Any object exposing ``neighbors`` and ``has_city``.
    origin:
        City to search around.
    max_distance:
        Inclusive upper bound on the distance. ``None`` keeps every
        neighbor.

    Returns
    -------
    list[Neighbor]
        Ascending by distance; ties keep adjacency insertion order.
        Empty when ``origin`` is not in the graph.

    Raises
    ------
    InvalidInputError
        If ``graph`` does not expose the graph capability set.
    InvalidDistanceError
        If ``max_distance`` is not a non-negative number.
    """
    if not isinstance(graph, GraphLike):
        raise InvalidInputError(
            f"Expected a graph, got {type(graph).__name__}", value=graph
        )
    _check_max_distance(max_distance)

    if not graph.has_city(origin):
        return []

    candidates = graph.neighbors(origin)
    if max_distance is not None:
        candidates = [n for n in candidates if n.distance <= max_distance]

    return sorted(candidates, key=lambda n: n.distance)

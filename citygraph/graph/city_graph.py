"""In-memory undirected weighted graph of cities.

This module defines the Graph type used throughout the project. Cities
are plain string names; each city maps to the ordered list of its
direct connections. Invariants are enforced when the graph is mutated,
so queries can trust whatever they read.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from ..domain.errors import InvalidDistanceError, InvalidInputError, UnknownCityError
from ..domain.models import Neighbor

logger = logging.getLogger(__name__)

Adjacency = Dict[str, List[Neighbor]]


def is_valid_city_name(name: Any) -> bool:
    return isinstance(name, str) and name != ""


def is_valid_distance(distance: Any) -> bool:
    """Return True for a finite real number strictly greater than zero.

    Booleans are rejected even though ``bool`` is a subclass of ``int``.
    """
    if isinstance(distance, bool) or not isinstance(distance, Real):
        return False
    return math.isfinite(distance) and distance > 0


class Graph:
    """Undirected weighted graph keyed by city name.

    Every city referenced by an adjacency record is itself a key, and
    edges are always stored in both directions with the same distance.
    Adding the same pair twice stores two records per side.
    """

    def __init__(self) -> None:
        self._adj: Adjacency = {}

    def add_city(self, name: str) -> None:
        """Add a city with no connections.

        Re-adding an existing city is a no-op: its adjacency list is kept.

        Raises:
            InvalidInputError: If ``name`` is not a non-empty string.
        """
        if not is_valid_city_name(name):
            raise InvalidInputError(
                f"City name must be a non-empty string, got {name!r}",
                value=name,
            )
        if name not in self._adj:
            self._adj[name] = []
            logger.debug("City added", extra={"city": name})

    def add_edge(self, from_city: str, to_city: str, distance: float) -> None:
        """Connect two existing cities in both directions.

        All checks run before the adjacency is touched, so either both
        records are stored or neither is.

        Raises:
            UnknownCityError: If either endpoint is not in the graph.
            InvalidDistanceError: If ``distance`` is not a finite number > 0.
            InvalidInputError: If both endpoints are the same city.
        """
        for city in (from_city, to_city):
            if not self.has_city(city):
                raise UnknownCityError(f"Unknown city: {city!r}", city=city)
        if not is_valid_distance(distance):
            raise InvalidDistanceError(
                f"Distance must be a finite number greater than 0, got {distance!r}",
                distance=distance,
            )
        if from_city == to_city:
            raise InvalidInputError(
                f"Self-loop edges are not allowed: {from_city!r}",
                value=from_city,
            )

        self._adj[from_city].append(Neighbor(to_city, distance))
        self._adj[to_city].append(Neighbor(from_city, distance))
        logger.debug(
            "Edge added",
            extra={"from_city": from_city, "to_city": to_city, "distance": distance},
        )

    def neighbors(self, name: str) -> Tuple[Neighbor, ...]:
        """Return the direct connections of ``name`` in insertion order.

        An unknown city has no neighbors; callers that need to tell the
        two cases apart should use ``has_city``.
        """
        try:
            return tuple(self._adj[name])
        except (KeyError, TypeError):
            return ()

    def has_city(self, name: Any) -> bool:
        try:
            return name in self._adj
        except TypeError:
            # unhashable
            return False

    def cities(self) -> List[str]:
        return list(self._adj)

    def edge_count(self) -> int:
        """Number of undirected edges, duplicates included."""
        return sum(len(records) for records in self._adj.values()) // 2

    @property
    def adj(self) -> Mapping[str, List[Neighbor]]:
        """Read-only view of the adjacency mapping."""
        return MappingProxyType(self._adj)

    def __contains__(self, name: object) -> bool:
        return self.has_city(name)

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return f"Graph(cities={len(self)}, edges={self.edge_count()})"

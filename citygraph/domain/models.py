"""Immutable domain models for the city graph.

All models are frozen dataclasses with slots. They have no external
dependencies and carry no validation beyond their shape: invariants are
enforced by the Graph at mutation time and reported by the validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True, slots=True)
class Neighbor:
    """One direct connection stored in a city's adjacency list.

    Attributes:
        to: Name of the connected city
        distance: Distance to that city
    """

    to: str
    distance: float

    def as_dict(self) -> Dict[str, Any]:
        return {"to": self.to, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A raw edge as supplied by a dataset.

    Fields are left untyped: whatever the source provided reaches the
    validator unchanged so it can be reported.

    Attributes:
        from_city: One endpoint
        to_city: The other endpoint
        distance: Distance between the two cities
    """

    from_city: Any
    to_city: Any
    distance: Any

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> EdgeRecord:
        """Build a record from a ``{"from", "to", "distance"}`` mapping.

        Raises:
            KeyError: If one of the three keys is missing.
        """
        return cls(
            from_city=raw["from"],
            to_city=raw["to"],
            distance=raw["distance"],
        )

    def as_dict(self) -> Dict[str, Any]:
        return {"from": self.from_city, "to": self.to_city, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class GraphDataset:
    """A raw dataset of cities and edges, before any validation.

    Attributes:
        cities: City names in input order
        edges: Edge records in input order
    """

    cities: tuple[Any, ...] = field(default_factory=tuple)
    edges: tuple[EdgeRecord, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        """Return the plain ``{"cities": [...], "edges": [...]}`` form."""
        return {
            "cities": list(self.cities),
            "edges": [edge.as_dict() for edge in self.edges],
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a dataset.

    Attributes:
        ok: True when no problem was found
        errors: Every problem found, in discovery order
    """

    ok: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        return cls(ok=not errors, errors=tuple(errors))

    def __bool__(self) -> bool:
        return self.ok

"""Validation of externally supplied graph datasets.

Datasets may come from users or remote sources, so this module never
raises: it walks the whole dataset and returns every problem it finds
as a human-readable message. The checks mirror the invariants the Graph
enforces at mutation time, so a dataset that validates also builds.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping as MappingABC
from typing import Any, List, Mapping, Sequence, Set, Union

from ..domain.models import EdgeRecord, GraphDataset, ValidationResult
from .city_graph import is_valid_city_name, is_valid_distance

RawDataset = Union[GraphDataset, Mapping[str, Any]]

EDGE_KEYS = ("from", "to", "distance")


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _check_cities(cities: Sequence[Any], errors: List[str]) -> Set[str]:
    """Check city names and return the set of usable ones."""
    known: Set[str] = set()
    for index, city in enumerate(cities):
        if not is_valid_city_name(city):
            errors.append(f"City #{index} must be a non-empty string, got {city!r}")
        else:
            known.add(city)

    counts = Counter(city for city in cities if is_valid_city_name(city))
    for city, count in counts.items():
        if count > 1:
            errors.append(f"Duplicate city {city!r} appears {count} times")
    return known


def _check_edges(edges: Sequence[Any], known: Set[str], errors: List[str]) -> None:
    for index, edge in enumerate(edges):
        if not isinstance(edge, MappingABC):
            errors.append(f"Edge #{index} must be an object, got {edge!r}")
            continue

        missing = [key for key in EDGE_KEYS if key not in edge]
        if missing:
            errors.append(f"Edge #{index} is missing {', '.join(missing)}")

        from_city = edge.get("from")
        to_city = edge.get("to")
        label = f"Edge #{index} ({from_city!r} -> {to_city!r})"

        for key, city in (("from", from_city), ("to", to_city)):
            if key in edge and not _is_known(city, known):
                errors.append(f"{label} references unknown city {city!r}")

        if "distance" in edge and not is_valid_distance(edge["distance"]):
            errors.append(
                f"{label} has invalid distance {edge['distance']!r}; "
                "expected a finite number greater than 0"
            )

        if "from" in edge and "to" in edge and from_city == to_city:
            errors.append(f"{label} is a self-loop")


def _is_known(city: Any, known: Set[str]) -> bool:
    return isinstance(city, str) and city in known


def _dataset_as_mapping(dataset: GraphDataset) -> Mapping[str, Any]:
    # GraphDataset fields are untyped; edges may hold raw mappings or junk
    edges = dataset.edges
    if _is_list(edges):
        edges = [e.as_dict() if isinstance(e, EdgeRecord) else e for e in edges]
    return {"cities": dataset.cities, "edges": edges}


def validate_graph_data(data: RawDataset) -> ValidationResult:
    """Check a raw dataset against the Graph invariants.

    Parameters
    ----------
    data:
        Either a ``GraphDataset`` or a mapping shaped like
        ``{"cities": [...], "edges": [{"from", "to", "distance"}, ...]}``.

    Returns
    -------
    ValidationResult
        ``ok`` is True when nothing was found; ``errors`` lists every
        problem otherwise. The input is never mutated.
    """
    if isinstance(data, GraphDataset):
        data = _dataset_as_mapping(data)
    if not isinstance(data, MappingABC):
        return ValidationResult.from_errors(
            [f"Dataset must be an object with 'cities' and 'edges', got {type(data).__name__}"]
        )

    errors: List[str] = []

    cities = data.get("cities")
    if not _is_list(cities):
        errors.append(f"'cities' must be a list, got {type(cities).__name__}")
        cities = []

    edges = data.get("edges")
    if not _is_list(edges):
        errors.append(f"'edges' must be a list, got {type(edges).__name__}")
        edges = []

    known = _check_cities(cities, errors)
    _check_edges(edges, known, errors)

    return ValidationResult.from_errors(errors)

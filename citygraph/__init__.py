"""Top-level package for the city graph project.

An in-memory undirected weighted graph of cities, a validator for
externally supplied datasets and a one-hop "nearby cities" query.
The public core is re-exported here.
"""

from .domain import (
    CityGraphError,
    InvalidDistanceError,
    InvalidInputError,
    Neighbor,
    UnknownCityError,
    ValidationResult,
)
from .graph import (
    SAMPLE_DATA,
    Graph,
    build_graph,
    get_nearby_cities,
    sample_data,
    validate_graph_data,
)

__all__ = [
    "Graph",
    "Neighbor",
    "ValidationResult",
    "build_graph",
    "get_nearby_cities",
    "validate_graph_data",
    "SAMPLE_DATA",
    "sample_data",
    "CityGraphError",
    "InvalidInputError",
    "UnknownCityError",
    "InvalidDistanceError",
]

"""Graph core: the city graph, dataset validation and range queries.

Control flow: raw dataset -> validate_graph_data -> build_graph ->
Graph -> get_nearby_cities.
"""

from .build import build_graph, build_graph_from_dataset
from .city_graph import Graph, is_valid_city_name, is_valid_distance
from .nearby import get_nearby_cities
from .sample_data import SAMPLE_DATA, sample_data
from .validation import validate_graph_data

__all__ = [
    "Graph",
    "build_graph",
    "build_graph_from_dataset",
    "get_nearby_cities",
    "validate_graph_data",
    "is_valid_city_name",
    "is_valid_distance",
    "SAMPLE_DATA",
    "sample_data",
]

import math

import pytest

from citygraph.domain.errors import (
    InvalidDistanceError,
    InvalidInputError,
    UnknownCityError,
)
from citygraph.domain.models import Neighbor
from citygraph.graph.build import build_graph
from citygraph.graph.city_graph import Graph
from citygraph.graph.sample_data import SAMPLE_DATA


@pytest.fixture
def ab_graph() -> Graph:
    graph = Graph()
    graph.add_city("A")
    graph.add_city("B")
    return graph


def test_add_city_registers_key():
    graph = Graph()
    graph.add_city("A")
    graph.add_city("B")

    assert "A" in graph.adj
    assert "B" in graph.adj
    assert graph.neighbors("A") == ()


@pytest.mark.parametrize("name", ["", None, 42, ["A"]])
def test_add_city_rejects_invalid_names(name):
    graph = Graph()
    with pytest.raises(InvalidInputError):
        graph.add_city(name)
    assert len(graph) == 0


def test_add_city_twice_is_a_noop(ab_graph):
    ab_graph.add_edge("A", "B", 10)
    ab_graph.add_city("A")

    assert list(ab_graph.adj) == ["A", "B"]
    assert ab_graph.neighbors("A") == (Neighbor("B", 10),)


def test_add_edge_is_symmetric(ab_graph):
    ab_graph.add_edge("A", "B", 10)

    assert ab_graph.neighbors("A")[0] == Neighbor(to="B", distance=10)
    assert ab_graph.neighbors("B")[0] == Neighbor(to="A", distance=10)
    assert ab_graph.neighbors("A")[0].as_dict() == {"to": "B", "distance": 10}


def test_add_edge_unknown_city_leaves_graph_untouched():
    graph = Graph()
    graph.add_city("A")

    with pytest.raises(UnknownCityError) as excinfo:
        graph.add_edge("A", "X", 10)

    assert excinfo.value.city == "X"
    assert graph.neighbors("A") == ()


def test_unknown_city_error_is_a_key_error(ab_graph):
    with pytest.raises(KeyError):
        ab_graph.add_edge("X", "B", 1)


@pytest.mark.parametrize(
    "distance", [-2, 0, "bad", None, math.inf, math.nan, True]
)
def test_add_edge_rejects_invalid_distances(ab_graph, distance):
    with pytest.raises(InvalidDistanceError):
        ab_graph.add_edge("A", "B", distance)
    assert ab_graph.neighbors("A") == ()
    assert ab_graph.neighbors("B") == ()


def test_add_edge_rejects_self_loop(ab_graph):
    with pytest.raises(InvalidInputError):
        ab_graph.add_edge("A", "A", 5)
    assert ab_graph.neighbors("A") == ()


def test_add_edge_accepts_float_distance(ab_graph):
    ab_graph.add_edge("A", "B", 0.5)
    assert ab_graph.neighbors("B") == (Neighbor("A", 0.5),)


def test_duplicate_edges_are_appended(ab_graph):
    ab_graph.add_edge("A", "B", 10)
    ab_graph.add_edge("B", "A", 7)

    assert ab_graph.neighbors("A") == (Neighbor("B", 10), Neighbor("B", 7))
    assert ab_graph.neighbors("B") == (Neighbor("A", 10), Neighbor("A", 7))
    assert ab_graph.edge_count() == 2


def test_neighbors_of_unknown_city_is_empty(ab_graph):
    assert ab_graph.neighbors("Nowhere") == ()
    assert ab_graph.neighbors(None) == ()
    assert not ab_graph.has_city("Nowhere")


def test_adj_view_is_read_only(ab_graph):
    with pytest.raises(TypeError):
        ab_graph.adj["C"] = []  # type: ignore[index]


def test_neighbors_returns_a_copy(ab_graph):
    ab_graph.add_edge("A", "B", 3)
    records = ab_graph.neighbors("A")
    ab_graph.add_edge("A", "B", 4)
    assert len(records) == 1


def test_build_graph_contains_all_cities():
    graph = build_graph(SAMPLE_DATA.cities, SAMPLE_DATA.edges)

    assert len(graph.adj) == len(SAMPLE_DATA.cities)
    assert graph.cities() == list(SAMPLE_DATA.cities)
    assert graph.edge_count() == len(SAMPLE_DATA.edges)


def test_build_graph_accepts_mappings():
    graph = build_graph(
        ["A", "B", "C"],
        [{"from": "A", "to": "B", "distance": 1}, {"from": "B", "to": "C", "distance": 2}],
    )

    assert graph.neighbors("B") == (Neighbor("A", 1), Neighbor("C", 2))


def test_build_graph_propagates_graph_errors():
    with pytest.raises(UnknownCityError):
        build_graph(["A"], [{"from": "A", "to": "B", "distance": 10}])
    with pytest.raises(InvalidDistanceError):
        build_graph(["A", "B"], [{"from": "A", "to": "B", "distance": -5}])
    with pytest.raises(InvalidInputError):
        build_graph(["A", ""], [])


def test_build_graph_rejects_malformed_edge():
    with pytest.raises(InvalidInputError):
        build_graph(["A", "B"], [{"from": "A", "to": "B"}])
    with pytest.raises(InvalidInputError):
        build_graph(["A", "B"], [("A", "B", 1)])


def test_repr_mentions_counts(ab_graph):
    ab_graph.add_edge("A", "B", 1)
    assert repr(ab_graph) == "Graph(cities=2, edges=1)"

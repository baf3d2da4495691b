"""Shared test fixtures."""

import pytest

from lodestar.core.events import RecordingObserver
from lodestar.core.graph import WeightedGraph


def build_graph(vertices, edges):
    """Build a graph from vertex names and ``(from, to, weight)`` triples."""
    graph = WeightedGraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for from_vertex, to_vertex, weight in edges:
        graph.add_edge(from_vertex, to_vertex, weight)
    return graph


@pytest.fixture
def graph_factory():
    """Fixture providing the graph builder."""
    return build_graph


@pytest.fixture
def recorder() -> RecordingObserver:
    """Fixture providing a fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def chain_graph() -> WeightedGraph:
    """Linear chain A -> B -> C -> D with unit weights."""
    return build_graph("ABCD", [("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])


@pytest.fixture
def branching_graph() -> WeightedGraph:
    """A -> B, A -> C, B -> D with unit weights."""
    return build_graph("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])


@pytest.fixture
def weighted_graph() -> WeightedGraph:
    """Four vertices where the cheapest A -> D route takes every hop."""
    return build_graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("A", "C", 4),
            ("B", "C", 2),
            ("B", "D", 5),
            ("C", "D", 1),
        ],
    )

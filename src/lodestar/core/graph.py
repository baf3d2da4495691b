"""
Core weighted graph data structure with an adjacency map representation.

This module provides the WeightedGraph class, a directed graph whose edges carry
non-negative integer weights. Each vertex owns a mapping from its neighbours to
the weight of the edge leading to them, and the graph keeps an ordered list of
observers that the search algorithms report to.

Vertices and neighbours are enumerated in insertion order. Traversal order and
Dijkstra tie-breaking both depend on this, which makes every search
reproducible for a given sequence of ``add_vertex``/``add_edge`` calls.

The graph only grows: there are no removal operations. It performs no internal
locking, so mutating it from another thread while a search runs is undefined.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from .events import GraphAlgorithmObserver, ObserverRegistry
from .exceptions import DuplicateVertexError, InvalidWeightError, VertexNotFoundError
from .search.shortest_path import DijkstraSearch
from .search.traversal import BreadthFirstSearch, DepthFirstSearch

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass
class GraphState(Generic[V]):
    """Encapsulates the state of a graph."""

    adjacency: Dict[V, Dict[V, int]] = field(default_factory=dict)
    edge_count: int = 0


class WeightedGraph(Generic[V]):
    """
    Directed graph with non-negative integer edge weights.

    Vertices may be any hashable value. Edge existence is signalled by key
    presence in the adjacency map, so a zero-weight edge is distinct from a
    missing one.

    Attributes:
        _state (GraphState): Vertices and their outgoing edges
        _observers (ObserverRegistry): Observers notified by the searches
    """

    def __init__(self) -> None:
        self._state: GraphState[V] = GraphState()
        self._observers: ObserverRegistry[V] = ObserverRegistry()

    @property
    def observers(self) -> ObserverRegistry[V]:
        """Registered observers, in notification order."""
        return self._observers

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer for all subsequent algorithm runs."""
        self._observers.add(observer)

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Args:
            vertex: Hashable vertex identity

        Raises:
            DuplicateVertexError: If the vertex is already present
        """
        if vertex in self._state.adjacency:
            raise DuplicateVertexError(vertex)
        self._state.adjacency[vertex] = {}

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._state.adjacency

    def add_edge(self, from_vertex: V, to_vertex: V, weight: int) -> None:
        """
        Add a directed edge, replacing the weight of an existing one.

        Re-adding an edge does not accumulate weights and keeps the neighbour
        at its original position in the enumeration order.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
            weight: Non-negative integer weight

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
            InvalidWeightError: If the weight is negative or not an integer
        """
        self._require_vertex(from_vertex, "Source vertex")
        self._require_vertex(to_vertex, "Target vertex")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidWeightError(weight)

        edges = self._state.adjacency[from_vertex]
        if to_vertex not in edges:
            self._state.edge_count += 1
        edges[to_vertex] = weight

    def get_weight(self, from_vertex: V, to_vertex: V) -> Optional[int]:
        """
        Get the weight of the edge between two vertices.

        Returns:
            Optional[int]: The weight, or None when there is no such edge

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
        """
        self._require_vertex(from_vertex, "Source vertex")
        self._require_vertex(to_vertex, "Target vertex")
        return self._state.adjacency[from_vertex].get(to_vertex)

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._state.adjacency)

    def get_neighbors(self, vertex: V) -> List[V]:
        """Get the targets of a vertex's outgoing edges in insertion order."""
        self._require_vertex(vertex)
        return list(self._state.adjacency[vertex])

    def get_outgoing(self, vertex: V) -> Dict[V, int]:
        """Get a copy of a vertex's ``neighbour -> weight`` map."""
        self._require_vertex(vertex)
        return dict(self._state.adjacency[vertex])

    def get_edges(self) -> Iterator[Tuple[V, V, int]]:
        """Get all edges as ``(from, to, weight)`` triples."""
        for from_vertex, edges in self._state.adjacency.items():
            for to_vertex, weight in edges.items():
                yield from_vertex, to_vertex, weight

    @property
    def vertex_count(self) -> int:
        return len(self._state.adjacency)

    @property
    def edge_count(self) -> int:
        return self._state.edge_count

    def run_bfs(self, start: V, end: V) -> None:
        """
        Breadth-first search from ``start`` until ``end`` is visited.

        Results are reported to the registered observers only.

        Raises:
            VertexNotFoundError: If ``start`` or ``end`` is not in the graph
        """
        BreadthFirstSearch(self, self._observers).run(start, end)

    def run_dfs(self, start: V, end: V) -> None:
        """
        Depth-first search from ``start`` until ``end`` is visited.

        Raises:
            VertexNotFoundError: If ``start`` or ``end`` is not in the graph
        """
        DepthFirstSearch(self, self._observers).run(start, end)

    def run_dijkstra(self, start: V, end: V) -> None:
        """
        Dijkstra's algorithm over the whole graph, then the path to ``end``.

        The path is delivered through ``dijkstra_over``.

        Raises:
            VertexNotFoundError: If ``start`` or ``end`` is not in the graph
            UnreachableVertexError: If ``end`` cannot be reached from ``start``
        """
        DijkstraSearch(self, self._observers).run(start, end)

    def _require_vertex(self, vertex: V, role: str = "Vertex") -> None:
        if vertex not in self._state.adjacency:
            raise VertexNotFoundError(vertex, role)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._state.adjacency

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._state.adjacency))

    def __len__(self) -> int:
        return len(self._state.adjacency)

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

"""Base class for the graph search algorithms."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from ..events import ObserverRegistry, SearchKind
from ..exceptions import VertexNotFoundError

if TYPE_CHECKING:
    from ..graph import WeightedGraph

V = TypeVar("V")


class GraphSearch(ABC, Generic[V]):
    """
    Abstract base class for search algorithms.

    A search instance holds references to the graph and its observers; all
    per-run scratch state lives in local variables of ``run``, so an
    instance may be run any number of times.
    """

    kind: SearchKind

    def __init__(self, graph: "WeightedGraph[V]", observers: ObserverRegistry[V]):
        """Initialize search with graph and the observers to notify."""
        self.graph = graph
        self.observers = observers

    @abstractmethod
    def run(self, start: V, end: V) -> None:
        """Run the search, reporting progress to the observers."""

    def validate_vertices(self, start: V, end: V) -> None:
        """Validate that both endpoints exist in the graph."""
        if not self.graph.contains_vertex(start):
            raise VertexNotFoundError(start, "Start vertex")
        if not self.graph.contains_vertex(end):
            raise VertexNotFoundError(end, "End vertex")

"""
Dijkstra's shortest path algorithm.

The search finishes every vertex of the graph before reconstructing the path to
the end vertex, so the observers see the final cost of every vertex, not only
of those on the way to ``end``.

Costs are plain Python integers, with ``math.inf`` standing for "not reached".
Integers are unbounded, so relaxation can never overflow.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Set, TypeVar

from ..events import SearchKind
from ..exceptions import UnreachableVertexError
from .base import GraphSearch

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass
class DijkstraState(Generic[V]):
    """
    Scratch state of a single Dijkstra run.

    Attributes:
        start: Source vertex
        cost: Best known cost per vertex, ``math.inf`` if unreached
        predecessor: Previous vertex on the best known path; the start is its
            own predecessor and unreached vertices have no entry
        finished: Vertices whose cost is final
    """

    start: V
    cost: Dict[V, float] = field(default_factory=dict)
    predecessor: Dict[V, V] = field(default_factory=dict)
    finished: Set[V] = field(default_factory=set)

    def is_reachable(self, vertex: V) -> bool:
        return vertex in self.predecessor


class DijkstraSearch(GraphSearch[V]):
    """Dijkstra over the whole graph followed by path reconstruction."""

    kind = SearchKind.DIJKSTRA

    def run(self, start: V, end: V) -> None:
        self.validate_vertices(start, end)
        logger.info("Starting DIJKSTRA from %r to %r", start, end)
        self.observers.search_begun(self.kind)

        state = self.compute(start)
        path = self.reconstruct_path(state, end)

        logger.info("Shortest path to %r costs %s: %r", end, state.cost[end], path)
        self.observers.dijkstra_over(path)

    def compute(self, start: V) -> DijkstraState[V]:
        """
        Finish every vertex, notifying the observers in finish order.

        Args:
            start: Source vertex

        Returns:
            DijkstraState: Final costs and predecessors
        """
        vertices = self.graph.get_vertices()
        state: DijkstraState[V] = DijkstraState(start)
        for vertex in vertices:
            state.cost[vertex] = math.inf
        state.cost[start] = 0
        state.predecessor[start] = start

        while len(state.finished) < len(vertices):
            current = self._select_next(vertices, state)
            state.finished.add(current)
            current_cost = state.cost[current]
            logger.debug("Finished %r with cost %s", current, current_cost)
            self.observers.dijkstra_vertex_finished(current, current_cost)

            if current_cost == math.inf:
                # Nothing reachable is left, relaxing from here changes nothing
                continue

            for neighbor, weight in self.graph.get_outgoing(current).items():
                if neighbor in state.finished:
                    continue
                new_cost = current_cost + weight
                if new_cost < state.cost[neighbor]:
                    logger.debug(
                        "  Relaxed %r: %s -> %s via %r",
                        neighbor,
                        state.cost[neighbor],
                        new_cost,
                        current,
                    )
                    state.cost[neighbor] = new_cost
                    state.predecessor[neighbor] = current

        return state

    def _select_next(self, vertices: List[V], state: DijkstraState[V]) -> V:
        """Unfinished vertex with the lowest cost; the earliest inserted wins ties."""
        candidates = [vertex for vertex in vertices if vertex not in state.finished]
        best = candidates[0]
        for vertex in candidates[1:]:
            if state.cost[vertex] < state.cost[best]:
                best = vertex
        return best

    def reconstruct_path(self, state: DijkstraState[V], end: V) -> List[V]:
        """
        Follow predecessor links from ``end`` back to the start.

        Returns:
            List: Vertices in start-to-end order

        Raises:
            UnreachableVertexError: If ``end`` was never reached
        """
        if not state.is_reachable(end):
            raise UnreachableVertexError(state.start, end)

        path = [end]
        current = end
        while current != state.start:
            if current not in state.predecessor or len(path) > len(state.predecessor):
                raise UnreachableVertexError(state.start, end)
            previous = state.predecessor[current]
            path.append(previous)
            current = previous

        path.reverse()
        return path

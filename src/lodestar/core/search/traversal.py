"""
Breadth-first and depth-first search.

Both searches share a frontier-based skeleton and differ only in which end of
the frontier the next vertex is taken from. Duplicate entries are allowed in
the frontier: a vertex may be discovered several times before it is processed,
and it is skipped when taken out again after its first visit.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, List, TypeVar

from ..events import SearchKind
from .base import GraphSearch

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Frontier(ABC, Generic[V]):
    """Discovered but not yet processed vertices."""

    @abstractmethod
    def push(self, vertex: V) -> None: ...

    @abstractmethod
    def pop(self) -> V: ...

    @abstractmethod
    def __len__(self) -> int: ...


class QueueFrontier(Frontier[V]):
    """FIFO frontier, yields breadth-first order."""

    def __init__(self) -> None:
        self._items: Deque[V] = deque()

    def push(self, vertex: V) -> None:
        self._items.append(vertex)

    def pop(self) -> V:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class StackFrontier(Frontier[V]):
    """LIFO frontier, yields depth-first order."""

    def __init__(self) -> None:
        self._items: List[V] = []

    def push(self, vertex: V) -> None:
        self._items.append(vertex)

    def pop(self) -> V:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class FrontierSearch(GraphSearch[V]):
    """
    Frontier-based search that stops as soon as the end vertex is visited.

    Neighbours are pushed in the graph's insertion order. If the frontier runs
    dry before ``end`` is visited the search returns without calling
    ``search_over``.
    """

    @abstractmethod
    def create_frontier(self) -> Frontier[V]:
        """Create an empty frontier for one run."""

    def run(self, start: V, end: V) -> None:
        self.validate_vertices(start, end)
        logger.info("Starting %s from %r to %r", self.kind.name, start, end)
        self.observers.search_begun(self.kind)

        visited = set()
        frontier = self.create_frontier()
        frontier.push(start)

        while frontier:
            vertex = frontier.pop()
            if vertex in visited:
                continue

            visited.add(vertex)
            logger.debug("Visiting %r", vertex)
            self.observers.vertex_visited(vertex)

            if vertex == end:
                logger.info("%s reached %r after %d visits", self.kind.name, end, len(visited))
                self.observers.search_over()
                return

            for neighbor in self.graph.get_neighbors(vertex):
                if neighbor not in visited:
                    frontier.push(neighbor)

        logger.info(
            "%s exhausted the frontier after %d visits without reaching %r",
            self.kind.name,
            len(visited),
            end,
        )


class BreadthFirstSearch(FrontierSearch[V]):
    """Breadth-first search."""

    kind = SearchKind.BFS

    def create_frontier(self) -> Frontier[V]:
        return QueueFrontier()


class DepthFirstSearch(FrontierSearch[V]):
    """
    Depth-first search.

    Neighbours are pushed in insertion order, so the most recently inserted
    neighbour of a vertex is explored first.
    """

    kind = SearchKind.DFS

    def create_frontier(self) -> Frontier[V]:
        return StackFrontier()

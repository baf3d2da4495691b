"""
Search event system.

This module provides the observer protocol through which the search algorithms
report their progress. Observers are registered on a graph and receive
synchronous notifications, in registration order, on the thread running the
algorithm.

An observer that raises aborts the running algorithm: the exception is logged
and then propagated to the caller unchanged. Observers registered after the
failing one do not receive that notification.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

V = TypeVar("V")


class SearchKind(Enum):
    """Algorithms that announce themselves through ``search_begun``."""

    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"


class GraphAlgorithmObserver(Protocol[V]):
    """Protocol for objects that follow the progress of a search."""

    def search_begun(self, kind: SearchKind) -> None:
        """
        Called once before the algorithm processes any vertex.

        Args:
            kind (SearchKind): Algorithm that is starting
        """
        ...

    def vertex_visited(self, vertex: V) -> None:
        """Called when BFS or DFS visits a vertex for the first time."""
        ...

    def search_over(self) -> None:
        """Called when BFS or DFS reaches the end vertex."""
        ...

    def dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        """
        Called when Dijkstra commits to the final cost of a vertex.

        Args:
            vertex: The finished vertex
            cost: Cost of the cheapest path from the start, ``math.inf``
                when the vertex is unreachable
        """
        ...

    def dijkstra_over(self, path: List[V]) -> None:
        """Called with the start-to-end path once Dijkstra is complete."""
        ...


@dataclass
class ObserverRegistry(Generic[V]):
    """
    Ordered, append-only collection of search observers.

    Attributes:
        _observers (List[GraphAlgorithmObserver]): Registered observers
    """

    _observers: List[GraphAlgorithmObserver[V]] = field(default_factory=list)

    def add(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Register an observer.

        The same observer may be registered more than once, in which case it
        is notified once per registration.
        """
        self._observers.append(observer)

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[GraphAlgorithmObserver[V]]:
        return iter(self._observers)

    def notify(self, method: str, *args: Any) -> None:
        """
        Call ``method`` on every observer in registration order.

        Args:
            method (str): Name of the observer method to invoke
            *args: Arguments passed to the observer method

        Raises:
            Exception: Whatever the failing observer raised
        """
        self._dispatch(method, lambda: args)

    def _dispatch(self, method: str, make_args: Callable[[], Tuple[Any, ...]]) -> None:
        for observer in self._observers:
            try:
                getattr(observer, method)(*make_args())
            except Exception:
                logger.error("Observer %r failed during %s", observer, method)
                raise

    def search_begun(self, kind: SearchKind) -> None:
        self.notify("search_begun", kind)

    def vertex_visited(self, vertex: V) -> None:
        self.notify("vertex_visited", vertex)

    def search_over(self) -> None:
        self.notify("search_over")

    def dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self.notify("dijkstra_vertex_finished", vertex, cost)

    def dijkstra_over(self, path: List[V]) -> None:
        # Each observer receives its own copy of the path
        self._dispatch("dijkstra_over", lambda: (list(path),))


class RecordingObserver(Generic[V]):
    """
    Observer that records every notification it receives.

    Notifications are stored in ``events`` as ``(name, payload)`` tuples in
    the order they arrived, which makes whole notification sequences easy to
    compare.
    """

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def search_begun(self, kind: SearchKind) -> None:
        self.events.append(("search_begun", kind))

    def vertex_visited(self, vertex: V) -> None:
        self.events.append(("vertex_visited", vertex))

    def search_over(self) -> None:
        self.events.append(("search_over", None))

    def dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self.events.append(("dijkstra_vertex_finished", (vertex, cost)))

    def dijkstra_over(self, path: List[V]) -> None:
        self.events.append(("dijkstra_over", path))

    @property
    def kind(self) -> Optional[SearchKind]:
        """Kind of the most recently begun search."""
        kinds = [payload for name, payload in self.events if name == "search_begun"]
        return kinds[-1] if kinds else None

    @property
    def visited(self) -> List[V]:
        """Vertices in visit order."""
        return [payload for name, payload in self.events if name == "vertex_visited"]

    @property
    def finished(self) -> List[Tuple[V, float]]:
        """``(vertex, cost)`` pairs in Dijkstra finish order."""
        return [payload for name, payload in self.events if name == "dijkstra_vertex_finished"]

    @property
    def path(self) -> Optional[List[V]]:
        """Most recent Dijkstra path, if any."""
        paths = [payload for name, payload in self.events if name == "dijkstra_over"]
        return paths[-1] if paths else None

    @property
    def completed(self) -> bool:
        """Whether the most recent search announced its completion."""
        return bool(self.events) and self.events[-1][0] in ("search_over", "dijkstra_over")

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver(Generic[V]):
    """Observer that reports every notification through :mod:`logging`."""

    def __init__(self, name: str = "lodestar.search", level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(name)
        self._level = level

    def search_begun(self, kind: SearchKind) -> None:
        self._logger.log(self._level, "%s search begun", kind.name)

    def vertex_visited(self, vertex: V) -> None:
        self._logger.log(self._level, "Visited %r", vertex)

    def search_over(self) -> None:
        self._logger.log(self._level, "Search over")

    def dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self._logger.log(self._level, "Finished %r at cost %s", vertex, cost)

    def dijkstra_over(self, path: Sequence[V]) -> None:
        self._logger.log(self._level, "Dijkstra over, path: %s", " -> ".join(map(repr, path)))

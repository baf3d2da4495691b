"""Search algorithms: breadth-first, depth-first and Dijkstra."""

from .base import GraphSearch
from .shortest_path import DijkstraSearch, DijkstraState
from .traversal import (
    BreadthFirstSearch,
    DepthFirstSearch,
    Frontier,
    FrontierSearch,
    QueueFrontier,
    StackFrontier,
)

__all__ = [
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraSearch",
    "DijkstraState",
    "Frontier",
    "FrontierSearch",
    "GraphSearch",
    "QueueFrontier",
    "StackFrontier",
]

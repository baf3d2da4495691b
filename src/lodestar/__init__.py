"""
Lodestar - Weighted graph search engine

This package provides an in-memory directed graph with non-negative integer
edge weights and three classic searches over it:

- Breadth-first search
- Depth-first search
- Dijkstra's single-source shortest path

Searches report their progress to registered observers. A maze adapter builds
graphs from grid-shaped data, and a small CLI runs the searches over maze
documents.
"""

__version__ = "0.1.0"
__author__ = "Lodestar Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Lodestar requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.events import GraphAlgorithmObserver, SearchKind
from .core.graph import WeightedGraph

__all__ = [
    "GraphAlgorithmObserver",
    "SearchKind",
    "WeightedGraph",
]

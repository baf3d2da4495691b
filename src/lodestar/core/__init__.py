"""Core graph functionality."""

from .events import (
    GraphAlgorithmObserver,
    LoggingObserver,
    ObserverRegistry,
    RecordingObserver,
    SearchKind,
)
from .exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    MazeFormatError,
    PathNotFoundError,
    UnreachableVertexError,
    ValidationError,
    VertexNotFoundError,
)
from .graph import WeightedGraph

__all__ = [
    "ConfigurationError",
    "DuplicateVertexError",
    "GraphAlgorithmObserver",
    "GraphOperationError",
    "InvalidWeightError",
    "LoggingObserver",
    "MazeFormatError",
    "ObserverRegistry",
    "PathNotFoundError",
    "RecordingObserver",
    "SearchKind",
    "UnreachableVertexError",
    "ValidationError",
    "VertexNotFoundError",
    "WeightedGraph",
]

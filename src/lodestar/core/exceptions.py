"""
Custom exceptions for the weighted graph engine.

This module defines the hierarchy of exceptions raised by the graph store, the
search algorithms and the surrounding tooling. Every failure is raised
synchronously and leaves the graph exactly as it was before the call.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Negative edge weights
        * Malformed maze documents
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for failures of the search algorithms themselves,
    as opposed to bad input handed to the graph store.

    Examples:
        * No path between two vertices
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown log level in the environment
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when an operation references a vertex that is not in the graph.

    Examples:
        * Edge insertion with an unknown endpoint
        * Weight lookup with an unknown endpoint
        * Running a search from or to an unknown vertex
    """

    def __init__(self, vertex: object, role: str = "Vertex"):
        self.vertex = vertex
        self.role = role
        super().__init__(f"{role} {vertex!r} not found in the graph")


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.
    """


class DuplicateVertexError(DuplicateResourceError):
    """
    Raised when adding a vertex that is already present.
    """

    def __init__(self, vertex: object):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} already exists in the graph")


class InvalidWeightError(ValidationError):
    """
    Raised when an edge weight is not a non-negative integer.
    """

    def __init__(self, weight: object):
        self.weight = weight
        super().__init__(f"Edge weight must be a non-negative integer, got {weight!r}")


class MazeFormatError(ValidationError):
    """
    Raised when a maze document does not match the expected schema.
    """


class PathNotFoundError(GraphOperationError):
    """
    Raised when no path exists between two vertices.
    """


class UnreachableVertexError(PathNotFoundError):
    """
    Raised by Dijkstra when the end vertex cannot be reached from the start.

    Attributes:
        start: Vertex the search started from
        end: Vertex that could not be reached
    """

    def __init__(self, start: object, end: object):
        self.start = start
        self.end = end
        super().__init__(f"No path exists between {start!r} and {end!r}")

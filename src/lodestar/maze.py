"""
Maze adapter.

This module builds a WeightedGraph from grid-shaped data. A maze is a
rectangular grid of junctures addressed by ``(x, y)`` with ``(0, 0)`` in the
upper left corner. Every juncture becomes a vertex, and for every pair of
adjacent junctures not separated by a wall a directed edge is added in each
direction, weighted as the maze says.

The adapter only uses the public vertex and edge API of the graph.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Protocol, Tuple, Union

from .core.exceptions import MazeFormatError
from .core.graph import WeightedGraph
from .utils.validation import MazeSchemaValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Juncture:
    """A grid position in a maze."""

    x: int
    y: int

    def above(self) -> "Juncture":
        return Juncture(self.x, self.y - 1)

    def below(self) -> "Juncture":
        return Juncture(self.x, self.y + 1)

    def left(self) -> "Juncture":
        return Juncture(self.x - 1, self.y)

    def right(self) -> "Juncture":
        return Juncture(self.x + 1, self.y)

    @classmethod
    def parse(cls, text: str) -> "Juncture":
        """Parse an ``"x,y"`` string."""
        try:
            x, y = (int(part) for part in text.split(","))
        except ValueError:
            raise ValueError(f"Expected a juncture as 'x,y', got {text!r}")
        return cls(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class MazeSource(Protocol):
    """Grid collaborator consumed by :func:`build_maze_graph`."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def is_wall_above(self, juncture: Juncture) -> bool: ...

    def is_wall_below(self, juncture: Juncture) -> bool: ...

    def is_wall_left(self, juncture: Juncture) -> bool: ...

    def is_wall_right(self, juncture: Juncture) -> bool: ...

    def weight_above(self, juncture: Juncture) -> int: ...

    def weight_below(self, juncture: Juncture) -> int: ...

    def weight_left(self, juncture: Juncture) -> int: ...

    def weight_right(self, juncture: Juncture) -> int: ...


def build_maze_graph(
    maze: MazeSource, graph: Optional[WeightedGraph[Juncture]] = None
) -> WeightedGraph[Juncture]:
    """
    Populate a graph with the junctures and open passages of a maze.

    Junctures are added column by column (``x`` outer, ``y`` inner), which
    fixes the enumeration order the searches see. For each juncture the
    passages are added in the order right, above, left, below.

    Args:
        maze: Grid collaborator
        graph: Graph to populate; a new one is created when omitted

    Returns:
        WeightedGraph: The populated graph
    """
    if graph is None:
        graph = WeightedGraph()

    for juncture in _junctures(maze):
        graph.add_vertex(juncture)

    for juncture in _junctures(maze):
        if not maze.is_wall_right(juncture):
            graph.add_edge(juncture, juncture.right(), maze.weight_right(juncture))
        if not maze.is_wall_above(juncture):
            graph.add_edge(juncture, juncture.above(), maze.weight_above(juncture))
        if not maze.is_wall_left(juncture):
            graph.add_edge(juncture, juncture.left(), maze.weight_left(juncture))
        if not maze.is_wall_below(juncture):
            graph.add_edge(juncture, juncture.below(), maze.weight_below(juncture))

    logger.debug("Built %r from a %dx%d maze", graph, maze.width, maze.height)
    return graph


def _junctures(maze: MazeSource) -> Iterator[Juncture]:
    for x in range(maze.width):
        for y in range(maze.height):
            yield Juncture(x, y)


class GridMaze:
    """
    In-memory maze backed by per-cell wall and weight tables.

    A wall blocks passage in both directions: a wall declared to the right of
    one juncture is also to the left of its neighbour. The outer boundary of
    the grid is always walled. Weights are directional and fall back to
    ``default_weight``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        walls: Optional[Mapping[Juncture, FrozenSet[str]]] = None,
        weights: Optional[Mapping[Tuple[Juncture, str], int]] = None,
        default_weight: int = 1,
    ):
        self._width = width
        self._height = height
        self._walls: Dict[Juncture, FrozenSet[str]] = dict(walls or {})
        self._weights: Dict[Tuple[Juncture, str], int] = dict(weights or {})
        self.default_weight = default_weight

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @classmethod
    def from_dict(cls, document: Any) -> "GridMaze":
        """
        Create a maze from a parsed maze document.

        Raises:
            MazeFormatError: If the document does not describe a valid maze
        """
        result = MazeSchemaValidator().validate(document)
        if not result.is_valid:
            raise MazeFormatError("; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)

        walls: Dict[Juncture, FrozenSet[str]] = {}
        weights: Dict[Tuple[Juncture, str], int] = {}
        for cell in document.get("cells", []):
            juncture = Juncture(cell["x"], cell["y"])
            walls[juncture] = frozenset(cell.get("walls", []))
            for direction, weight in cell.get("weights", {}).items():
                weights[(juncture, direction)] = weight

        return cls(
            document["width"],
            document["height"],
            walls=walls,
            weights=weights,
            default_weight=document.get("default_weight", 1),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GridMaze":
        """
        Load a maze from a JSON file.

        Raises:
            MazeFormatError: If the file cannot be read, is not valid JSON or
                is not a valid maze
        """
        try:
            with open(path, "r") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise MazeFormatError(f"Invalid JSON in {path}: {e}")
        except OSError as e:
            raise MazeFormatError(f"Cannot read maze file {path}: {e}")
        return cls.from_dict(document)

    def contains(self, juncture: Juncture) -> bool:
        return 0 <= juncture.x < self._width and 0 <= juncture.y < self._height

    def _is_wall(self, juncture: Juncture, direction: str, neighbor: Juncture, facing: str) -> bool:
        if not self.contains(neighbor):
            return True
        return direction in self._walls.get(juncture, ()) or facing in self._walls.get(
            neighbor, ()
        )

    def _weight(self, juncture: Juncture, direction: str) -> int:
        return self._weights.get((juncture, direction), self.default_weight)

    def is_wall_above(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, "above", juncture.above(), "below")

    def is_wall_below(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, "below", juncture.below(), "above")

    def is_wall_left(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, "left", juncture.left(), "right")

    def is_wall_right(self, juncture: Juncture) -> bool:
        return self._is_wall(juncture, "right", juncture.right(), "left")

    def weight_above(self, juncture: Juncture) -> int:
        return self._weight(juncture, "above")

    def weight_below(self, juncture: Juncture) -> int:
        return self._weight(juncture, "below")

    def weight_left(self, juncture: Juncture) -> int:
        return self._weight(juncture, "left")

    def weight_right(self, juncture: Juncture) -> int:
        return self._weight(juncture, "right")

    def __repr__(self) -> str:
        return f"GridMaze(width={self._width}, height={self._height})"

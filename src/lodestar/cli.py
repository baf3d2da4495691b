"""Command Line Interface for running searches over mazes.

This module provides a CLI that loads a maze document, builds a graph from it
and runs one of the searches, printing every notification the search emits.

The CLI supports the following commands:
    - bfs: Breadth-first search from START to END
    - dfs: Depth-first search from START to END
    - dijkstra: Shortest path from START to END

The maze can be given either as a file path or as a direct JSON string. File
paths may be prefixed with '@'.

Example Usage:
    python -m lodestar bfs @data/maze.json --start 0,0 --end 3,2
    python -m lodestar dijkstra '{"width": 3, "height": 1}' --start 0,0 --end 2,0
"""

import argparse
import json
import os
import sys
from typing import Any, List, Optional, TextIO

from .config import LOG_LEVELS, SearchSettings, configure_logging
from .core.events import SearchKind
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from .maze import GridMaze, Juncture, build_maze_graph


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path, optionally
                       prefixed with '@'.

    Returns:
        The parsed JSON document.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@") or os.path.isfile(json_str):
        file_path = json_str[1:] if json_str.startswith("@") else json_str
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


class PrintingObserver:
    """Observer that writes one line per notification."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self.stream)

    def search_begun(self, kind: SearchKind) -> None:
        self._write(f"begin {kind.value}")

    def vertex_visited(self, vertex: Juncture) -> None:
        self._write(f"visit {vertex}")

    def search_over(self) -> None:
        self._write("over")

    def dijkstra_vertex_finished(self, vertex: Juncture, cost: float) -> None:
        self._write(f"finish {vertex} cost={cost}")

    def dijkstra_over(self, path: List[Juncture]) -> None:
        self._write("path " + " -> ".join(str(vertex) for vertex in path))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lodestar", description="Run graph searches over a maze document"
    )
    parser.add_argument("command", choices=[kind.value for kind in SearchKind])
    parser.add_argument("maze", help="Maze JSON string, or path to a maze file (optionally @path)")
    parser.add_argument("--start", required=True, type=Juncture.parse, help="Start juncture as x,y")
    parser.add_argument("--end", required=True, type=Juncture.parse, help="End juncture as x,y")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Override LODESTAR_LOG_LEVEL",
    )
    return parser


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        settings = SearchSettings.from_env()
        if args.log_level:
            settings.log_level = args.log_level
        configure_logging(settings)

        maze = GridMaze.from_dict(parse_json_input(args.maze))
        graph = build_maze_graph(maze)
        graph.add_observer(PrintingObserver(stream))

        runners = {
            SearchKind.BFS.value: graph.run_bfs,
            SearchKind.DFS.value: graph.run_dfs,
            SearchKind.DIJKSTRA.value: graph.run_dijkstra,
        }
        runners[args.command](args.start, args.end)
    except (
        ConfigurationError,
        GraphOperationError,
        ResourceNotFoundError,
        ValidationError,
        ValueError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

"""Tests for breadth-first and depth-first search."""

import pytest

from lodestar.core.events import RecordingObserver, SearchKind
from lodestar.core.exceptions import VertexNotFoundError
from lodestar.core.search import BreadthFirstSearch, DepthFirstSearch, QueueFrontier, StackFrontier


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_chain_visits_in_order(chain_graph, recorder, algorithm):
    """Test that both searches walk a linear chain in order."""
    chain_graph.add_observer(recorder)

    getattr(chain_graph, algorithm)("A", "D")

    assert recorder.visited == ["A", "B", "C", "D"]
    names = [name for name, _ in recorder.events]
    assert names.count("search_over") == 1
    assert recorder.events[-2] == ("vertex_visited", "D")
    assert recorder.events[-1] == ("search_over", None)


def test_bfs_notification_sequence(chain_graph, recorder):
    """Test the complete BFS notification sequence."""
    chain_graph.add_observer(recorder)

    chain_graph.run_bfs("A", "D")

    assert recorder.events == [
        ("search_begun", SearchKind.BFS),
        ("vertex_visited", "A"),
        ("vertex_visited", "B"),
        ("vertex_visited", "C"),
        ("vertex_visited", "D"),
        ("search_over", None),
    ]


def test_dfs_announces_kind(chain_graph, recorder):
    """Test that DFS announces itself as DFS."""
    chain_graph.add_observer(recorder)

    chain_graph.run_dfs("A", "B")

    assert recorder.events[0] == ("search_begun", SearchKind.DFS)


def test_bfs_branching_order(branching_graph, recorder):
    """Test that BFS finishes a level before descending."""
    branching_graph.add_observer(recorder)

    branching_graph.run_bfs("A", "D")

    visited = recorder.visited
    assert visited == ["A", "B", "C", "D"]
    assert visited.index("A") < visited.index("B")
    assert visited.index("A") < visited.index("C")
    assert visited.index("D") > max(visited.index("B"), visited.index("C"))


def test_dfs_branching_order(branching_graph, recorder):
    """Test that DFS explores the last pushed neighbour first."""
    branching_graph.add_observer(recorder)

    branching_graph.run_dfs("A", "D")

    # B and C are pushed in that order, so C is popped first
    assert recorder.visited == ["A", "C", "B", "D"]
    assert recorder.completed


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_stops_at_end(branching_graph, recorder, algorithm):
    """Test that the search stops as soon as the end vertex is visited."""
    branching_graph.add_observer(recorder)

    getattr(branching_graph, algorithm)("A", "B")

    assert recorder.visited[-1] == "B"
    assert "D" not in recorder.visited
    assert recorder.events[-1] == ("search_over", None)


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_start_equals_end(chain_graph, recorder, algorithm):
    """Test a search whose start is its end."""
    chain_graph.add_observer(recorder)

    getattr(chain_graph, algorithm)("B", "B")

    assert recorder.visited == ["B"]
    assert recorder.completed


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_unreachable_end_exhausts_silently(chain_graph, recorder, algorithm):
    """Test that an unreachable end ends the search without search_over."""
    chain_graph.add_observer(recorder)

    getattr(chain_graph, algorithm)("C", "A")

    assert recorder.visited == ["C", "D"]
    assert ("search_over", None) not in recorder.events
    assert not recorder.completed


def test_duplicates_in_frontier_are_visited_once(graph_factory, recorder):
    """Test that a vertex discovered twice is only visited once."""
    graph = graph_factory(
        "ABCDE",
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1), ("D", "E", 1)],
    )
    graph.add_observer(recorder)

    graph.run_bfs("A", "E")

    assert recorder.visited == ["A", "B", "C", "D", "E"]


def test_cycles_terminate(graph_factory, recorder):
    """Test that cycles do not cause revisits."""
    graph = graph_factory("ABC", [("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("B", "A", 1)])
    graph.add_observer(recorder)

    graph.run_dfs("A", "C")

    assert recorder.visited == ["A", "B", "C"]


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_unknown_endpoints_fail_before_notifying(chain_graph, recorder, algorithm):
    """Test that unknown endpoints fail fast without any notification."""
    chain_graph.add_observer(recorder)

    with pytest.raises(VertexNotFoundError):
        getattr(chain_graph, algorithm)("Z", "A")
    with pytest.raises(VertexNotFoundError):
        getattr(chain_graph, algorithm)("A", "Z")

    assert recorder.events == []


@pytest.mark.parametrize("algorithm", ["run_bfs", "run_dfs"])
def test_repeated_runs_are_identical(branching_graph, recorder, algorithm):
    """Test that running twice produces the same notifications."""
    branching_graph.add_observer(recorder)

    getattr(branching_graph, algorithm)("A", "D")
    first = list(recorder.events)
    recorder.clear()
    getattr(branching_graph, algorithm)("A", "D")

    assert recorder.events == first


def test_search_objects_are_reusable(branching_graph):
    """Test running the same search instance more than once."""
    recorder = RecordingObserver()
    branching_graph.add_observer(recorder)
    search = BreadthFirstSearch(branching_graph, branching_graph.observers)

    search.run("A", "D")
    search.run("A", "C")

    assert recorder.visited == ["A", "B", "C", "D", "A", "B", "C"]


def test_frontier_disciplines():
    """Test FIFO and LIFO frontiers."""
    queue, stack = QueueFrontier(), StackFrontier()
    for vertex in "XYZ":
        queue.push(vertex)
        stack.push(vertex)

    assert len(queue) == len(stack) == 3
    assert [queue.pop() for _ in range(3)] == ["X", "Y", "Z"]
    assert [stack.pop() for _ in range(3)] == ["Z", "Y", "X"]
    assert not queue and not stack


def test_search_kinds():
    """Test the kind each search announces."""
    assert BreadthFirstSearch.kind is SearchKind.BFS
    assert DepthFirstSearch.kind is SearchKind.DFS

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from searchgraph import SearchGraph


def _build_graph(labels, arcs, capacity=None, undirected=False) -> SearchGraph:
    """Create a SearchGraph with ``labels`` at handles 0.. and the given arcs."""
    graph = SearchGraph(capacity if capacity is not None else len(labels))
    for handle, label in enumerate(labels):
        assert graph.add_node(label, handle)
    for source, target, weight in arcs:
        if undirected:
            assert graph.add_dual_arc(source, target, weight)
        else:
            assert graph.add_arc(source, target, weight)
    return graph


@pytest.fixture
def build_graph():
    """Factory fixture: build_graph(labels, arcs, capacity=None, undirected=False)."""
    return _build_graph


@pytest.fixture
def abcd_arcs() -> list:
    """Arcs of the A-B(1), B-C(2), A-C(5), C-D(1) scenario."""
    return [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)]


@pytest.fixture
def abcd_graph(abcd_arcs) -> SearchGraph:
    """Directed A,B,C,D graph."""
    return _build_graph(["A", "B", "C", "D"], abcd_arcs)


@pytest.fixture
def abcd_dual_graph(abcd_arcs) -> SearchGraph:
    """Undirected A,B,C,D graph."""
    return _build_graph(["A", "B", "C", "D"], abcd_arcs, undirected=True)


@pytest.fixture
def tree_graph() -> SearchGraph:
    """
    Directed tree with a spare slot.

        0 -> 1 -> 3
          -> 2 -> 4
                -> 5
    """
    return _build_graph(
        ["root", "left", "right", "left.leaf", "right.a", "right.b"],
        [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1), (2, 5, 1)],
        capacity=7,
    )


@pytest.fixture
def weighted_graph() -> SearchGraph:
    """
    Undirected six-node graph where the fewest-arc path is not the cheapest.

    Cheapest 0 -> 5 is 0-1-2-4-5 (cost 7); fewest arcs is 0-3-5 (cost 20).
    """
    return _build_graph(
        ["a", "b", "c", "d", "e", "f"],
        [(0, 1, 2), (1, 2, 1), (2, 4, 3), (4, 5, 1), (0, 3, 10), (3, 5, 10), (1, 3, 9)],
        undirected=True,
    )


@pytest.fixture
def sample_nodes_text() -> str:
    return "A B C\nD E:7\n"


@pytest.fixture
def sample_arcs_text() -> str:
    return "0 1 1\n1 2 2\n0 2 5\n2 3 1\n3 4 2.5\n"

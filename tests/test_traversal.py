"""
Unit tests for depth-first and breadth-first traversal.
"""

import pytest

from searchgraph import InvalidHandleError, SearchGraph


def collect(graph, method, *args, **kwargs):
    """Run a traversal and return the visited handles in order."""
    visited = []
    getattr(graph, method)(*args, visit=lambda node: visited.append(node.handle), **kwargs)
    return visited


class TestDepthFirst:
    """Test pre-order depth-first traversal."""

    def test_preorder_in_arc_order(self, tree_graph):
        """Each subtree is finished before the next sibling starts."""
        assert collect(tree_graph, "depth_first", 0) == [0, 1, 3, 2, 4, 5]

    def test_skips_already_marked_neighbors(self, abcd_graph):
        """C is reached through B, so the direct A -> C arc is not followed again."""
        assert collect(abcd_graph, "depth_first", 0) == [0, 1, 2, 3]

    def test_cycles_visit_each_node_once(self, abcd_dual_graph):
        assert collect(abcd_dual_graph, "depth_first", 3) == [3, 2, 1, 0]

    def test_only_reachable_component(self, tree_graph):
        assert collect(tree_graph, "depth_first", 2) == [2, 4, 5]

    def test_marks_left_on_state(self, tree_graph):
        state = tree_graph.depth_first(2)
        assert state.marked_handles() == [2, 4, 5]
        assert state.predecessor[4] == 2
        assert state.origin == 2

    def test_long_chain_does_not_recurse(self, build_graph):
        """A chain far deeper than the recursion limit is traversed."""
        size = 5000
        graph = build_graph([str(i) for i in range(size)],
                            [(i, i + 1, 1) for i in range(size - 1)])
        assert collect(graph, "depth_first", 0) == list(range(size))

    def test_empty_start_visits_nothing(self, tree_graph):
        state = tree_graph.depth_first(6)
        assert state.marked_handles() == []
        assert state.origin is None

    def test_invalid_start_raises(self, tree_graph):
        with pytest.raises(InvalidHandleError):
            tree_graph.depth_first(7)


class TestBreadthFirst:
    """Test full breadth-first traversal."""

    def test_level_order(self, tree_graph):
        assert collect(tree_graph, "breadth_first", 0) == [0, 1, 2, 3, 4, 5]

    def test_cycles_visit_each_node_once(self, abcd_dual_graph):
        assert collect(abcd_dual_graph, "breadth_first", 3) == [3, 2, 1, 0]

    def test_distance_counts_arcs(self, abcd_graph):
        state = abcd_graph.breadth_first(0)
        assert state.distance[:4] == [0, 1, 1, 2]

    @pytest.mark.parametrize("start", [0, 1, 2, 3, 4, 5])
    def test_same_component_as_depth_first(self, weighted_graph, start):
        """Both traversals reach the same nodes, each exactly once."""
        depth = collect(weighted_graph, "depth_first", start)
        breadth = collect(weighted_graph, "breadth_first", start)
        assert len(depth) == len(set(depth))
        assert len(breadth) == len(set(breadth))
        assert sorted(depth) == sorted(breadth) == list(range(6))
        assert depth[0] == breadth[0] == start


class TestReusedState:
    """Marks on a caller-supplied state persist until cleared."""

    def test_marks_persist_between_traversals(self, tree_graph):
        state = tree_graph.new_state()
        assert collect(tree_graph, "depth_first", 1, state=state) == [1, 3]
        assert collect(tree_graph, "depth_first", 0, state=state) == [0, 2, 4, 5]

    def test_clear_marks_allows_full_traversal(self, tree_graph):
        state = tree_graph.new_state()
        tree_graph.breadth_first(0, state=state)
        assert collect(tree_graph, "breadth_first", 0, state=state) == [0]

        state.clear_marks()
        assert collect(tree_graph, "breadth_first", 0, state=state) == [0, 1, 2, 3, 4, 5]

    def test_cleared_state_has_no_path_from_earlier_search(self, tree_graph):
        """After clear_marks a new search cannot reuse the old predecessors."""
        state = tree_graph.new_state()
        tree_graph.breadth_first(0, state=state)
        state.clear_marks()

        tree_graph.breadth_first_to(3, 4, state=state)
        assert state.chain_to(4) is None
        assert state.path_to(4) is None
        assert not state.reached(4)

    def test_uncleared_state_has_no_path_from_earlier_search(self, tree_graph):
        state = tree_graph.new_state()
        tree_graph.breadth_first(0, state=state)

        tree_graph.breadth_first_to(3, 4, state=state)
        assert state.chain_to(4) is None

    def test_chain_must_end_at_origin(self, tree_graph):
        """A predecessor chain leading to another node is not a path."""
        state = tree_graph.new_state()
        tree_graph.breadth_first(0, state=state)
        assert state.chain_to(4) == [4, 2, 0]

        state.origin = 1
        assert state.chain_to(4) is None

    def test_fresh_state_per_call(self, tree_graph):
        """Without a state argument every call starts clean."""
        first = collect(tree_graph, "breadth_first", 0)
        second = collect(tree_graph, "breadth_first", 0)
        assert first == second


class TestBreadthFirstTo:
    """Test breadth-first search for a target."""

    def test_chain_is_fewest_arcs(self, weighted_graph):
        """The fewest-arc path ignores weights."""
        state = weighted_graph.breadth_first_to(0, 5)
        assert state.chain_to(5) == [5, 3, 0]
        assert state.path_to(5) == [0, 3, 5]
        assert state.distance[5] == 2

    def test_stops_when_target_discovered(self, weighted_graph):
        """The target is discovered, not dequeued, so it is never visited."""
        assert collect(weighted_graph, "breadth_first_to", 0, 5) == [0, 1, 3]

    @pytest.mark.parametrize("target, arcs", [(1, 1), (3, 2), (5, 2), (4, 2)])
    def test_chain_length_is_edge_distance(self, tree_graph, target, arcs):
        state = tree_graph.breadth_first_to(0, target)
        assert len(state.chain_to(target)) - 1 == arcs

    def test_unreachable_target(self, tree_graph):
        """An undiscovered target has no chain."""
        state = tree_graph.breadth_first_to(3, 0)
        assert state.predecessor[0] is None
        assert state.chain_to(0) is None
        assert state.path_to(0) is None
        assert not state.reached(0)

    def test_unreachable_target_exhausts_component(self, tree_graph):
        assert collect(tree_graph, "breadth_first_to", 2, 1) == [2, 4, 5]

    def test_start_is_target(self, tree_graph):
        visited = collect(tree_graph, "breadth_first_to", 2, 2)
        assert visited == [2]
        assert tree_graph.breadth_first_to(2, 2).chain_to(2) == [2]

    def test_empty_target_slot(self, tree_graph):
        state = tree_graph.breadth_first_to(0, 6)
        assert state.chain_to(6) is None

    def test_fewest_arcs_path(self, abcd_graph):
        assert abcd_graph.fewest_arcs_path(0, 3) == [0, 2, 3]

    def test_self_loop_does_not_confuse_search(self):
        graph = SearchGraph(2)
        graph.add_node("A", 0)
        graph.add_node("B", 1)
        graph.add_arc(0, 0, 1)
        graph.add_arc(0, 1, 1)
        assert graph.breadth_first_to(0, 1).path_to(1) == [0, 1]

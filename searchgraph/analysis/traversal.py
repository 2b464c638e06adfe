"""
Unweighted traversal for graphs: depth-first and breadth-first.

This module provides reachability traversals that call a visitor once per
visited node and record marks and predecessors in a SearchState.
"""

import logging
from collections import deque
from typing import Callable, Optional

from ..classes.node import Node
from ..classes.search_state import SearchState
from ..core.graph import Graph

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], None]


def ignore_visit(node: Node):
    """Visitor that does nothing; used when no visitor is given."""


class Traverser:
    """
    Unweighted traversal algorithms.

    This class provides methods for:
    - Depth-first pre-order traversal
    - Breadth-first traversal of a whole reachable component
    - Breadth-first search for a target with predecessor capture

    Each method accepts an optional SearchState. Without one a fresh state
    is used. A state passed in keeps its marks, so nodes marked by an earlier
    traversal are skipped until the caller runs ``state.clear_marks()``.
    """

    def __init__(self, graph: Graph):
        """
        Initialize the traverser.

        Args:
            graph: Graph instance to traverse
        """
        self.graph = graph

    def _prepare(self, start: int, state: Optional[SearchState]) -> SearchState:
        self.graph.check_handle(start)
        if state is None:
            state = SearchState(self.graph.capacity)
        return state

    def depth_first(self, start: int, visit: Optional[Visitor] = None,
                    state: Optional[SearchState] = None) -> SearchState:
        """
        Pre-order depth-first traversal from ``start``.

        The start node is visited and marked, then each unmarked neighbor is
        explored in arc-insertion order before the next one. An explicit
        stack of arc iterators replaces recursion, visiting nodes in the same
        order the recursive formulation would.

        Args:
            start: Handle to start from
            visit: Called once per visited node
            state: Optional state to reuse

        Returns:
            The search state with every visited node marked
        """
        state = self._prepare(start, state)
        visit = visit or ignore_visit

        start_node = self.graph.node(start)
        if start_node is None:
            logger.debug(f"Depth-first start {start} is empty")
            return state
        state.begin(start)

        visit(start_node)
        state.mark(start)
        stack = [(start, iter(start_node.arcs))]
        visited = 1

        while stack:
            current, arcs = stack[-1]
            for arc in arcs:
                if not state.is_marked(arc.target):
                    neighbor = self.graph.node(arc.target)
                    visit(neighbor)
                    state.mark(arc.target)
                    state.predecessor[arc.target] = current
                    stack.append((arc.target, iter(neighbor.arcs)))
                    visited += 1
                    break
            else:
                stack.pop()

        logger.debug(f"Depth-first from {start} visited {visited} nodes")
        return state

    def breadth_first(self, start: int, visit: Optional[Visitor] = None,
                      state: Optional[SearchState] = None) -> SearchState:
        """
        Breadth-first traversal of everything reachable from ``start``.

        Nodes are marked when enqueued and visited when dequeued, so the
        enqueue order is the visit order.

        Args:
            start: Handle to start from
            visit: Called once per visited node
            state: Optional state to reuse

        Returns:
            The search state; ``distance`` holds the edge count from ``start``
        """
        state = self._prepare(start, state)
        visit = visit or ignore_visit

        if self.graph.node(start) is None:
            logger.debug(f"Breadth-first start {start} is empty")
            return state
        state.begin(start)

        queue = deque([start])
        state.mark(start)
        state.distance[start] = 0
        visited = 0

        while queue:
            current = queue.popleft()
            node = self.graph.node(current)
            visit(node)
            visited += 1

            for arc in node.arcs:
                if not state.is_marked(arc.target):
                    state.mark(arc.target)
                    state.predecessor[arc.target] = current
                    state.distance[arc.target] = state.distance[current] + 1
                    queue.append(arc.target)

        logger.debug(f"Breadth-first from {start} visited {visited} nodes")
        return state

    def breadth_first_to(self, start: int, target: int, visit: Optional[Visitor] = None,
                         state: Optional[SearchState] = None) -> SearchState:
        """
        Breadth-first search from ``start`` that stops once ``target`` is found.

        Every newly discovered node records the node that discovered it as
        its predecessor. The search ends as soon as ``target`` is discovered,
        before it is dequeued, so the target itself is not passed to
        ``visit``. The predecessor chain from ``target`` back to ``start`` is
        then a path with the fewest arcs.

        Args:
            start: Handle to start from
            target: Handle to look for
            visit: Called once per dequeued node
            state: Optional state to reuse

        Returns:
            The search state. ``state.chain_to(target)`` is None when the
            target was not reachable.
        """
        state = self._prepare(start, state)
        self.graph.check_handle(target)
        visit = visit or ignore_visit

        start_node = self.graph.node(start)
        if start_node is None:
            logger.debug(f"Breadth-first start {start} is empty")
            return state
        state.begin(start)
        state.predecessor[target] = None

        state.mark(start)
        state.distance[start] = 0

        if start == target:
            visit(start_node)
            return state

        queue = deque([start])
        found = False

        while queue and not found:
            current = queue[0]
            visit(self.graph.node(current))

            for arc in self.graph.node(current).arcs:
                if arc.target == target:
                    state.predecessor[target] = current
                    state.distance[target] = state.distance[current] + 1
                    found = True
                    break
                if not state.is_marked(arc.target):
                    state.mark(arc.target)
                    state.predecessor[arc.target] = current
                    state.distance[arc.target] = state.distance[current] + 1
                    queue.append(arc.target)

            queue.popleft()

        if found:
            logger.debug(f"Found {target} from {start} in {state.distance[target]} arcs")
        else:
            logger.debug(f"Target {target} is not reachable from {start}")
        return state

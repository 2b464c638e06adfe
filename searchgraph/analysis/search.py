"""
Weighted shortest-path search (uniform-cost search).

This module provides Dijkstra's algorithm in its uniform-cost form: nodes are
expanded in order of their best known cumulative cost, and each node enters
the frontier at most once.
"""

import heapq
import itertools
import logging
from typing import List, Optional, Set, Tuple

from ..classes.path import ShortestPath
from ..classes.search_state import SearchState
from ..core.graph import Graph
from ..exceptions import NegativeWeightError
from .traversal import Visitor, ignore_visit

logger = logging.getLogger(__name__)


class CostFrontier:
    """
    Min-priority frontier ordered by each node's live distance.

    The frontier holds handles and reads their priority from the
    SearchState. A heap entry carries the distance it was keyed with; when a
    queued node's distance drops, :meth:`reprioritize` adds a fresh entry,
    and entries whose key no longer equals the live distance are discarded
    when they surface. The node returned by :meth:`peek` is therefore always
    the queued node with the smallest current distance, ties broken by
    push order.
    """

    def __init__(self, state: SearchState):
        self._state = state
        self._heap: List[Tuple[float, int, int]] = []
        self._queued: Set[int] = set()
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._queued)

    def __bool__(self) -> bool:
        return bool(self._queued)

    def __contains__(self, handle: int) -> bool:
        return handle in self._queued

    def push(self, handle: int):
        self._queued.add(handle)
        heapq.heappush(self._heap, (self._state.distance[handle], next(self._counter), handle))

    def reprioritize(self, handle: int):
        """Re-key a queued node after its distance changed."""
        if handle in self._queued:
            heapq.heappush(self._heap, (self._state.distance[handle], next(self._counter), handle))

    def _discard_stale(self):
        while self._heap:
            key, _, handle = self._heap[0]
            if handle in self._queued and key == self._state.distance[handle]:
                return
            heapq.heappop(self._heap)

    def peek(self) -> Optional[int]:
        """Handle with the smallest live distance, or None when empty."""
        self._discard_stale()
        if not self._heap:
            return None
        return self._heap[0][2]

    def pop(self) -> int:
        handle = self.peek()
        if handle is None:
            raise IndexError("pop from an empty frontier")
        heapq.heappop(self._heap)
        self._queued.discard(handle)
        return handle


class UniformCostSearch:
    """
    Uniform-cost (Dijkstra) search between two nodes.

    This class provides methods for:
    - Running the search and returning its SearchState
    - Reconstructing the shortest path as a ShortestPath
    """

    def __init__(self, graph: Graph):
        """
        Initialize the search.

        Args:
            graph: Graph instance to search
        """
        self.graph = graph

    def search(self, start: int, target: int, visit: Optional[Visitor] = None,
               state: Optional[SearchState] = None) -> SearchState:
        """
        Run uniform-cost search from ``start`` until ``target`` is settled.

        The state is reset first (distances to infinity, marks and
        predecessors cleared), even when the caller supplies one. A node is
        marked the first time it is pushed and never pushed again; its
        priority follows its live distance while it waits in the frontier.
        Arcs leading back to the expanded node's own predecessor are skipped.

        Args:
            start: Handle to start from
            target: Handle to reach
            visit: Called once per expanded node, and once for the target
                when it reaches the top of the frontier
            state: Optional state to reuse

        Returns:
            The search state; ``state.distance[target]`` is the path cost and
            ``state.path_to(target)`` the path, or None if unreachable

        Raises:
            NegativeWeightError: If an arc with a negative weight is relaxed
        """
        self.graph.check_handle(start)
        self.graph.check_handle(target)
        visit = visit or ignore_visit

        if state is None:
            state = SearchState(self.graph.capacity)
        else:
            state.reset()

        if self.graph.node(start) is None:
            logger.debug(f"Uniform-cost start {start} is empty")
            return state
        state.begin(start)

        logger.debug(f"UCS from {self.graph.node(start).label} to {target}")

        frontier = CostFrontier(state)
        state.distance[start] = 0
        frontier.push(start)
        state.mark(start)
        expanded = 0

        while frontier and frontier.peek() != target:
            current = frontier.pop()
            node = self.graph.node(current)
            visit(node)
            expanded += 1

            for arc in node.arcs:
                neighbor = arc.target
                if neighbor == state.predecessor[current]:
                    continue
                if arc.weight < 0:
                    raise NegativeWeightError(current, neighbor, arc.weight)

                candidate = state.distance[current] + arc.weight
                if candidate < state.distance[neighbor]:
                    state.distance[neighbor] = candidate
                    state.predecessor[neighbor] = current
                    frontier.reprioritize(neighbor)

                if not state.is_marked(neighbor):
                    frontier.push(neighbor)
                    state.mark(neighbor)

        if frontier:
            visit(self.graph.node(target))
            logger.debug(f"Settled {target} at cost {state.distance[target]} after {expanded} expansions")
        else:
            logger.debug(f"Target {target} is not reachable from {start}")

        return state

    def shortest_path(self, start: int, target: int, visit: Optional[Visitor] = None,
                      state: Optional[SearchState] = None) -> Optional[ShortestPath]:
        """
        Find the cheapest path from ``start`` to ``target``.

        Returns:
            The path with per-hop costs, or None if ``target`` is unreachable
        """
        state = self.search(start, target, visit, state)
        return ShortestPath.from_search(self.graph, state, target)

"""
Main facade class for graph search.

This module provides the SearchGraph class, which owns a Graph and
delegates traversal, search and batch precomputation to specialized modules.
"""

import logging
from typing import Iterable, List, Optional, Union

from ..classes.arc import Arc, Weight
from ..classes.node import Node, NodePayload
from ..classes.path import ShortestPath
from ..classes.search_state import SearchState
from ..analysis.traversal import Traverser, Visitor
from ..analysis.search import UniformCostSearch
from ..analysis.precompute import PathPrecomputer, PathTable
from .graph import Graph

logger = logging.getLogger(__name__)


class SearchGraph:
    """
    Main facade class for graph search.

    Exposes the container operations of Graph together with every traversal
    and search, so callers only need one object.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty graph.

        Args:
            capacity: Number of node slots
        """
        self._graph = Graph(capacity)

        self._traverser = Traverser(self._graph)
        self._search = UniformCostSearch(self._graph)
        self._precomputer = PathPrecomputer(self._graph, self._search)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def capacity(self) -> int:
        return self._graph.capacity

    @property
    def count(self) -> int:
        return self._graph.count

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, handle) -> bool:
        return handle in self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def node(self, handle: int) -> Optional[Node]:
        """Get the node at a handle, or None if the slot is empty."""
        return self._graph.node(handle)

    def nodes(self) -> List[Node]:
        """All live nodes in handle order."""
        return self._graph.nodes()

    def handles(self) -> List[int]:
        """All occupied handles in ascending order."""
        return self._graph.handles()

    def add_node(self, payload: Union[NodePayload, str], handle: int) -> bool:
        """Create a node at ``handle``; False if the slot is occupied."""
        return self._graph.add_node(payload, handle)

    def remove_node(self, handle: int) -> bool:
        """Remove a node and every arc pointing to it."""
        return self._graph.remove_node(handle)

    def add_arc(self, source: int, target: int, weight: Weight) -> bool:
        """Add a directed arc; False on missing endpoint or duplicate."""
        return self._graph.add_arc(source, target, weight)

    def add_dual_arc(self, source: int, target: int, weight: Weight,
                     check_reverse: bool = False) -> bool:
        """Add arcs in both directions."""
        return self._graph.add_dual_arc(source, target, weight, check_reverse)

    def remove_arc(self, source: int, target: int) -> bool:
        """Remove a directed arc."""
        return self._graph.remove_arc(source, target)

    def get_arc(self, source: int, target: int) -> Optional[Arc]:
        """Look up a directed arc."""
        return self._graph.get_arc(source, target)

    def arc_count(self) -> int:
        """Total number of directed arcs."""
        return self._graph.arc_count()

    def new_state(self) -> SearchState:
        """Create an empty search state sized for this graph."""
        return SearchState(self._graph.capacity)

    # ========================================================================
    # UNWEIGHTED TRAVERSAL
    # ========================================================================

    def depth_first(self, start: int, visit: Optional[Visitor] = None,
                    state: Optional[SearchState] = None) -> SearchState:
        """Pre-order depth-first traversal."""
        return self._traverser.depth_first(start, visit, state)

    def breadth_first(self, start: int, visit: Optional[Visitor] = None,
                      state: Optional[SearchState] = None) -> SearchState:
        """Breadth-first traversal of the reachable component."""
        return self._traverser.breadth_first(start, visit, state)

    def breadth_first_to(self, start: int, target: int, visit: Optional[Visitor] = None,
                         state: Optional[SearchState] = None) -> SearchState:
        """Breadth-first search stopping when ``target`` is discovered."""
        return self._traverser.breadth_first_to(start, target, visit, state)

    def fewest_arcs_path(self, start: int, target: int,
                         visit: Optional[Visitor] = None) -> Optional[List[int]]:
        """Handles of a path with the fewest arcs, or None if unreachable."""
        return self._traverser.breadth_first_to(start, target, visit).path_to(target)

    # ========================================================================
    # WEIGHTED SEARCH
    # ========================================================================

    def uniform_cost_search(self, start: int, target: int, visit: Optional[Visitor] = None,
                            state: Optional[SearchState] = None) -> SearchState:
        """Uniform-cost search; returns the resulting state."""
        return self._search.search(start, target, visit, state)

    def shortest_path(self, start: int, target: int, visit: Optional[Visitor] = None,
                      state: Optional[SearchState] = None) -> Optional[ShortestPath]:
        """Cheapest path from ``start`` to ``target``, or None if unreachable."""
        return self._search.shortest_path(start, target, visit, state)

    def precompute_paths(self, handles: Optional[Iterable[int]] = None, upto: Optional[int] = None,
                         visit: Optional[Visitor] = None) -> PathTable:
        """Shortest paths for every pair of a handle subset."""
        return self._precomputer.precompute(handles, upto, visit)

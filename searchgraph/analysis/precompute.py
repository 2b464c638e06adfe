"""
Batch precomputation of shortest paths between every pair of a node subset.

Each pair gets its own full uniform-cost search; nothing is shared between
pairs.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..classes.path import ShortestPath
from ..classes.search_state import SearchState
from ..core.graph import Graph
from .search import UniformCostSearch
from .traversal import Visitor

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


class PathTable:
    """
    Precomputed shortest paths keyed by ``(origin, target)`` handle pairs.

    Entries keep the order they were computed in. An unreachable pair maps
    to None.
    """

    def __init__(self, handles: Sequence[int]):
        self.handles: List[int] = list(handles)
        self._paths: Dict[Pair, Optional[ShortestPath]] = {}

    def add(self, origin: int, target: int, path: Optional[ShortestPath]):
        self._paths[(origin, target)] = path

    def get(self, origin: int, target: int) -> Optional[ShortestPath]:
        return self._paths.get((origin, target))

    def __getitem__(self, pair: Pair) -> Optional[ShortestPath]:
        return self._paths[pair]

    def __contains__(self, pair) -> bool:
        return pair in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._paths)

    def items(self):
        return self._paths.items()

    def paths(self) -> List[ShortestPath]:
        """Every reachable path, in computation order."""
        return [path for path in self._paths.values() if path is not None]

    def unreachable_pairs(self) -> List[Pair]:
        return [pair for pair, path in self._paths.items() if path is None]

    def cost_matrix(self, symmetric: bool = False) -> np.ndarray:
        """
        Total path costs as a square matrix over ``self.handles``.

        Args:
            symmetric: Mirror each ``(i, j)`` cost into ``(j, i)``; only
                meaningful for undirected graphs

        Returns:
            Array where row/column ``k`` corresponds to ``self.handles[k]``;
            0 on the diagonal, ``inf`` where no path is known
        """
        size = len(self.handles)
        position = {handle: k for k, handle in enumerate(self.handles)}
        matrix = np.full((size, size), np.inf, dtype=float)
        np.fill_diagonal(matrix, 0.0)

        for (origin, target), path in self._paths.items():
            if path is None:
                continue
            i, j = position[origin], position[target]
            matrix[i, j] = path.total_cost
            if symmetric:
                matrix[j, i] = path.total_cost

        return matrix


class PathPrecomputer:
    """
    Runs uniform-cost search for every pair of a handle subset.

    For handles ``h[0] .. h[m]`` every pair ``(h[i], h[j])`` with ``i < j``
    is searched independently, each search starting with a full state reset.
    """

    def __init__(self, graph: Graph, search: Optional[UniformCostSearch] = None):
        """
        Initialize the precomputer.

        Args:
            graph: Graph instance to search
            search: Search to reuse; one is created when omitted
        """
        self.graph = graph
        self.search = search or UniformCostSearch(graph)

    def select_handles(self, handles: Optional[Iterable[int]] = None,
                       upto: Optional[int] = None) -> List[int]:
        """
        Resolve the subset of handles to precompute.

        Args:
            handles: Explicit handles, kept in the given order
            upto: Use handles ``0 .. upto`` (inclusive) instead

        Returns:
            List of validated handles
        """
        if handles is not None and upto is not None:
            raise ValueError("Pass either handles or upto, not both")

        if upto is not None:
            selected = list(range(upto + 1))
        elif handles is not None:
            selected = list(handles)
        else:
            selected = self.graph.handles()

        for handle in selected:
            self.graph.check_handle(handle)
            if handle not in self.graph:
                logger.warning(f"Handle {handle} is empty, its pairs will be unreachable")

        if len(set(selected)) != len(selected):
            raise ValueError(f"Duplicate handles in subset {selected}")
        return selected

    def precompute(self, handles: Optional[Iterable[int]] = None, upto: Optional[int] = None,
                   visit: Optional[Visitor] = None) -> PathTable:
        """
        Compute the shortest path for every ordered pair ``i < j`` of the subset.

        Args:
            handles: Explicit handles (default: every occupied handle)
            upto: Use handles ``0 .. upto`` instead
            visit: Visitor handed to every search

        Returns:
            PathTable with one entry per pair
        """
        selected = self.select_handles(handles, upto)
        table = PathTable(selected)
        # One state serves every pair; each search resets it before running.
        state = SearchState(self.graph.capacity)

        for i, origin in enumerate(selected):
            for target in selected[i + 1:]:
                path = self.search.shortest_path(origin, target, visit, state)
                if path is None:
                    logger.debug(f"No path from {origin} to {target}")
                table.add(origin, target, path)

        unreachable = len(table.unreachable_pairs())
        logger.info(f"Precomputed {len(table)} pairs over {len(selected)} nodes "
                    f"({unreachable} unreachable)")
        return table


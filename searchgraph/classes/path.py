"""
Reconstructed shortest paths.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .search_state import SearchState

Cost = Union[int, float]


@dataclass(frozen=True)
class PathStep:
    """
    One node of a path and the cost of the hop that reached it.

    Attributes:
        label: Label of the node
        cost: Cost of the hop from the previous node (0 for the first node)
    """

    label: str
    cost: Cost


@dataclass
class ShortestPath:
    """
    A single shortest path between two handles.

    Attributes:
        origin: Start handle
        target: End handle
        handles: Node handles from origin to target
        steps: ``(label, incremental cost)`` pairs, same order as ``handles``
    """

    origin: int
    target: int
    handles: List[int] = field(default_factory=list)
    steps: List[PathStep] = field(default_factory=list)

    @property
    def total_cost(self) -> Cost:
        return sum(step.cost for step in self.steps)

    @property
    def labels(self) -> List[str]:
        return [step.label for step in self.steps]

    @property
    def hop_count(self) -> int:
        return max(len(self.handles) - 1, 0)

    def __len__(self) -> int:
        return len(self.handles)

    @classmethod
    def from_search(cls, graph, state: SearchState, target: int) -> Optional["ShortestPath"]:
        """
        Build a path from the predecessor chain recorded in ``state``.

        The incremental cost of each step is the cumulative distance at that
        node minus the cumulative distance at the node before it.

        Args:
            graph: Graph the search ran on (used to resolve labels)
            state: State returned by a uniform-cost search
            target: Handle the path should end at

        Returns:
            The path, or None if ``target`` was not reached
        """
        handles = state.path_to(target)
        if handles is None:
            return None

        steps = []
        last_cost = 0
        for handle in handles:
            cumulative = state.distance[handle]
            steps.append(PathStep(graph.node(handle).label, cumulative - last_cost))
            last_cost = cumulative

        return cls(origin=handles[0], target=target, handles=handles, steps=steps)

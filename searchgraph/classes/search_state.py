"""
Per-query search state.

Traversals and searches never write onto the nodes themselves. Each call
works on a SearchState indexed by node handle, so two queries on the same
graph cannot see each other's marks, distances or predecessors unless the
caller hands the same state to both.
"""

import math
from typing import List, Optional


class SearchState:
    """
    Marks, tentative distances and predecessors for one traversal or search.

    Attributes:
        marked: Visited (unweighted traversals) or enqueued (uniform-cost
            search) flag per handle
        distance: Best known cumulative cost per handle, ``math.inf`` if unknown
        predecessor: Handle that discovered each node, or None
        origin: Handle the last traversal started from
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.marked: List[bool] = [False] * capacity
        self.distance: List[float] = [math.inf] * capacity
        self.predecessor: List[Optional[int]] = [None] * capacity
        self.origin: Optional[int] = None

    def reset(self):
        """Forget everything: unmark, set distances to infinity, drop predecessors."""
        for handle in range(self.capacity):
            self.marked[handle] = False
            self.distance[handle] = math.inf
            self.predecessor[handle] = None
        self.origin = None

    def clear_marks(self):
        """Unmark every handle and forget the distances and predecessors found so far."""
        for handle in range(self.capacity):
            self.marked[handle] = False
            self.distance[handle] = math.inf
            self.predecessor[handle] = None

    def mark(self, handle: int):
        self.marked[handle] = True

    def is_marked(self, handle: int) -> bool:
        return self.marked[handle]

    def marked_handles(self) -> List[int]:
        return [handle for handle in range(self.capacity) if self.marked[handle]]

    def begin(self, start: int):
        """Record ``start`` as the origin of a new traversal; it has no predecessor."""
        self.origin = start
        self.predecessor[start] = None

    def reached(self, target: int) -> bool:
        """Whether the predecessor chain from ``target`` leads back to the origin."""
        return self.chain_to(target) is not None

    def chain_to(self, target: int) -> Optional[List[int]]:
        """
        Walk the predecessor chain from ``target`` back to the origin.

        Predecessors left by an earlier traversal on a reused state can form
        a chain ending somewhere else; such a chain does not count.

        Args:
            target: Handle the chain starts from

        Returns:
            Handles in target-to-origin order, or None if ``target`` was
            not reached from the origin
        """
        if self.origin is None:
            return None

        chain = [target]
        current = target
        # A chain can never be longer than the number of slots; a longer one
        # loops through stale predecessors and never reaches the origin.
        while self.predecessor[current] is not None and len(chain) <= self.capacity:
            current = self.predecessor[current]
            chain.append(current)

        if len(chain) > self.capacity or current != self.origin:
            return None
        return chain

    def path_to(self, target: int) -> Optional[List[int]]:
        """Same as :meth:`chain_to` but in origin-to-target order."""
        chain = self.chain_to(target)
        if chain is None:
            return None
        chain.reverse()
        return chain

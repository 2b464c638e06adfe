"""
Node representation: a graph slot holding a payload and its outgoing arcs.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .arc import Arc, Weight


@dataclass
class NodePayload:
    """
    User data carried by a node.

    Attributes:
        label: Display name of the node
        attribute: Optional integer attribute supplied by the loader
    """

    label: str
    attribute: Optional[int] = None


class Node:
    """
    A populated slot of the graph.

    Holds the payload and the outgoing arcs in insertion order. Search state
    (marks, distances, predecessors) is not stored here; every traversal
    works on its own SearchState.
    """

    def __init__(self, handle: int, payload: NodePayload):
        self.handle = handle
        self.payload = payload
        self.arcs: List[Arc] = []

    @property
    def label(self) -> str:
        return self.payload.label

    def get_arc(self, target: int) -> Optional[Arc]:
        """Return the arc pointing at ``target``, or None."""
        for arc in self.arcs:
            if arc.target == target:
                return arc
        return None

    def add_arc(self, target: int, weight: Weight) -> Arc:
        """Append a new arc to ``target``; duplicates are the caller's concern."""
        arc = Arc(target, weight)
        self.arcs.append(arc)
        return arc

    def remove_arc(self, target: int) -> bool:
        """
        Remove the first arc pointing at ``target``.

        Returns:
            True if an arc was removed
        """
        for i, arc in enumerate(self.arcs):
            if arc.target == target:
                del self.arcs[i]
                return True
        return False

    def neighbors(self) -> Iterator[int]:
        """Yield the target handle of every outgoing arc, in insertion order."""
        for arc in self.arcs:
            yield arc.target

    def __repr__(self) -> str:
        return f"Node(handle={self.handle}, label={self.label!r}, arcs={len(self.arcs)})"

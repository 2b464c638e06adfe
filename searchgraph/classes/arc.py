"""
Arc representation: a directed, weighted edge owned by its source node.
"""

from typing import Union

Weight = Union[int, float]


class Arc:
    """
    Directed weighted edge stored in the outgoing list of its source node.

    The target is kept as an integer handle, never as a node reference, so
    freeing a slot in the graph cannot leave a dangling object behind.
    """

    __slots__ = ("target", "weight")

    def __init__(self, target: int, weight: Weight):
        self.target = target
        self.weight = weight

    def __eq__(self, other) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self.target == other.target and self.weight == other.weight

    def __repr__(self) -> str:
        return f"Arc(target={self.target}, weight={self.weight})"

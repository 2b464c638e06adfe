"""
Exception types raised by searchgraph.

Expected refusals (occupied slot, missing endpoint, duplicate arc,
unreachable target) are reported through return values; these exceptions
cover misuse that cannot be answered with a plain False or None.
"""


class GraphError(Exception):
    """Base class for all searchgraph errors."""


class InvalidHandleError(GraphError, IndexError):
    """A node handle is not an integer in ``[0, capacity - 1]``."""

    def __init__(self, handle, capacity: int):
        self.handle = handle
        self.capacity = capacity
        super().__init__(f"Node handle {handle!r} is outside [0, {capacity - 1}]")


class NegativeWeightError(GraphError, ValueError):
    """Uniform-cost search met an arc with a negative weight."""

    def __init__(self, source: int, target: int, weight):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(f"Arc {source} -> {target} has negative weight {weight}")


class RecordFormatError(GraphError, ValueError):
    """A node or arc record stream could not be parsed."""

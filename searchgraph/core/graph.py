"""
Core graph data structure: a fixed-capacity arena of nodes.

This module provides the node and arc lifecycle without any search logic.
"""

import logging
from typing import Iterator, List, Optional, Union

from ..classes.arc import Arc, Weight
from ..classes.node import Node, NodePayload
from ..exceptions import InvalidHandleError

logger = logging.getLogger(__name__)


class Graph:
    """
    Fixed-capacity indexed collection of optional nodes.

    This class owns node and arc lifecycle. It provides:
    - Node insertion and removal at caller-chosen handles
    - Directed and dual (undirected) arc insertion
    - Arc lookup and removal
    - Handle validation

    Refusals (occupied slot, missing endpoint, duplicate arc) are reported
    with a False/None return and leave the graph untouched. A handle outside
    ``[0, capacity - 1]`` raises InvalidHandleError.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty graph.

        Args:
            capacity: Number of slots; valid handles are ``0 .. capacity - 1``
        """
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError(f"Graph capacity must be a non-negative integer, got {capacity!r}")

        self._capacity = capacity
        self._slots: List[Optional[Node]] = [None] * capacity
        self._count = 0

        logger.debug(f"Created graph with {capacity} slots")

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        """Number of occupied slots."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def __contains__(self, handle) -> bool:
        return self._is_handle(handle) and self._slots[handle] is not None

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def _is_handle(self, handle) -> bool:
        return (isinstance(handle, int) and not isinstance(handle, bool)
                and 0 <= handle < self._capacity)

    def check_handle(self, handle) -> int:
        """
        Validate a node handle.

        Raises:
            InvalidHandleError: If ``handle`` is not an integer in range
        """
        if not self._is_handle(handle):
            raise InvalidHandleError(handle, self._capacity)
        return handle

    # ========================================================================
    # NODE LIFECYCLE
    # ========================================================================

    def node(self, handle: int) -> Optional[Node]:
        """
        Get the node stored at a handle.

        Args:
            handle: Slot index

        Returns:
            The node, or None if the slot is empty
        """
        return self._slots[self.check_handle(handle)]

    def nodes(self) -> List[Node]:
        """All live nodes in handle order."""
        return [node for node in self._slots if node is not None]

    def handles(self) -> List[int]:
        """All occupied handles in ascending order."""
        return [handle for handle, node in enumerate(self._slots) if node is not None]

    def add_node(self, payload: Union[NodePayload, str], handle: int) -> bool:
        """
        Create a node at ``handle``.

        Args:
            payload: NodePayload, or a bare label
            handle: Slot to populate

        Returns:
            False if the slot is already occupied, True otherwise
        """
        self.check_handle(handle)
        if self._slots[handle] is not None:
            logger.debug(f"Slot {handle} already holds {self._slots[handle].label!r}")
            return False

        if not isinstance(payload, NodePayload):
            payload = NodePayload(str(payload))

        self._slots[handle] = Node(handle, payload)
        self._count += 1
        logger.debug(f"Added node {payload.label!r} at {handle}")
        return True

    def remove_node(self, handle: int) -> bool:
        """
        Remove the node at ``handle`` along with every arc pointing to it.

        Every other occupied node is scanned for arcs targeting ``handle``
        before the slot is freed.

        Returns:
            False if the slot was already empty
        """
        self.check_handle(handle)
        node = self._slots[handle]
        if node is None:
            return False

        purged = 0
        for other in self._slots:
            if other is not None and other is not node:
                while other.remove_arc(handle):
                    purged += 1

        self._slots[handle] = None
        self._count -= 1
        logger.debug(f"Removed node {node.label!r} at {handle}, purged {purged} incoming arcs")
        return True

    def clear(self):
        """Empty every slot."""
        self._slots = [None] * self._capacity
        self._count = 0

    # ========================================================================
    # ARC LIFECYCLE
    # ========================================================================

    def _endpoints(self, source: int, target: int):
        self.check_handle(source)
        self.check_handle(target)
        return self._slots[source], self._slots[target]

    def add_arc(self, source: int, target: int, weight: Weight) -> bool:
        """
        Add a directed arc ``source -> target``.

        Returns:
            False if an endpoint is missing or the arc already exists
        """
        from_node, to_node = self._endpoints(source, target)
        if from_node is None or to_node is None:
            logger.debug(f"Cannot add arc {source} -> {target}: missing endpoint")
            return False

        if from_node.get_arc(target) is not None:
            logger.debug(f"Arc {source} -> {target} already exists")
            return False

        from_node.add_arc(target, weight)
        logger.debug(f"Adding arc from {from_node.label} to {to_node.label} weight {weight}")
        return True

    def add_dual_arc(self, source: int, target: int, weight: Weight,
                     check_reverse: bool = False) -> bool:
        """
        Add arcs in both directions between two nodes.

        Only the forward arc is checked for duplicates unless
        ``check_reverse`` is set, so an existing ``target -> source`` arc is
        kept and a second one appended next to it.

        Args:
            source: First endpoint
            target: Second endpoint
            weight: Weight used for both arcs
            check_reverse: Also refuse when ``target -> source`` exists

        Returns:
            False if an endpoint is missing or a checked arc already exists
        """
        from_node, to_node = self._endpoints(source, target)
        if from_node is None or to_node is None:
            logger.debug(f"Cannot add dual arc {source} <-> {target}: missing endpoint")
            return False

        if from_node.get_arc(target) is not None:
            logger.debug(f"Arc {source} -> {target} already exists")
            return False

        if to_node.get_arc(source) is not None:
            if check_reverse:
                logger.debug(f"Arc {target} -> {source} already exists")
                return False
            logger.warning(f"Reverse arc {target} -> {source} already exists, adding a duplicate")

        from_node.add_arc(target, weight)
        to_node.add_arc(source, weight)
        logger.debug(f"Adding dual arc between {from_node.label} and {to_node.label} weight {weight}")
        return True

    def remove_arc(self, source: int, target: int) -> bool:
        """
        Remove the arc ``source -> target``.

        Returns:
            True if an arc was removed
        """
        from_node, to_node = self._endpoints(source, target)
        if from_node is None or to_node is None:
            return False
        return from_node.remove_arc(target)

    def get_arc(self, source: int, target: int) -> Optional[Arc]:
        """
        Look up the arc ``source -> target``.

        Returns:
            The arc, or None if it or either endpoint is missing
        """
        from_node, to_node = self._endpoints(source, target)
        if from_node is None or to_node is None:
            return None
        return from_node.get_arc(target)

    def arc_count(self) -> int:
        """Total number of directed arcs."""
        return sum(len(node.arcs) for node in self.nodes())

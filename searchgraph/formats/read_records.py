"""
Read node and arc record streams and build a graph from them.

Node records are whitespace-separated labels, assigned to consecutive
handles from 0. Arc records are ``from to weight`` triples. Line breaks carry
no meaning in either stream.
"""

import logging
import os
from typing import IO, Iterator, List, Optional, Tuple, Union

from ..classes.arc import Weight
from ..classes.node import NodePayload
from ..config import NODE_ATTRIBUTE_SEPARATOR, RECORD_ENCODING
from ..core.searchgraph import SearchGraph
from ..exceptions import RecordFormatError

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, IO[str]]
ArcRecord = Tuple[int, int, Weight]


def _iter_tokens(source: Source) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, token)`` for every token in a path or open stream."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding=RECORD_ENCODING) as stream:
            yield from _iter_tokens(stream)
        return

    try:
        for line_number, line in enumerate(source, start=1):
            for token in line.split():
                yield line_number, token
    except UnicodeDecodeError as e:
        raise RecordFormatError(f"Record stream is not valid {RECORD_ENCODING} text: {e}") from e


def _parse_payload(token: str) -> NodePayload:
    label, separator, attribute = token.rpartition(NODE_ATTRIBUTE_SEPARATOR)
    if separator and label:
        try:
            return NodePayload(label, int(attribute))
        except ValueError:
            pass
    return NodePayload(token)


def _parse_weight(token: str, line_number: int) -> Weight:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise RecordFormatError(f"Line {line_number}: weight {token!r} is not a number") from None


def read_node_records(source: Source) -> List[NodePayload]:
    """
    Read node payloads.

    Each token is one node label. A token of the form ``label:attribute``
    with an integer attribute also sets the payload attribute.

    Args:
        source: File path or open text stream

    Returns:
        Payloads in input order; the index of each is its handle
    """
    payloads = [_parse_payload(token) for _, token in _iter_tokens(source)]
    logger.debug(f"Read {len(payloads)} node records")
    return payloads


def read_arc_records(source: Source) -> List[ArcRecord]:
    """
    Read ``from to weight`` arc triples.

    Args:
        source: File path or open text stream

    Returns:
        Triples in input order

    Raises:
        RecordFormatError: If a handle is not an integer, a weight is not a
            number, or the stream ends in the middle of a triple
    """
    records: List[ArcRecord] = []
    pending: List[Tuple[int, str]] = []

    for line_number, token in _iter_tokens(source):
        pending.append((line_number, token))
        if len(pending) < 3:
            continue

        (from_line, from_token), (to_line, to_token), (weight_line, weight_token) = pending
        pending = []
        try:
            source_handle = int(from_token)
            target_handle = int(to_token)
        except ValueError:
            raise RecordFormatError(
                f"Line {from_line}: arc endpoints {from_token!r} {to_token!r} are not integers"
            ) from None
        records.append((source_handle, target_handle, _parse_weight(weight_token, weight_line)))

    if pending:
        line_number, token = pending[0]
        raise RecordFormatError(f"Line {line_number}: incomplete arc record starting at {token!r}")

    logger.debug(f"Read {len(records)} arc records")
    return records


def load_graph(nodes: Source, arcs: Source, capacity: Optional[int] = None,
               undirected: bool = False) -> SearchGraph:
    """
    Build a SearchGraph from a node stream and an arc stream.

    Nodes are added at handles ``0 .. n - 1`` in input order. Arcs are added
    in input order with add_arc, or add_dual_arc when ``undirected`` is set.
    Arcs the graph refuses (missing endpoint, duplicate) are logged and
    skipped.

    Args:
        nodes: Node record path or stream
        arcs: Arc record path or stream
        capacity: Slot count; defaults to the number of node records
        undirected: Insert every arc in both directions

    Returns:
        The populated graph
    """
    payloads = read_node_records(nodes)
    records = read_arc_records(arcs)

    if capacity is None:
        capacity = len(payloads)
    if capacity < len(payloads):
        raise RecordFormatError(f"{len(payloads)} node records do not fit in {capacity} slots")

    graph = SearchGraph(capacity)
    for handle, payload in enumerate(payloads):
        graph.add_node(payload, handle)

    add = graph.add_dual_arc if undirected else graph.add_arc
    refused = 0
    for source_handle, target_handle, weight in records:
        if not 0 <= source_handle < capacity or not 0 <= target_handle < capacity:
            logger.warning(f"Skipping arc {source_handle} -> {target_handle}: handle out of range")
            refused += 1
        elif not add(source_handle, target_handle, weight):
            logger.warning(f"Skipping arc {source_handle} -> {target_handle}: refused by graph")
            refused += 1

    logger.info(f"Loaded graph with {graph.count} nodes and {graph.arc_count()} arcs "
                f"({refused} arc records skipped)")
    return graph

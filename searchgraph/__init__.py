"""
SearchGraph - In-Memory Graph Traversal and Shortest-Path Library

A Python library for building fixed-capacity directed or undirected graphs
and running depth-first, breadth-first and uniform-cost (Dijkstra) searches
on them, including batch precomputation of shortest paths between every
pair of a node subset.

Main Classes:
    SearchGraph: Main class for traversal and search (facade)
    Graph: Fixed-capacity node and arc container
    Node: Graph slot holding a payload and outgoing arcs
    Arc: Directed weighted edge
    SearchState: Marks, distances and predecessors of one query
    ShortestPath: Reconstructed path with per-hop costs

Example:
    >>> from searchgraph import SearchGraph
    >>> graph = SearchGraph(4)
    >>> for handle, label in enumerate("ABCD"):
    ...     _ = graph.add_node(label, handle)
    >>> _ = graph.add_dual_arc(0, 1, 1)
    >>> graph.shortest_path(0, 1).labels
    ['A', 'B']
"""

__version__ = "0.1.0"

from searchgraph.classes.arc import Arc
from searchgraph.classes.node import Node, NodePayload
from searchgraph.classes.path import PathStep, ShortestPath
from searchgraph.classes.search_state import SearchState
from searchgraph.core.graph import Graph
from searchgraph.core.searchgraph import SearchGraph
from searchgraph.analysis.precompute import PathTable
from searchgraph.exceptions import (
    GraphError,
    InvalidHandleError,
    NegativeWeightError,
    RecordFormatError,
)

__all__ = [
    'SearchGraph',
    'Graph',
    'Node',
    'NodePayload',
    'Arc',
    'SearchState',
    'PathStep',
    'ShortestPath',
    'PathTable',
    'GraphError',
    'InvalidHandleError',
    'NegativeWeightError',
    'RecordFormatError',
]

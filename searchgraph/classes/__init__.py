"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the searchgraph library.
"""

from .arc import Arc
from .node import Node, NodePayload
from .search_state import SearchState
from .path import PathStep, ShortestPath

__all__ = [
    'Arc',
    'Node',
    'NodePayload',
    'SearchState',
    'PathStep',
    'ShortestPath',
]

"""
Core graph data structures and management.

This module contains the node/arc container and the SearchGraph facade.
Import from the submodules directly; the analysis package depends on
core.graph, so nothing is re-exported here.
"""

__all__ = []

"""
Traversal and search modules.

This module contains the unweighted traversals, uniform-cost search and
batch shortest-path precomputation.
"""

__all__ = []

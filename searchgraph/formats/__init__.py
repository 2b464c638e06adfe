"""
Record file reading and path rendering.

This module contains the loaders for node and arc record streams and the
text renderers for search results.
"""

from .read_records import read_node_records, read_arc_records, load_graph
from .export_path import format_path, format_path_detail, format_path_table, format_trackback

__all__ = [
    'read_node_records',
    'read_arc_records',
    'load_graph',
    'format_path',
    'format_path_detail',
    'format_path_table',
    'format_trackback',
]

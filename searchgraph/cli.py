#!/usr/bin/env python
"""
Command line interface for searchgraph.

Loads a node list and an arc list, then runs a traversal, a single
shortest-path search, or a batch precomputation.

Usage:
    searchgraph traverse --order bfs --start 0
    searchgraph path --start 0 --target 5
    searchgraph path --start 0 --target 5 --unweighted
    searchgraph precompute --upto 5
    searchgraph --nodes nodes.txt --arcs arcs.txt --directed precompute
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_ARCS_FILE, DEFAULT_NODES_FILE, configure_logging
from .exceptions import GraphError
from .formats.export_path import format_path, format_path_table, format_trackback
from .formats.read_records import load_graph

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="searchgraph",
        description="Traverse and search a graph loaded from record files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--nodes",
        type=str,
        default=DEFAULT_NODES_FILE,
        help=f"Node list file (default: {DEFAULT_NODES_FILE})",
    )
    parser.add_argument(
        "--arcs",
        type=str,
        default=DEFAULT_ARCS_FILE,
        help=f"Arc triple file (default: {DEFAULT_ARCS_FILE})",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Load arcs in one direction only (default: both directions)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Number of node slots (default: number of nodes read)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    traverse = commands.add_parser("traverse", help="Visit every node reachable from a start")
    traverse.add_argument("--order", choices=("dfs", "bfs"), default="bfs")
    traverse.add_argument("--start", type=int, default=0)

    path = commands.add_parser("path", help="Find one path between two nodes")
    path.add_argument("--start", type=int, default=0)
    path.add_argument("--target", type=int, required=True)
    path.add_argument(
        "--unweighted",
        action="store_true",
        help="Minimise the number of arcs instead of the total weight",
    )

    precompute = commands.add_parser("precompute", help="Shortest paths between every pair")
    precompute.add_argument(
        "--upto",
        type=int,
        default=None,
        help="Use nodes 0..UPTO (default: every node)",
    )

    return parser.parse_args(argv)


def _print_visit(node):
    print(f"Visiting: {node.label}")


def run(args: argparse.Namespace) -> int:
    graph = load_graph(args.nodes, args.arcs, capacity=args.capacity, undirected=not args.directed)

    if args.command == "traverse":
        if args.order == "dfs":
            graph.depth_first(args.start, _print_visit)
        else:
            graph.breadth_first(args.start, _print_visit)
        return 0

    if args.command == "path":
        if args.unweighted:
            state = graph.breadth_first_to(args.start, args.target)
            chain = state.chain_to(args.target)
            if chain is None:
                print(f"No path from {args.start} to {args.target}")
                return 1
            print(format_trackback(graph.graph, chain))
            return 0

        shortest = graph.shortest_path(args.start, args.target)
        if shortest is None:
            print(f"No path from {args.start} to {args.target}")
            return 1
        print(format_path(shortest))
        return 0

    table = graph.precompute_paths(upto=args.upto)
    print(format_path_table(table, graph.graph))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        return run(args)
    except (GraphError, OSError) as e:
        logger.error(f"Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())

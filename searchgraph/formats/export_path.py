"""
Text rendering of search results.
"""

from typing import List, Optional, Sequence

from ..analysis.precompute import PathTable
from ..classes.path import ShortestPath
from ..core.graph import Graph


def _format_cost(cost) -> str:
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def _label(graph: Optional[Graph], handle: int) -> str:
    if graph is not None and handle in graph:
        return graph.node(handle).label
    return str(handle)


def format_path(path: ShortestPath) -> str:
    """
    Render a path on two lines.

    Example::

        [A-D] [4]
        A(0)->B(1)->C(2)->D(1)
    """
    header = (f"[{path.steps[0].label}-{path.steps[-1].label}] "
              f"[{_format_cost(path.total_cost)}]")
    body = "->".join(f"{step.label}({_format_cost(step.cost)})" for step in path.steps)
    return f"{header}\n{body}"


def format_path_detail(path: ShortestPath) -> str:
    """Render a path with one line per node and the total cost."""
    lines = [f"Path from {path.steps[0].label} to {path.steps[-1].label}", ""]
    lines.extend(f"Node: {step.label}, {_format_cost(step.cost)}" for step in path.steps)
    lines.append("")
    lines.append(f"Path total cost: {_format_cost(path.total_cost)}")
    return "\n".join(lines)


def format_path_table(table: PathTable, graph: Optional[Graph] = None) -> str:
    """
    Render every entry of a path table, separated by blank lines.

    Unreachable pairs are shown as ``[A-D] unreachable`` when ``graph`` is
    given to resolve their labels, and with handles otherwise.
    """
    blocks: List[str] = []
    for (origin, target), path in table.items():
        if path is not None:
            blocks.append(format_path(path))
        else:
            blocks.append(f"[{_label(graph, origin)}-{_label(graph, target)}] unreachable")
    return "\n\n".join(blocks)


def format_trackback(graph: Graph, chain: Sequence[int]) -> str:
    """Render a predecessor chain as ``Trackback: label`` lines, target first."""
    return "\n".join(f"Trackback: {graph.node(handle).label}" for handle in chain)

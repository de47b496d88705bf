"""
Heuristic estimates for A* searches and validators for their contracts.

A heuristic is defined on a specific end node and returns an estimate of the
path distance from its argument to that end node. Two subclasses matter:

Admissible: the estimate never exceeds the true shortest path distance to
end. AStar.astar_a with an admissible heuristic finds shortest paths.

Monotonic (consistent): for every arc a -> b,
``h(a) <= weight(a, b) + h(b)``. A monotonic heuristic with h(end) = 0 is
also admissible, and enables AStar.astar_m.

The validators below are O(graph) diagnostics for tests and debugging; no
search calls them.
"""

from typing import Any, Protocol, Sequence, Tuple

from .dijkstra import Dijkstra
from .graph import WeightFunction, transpose


class Heuristic(Protocol):
    """Estimate of the distance from node to a fixed end node."""

    def __call__(self, node: int) -> float:
        ...


def is_admissible(
    h: Heuristic,
    graph: Sequence[Sequence[Tuple[int, Any]]],
    weight: WeightFunction,
    end: int,
) -> Tuple[bool, str]:
    """
    Check whether h is admissible on graph relative to end.

    Runs a Dijkstra all-paths search from end over the transposed graph and
    compares h against every distance found. Nodes with no path to end
    accept any estimate.

    Args:
        h: Heuristic defined on end.
        graph: Labeled adjacency list with non-negative weights.
        weight: Weight function applied to arc labels.
        end: End node h estimates distances to.

    Returns:
        (True, "") if admissible, otherwise (False, description of a counter
        example).

    Example:
        >>> g = [[(1, 1.0)], []]
        >>> is_admissible(lambda n: [1.0, 0.0][n], g, float, 1)
        (True, '')
    """
    inv, _ = transpose(graph)
    d = Dijkstra(inv, weight)
    # the end node is the start node of the transposed graph
    d.all_paths(end)
    for n in range(len(inv)):
        if not d.tree.reached(n):
            continue
        est = h(n)
        if not est <= d.dist[n]:
            return False, (
                f"h({n}) = {est:g}, required to be <= "
                f"found shortest path ({d.dist[n]:g})"
            )
    return True, ""


def is_monotonic(
    h: Heuristic,
    graph: Sequence[Sequence[Tuple[int, Any]]],
    weight: WeightFunction,
) -> Tuple[bool, str]:
    """
    Check whether h is monotonic on graph.

    Returns:
        (True, "") if ``h(a) <= weight + h(b)`` holds for every arc a -> b,
        otherwise (False, description of a counter example).
    """
    hv = [h(n) for n in range(len(graph))]
    for fr, arcs in enumerate(graph):
        for to, label in arcs:
            w = weight(label)
            if not hv[fr] <= w + hv[to]:
                return False, (
                    f"h({fr}) = {hv[fr]:g}, required to be <= arc weight + h({to}) "
                    f"(= {w:g} + {hv[to]:g} = {w + hv[to]:g})"
                )
    return True, ""

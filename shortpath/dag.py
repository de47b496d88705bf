"""
Shortest and longest paths in directed acyclic graphs.

Nodes are relaxed once each, in topological order, so arbitrary arc weights
are allowed and the longest path problem is as easy as the shortest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.2 (Single-source shortest paths in directed acyclic graphs).
"""

from collections import deque
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .diagnostics import is_debug_enabled
from .graph import WeightFunction, identity_weight
from .logging import get_logger
from .search import NO_PATH, _SearchBase

logger = get_logger(__name__)


def topological_order(graph: Sequence[Sequence[Tuple[int, Any]]]) -> List[int]:
    """
    Topological ordering of a directed graph by Kahn's algorithm.

    Args:
        graph: Labeled adjacency list.

    Returns:
        Every node index once, each before all nodes its arcs lead to.

    Raises:
        ValueError: If graph has a cycle (loops included).

    Complexity: O(V + E)
    """
    n = len(graph)
    indegree = np.zeros(n, dtype=np.int64)
    for arcs in graph:
        for to, _ in arcs:
            indegree[to] += 1

    ready = deque(int(i) for i in np.flatnonzero(indegree == 0))
    order: List[int] = []
    while ready:
        fr = ready.popleft()
        order.append(fr)
        for to, _ in graph[fr]:
            indegree[to] -= 1
            if indegree[to] == 0:
                ready.append(to)

    if len(order) != n:
        raise ValueError(f"Graph is not a DAG: {n - len(order)} nodes lie on or after a cycle")
    return order


class DAGPath(_SearchBase):
    """
    Path searches of minimum or maximum distance in a directed acyclic graph.

    Negative arc weights are allowed. Among equal-distance paths the one with
    fewer nodes is kept when searching shortest paths, the one with more
    nodes when searching longest paths.

    Args:
        graph: Labeled adjacency list of a DAG.
        ordering: Topological ordering of graph, e.g. from
            ``topological_order``.
        weight: Weight function applied to arc labels.
        longest: Find paths of maximum rather than minimum distance.

    Attributes:
        tree: Path tree of the last search.
        dist: Distances of the last search, NO_PATH (inf) where not reached.

    Example:
        >>> g = [[(1, 2.0), (2, 1.0)], [(2, 3.0)], []]
        >>> d = DAGPath(g, [0, 1, 2], identity_weight, longest=True)
        >>> d.path(0, 2)
        True
        >>> d.tree.path_to(2), float(d.dist[2])
        ([0, 1, 2], 5.0)
    """

    def __init__(
        self,
        graph: Sequence[Sequence[Tuple[int, Any]]],
        ordering: Sequence[int],
        weight: WeightFunction,
        longest: bool = False,
    ):
        super().__init__(graph, weight)
        self.ordering = ordering
        self.longest = longest

    def path(self, start: int, end: int) -> bool:
        """
        Find a single path from start to end.

        The search stops once end comes up in the ordering; later nodes are
        not examined.

        Returns:
            True if end is reachable from start.
        """
        self._search(start, end)
        return self.tree.reached(end)

    def all_paths(self, start: int) -> int:
        """
        Find paths from start to every node reachable from start.

        Returns:
            Number of nodes reached, including start itself.
        """
        return self._search(start, None)

    def _search(self, start: int, end: Optional[int]) -> int:
        self.reset()
        self._debug_check((start,) if end is None else (start, end), non_negative=False)
        if is_debug_enabled():
            self._check_ordering()

        graph, weight = self.graph, self.weight
        tree, dist = self.tree, self.dist
        length = tree.length
        # minimizing sign * distance covers both modes
        sign = -1.0 if self.longest else 1.0

        ordering = list(self.ordering)
        tree.set_root(start)
        dist[start] = 0.0
        reached = 1
        # index() raises ValueError if start is missing from the ordering
        for n in ordering[ordering.index(start):]:
            if n == end:
                break
            if length[n] == 0:
                continue
            self.nodes_visited += 1
            d_n = dist[n]
            cand_len = length[n] + 1
            for to, label in graph[n]:
                self.arcs_visited += 1
                d = d_n + weight(label)
                if length[to] == 0:
                    reached += 1
                elif not (
                    sign * d < sign * dist[to]
                    or (d == dist[to] and sign * cand_len < sign * length[to])
                ):
                    continue
                dist[to] = d
                tree.set_path(to, n, cand_len)

        logger.debug(
            "dag_path longest=%s start=%d end=%s: %d nodes reached, %d arcs visited",
            self.longest, start, end, reached, self.arcs_visited,
        )
        return reached

    def _check_ordering(self) -> None:
        n = len(self.graph)
        pos = np.full(n, -1, dtype=np.int64)
        for i, node in enumerate(self.ordering):
            pos[node] = i
        for fr, arcs in enumerate(self.graph):
            for to, _ in arcs:
                if pos[fr] >= 0 and not pos[fr] < pos[to]:
                    raise ValueError(f"Ordering places arc ({fr}, {to}) backward")


def _dag_path(graph, start, end, weight, longest) -> Tuple[List[int], float]:
    d = DAGPath(graph, topological_order(graph), weight, longest)
    if not d.path(start, end):
        return [], NO_PATH
    return d.tree.path_to(end), float(d.dist[end])


def dag_min_dist_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single shortest path in a DAG.

    Returns:
        Tuple of (path as node indices, path distance); ([], inf) if end is
        unreachable.

    Raises:
        ValueError: If graph has a cycle.
    """
    return _dag_path(graph, start, end, weight, False)


def dag_max_dist_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single longest path in a DAG.

    Returns:
        Tuple of (path as node indices, path distance); ([], inf) if end is
        unreachable.

    Raises:
        ValueError: If graph has a cycle.
    """
    return _dag_path(graph, start, end, weight, True)

"""
Bellman-Ford(-Moore) algorithm for single-source shortest paths.

Negative arc weights are allowed. Negative cycles reachable from the start
node are detected and reported.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (Bellman-Ford).
"""

from typing import Any, List, Sequence, Tuple

from .graph import WeightFunction, identity_weight
from .logging import get_logger
from .search import NO_PATH, _SearchBase

logger = get_logger(__name__)


class BellmanFord(_SearchBase):
    """
    Shortest path searches by the Bellman-Ford-Moore algorithm.

    Graphs may be directed or undirected, and loops and parallel arcs are
    allowed. Negative arc weights are allowed as long as no negative cycle is
    reachable from the start node. Among paths of equal distance no
    preference is made for fewer nodes.

    Attributes:
        tree: Path tree of the last run; meaningless after a failed run.
        dist: Distances of the last run, NO_PATH (inf) where not reached.
        rounds: Relaxation rounds performed by the last run.

    Complexity: O(VE) where V is nodes and E is arcs.

    Example:
        >>> g = [[(1, 1.0)], [(2, -2.0)], []]
        >>> b = BellmanFord(g, identity_weight)
        >>> b.run(0)
        True
        >>> float(b.dist[2])
        -1.0
    """

    def __init__(self, graph: Sequence[Sequence[Tuple[int, Any]]], weight: WeightFunction):
        super().__init__(graph, weight)
        self.rounds = 0

    def reset(self) -> None:
        super().reset()
        self.rounds = 0

    def run(self, start: int) -> bool:
        """
        Find shortest paths from start to all nodes reachable from start.

        Returns:
            True on success, with shortest paths encoded in ``tree`` and
            ``dist``. False if a negative cycle is reachable from start, in
            which case the results are meaningless. A negative cycle not
            reachable from start does not prevent success.
        """
        self.reset()
        self._debug_check((start,), non_negative=False)

        graph, weight = self.graph, self.weight
        tree, dist = self.tree, self.dist
        length = tree.length

        tree.set_root(start)
        dist[start] = 0.0
        for _ in range(len(graph) - 1):
            self.rounds += 1
            improved = False
            for fr, arcs in enumerate(graph):
                if length[fr] == 0:
                    continue
                d1 = dist[fr]
                for to, label in arcs:
                    self.arcs_visited += 1
                    d2 = d1 + weight(label)
                    if d2 < dist[to]:
                        tree.set_path(to, fr, length[fr] + 1)
                        dist[to] = d2
                        improved = True
            if not improved:
                break

        if self._relaxable():
            logger.debug("bellman_ford start=%d: negative cycle detected", start)
            return False
        logger.debug(
            "bellman_ford start=%d: converged after %d rounds, %d arcs visited",
            start, self.rounds, self.arcs_visited,
        )
        return True

    def all_paths(self, start: int) -> int:
        """
        Run from start and count reached nodes.

        Returns:
            Number of nodes reached including start, or -1 if a negative
            cycle is reachable from start.
        """
        if not self.run(start):
            return -1
        return int((self.tree.length > 0).sum())

    def path(self, start: int, end: int) -> bool:
        """
        Run from start and report whether end was reached.

        Returns False when a negative cycle is reachable from start.
        """
        return self.run(start) and self.tree.reached(end)

    def negative_cycle(self) -> bool:
        """
        Return True if the graph contains any negative cycle.

        Unlike ``run``, cycles anywhere in the graph are found, not just those
        reachable from some start node. Path information is not computed;
        ``tree`` is left reset and ``dist`` holds scratch values.

        Note the sense of the result is opposite to that of ``run``.
        """
        self.reset()
        graph, weight, dist = self.graph, self.weight, self.dist
        # all-zero distances act as a virtual start node with a zero-weight
        # arc to every node
        dist.fill(0.0)
        for _ in range(len(graph) - 1):
            self.rounds += 1
            improved = False
            for fr, arcs in enumerate(graph):
                d1 = dist[fr]
                for to, label in arcs:
                    d2 = d1 + weight(label)
                    if d2 < dist[to]:
                        dist[to] = d2
                        improved = True
            if not improved:
                break
        return self._relaxable()

    def _relaxable(self) -> bool:
        graph, weight, dist = self.graph, self.weight, self.dist
        for fr, arcs in enumerate(graph):
            d1 = dist[fr]
            if d1 == NO_PATH:
                continue
            for to, label in arcs:
                if d1 + weight(label) < dist[to]:
                    return True
        return False


def bellman_ford_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single shortest path with the Bellman-Ford algorithm.

    Args:
        graph: Labeled adjacency list, negative weights allowed.
        start: Start node index.
        end: End node index.
        weight: Weight function (default: labels are weights).

    Returns:
        Tuple of (path as node indices, path distance); ([], inf) if end is
        unreachable.

    Raises:
        ValueError: If a negative cycle is reachable from start.
    """
    b = BellmanFord(graph, weight)
    if not b.run(start):
        raise ValueError(f"Negative cycle reachable from node {start}")
    return b.tree.path_to(end), float(b.dist[end])

"""
A* family searches: algorithm A, A*, and A* for monotonic heuristics.

The open set is ordered by ``f = g + h(node)`` where ``g`` is the distance
from start and ``h`` a heuristic estimate of the remaining distance to the
end node. See ``shortpath.heuristic`` for the heuristic contracts and their
validators.

References:
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic Determination
      of Minimum Cost Paths" (1968).
"""

from enum import Enum
from typing import Any, List, Sequence, Tuple

from .graph import WeightFunction, identity_weight
from .heap import IndexedMinHeap
from .heuristic import Heuristic
from .logging import get_logger
from .search import _SearchBase

logger = get_logger(__name__)


class AStarStatus(Enum):
    """
    Per-node search state.

    ``astar_a`` moves nodes UNREACHED -> OPEN -> DONE and may re-open a DONE
    node when a better path to it turns up. ``astar_m`` uses CLOSED in place
    of DONE, and a CLOSED node is never re-opened.
    """

    UNREACHED = 0
    OPEN = 1
    DONE = 2
    CLOSED = 3


class AStar(_SearchBase):
    """
    Shortest path searches by variants of the A* algorithm.

    Arc weights must be non-negative. The variant is determined by the search
    method and the heuristic passed to it. The object is sized to the order of
    graph at construction.

    Attributes:
        tree: Path tree of the last search. Only the path to the end node is
            meaningful.
        dist: Distances of the last search, NO_PATH (inf) where not reached.
    """

    def __init__(self, graph: Sequence[Sequence[Tuple[int, Any]]], weight: WeightFunction):
        super().__init__(graph, weight)
        self._status: List[AStarStatus] = [AStarStatus.UNREACHED] * len(graph)
        self._open = IndexedMinHeap(len(graph))

    def reset(self) -> None:
        super().reset()
        self._status[:] = [AStarStatus.UNREACHED] * len(self._status)
        self._open.clear()

    def status(self, node: int) -> AStarStatus:
        return self._status[node]

    def astar_a(self, start: int, end: int, h: Heuristic) -> bool:
        """
        Find a path from start to end by algorithm A or A*.

        With an admissible heuristic this is A* and the path found is a
        shortest path, like Dijkstra's algorithm but usually expanding fewer
        nodes. With an inadmissible heuristic it is algorithm A: a path is
        still found when one exists, but it need not be shortest. Quality
        degrades gracefully with the quality of the heuristic.

        h may be called more than once for the same node, so it should be
        cheap; memoize or precompute it if profiling says so.

        Args:
            start: Start node index.
            end: End node index, the node h estimates distances to.
            h: Heuristic estimate of the distance from a node to end.

        Returns:
            True if a path was found; decode it with ``tree.path_to(end)``.
        """
        self.reset()
        self._debug_check((start, end), non_negative=True)

        UNREACHED = AStarStatus.UNREACHED
        OPEN = AStarStatus.OPEN
        DONE = AStarStatus.DONE
        graph, weight = self.graph, self.weight
        tree, dist, status, heap = self.tree, self.dist, self._status, self._open
        length = tree.length

        tree.set_root(start)
        dist[start] = 0.0
        status[start] = OPEN
        heap.push(start, h(start))
        while heap:
            best = heap.pop()
            if best == end:
                self._settle(end)
                self._log("astar_a", start, end, True)
                return True
            status[best] = DONE
            self.nodes_visited += 1
            g_best = dist[best]
            next_len = length[best] + 1
            for to, label in graph[best]:
                self.arcs_visited += 1
                g = g_best + weight(label)
                st = status[to]
                if st is not UNREACHED:
                    if g > dist[to]:
                        continue
                    if g == dist[to] and next_len >= length[to]:
                        # same distance but no fewer nodes
                        continue
                    tree.set_path(to, best, next_len)
                    dist[to] = g
                    if st is OPEN:
                        heap.decrease_key(to, g + h(to))
                    else:
                        status[to] = OPEN
                        heap.push(to, g + h(to))
                else:
                    tree.set_path(to, best, next_len)
                    dist[to] = g
                    status[to] = OPEN
                    heap.push(to, g + h(to))
        self._log("astar_a", start, end, False)
        return False

    def astar_m(self, start: int, end: int, h: Heuristic) -> bool:
        """
        Find a shortest path from start to end by A* with a monotonic heuristic.

        Monotonicity means a node's f value cannot improve once it is closed,
        so closed nodes are skipped without being re-examined and every node
        is closed at most once. Results are not meaningful if h is not
        monotonic. See ``astar_a`` for general usage.

        Returns:
            True if a path was found; decode it with ``tree.path_to(end)``.
        """
        self.reset()
        self._debug_check((start, end), non_negative=True)

        OPEN = AStarStatus.OPEN
        CLOSED = AStarStatus.CLOSED
        graph, weight = self.graph, self.weight
        tree, dist, status, heap = self.tree, self.dist, self._status, self._open
        length = tree.length

        tree.set_root(start)
        dist[start] = 0.0
        status[start] = OPEN
        heap.push(start, h(start))
        while heap:
            best = heap.pop()
            if best == end:
                self._log("astar_m", start, end, True)
                return True
            status[best] = CLOSED
            self.nodes_visited += 1
            g_best = dist[best]
            next_len = length[best] + 1
            for to, label in graph[best]:
                self.arcs_visited += 1
                st = status[to]
                if st is CLOSED:
                    continue
                g = g_best + weight(label)
                if st is OPEN:
                    if g > dist[to]:
                        continue
                    if g == dist[to] and next_len >= length[to]:
                        continue
                    tree.set_path(to, best, next_len)
                    dist[to] = g
                    heap.decrease_key(to, g + h(to))
                else:
                    tree.set_path(to, best, next_len)
                    dist[to] = g
                    status[to] = OPEN
                    heap.push(to, g + h(to))
        self._log("astar_m", start, end, False)
        return False

    def _settle(self, end: int) -> None:
        # An inadmissible h can shorten an ancestor of end after end was
        # reached. Lengths and distances along the chain are then stale.
        tree, dist, weight = self.tree, self.dist, self.weight
        tree.settle_path(end)
        path = tree.path_to(end)
        for fr, to in zip(path, path[1:]):
            w = min(weight(label) for nb, label in self.graph[fr] if nb == to)
            dist[to] = dist[fr] + w

    def _log(self, method: str, start: int, end: int, found: bool) -> None:
        logger.debug(
            "%s start=%d end=%d found=%s: %d nodes expanded, %d arcs visited",
            method, start, end, found, self.nodes_visited, self.arcs_visited,
        )


def astar_a_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    h: Heuristic,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single path with AStar.astar_a.

    Returns:
        Tuple of (path as node indices, path distance); ([], inf) if no path.
    """
    a = AStar(graph, weight)
    if not a.astar_a(start, end, h):
        return [], float("inf")
    return a.tree.path_to(end), float(a.dist[end])


def astar_m_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    h: Heuristic,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single shortest path with AStar.astar_m.

    Returns:
        Tuple of (path as node indices, path distance); ([], inf) if no path.
    """
    a = AStar(graph, weight)
    if not a.astar_m(start, end, h):
        return [], float("inf")
    return a.tree.path_to(end), float(a.dist[end])

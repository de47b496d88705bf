"""
Dijkstra's algorithm for single-source shortest paths.

Distances are sums of non-negative arc weights. Among equal-distance paths
found while a node is still open, the one with fewer nodes is kept. A node
closes on its first shortest path, so with zero-weight arcs an
equal-distance path with fewer nodes found later is not taken.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from .graph import WeightFunction, identity_weight
from .heap import IndexedMinHeap
from .logging import get_logger
from .search import _SearchBase

logger = get_logger(__name__)


class DijkstraStatus(Enum):
    """Per-node search state. CLOSED is terminal."""

    UNVISITED = 0
    OPEN = 1
    CLOSED = 2


class Dijkstra(_SearchBase):
    """
    Shortest path searches by Dijkstra's algorithm.

    Arc weights must be non-negative; with negative weights results are not
    meaningful and nothing is reported unless debug mode is enabled. Graphs
    may be directed or undirected, and loops and parallel arcs are allowed.

    The object is sized to the order of graph at construction. If nodes are
    added to the graph afterward, construct a new Dijkstra.

    Attributes:
        tree: Path tree of the last search.
        dist: Distances of the last search, NO_PATH (inf) where not reached.
            After ``path`` only nodes on the found path are final.

    Example:
        >>> g = [[(1, 7.0), (2, 9.0)], [(2, 1.0)], []]
        >>> d = Dijkstra(g, identity_weight)
        >>> d.path(0, 2)
        True
        >>> d.tree.path_to(2), float(d.dist[2])
        ([0, 1, 2], 8.0)
    """

    def __init__(self, graph: Sequence[Sequence[Tuple[int, Any]]], weight: WeightFunction):
        super().__init__(graph, weight)
        self._status: List[DijkstraStatus] = [DijkstraStatus.UNVISITED] * len(graph)
        self._open = IndexedMinHeap(len(graph))

    def reset(self) -> None:
        super().reset()
        self._status[:] = [DijkstraStatus.UNVISITED] * len(self._status)
        self._open.clear()

    def status(self, node: int) -> DijkstraStatus:
        return self._status[node]

    def path(self, start: int, end: int) -> bool:
        """
        Find a single shortest path from start to end.

        Returns as soon as the shortest path to end is found without exploring
        the rest of the graph. Decode the path with ``tree.path_to(end)``.

        Returns:
            True if end is reachable from start.
        """
        self._search(start, end)
        return self.tree.reached(end)

    def all_paths(self, start: int) -> int:
        """
        Find shortest paths from start to every node reachable from start.

        Returns:
            Number of nodes reached, including start itself.
        """
        return self._search(start, None)

    def _search(self, start: int, end: Optional[int]) -> int:
        self.reset()
        self._debug_check((start,) if end is None else (start, end), non_negative=True)

        CLOSED = DijkstraStatus.CLOSED
        OPEN = DijkstraStatus.OPEN
        graph, weight = self.graph, self.weight
        tree, dist, status, heap = self.tree, self.dist, self._status, self._open
        length = tree.length

        current = start
        tree.set_root(start)
        dist[start] = 0.0
        status[start] = CLOSED  # start skips the heap
        n_done = 1
        while current != end:
            cur_dist = dist[current]
            next_len = length[current] + 1
            for to, label in graph[current]:
                self.arcs_visited += 1
                st = status[to]
                if st is CLOSED:
                    continue
                d = cur_dist + weight(label)
                if st is OPEN:
                    if d > dist[to]:
                        continue
                    if d == dist[to] and next_len >= length[to]:
                        # same distance, no fewer nodes
                        continue
                    dist[to] = d
                    tree.set_path(to, current, next_len)
                    heap.decrease_key(to, d)
                else:
                    status[to] = OPEN
                    dist[to] = d
                    tree.set_path(to, current, next_len)
                    heap.push(to, d)
            self.nodes_visited += 1
            if not heap:
                break
            current = heap.pop()
            status[current] = CLOSED
            n_done += 1

        logger.debug(
            "dijkstra start=%d end=%s: %d nodes done, %d arcs visited",
            start, end, n_done, self.arcs_visited,
        )
        return n_done


def dijkstra_path(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    start: int,
    end: int,
    weight: WeightFunction = identity_weight,
) -> Tuple[List[int], float]:
    """
    Find a single shortest path with Dijkstra's algorithm.

    Args:
        graph: Labeled adjacency list with non-negative weights.
        start: Start node index.
        end: End node index.
        weight: Weight function (default: labels are weights).

    Returns:
        Tuple of (path as node indices, path distance). The path is empty and
        the distance inf if end is unreachable.

    Example:
        >>> g = [[(1, 1.0), (2, 5.0)], [(2, 2.0)], []]
        >>> dijkstra_path(g, 0, 2)
        ([0, 1, 2], 3.0)
    """
    d = Dijkstra(graph, weight)
    d.path(start, end)
    return d.tree.path_to(end), float(d.dist[end])

"""shortpath - shortest path searches over labeled adjacency lists.

Search objects bind a graph and a weight function, run Dijkstra, A* family,
Bellman-Ford or DAG searches, and leave their results in a path tree and a
distance array.

Example:
    >>> from shortpath import Dijkstra, identity_weight
    >>> g = [[(1, 1.0), (2, 5.0)], [(2, 2.0)], []]
    >>> d = Dijkstra(g, identity_weight)
    >>> d.path(0, 2)
    True
    >>> d.tree.path_to(2)
    [0, 1, 2]
"""

__version__ = "0.1.0"

# Searches
from .allpairs import floyd_warshall
from .astar import AStar, AStarStatus, astar_a_path, astar_m_path
from .bellman_ford import BellmanFord, bellman_ford_path
from .dag import DAGPath, dag_max_dist_path, dag_min_dist_path, topological_order

# Diagnostics
from .diagnostics import (
    assert_non_negative,
    assert_valid_graph,
    assert_valid_tree,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .dijkstra import Dijkstra, DijkstraStatus, dijkstra_path

# Path trees and graphs
from .fromlist import NO_NODE, FromList, PathEnd, path_to
from .graph import (
    Arc,
    LabeledGraph,
    WeightFunction,
    arc_count,
    identity_weight,
    negative_arc,
    path_distance,
    transpose,
    valid_to,
)
from .heap import NOT_QUEUED, IndexedMinHeap
from .heuristic import Heuristic, is_admissible, is_monotonic

# Logging
from .logging import configure_logging, get_logger, set_log_level
from .search import NO_PATH

__all__ = [
    "__version__",
    # Path trees and graphs
    "Arc",
    "LabeledGraph",
    "WeightFunction",
    "identity_weight",
    "transpose",
    "arc_count",
    "valid_to",
    "negative_arc",
    "path_distance",
    "FromList",
    "PathEnd",
    "NO_NODE",
    "path_to",
    "IndexedMinHeap",
    "NOT_QUEUED",
    # Searches
    "NO_PATH",
    "Dijkstra",
    "DijkstraStatus",
    "dijkstra_path",
    "AStar",
    "AStarStatus",
    "astar_a_path",
    "astar_m_path",
    "Heuristic",
    "is_admissible",
    "is_monotonic",
    "BellmanFord",
    "bellman_ford_path",
    "DAGPath",
    "dag_min_dist_path",
    "dag_max_dist_path",
    "topological_order",
    "floyd_warshall",
    # Diagnostics
    "assert_valid_graph",
    "assert_non_negative",
    "assert_valid_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

"""
All-pairs shortest path distances: Floyd-Warshall.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Any, Sequence, Tuple

import numpy as np

from .graph import WeightFunction, identity_weight


def floyd_warshall(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    weight: WeightFunction = identity_weight,
) -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest path distances.

    Handles negative arc weights. If negative cycles exist the result is not
    a distance matrix; a negative diagonal element then marks a node on a
    negative cycle.

    Args:
        graph: Labeled adjacency list.
        weight: Weight function (default: labels are weights).

    Returns:
        Array d of shape (n, n) where d[i, j] is the shortest distance from
        node i to node j, inf if j is unreachable from i. Where parallel arcs
        exist the lightest is used.

    Complexity: O(n^3) time, O(n^2) memory.

    Example:
        >>> d = floyd_warshall([[(1, 1.0)], [(2, 2.0)], []])
        >>> float(d[0, 2])
        3.0
    """
    n = len(graph)
    d = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(d, 0.0)

    for i, arcs in enumerate(graph):
        for j, label in arcs:
            w = weight(label)
            if w < d[i, j]:
                d[i, j] = w

    # row i relaxes through k as d[i, :] = min(d[i, :], d[i, k] + d[k, :])
    for k in range(n):
        np.minimum(d, d[:, k, np.newaxis] + d[np.newaxis, k, :], out=d)

    return d

"""Benchmark single-source shortest path searches on random graphs."""

import math
import time
from typing import Dict, List

import numpy as np

from shortpath import Arc, AStar, BellmanFord, Dijkstra, identity_weight


def random_geometric_graph(n: int, degree: int, seed: int = 0):
    """Random points in the unit square, each linked to random others.

    Arc weights are at least the straight-line distance, so the
    straight-line heuristic is monotonic.
    """
    rng = np.random.default_rng(seed)
    xy = rng.random((n, 2))
    graph: List[List[Arc]] = [[] for _ in range(n)]
    for fr in range(n):
        for to in rng.integers(0, n, size=degree):
            to = int(to)
            d = float(np.hypot(*(xy[fr] - xy[to])))
            graph[fr].append(Arc(to, d * (1.0 + float(rng.random()))))
    return graph, xy


def benchmark_searches(n: int, degree: int = 4, n_queries: int = 20) -> Dict[str, float]:
    """Time Dijkstra, A* and Bellman-Ford on one random graph.

    Args:
        n: Number of nodes.
        degree: Arcs leaving each node.
        n_queries: Number of random start/end pairs.

    Returns:
        Dictionary with mean seconds per query for each search.
    """
    graph, xy = random_geometric_graph(n, degree)
    rng = np.random.default_rng(1)
    pairs = [(int(s), int(e)) for s, e in rng.integers(0, n, size=(n_queries, 2))]

    d = Dijkstra(graph, identity_weight)
    a = AStar(graph, identity_weight)
    b = BellmanFord(graph, identity_weight)

    start = time.perf_counter()
    for s, e in pairs:
        d.path(s, e)
    t_dijkstra = (time.perf_counter() - start) / n_queries

    start = time.perf_counter()
    for s, e in pairs:
        ex, ey = xy[e]
        a.astar_m(s, e, lambda node: math.hypot(ex - xy[node, 0], ey - xy[node, 1]))
    t_astar = (time.perf_counter() - start) / n_queries

    start = time.perf_counter()
    for s, _ in pairs[:3]:
        b.run(s)
    t_bellman_ford = (time.perf_counter() - start) / 3

    return {
        "n": n,
        "arcs": n * degree,
        "dijkstra_sec": t_dijkstra,
        "astar_m_sec": t_astar,
        "bellman_ford_sec": t_bellman_ford,
    }


if __name__ == "__main__":
    print("Benchmarking shortest path searches...")

    for n in (1000, 5000):
        results = benchmark_searches(n)
        print(f"Random graph ({results['n']} nodes, {results['arcs']} arcs):")
        print(f"  Dijkstra path:     {results['dijkstra_sec']*1e3:.2f} ms")
        print(f"  A* (monotonic):    {results['astar_m_sec']*1e3:.2f} ms")
        print(f"  Bellman-Ford run:  {results['bellman_ford_sec']*1e3:.2f} ms")

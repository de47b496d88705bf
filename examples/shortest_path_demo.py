"""Example: Shortest path searches with shortpath

Builds a small road grid, finds routes with Dijkstra and A*, and runs
Bellman-Ford on a graph with negative arc weights.
"""

import math

import numpy as np

from shortpath import (
    Arc,
    AStar,
    BellmanFord,
    Dijkstra,
    LabeledGraph,
    identity_weight,
    is_admissible,
    is_monotonic,
)


def make_grid(side: int, rng: np.random.Generator):
    """Grid of side x side nodes, arcs to 4-neighbours, weights >= length."""
    coords = [(float(i % side), float(i // side)) for i in range(side * side)]
    graph = [[] for _ in coords]
    for node, (x, y) in enumerate(coords):
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < side and 0 <= ny < side:
                to = int(ny) * side + int(nx)
                # congestion only ever slows travel down
                graph[node].append(Arc(to, 1.0 + float(rng.random())))
    return graph, coords


def example_dijkstra_named_graph():
    """Example: Dijkstra on a graph with named nodes."""
    print("=" * 60)
    print("Example 1: Dijkstra on a named graph")
    print("=" * 60)

    g = LabeledGraph()
    for u, v, w in [
        ("a", "b", 7), ("a", "c", 9), ("a", "f", 14),
        ("b", "c", 10), ("b", "d", 15), ("c", "d", 11),
        ("c", "f", 2), ("d", "e", 6), ("e", "f", 9),
    ]:
        g.add_arc(u, v, w)

    d = Dijkstra(g, identity_weight)
    start = g.index("a")
    reached = d.all_paths(start)
    print(f"Reached {reached} nodes from a")
    for n in range(len(g)):
        route = " -> ".join(str(g.name(i)) for i in d.tree.path_to(n))
        print(f"  {g.name(n)}: distance {d.dist[n]:g}, path {route}")
    print()


def example_astar_grid():
    """Example: A* with a straight-line heuristic on a road grid."""
    print("=" * 60)
    print("Example 2: A* on a road grid")
    print("=" * 60)

    rng = np.random.default_rng(42)
    side = 12
    graph, coords = make_grid(side, rng)
    start, end = 0, side * side - 1
    ex, ey = coords[end]

    def straight_line(node: int) -> float:
        x, y = coords[node]
        return math.hypot(ex - x, ey - y)

    print(f"Heuristic admissible: {is_admissible(straight_line, graph, identity_weight, end)[0]}")
    print(f"Heuristic monotonic:  {is_monotonic(straight_line, graph, identity_weight)[0]}")

    d = Dijkstra(graph, identity_weight)
    d.path(start, end)
    a = AStar(graph, identity_weight)
    a.astar_m(start, end, straight_line)

    print(f"Dijkstra distance: {d.dist[end]:.4f}, nodes expanded: {d.nodes_visited}")
    print(f"A* distance:       {a.dist[end]:.4f}, nodes expanded: {a.nodes_visited}")
    print(f"Path length: {len(a.tree.path_to(end))} nodes")
    print()


def example_bellman_ford():
    """Example: Bellman-Ford with negative arcs and a negative cycle."""
    print("=" * 60)
    print("Example 3: Bellman-Ford")
    print("=" * 60)

    graph = [
        [Arc(2, -1.0)],
        [Arc(3, -2.0)],
        [Arc(1, 4.0), Arc(3, 3.0)],
        [Arc(0, 2.0)],
    ]
    b = BellmanFord(graph, identity_weight)
    if b.run(0):
        print(f"Distances from 0: {[float(x) for x in b.dist]}")
        print(f"Shortest path 0 -> 3: {b.tree.path_to(3)}")

    graph[3].append(Arc(1, -5.0))
    print(f"After adding arc 3 -> 1 (-5): run succeeds = {b.run(0)}")
    print(f"Negative cycle in graph: {b.negative_cycle()}")
    print()


if __name__ == "__main__":
    example_dijkstra_named_graph()
    example_astar_grid()
    example_bellman_ford()
    print("Shortest path demo complete")

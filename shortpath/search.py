"""
State shared by the search objects.

A search object is bound to one graph and one weight function. It allocates
its per-node arrays once, sized to the order of the graph, and reuses them
for every search. Searches on one object run consecutively, never
concurrently; separate objects over the same graph are independent.
"""

import math
from typing import Any, Sequence, Tuple

import numpy as np

from .diagnostics import assert_non_negative, assert_valid_graph, is_debug_enabled
from .fromlist import FromList
from .graph import WeightFunction

NO_PATH = math.inf


class _SearchBase:
    """
    Graph, weight function and result arrays common to every search.

    Attributes:
        graph: Labeled adjacency list; not modified by searches.
        weight: Weight function mapping arc labels to floats.
        tree: Path tree holding the results of the last search.
        dist: Path distance for each node, NO_PATH for nodes not reached.
        nodes_visited: Nodes expanded by the last search.
        arcs_visited: Arcs examined by the last search.
    """

    def __init__(self, graph: Sequence[Sequence[Tuple[int, Any]]], weight: WeightFunction):
        self.graph = graph
        self.weight = weight
        self.tree = FromList(len(graph))
        self.dist = np.full(len(graph), NO_PATH, dtype=np.float64)
        self.nodes_visited = 0
        self.arcs_visited = 0

    def reset(self) -> None:
        """
        Clear results from any previous search.

        Leaves the graph and weight function in place and otherwise prepares
        the object for another search. Every search calls this first.
        """
        self.nodes_visited = 0
        self.arcs_visited = 0
        self.tree.reset()
        self.dist.fill(NO_PATH)

    def _debug_check(self, nodes: Sequence[int], non_negative: bool) -> None:
        if not is_debug_enabled():
            return
        n = len(self.graph)
        for node in nodes:
            if node < 0 or node >= n:
                raise ValueError(f"Node {node} not in graph of order {n}")
        assert_valid_graph(self.graph)
        if non_negative:
            assert_non_negative(self.graph, self.weight)

"""
Labeled adjacency lists over dense integer node indices.

A graph is any sequence where element ``i`` is the list of arcs leaving node
``i``. Arcs carry an opaque label that a weight function translates to a
float arc weight. ``LabeledGraph`` is a convenience builder mapping hashable
node names onto indices ``0..n-1`` in insertion order.
"""

from typing import Any, Callable, Dict, Hashable, List, NamedTuple, Sequence, Tuple

WeightFunction = Callable[[Any], float]


class Arc(NamedTuple):
    """A half arc: the node the arc leads to and its label."""

    to: int
    label: Any


def identity_weight(label: Any) -> float:
    """Weight function using the label itself as the arc weight."""
    return label


class LabeledGraph:
    """
    Labeled adjacency list with named nodes.

    Node names are mapped to dense indices in the order they are first seen,
    so ``graph[i]`` is always the arc list of node ``i``. A LabeledGraph can
    be handed directly to any search object.

    Attributes:
        directed: If False, ``add_arc`` also adds the reverse arc.

    Complexity:
        - add_node: O(1) amortized
        - add_arc: O(1) amortized (parallel arcs are kept)

    Example:
        >>> g = LabeledGraph()
        >>> g.add_arc('a', 'b', 7)
        >>> g.add_arc('b', 'c', 10)
        >>> g[0]
        [Arc(to=1, label=7)]
    """

    def __init__(self, directed: bool = True):
        self.directed = directed
        self._index: Dict[Hashable, int] = {}
        self._names: List[Hashable] = []
        self._adj: List[List[Arc]] = []

    def add_node(self, name: Hashable) -> int:
        """
        Add a node if not present.

        Args:
            name: Hashable node name.

        Returns:
            Dense index of the node.
        """
        idx = self._index.get(name)
        if idx is None:
            idx = len(self._names)
            self._index[name] = idx
            self._names.append(name)
            self._adj.append([])
        return idx

    def add_arc(self, u: Hashable, v: Hashable, label: Any = 1.0) -> None:
        """
        Add a labeled arc from u to v, adding missing nodes.

        Args:
            u: Name of the node the arc leaves.
            v: Name of the node the arc leads to.
            label: Arc label (default 1.0, usable with identity_weight).
        """
        i = self.add_node(u)
        j = self.add_node(v)
        self._adj[i].append(Arc(j, label))
        if not self.directed and i != j:
            self._adj[j].append(Arc(i, label))

    def index(self, name: Hashable) -> int:
        """
        Return the index of a named node.

        Raises:
            KeyError: If the node is not in the graph.
        """
        if name not in self._index:
            raise KeyError(f"Node {name} not in graph")
        return self._index[name]

    def name(self, index: int) -> Hashable:
        return self._names[index]

    def names(self) -> List[Hashable]:
        """Return node names in index order."""
        return list(self._names)

    @property
    def adjacency(self) -> List[List[Arc]]:
        """The underlying adjacency list (shared, not copied)."""
        return self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __getitem__(self, index: int) -> List[Arc]:
        return self._adj[index]

    def __iter__(self):
        return iter(self._adj)


def transpose(graph: Sequence[Sequence[Tuple[int, Any]]]) -> Tuple[List[List[Arc]], int]:
    """
    Construct the transpose of a directed graph.

    For every arc ``fr -> to`` of graph, the result has an arc ``to -> fr``
    with the same label.

    Args:
        graph: Labeled adjacency list.

    Returns:
        Tuple of (transposed adjacency list, number of arcs).
    """
    t: List[List[Arc]] = [[] for _ in range(len(graph))]
    m = 0
    for fr, arcs in enumerate(graph):
        for to, label in arcs:
            t[to].append(Arc(fr, label))
            m += 1
    return t, m


def arc_count(graph: Sequence[Sequence[Tuple[int, Any]]]) -> int:
    return sum(len(arcs) for arcs in graph)


def valid_to(graph: Sequence[Sequence[Tuple[int, Any]]]) -> bool:
    """
    Return True if every arc leads to a valid node index of graph.
    """
    n = len(graph)
    for arcs in graph:
        for to, _ in arcs:
            if to < 0 or to >= n:
                return False
    return True


def negative_arc(graph: Sequence[Sequence[Tuple[int, Any]]], weight: WeightFunction) -> bool:
    """
    Return True if graph contains an arc of negative weight.
    """
    for arcs in graph:
        for _, label in arcs:
            if weight(label) < 0:
                return True
    return False


def path_distance(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    path: Sequence[int],
    weight: WeightFunction = identity_weight,
) -> float:
    """
    Sum arc weights along a path of node indices.

    Where parallel arcs join consecutive nodes the lightest one is used, which
    is the arc any shortest path search would have taken.

    Args:
        graph: Labeled adjacency list.
        path: Node indices, first to last.
        weight: Weight function applied to arc labels.

    Returns:
        Path distance; 0.0 for a single-node path.

    Raises:
        ValueError: If path is empty or two consecutive nodes are not joined
            by an arc.
    """
    if len(path) == 0:
        raise ValueError("path_distance requires a non-empty path")

    total = 0.0
    for fr, to in zip(path, path[1:]):
        weights = [weight(label) for nb, label in graph[fr] if nb == to]
        if not weights:
            raise ValueError(f"No arc from {fr} to {to}")
        total += min(weights)
    return total

"""
Path trees: rooted trees or forests encoded as "from" lists.

Other names for this structure are parent list, predecessor list, in-tree,
inverse arborescence and spaghetti stack. Every search object in this package
records its results in a FromList: for each node, the node the best known
path arrives from and the number of nodes on that path.

For a start node ``from_`` is NO_NODE and ``length`` is 1. For a node reached
by a search ``from_`` is its predecessor and ``length`` the node count from
start through the node. For a node not reached ``from_`` is NO_NODE and
``length`` is 0.
"""

from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

NO_NODE = -1


class PathEnd(NamedTuple):
    """One entry of a path tree."""

    from_: int
    length: int


class FromList:
    """
    Path tree over nodes ``0..n-1``.

    Entries are held in two numpy integer arrays, ``from_`` and ``length``,
    parallel to node indices. ``max_len`` is the longest path length recorded.

    Attributes:
        from_: Predecessor of each node, NO_NODE for roots and unreached nodes.
        length: Number of nodes in the path to each node, 0 if unreached.
        max_len: Maximum of ``length``.

    Example:
        >>> t = FromList(3)
        >>> t.set_root(0)
        >>> t.set_path(2, 0, 2)
        >>> t.path_to(2)
        [0, 2]
    """

    def __init__(self, order: int):
        self.from_ = np.full(order, NO_NODE, dtype=np.int64)
        self.length = np.zeros(order, dtype=np.int64)
        self.max_len = 0

    def reset(self) -> None:
        """Mark every node unreached, in place."""
        self.from_.fill(NO_NODE)
        self.length.fill(0)
        self.max_len = 0

    def set_root(self, n: int) -> None:
        self.from_[n] = NO_NODE
        self.length[n] = 1
        if self.max_len < 1:
            self.max_len = 1

    def set_path(self, n: int, from_: int, length: int) -> None:
        """Record that the path to n arrives from node from_ with length nodes."""
        self.from_[n] = from_
        self.length[n] = length
        if length > self.max_len:
            self.max_len = length

    def reached(self, n: int) -> bool:
        return bool(self.length[n] > 0)

    def __len__(self) -> int:
        return len(self.length)

    def __getitem__(self, n: int) -> PathEnd:
        return PathEnd(int(self.from_[n]), int(self.length[n]))

    @property
    def paths(self) -> List[PathEnd]:
        """All entries as a list of PathEnd."""
        return [PathEnd(int(f), int(l)) for f, l in zip(self.from_, self.length)]

    def path_to(self, end: int) -> List[int]:
        """
        Decode the path ending at end.

        The buffer is sized from the recorded length and filled back to
        front, so at most ``length[end]`` entries are read.

        Args:
            end: Node index to decode.

        Returns:
            List of node indices from a root to end, or an empty list if end
            was not reached.

        Complexity: O(path length).
        """
        n = int(self.length[end])
        if n == 0:
            return []
        p = [0] * n
        fr = self.from_
        while True:
            n -= 1
            p[n] = end
            if n == 0:
                return p
            end = int(fr[end])

    def root(self, n: int) -> int:
        """Follow from pointers up to the root of n."""
        fr = self.from_
        while fr[n] >= 0:
            n = int(fr[n])
        return n

    def reroot(self, n: int) -> None:
        """
        Make n the root of its tree by reversing the path from the old root.

        Only from pointers change. Lengths are stale afterward; call
        ``recalc_len`` if they are needed.
        """
        fr = self.from_
        prev = int(fr[n])
        if prev < 0:
            return
        fr[n] = NO_NODE
        while prev >= 0:
            nxt = int(fr[prev])
            fr[prev] = n
            n, prev = prev, nxt

    def leaves(self) -> np.ndarray:
        """
        Boolean mask of nodes that no other node arrives from.

        Unreached nodes have no children and so are included; combine with
        ``length > 0`` for leaves of the search tree proper.
        """
        mask = np.ones(len(self.from_), dtype=bool)
        parents = self.from_[self.from_ >= 0]
        mask[parents] = False
        return mask

    def transpose(self) -> List[List[int]]:
        """
        Child lists of the tree: arcs from roots toward leaves.

        Returns:
            Adjacency list where element ``i`` holds every node arriving
            from ``i``, in index order.
        """
        g: List[List[int]] = [[] for _ in range(len(self.from_))]
        for n, fr in enumerate(self.from_):
            if fr >= 0:
                g[int(fr)].append(n)
        return g

    def common_ancestor(self, a: int, b: int) -> int:
        """
        Return the nearest common ancestor of a and b.

        Returns NO_NODE if a or b is not a valid node index, is unreached, or
        if the two nodes lie in different trees of a forest.
        """
        n = len(self.length)
        if a < 0 or b < 0 or a >= n or b >= n:
            return NO_NODE
        fr, ln = self.from_, self.length
        if ln[a] == 0 or ln[b] == 0:
            return NO_NODE
        if ln[a] < ln[b]:
            a, b = b, a
        while ln[a] > ln[b]:
            a = int(fr[a])
        while a != b:
            if a < 0 or b < 0:
                return NO_NODE
            a, b = int(fr[a]), int(fr[b])
        return a

    def bounds_ok(self) -> Tuple[bool, int]:
        """
        Validate from values.

        Negative values are allowed as they indicate roots.

        Returns:
            (True, NO_NODE) when every from value is a valid index, otherwise
            (False, n) for a node n holding an out-of-range from value.
        """
        bad = np.flatnonzero(self.from_ >= len(self.from_))
        if bad.size:
            return False, int(bad[0])
        return True, NO_NODE

    def recalc_len(self) -> None:
        """
        Recompute every length and max_len from the from pointers.

        Every node with a from value of NO_NODE becomes a root of length 1,
        so this is meant for forests built by hand where all nodes belong to
        some tree.

        Raises:
            ValueError: If the from pointers contain a cycle.
        """
        fr = self.from_
        ln = self.length
        ln.fill(0)
        self.max_len = 0
        for start in range(len(ln)):
            if ln[start] > 0:
                continue
            chain = []
            seen = set()
            n = start
            while n >= 0 and ln[n] == 0:
                if n in seen:
                    raise ValueError(f"from pointers form a cycle through node {n}")
                seen.add(n)
                chain.append(n)
                n = int(fr[n])
            base = int(ln[n]) if n >= 0 else 0
            for node in reversed(chain):
                base += 1
                ln[node] = base
            if base > self.max_len:
                self.max_len = base

    def settle_path(self, end: int) -> None:
        """
        Re-derive lengths along the chain ending at end.

        Used after a search that may have shortened an ancestor of end
        without revisiting end itself, leaving a stale length.
        """
        chain = [end]
        fr = self.from_
        n = end
        while fr[n] >= 0:
            n = int(fr[n])
            chain.append(n)
        for i, node in enumerate(reversed(chain), start=1):
            self.length[node] = i
        if len(chain) > self.max_len:
            self.max_len = len(chain)


def path_to(paths: Sequence[PathEnd], end: int) -> List[int]:
    """
    Decode a single path from a plain sequence of PathEnd.

    See FromList.path_to.
    """
    n = paths[end].length
    if n == 0:
        return []
    p = [0] * n
    while True:
        n -= 1
        p[n] = end
        if n == 0:
            return p
        end = paths[end].from_

"""Tests for DAG path searches."""

import math

import pytest

from shortpath import (
    Arc,
    BellmanFord,
    DAGPath,
    dag_max_dist_path,
    dag_min_dist_path,
    debug_context,
    identity_weight,
    topological_order,
)


@pytest.fixture
def dag():
    """Five node DAG; node 4 only leads into 3 and is not reachable from 0."""
    return [
        [Arc(1, 1.0), Arc(2, 4.0)],
        [Arc(2, 2.0), Arc(3, 6.0)],
        [Arc(3, 3.0)],
        [],
        [Arc(3, 1.0)],
    ]


@pytest.fixture
def tie_dag():
    """Node 4 is at distance 1 by 0, 1, 2, 4 and by 0, 3, 4."""
    return [
        [Arc(1, 0.0), Arc(3, 1.0)],
        [Arc(2, 0.0)],
        [Arc(4, 1.0)],
        [Arc(4, 0.0)],
        [],
    ]


class TestTopologicalOrder:
    """Tests for topological_order."""

    def test_order(self, dag):
        assert topological_order(dag) == [0, 4, 1, 2, 3]

    def test_arcs_point_forward(self, rng):
        n = 15
        g = [[] for _ in range(n)]
        for _ in range(40):
            a, b = sorted(int(x) for x in rng.choice(n, size=2, replace=False))
            g[b].append(Arc(a, 1.0))
        pos = {node: i for i, node in enumerate(topological_order(g))}
        assert len(pos) == n
        for fr, arcs in enumerate(g):
            for to, _ in arcs:
                assert pos[fr] < pos[to]

    def test_cycle_raises(self):
        with pytest.raises(ValueError, match="not a DAG"):
            topological_order([[Arc(1, 1.0)], [Arc(2, 1.0)], [Arc(0, 1.0)]])

    def test_loop_raises(self):
        with pytest.raises(ValueError, match="not a DAG"):
            topological_order([[Arc(0, 1.0)]])


class TestDAGMinDist:
    """Tests for shortest paths."""

    def test_min_path(self, dag):
        assert dag_min_dist_path(dag, 0, 3) == ([0, 1, 2, 3], 6.0)

    def test_negative_weights(self):
        g = [[Arc(1, -2.0), Arc(2, 1.0)], [Arc(2, -3.0)], []]
        assert dag_min_dist_path(g, 0, 2) == ([0, 1, 2], -5.0)

    def test_tie_break_fewer_nodes(self, tie_dag):
        """The fewer-node path found later replaces the longer one."""
        d = DAGPath(tie_dag, [0, 1, 2, 3, 4], identity_weight)
        assert d.path(0, 4)
        assert d.tree.path_to(4) == [0, 3, 4]
        assert d.dist[4] == 1.0

    def test_unreachable(self, dag):
        assert dag_min_dist_path(dag, 0, 4) == ([], math.inf)

    def test_not_a_dag(self):
        with pytest.raises(ValueError, match="not a DAG"):
            dag_min_dist_path([[Arc(1, 1.0)], [Arc(0, 1.0)]], 0, 1)

    def test_matches_bellman_ford(self, rng):
        """On random DAGs with negative arcs distances equal Bellman-Ford's."""
        n = 12
        for _ in range(10):
            g = [[] for _ in range(n)]
            for _ in range(30):
                a, b = sorted(int(x) for x in rng.choice(n, size=2, replace=False))
                g[a].append(Arc(b, int(rng.integers(-5, 10))))
            d = DAGPath(g, topological_order(g), identity_weight)
            b = BellmanFord(g, identity_weight)
            for start in (0, 5):
                assert d.all_paths(start) == b.all_paths(start)
                assert list(d.dist) == list(b.dist)


class TestDAGMaxDist:
    """Tests for longest paths."""

    def test_max_path(self, dag):
        """Two longest paths of distance 7; the first one found is kept."""
        assert dag_max_dist_path(dag, 0, 3) == ([0, 1, 3], 7.0)

    def test_negative_weights(self):
        g = [[Arc(1, -2.0), Arc(2, 1.0)], [Arc(2, -3.0)], []]
        assert dag_max_dist_path(g, 0, 2) == ([0, 2], 1.0)

    def test_tie_break_more_nodes(self, tie_dag):
        d = DAGPath(tie_dag, [0, 1, 2, 3, 4], identity_weight, longest=True)
        assert d.path(0, 4)
        assert d.tree.path_to(4) == [0, 1, 2, 4]

    def test_not_a_dag(self):
        with pytest.raises(ValueError, match="not a DAG"):
            dag_max_dist_path([[Arc(0, 1.0)]], 0, 0)


class TestDAGPathObject:
    """Tests for the search object."""

    def test_all_paths(self, dag):
        d = DAGPath(dag, topological_order(dag), identity_weight)
        assert d.all_paths(0) == 4
        assert not d.tree.reached(4)
        assert d.dist[4] == math.inf
        assert d.tree.max_len == 4

    def test_path_stops_at_end(self, dag):
        """Nodes after end in the ordering are not expanded."""
        d = DAGPath(dag, topological_order(dag), identity_weight)
        assert d.path(0, 1)
        assert d.tree.reached(2)
        assert not d.tree.reached(3)

    def test_start_is_end(self, dag):
        d = DAGPath(dag, topological_order(dag), identity_weight)
        assert d.path(2, 2)
        assert d.tree.path_to(2) == [2]
        assert d.dist[2] == 0.0

    def test_reuse_and_reset(self, dag):
        d = DAGPath(dag, topological_order(dag), identity_weight)
        d.all_paths(0)
        assert d.all_paths(4) == 2
        assert not d.tree.reached(0)
        assert d.tree.path_to(3) == [4, 3]
        d.reset()
        assert d.tree.path_to(3) == []

    def test_start_missing_from_ordering(self, dag):
        d = DAGPath(dag, [0, 1, 2, 3], identity_weight)
        with pytest.raises(ValueError):
            d.all_paths(4)

    def test_debug_mode_rejects_bad_ordering(self, dag):
        d = DAGPath(dag, [0, 4, 2, 1, 3], identity_weight)
        assert d.all_paths(0) == 4
        with debug_context(True):
            with pytest.raises(ValueError, match="backward"):
                d.all_paths(0)

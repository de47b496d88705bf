"""Tests for graph helpers."""

import pytest

from shortpath import (
    Arc,
    LabeledGraph,
    arc_count,
    identity_weight,
    negative_arc,
    path_distance,
    transpose,
    valid_to,
)


class TestLabeledGraph:
    """Tests for LabeledGraph."""

    def test_add_arc_adds_nodes(self):
        g = LabeledGraph()
        g.add_arc("a", "b", 7)
        g.add_arc("b", "c", 10)
        assert len(g) == 3
        assert g.names() == ["a", "b", "c"]
        assert g[0] == [Arc(1, 7)]
        assert g.index("c") == 2
        assert g.name(1) == "b"

    def test_add_node_idempotent(self):
        g = LabeledGraph()
        assert g.add_node("x") == 0
        assert g.add_node("y") == 1
        assert g.add_node("x") == 0
        assert len(g) == 2

    def test_undirected_adds_reverse(self):
        g = LabeledGraph(directed=False)
        g.add_arc("a", "b", 2.0)
        assert g[0] == [Arc(1, 2.0)]
        assert g[1] == [Arc(0, 2.0)]

    def test_undirected_loop_added_once(self):
        g = LabeledGraph(directed=False)
        g.add_arc("a", "a", 1.0)
        assert g[0] == [Arc(0, 1.0)]

    def test_parallel_arcs_kept(self):
        g = LabeledGraph()
        g.add_arc("a", "b", 1.0)
        g.add_arc("a", "b", 2.0)
        assert len(g[0]) == 2

    def test_index_missing_raises(self):
        g = LabeledGraph()
        g.add_node("a")
        with pytest.raises(KeyError):
            g.index("z")

    def test_adjacency_and_iteration(self):
        g = LabeledGraph()
        g.add_arc(1, 2, 0.5)
        assert g.adjacency is g.adjacency
        assert list(g) == [[Arc(1, 0.5)], []]


class TestGraphFunctions:
    """Tests for module level helpers."""

    def test_transpose(self):
        g = [[Arc(1, "x"), Arc(2, "y")], [Arc(2, "z")], []]
        t, m = transpose(g)
        assert m == 3
        assert t == [[], [Arc(0, "x")], [Arc(0, "y"), Arc(1, "z")]]

    def test_arc_count(self, wiki_graph):
        assert arc_count(wiki_graph) == 9
        assert arc_count([]) == 0

    def test_valid_to(self):
        assert valid_to([[Arc(1, 1.0)], [Arc(0, 1.0)]])
        assert not valid_to([[Arc(2, 1.0)], []])
        assert not valid_to([[Arc(-1, 1.0)]])

    def test_negative_arc(self):
        assert not negative_arc([[Arc(1, 0.0)], []], identity_weight)
        assert negative_arc([[Arc(1, -0.5)], []], identity_weight)

    def test_path_distance(self, h_graph):
        assert path_distance(h_graph, [0]) == 0.0
        assert path_distance(h_graph, [0, 2, 5]) == pytest.approx(1.1)

    def test_path_distance_parallel_arcs(self):
        g = [[Arc(1, 3.0), Arc(1, 1.0)], []]
        assert path_distance(g, [0, 1]) == 1.0

    def test_path_distance_errors(self, h_graph):
        with pytest.raises(ValueError, match="non-empty"):
            path_distance(h_graph, [])
        with pytest.raises(ValueError, match="No arc"):
            path_distance(h_graph, [0, 4])

"""Tests for heuristic validators."""

from shortpath import Arc, identity_weight, is_admissible, is_monotonic


class TestIsAdmissible:
    """Tests for is_admissible."""

    def test_admissible(self, h_graph, h4):
        ok, msg = is_admissible(h4.__getitem__, h_graph, identity_weight, 4)
        assert ok
        assert msg == ""

    def test_overestimate_rejected(self, h_graph, h4):
        """Shortest distance 1 -> 4 is 2.1, so h(1) = 2.5 is too large."""
        h = list(h4)
        h[1] = 2.5
        ok, msg = is_admissible(h.__getitem__, h_graph, identity_weight, 4)
        assert not ok
        assert "h(1)" in msg

    def test_nodes_without_path_ignored(self, h_graph, h4):
        """Node 5 cannot reach node 4, so any estimate there is accepted."""
        h = list(h4)
        h[5] = 1000.0
        ok, _ = is_admissible(h.__getitem__, h_graph, identity_weight, 4)
        assert ok

    def test_zero_heuristic_always_admissible(self, wiki_graph):
        for end in range(len(wiki_graph)):
            ok, _ = is_admissible(lambda n: 0.0, wiki_graph, identity_weight, end)
            assert ok


class TestIsMonotonic:
    """Tests for is_monotonic."""

    def test_monotonic(self, h_graph, h4):
        ok, msg = is_monotonic(h4.__getitem__, h_graph, identity_weight)
        assert ok
        assert msg == ""

    def test_admissible_but_not_monotonic(self, h_graph, h4):
        """h(2) = 1.5 is within the true 1.7 but breaks the arc 2 -> 5."""
        h = list(h4)
        h[2] = 1.5
        assert is_admissible(h.__getitem__, h_graph, identity_weight, 4)[0]
        ok, msg = is_monotonic(h.__getitem__, h_graph, identity_weight)
        assert not ok
        assert "h(2)" in msg
        assert "h(5)" in msg

    def test_labels_go_through_weight_function(self):
        g = [[Arc(1, "long")], []]
        weights = {"long": 10.0}
        h = [5.0, 0.0]
        assert is_monotonic(h.__getitem__, g, weights.__getitem__)[0]
        assert not is_monotonic(h.__getitem__, g, lambda label: 1.0)[0]

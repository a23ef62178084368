"""
Unit tests for analytics/layout.py.
"""
import math

import pytest

from conftest import crd, dep
from crdgraph.analytics.graph_builder import build_graph
from crdgraph.analytics.layout import compute_layout


def graph(ids, edges=()):
    return build_graph([crd(h) for h in ids], [dep(s, t) for s, t in edges])


class TestCircular:
    def test_positions_on_circle(self):
        pos = compute_layout(graph("abcd"), "circular")
        radius = 250 + 4 * 15
        assert pos["a"].x == pytest.approx(radius)
        assert pos["a"].y == pytest.approx(0)
        assert pos["b"].x == pytest.approx(0, abs=1e-9)
        assert pos["b"].y == pytest.approx(radius)
        for p in pos.values():
            assert math.hypot(p.x, p.y) == pytest.approx(radius)

    def test_radius_capped(self):
        ids = [f"n{i}" for i in range(20)]
        pos = compute_layout(build_graph([crd(h) for h in ids], []), "circular")
        assert math.hypot(pos["n0"].x, pos["n0"].y) == pytest.approx(400)

    def test_deterministic(self):
        g = graph("abc", [("a", "b")])
        assert compute_layout(g, "circular") == compute_layout(g, "circular")


class TestHierarchical:
    def test_levels_from_centrality(self):
        scores = {"a": 0.0, "b": 0.1, "c": 0.5, "d": 1.0}
        pos = compute_layout(graph("abcd"), "hierarchical", centrality=scores)
        assert (pos["a"].x, pos["a"].y) == (-100, 0)
        assert (pos["b"].x, pos["b"].y) == (100, 0)
        assert (pos["c"].x, pos["c"].y) == (0, 300)
        assert pos["d"].y == 600

    def test_uses_graph_centrality_by_default(self):
        g = graph("abc", [("a", "b"), ("a", "c"), ("b", "a"), ("c", "a")])
        pos = compute_layout(g, "hierarchical")
        # a: degree 4 / 4 = 1.0 -> top band; b, c: 0.5 -> band 2
        assert pos["a"].y == 4 * 150
        assert pos["b"].y == pos["c"].y == 2 * 150
        assert pos["b"].x != pos["c"].x


class TestForce:
    def test_every_node_finite(self):
        g = graph("abcde", [("a", "b"), ("b", "c"), ("d", "d")])
        pos = compute_layout(g, "force", seed=7)
        assert set(pos) == set(g.nodes)
        for p in pos.values():
            assert math.isfinite(p.x) and math.isfinite(p.y)

    def test_parallel_edges_and_self_loops(self):
        g = build_graph(
            [crd("a"), crd("b"), crd("c")],
            [dep("a", "b"), dep("a", "b", "strong"), dep("b", "b"), dep("c", "a")],
        )
        pos = compute_layout(g, "force", seed=5)
        assert set(pos) == {"a", "b", "c"}
        for p in pos.values():
            assert math.isfinite(p.x) and math.isfinite(p.y)

    def test_seeded_is_reproducible(self):
        g = graph("abcd", [("a", "b"), ("c", "d")])
        assert compute_layout(g, "force", seed=42) == compute_layout(g, "force", seed=42)

    def test_single_node(self):
        pos = compute_layout(graph("a"), "force", seed=1)
        assert set(pos) == {"a"}


class TestComputeLayout:
    @pytest.mark.parametrize("strategy", ["circular", "hierarchical", "force"])
    def test_empty_graph(self, strategy):
        assert compute_layout(graph(""), strategy) == {}

    @pytest.mark.parametrize("strategy", ["circular", "hierarchical", "force"])
    def test_exactly_the_graph_nodes(self, strategy):
        g = graph("abcdef", [("a", "b"), ("c", "d")])
        assert set(compute_layout(g, strategy, seed=3)) == set(g.nodes)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown layout strategy"):
            compute_layout(graph("a"), "spiral")

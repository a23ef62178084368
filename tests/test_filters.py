"""
Unit tests for analytics/filters.py.
"""
from conftest import crd, dep
from crdgraph.analytics.filters import filter_graph
from crdgraph.analytics.graph_builder import build_graph
from crdgraph.models.graph import FilterOptions


def assert_consistent(g):
    for e in g.edges:
        assert e.source in g.nodes and e.target in g.nodes


def xyz_graph():
    # degrees: x=1, y=3, z=2
    return build_graph(
        [crd("x"), crd("y"), crd("z")],
        [dep("x", "y"), dep("y", "z"), dep("z", "y")],
    )


def cert_graph():
    return build_graph(
        [
            crd("cert", kind="Certificate", group="cert-manager.io"),
            crd("issuer", kind="Issuer", group="cert-manager.io"),
            crd("widget", kind="Widget"),
        ],
        [
            dep("cert", "issuer", "strong"),
            dep("cert", "widget", "weak"),
            dep("widget", "issuer"),
        ],
    )


class TestDegreeFilter:
    def test_min_degree_excludes_low_degree_nodes(self):
        result = filter_graph(xyz_graph(), FilterOptions(min_degree=2))
        assert set(result.nodes) == {"y", "z"}
        assert [(e.source, e.target) for e in result.edges] == [("y", "z"), ("z", "y")]
        assert_consistent(result)

    def test_require_connected_bypasses_min_degree(self):
        result = filter_graph(xyz_graph(), FilterOptions(min_degree=2, require_connected=True))
        assert set(result.nodes) == {"x", "y", "z"}
        assert len(result.edges) == 3

    def test_negative_min_degree_is_clamped(self):
        result = filter_graph(xyz_graph(), min_degree=-4)
        assert set(result.nodes) == {"x", "y", "z"}

    def test_uninvolved_nodes_always_dropped(self):
        g = build_graph([crd("a"), crd("b"), crd("lonely")], [dep("a", "b")])
        assert set(filter_graph(g).nodes) == {"a", "b"}
        assert set(filter_graph(g, require_connected=True).nodes) == {"a", "b"}

    def test_keyword_overrides_options(self):
        opts = FilterOptions(min_degree=2)
        assert set(filter_graph(xyz_graph(), opts, min_degree=3).nodes) == {"y"}


class TestSearch:
    def test_matches_kind_and_group_case_insensitively(self):
        result = filter_graph(cert_graph(), search="CERT")
        assert set(result.nodes) == {"cert", "issuer"}
        assert [e.id for e in result.edges] == ["cert->issuer"]

    def test_unlabelled_core_nodes_have_no_group_to_match(self):
        assert filter_graph(cert_graph(), search="core").nodes == {}

    def test_explicit_core_label_matches(self):
        g = build_graph(
            [crd("pod", kind="PodPolicy", group="core"), crd("widget", kind="Widget")],
            [dep("pod", "widget")],
        )
        assert g.nodes["pod"].api_group is None
        result = filter_graph(g, search="Core", require_connected=True)
        assert set(result.nodes) == {"pod"}
        assert result.edges == ()

    def test_search_by_kind(self):
        result = filter_graph(cert_graph(), search="widg", require_connected=True)
        assert set(result.nodes) == {"widget"}
        assert result.edges == ()


class TestEdgeFilters:
    def test_severities(self):
        result = filter_graph(cert_graph(), severities=frozenset({"high"}))
        assert set(result.nodes) == {"cert", "issuer"}
        assert [e.severity for e in result.edges] == ["high"]

    def test_multiple_severities(self):
        result = filter_graph(cert_graph(), severities={"low", "medium"})
        assert [e.id for e in result.edges] == ["cert->widget", "widget->issuer"]

    def test_dependency_kinds(self):
        g = build_graph(
            [crd("a"), crd("b"), crd("c")],
            [dep("a", "b", referenceType="owner"), dep("b", "c", referenceType="schema-field")],
        )
        result = filter_graph(g, dependency_kinds=frozenset({"owner"}))
        assert set(result.nodes) == {"a", "b"}

    def test_order_preserved(self):
        result = filter_graph(cert_graph())
        assert [e.id for e in result.edges] == ["cert->issuer", "cert->widget", "widget->issuer"]


class TestEdgeCases:
    def test_empty_graph(self):
        result = filter_graph(build_graph([], []), FilterOptions(search="x", min_degree=3))
        assert result.nodes == {}
        assert result.edges == ()

    def test_input_graph_untouched(self):
        g = xyz_graph()
        filter_graph(g, min_degree=3)
        assert len(g.nodes) == 3
        assert len(g.edges) == 3

    def test_self_loop_counts_once(self):
        g = build_graph([crd("a"), crd("b")], [dep("a", "a"), dep("a", "b")])
        assert set(filter_graph(g, min_degree=2).nodes) == {"a"}
        assert [e.id for e in filter_graph(g, min_degree=2).edges] == ["a->a"]

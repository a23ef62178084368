"""
Graph view filtering — pure functions only.

The filtered graph keeps the canonical invariants: unique node ids, edges in
their original order, and no edge whose endpoint was filtered out.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Optional

from crdgraph.models.graph import CanonicalGraph, CRDNode, FilterOptions


def _matches_search(node: CRDNode, query: str) -> bool:
    return query in node.kind.lower() or query in node.group_label.lower()


def filter_graph(
    graph: CanonicalGraph,
    options: Optional[FilterOptions] = None,
    **overrides,
) -> CanonicalGraph:
    """
    Apply search, severity/kind and degree filters to a graph.

    options   — FilterOptions; keyword overrides replace individual fields,
                e.g. filter_graph(graph, min_degree=2)

    Steps:
      1. drop nodes whose kind/api group do not contain the search text
      2. restrict edges to the requested severities and dependency kinds
      3. keep nodes that touch a surviving edge and, unless require_connected
         is set, have at least min_degree surviving edges
      4. keep edges whose endpoints both survived
    """
    opts = replace(options or FilterOptions(), **overrides)
    min_degree = max(0, opts.min_degree or 0)

    candidates = graph.nodes
    if opts.search:
        query = opts.search.lower()
        candidates = {h: n for h, n in graph.nodes.items() if _matches_search(n, query)}

    edges = [
        e for e in graph.edges
        if (opts.severities is None or e.severity in opts.severities)
        and (opts.dependency_kinds is None or e.kind in opts.dependency_kinds)
    ]

    degree: Counter = Counter()
    for e in edges:
        degree[e.source] += 1
        if e.target != e.source:
            degree[e.target] += 1

    def keep(node_id: str) -> bool:
        # Counter keys are exactly the endpoints of surviving edges.
        if node_id not in degree:
            return False
        return opts.require_connected or degree[node_id] >= min_degree

    nodes = {h: n for h, n in candidates.items() if keep(h)}
    final_edges = tuple(e for e in edges if e.source in nodes and e.target in nodes)
    return CanonicalGraph(nodes=nodes, edges=final_edges)

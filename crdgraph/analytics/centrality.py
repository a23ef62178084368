"""
Degree centrality — pure functions only.
"""
from __future__ import annotations

from collections import Counter

from crdgraph.models.graph import CanonicalGraph


def degree_counts(graph: CanonicalGraph) -> tuple[Counter, Counter]:
    """
    Count in- and out-degree per node id in one pass over the edges.

    Returns (in_degree, out_degree). Nodes without edges are absent from the
    counters; a self-loop counts once in each.
    """
    in_degree: Counter = Counter()
    out_degree: Counter = Counter()
    for e in graph.edges:
        out_degree[e.source] += 1
        in_degree[e.target] += 1
    return in_degree, out_degree


def compute_centrality(graph: CanonicalGraph) -> dict[str, float]:
    """
    Normalized degree centrality: (in + out) / (2 * (n - 1)).

    Every node gets a score in [0, 1]; graphs with at most one node score 0.
    Parallel edges can push the raw ratio past 1, so scores are capped there.
    """
    n = len(graph.nodes)
    if n <= 1:
        return {node_id: 0.0 for node_id in graph.nodes}

    in_degree, out_degree = degree_counts(graph)
    max_possible = 2 * (n - 1)
    return {
        node_id: min(1.0, (in_degree[node_id] + out_degree[node_id]) / max_possible)
        for node_id in graph.nodes
    }


def top_central_nodes(graph: CanonicalGraph, centrality: dict[str, float], top_n: int = 3) -> list[dict]:
    """Rank the most central nodes; ties keep node order."""
    ranked = sorted(graph.nodes, key=lambda h: centrality.get(h, 0.0), reverse=True)[:top_n]
    return [
        {
            "id":    node_id,
            "kind":  graph.nodes[node_id].kind,
            "score": round(centrality.get(node_id, 0.0) * 100),
        }
        for node_id in ranked
    ]

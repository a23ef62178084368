"""
Aggregate dependency metrics — pure functions only.

Combines the canonical graph, centrality scores and detected cycles into a
single MetricsRecord: coupling hotspots, isolated CRDs, network density and
a bounded 0–100 complexity score.
"""
from __future__ import annotations

from typing import Sequence

from crdgraph.analytics.centrality import degree_counts
from crdgraph.models.graph import CanonicalGraph, Cycle, MetricsRecord

HIGH_COUPLING_THRESHOLD = 5

# Complexity score weights: coupling ratio, cycle ratio, density.
COUPLING_WEIGHT = 40
CYCLE_WEIGHT    = 30
DENSITY_WEIGHT  = 30


def network_density(graph: CanonicalGraph) -> float:
    """Actual edges over all possible directed edges, capped at 1."""
    n = len(graph.nodes)
    max_edges = n * (n - 1)
    if max_edges <= 0:
        return 0.0
    return min(1.0, len(graph.edges) / max_edges)


def complexity_score(n_nodes: int, n_high_coupling: int, n_cycles: int, density: float) -> float:
    if n_nodes == 0:
        return 0.0
    return min(
        100.0,
        (n_high_coupling / n_nodes) * COUPLING_WEIGHT
        + (n_cycles / n_nodes) * CYCLE_WEIGHT
        + density * DENSITY_WEIGHT,
    )


def aggregate_metrics(
    graph: CanonicalGraph,
    centrality: dict[str, float],
    cycles: Sequence[Cycle],
) -> MetricsRecord:
    """
    Build the metrics record for one graph.

    centrality — scores from compute_centrality over the same graph
    cycles     — output of find_cycles / find_all_cycles over the same graph
    """
    in_degree, out_degree = degree_counts(graph)

    high_coupling = frozenset(
        node_id for node_id in graph.nodes
        if in_degree[node_id] + out_degree[node_id] > HIGH_COUPLING_THRESHOLD
    )
    orphans = frozenset(
        node_id for node_id in graph.nodes
        if node_id not in in_degree and node_id not in out_degree
    )

    density = network_density(graph)

    # Mean over the nodes that appear in the out-degree map, i.e. those with
    # at least one outgoing dependency.
    avg_deps = sum(out_degree.values()) / len(out_degree) if out_degree else 0.0

    # Only cycles over this graph's nodes count toward the score.
    cycles = tuple(tuple(c) for c in cycles if all(h in graph.nodes for h in c))

    return MetricsRecord(
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges),
        high_coupling_node_ids=high_coupling,
        orphan_node_ids=orphans,
        cycles=cycles,
        network_density=density,
        avg_dependencies_per_node=avg_deps,
        complexity_score=complexity_score(len(graph.nodes), len(high_coupling), len(cycles), density),
        avg_centrality=sum(centrality.values()) / len(centrality) if centrality else 0.0,
    )

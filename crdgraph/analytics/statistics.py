"""
Graph view statistics — pure functions only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from crdgraph.analytics.centrality import compute_centrality, top_central_nodes
from crdgraph.models.graph import CanonicalGraph


@dataclass(frozen=True)
class GraphStatistics:
    total_crds: int = 0
    total_relations: int = 0
    high_severity: int = 0
    medium_severity: int = 0
    low_severity: int = 0
    avg_centrality: float = 0.0
    top_central_nodes: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_crds":        self.total_crds,
            "total_relations":   self.total_relations,
            "high_severity":     self.high_severity,
            "medium_severity":   self.medium_severity,
            "low_severity":      self.low_severity,
            "avg_centrality":    round(self.avg_centrality, 4),
            "top_central_nodes": self.top_central_nodes,
        }


def summarize_graph(
    graph: CanonicalGraph,
    centrality: Optional[dict[str, float]] = None,
    top_n: int = 3,
) -> GraphStatistics:
    """Severity histogram plus centrality summary for one (usually filtered) graph."""
    scores = centrality if centrality is not None else compute_centrality(graph)
    by_severity = {"high": 0, "medium": 0, "low": 0}
    for e in graph.edges:
        by_severity[e.severity] += 1

    return GraphStatistics(
        total_crds=len(graph.nodes),
        total_relations=len(graph.edges),
        high_severity=by_severity["high"],
        medium_severity=by_severity["medium"],
        low_severity=by_severity["low"],
        avg_centrality=sum(scores.values()) / len(scores) if scores else 0.0,
        top_central_nodes=top_central_nodes(graph, scores, top_n),
    )

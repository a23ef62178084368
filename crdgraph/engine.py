"""
Analysis pipelines over a full snapshot.

analyze_snapshot:  snapshot → canonical graph → centrality + cycles → metrics → insights
build_graph_view:  canonical graph → filtered graph → layout + highlight + statistics

Every call recomputes from scratch; nothing is cached between calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from crdgraph.analytics.centrality import compute_centrality
from crdgraph.analytics.cycles import detect_cycles
from crdgraph.analytics.filters import filter_graph
from crdgraph.analytics.graph_builder import build_graph_from_snapshot
from crdgraph.analytics.highlight import highlight_selection
from crdgraph.analytics.insights import generate_insights
from crdgraph.analytics.layout import compute_layout
from crdgraph.analytics.metrics import aggregate_metrics
from crdgraph.analytics.statistics import GraphStatistics, summarize_graph
from crdgraph.models.graph import (
    CanonicalGraph,
    Cycle,
    FilterOptions,
    Highlight,
    Insight,
    MetricsRecord,
    Position,
    Snapshot,
)
from crdgraph.observability.logging import get_logger

log = get_logger("engine")


@dataclass(frozen=True)
class AnalysisReport:
    graph: CanonicalGraph
    centrality: dict[str, float]
    cycles: list[Cycle]
    metrics: MetricsRecord
    insights: list[Insight]

    def to_dict(self) -> dict:
        return {
            "graph":      self.graph.to_dict(),
            "centrality": {h: round(s, 4) for h, s in self.centrality.items()},
            "metrics":    self.metrics.to_dict(),
            "insights":   [i.to_dict() for i in self.insights],
        }


@dataclass(frozen=True)
class GraphView:
    graph: CanonicalGraph
    centrality: dict[str, float]
    positions: dict[str, Position]
    highlight: Highlight
    statistics: GraphStatistics
    selected_node_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nodes": [
                {
                    **node.to_dict(),
                    "position":   self.positions[h].to_dict(),
                    "centrality": round(self.centrality.get(h, 0.0), 4),
                    "selected":   h == self.selected_node_id,
                    "is_source_of_selected": h in self.highlight.sources,
                    "is_target_of_selected": h in self.highlight.targets,
                }
                for h, node in self.graph.nodes.items()
            ],
            "edges":      [e.to_dict() for e in self.graph.edges],
            "highlight":  self.highlight.to_dict(),
            "statistics": self.statistics.to_dict(),
        }


def analyze_snapshot(
    snapshot: Union[Snapshot, dict],
    cycle_mode: str = "approximate",
    max_cycles: int = 1000,
) -> AnalysisReport:
    """Run the full metrics/insights pipeline over one snapshot."""
    graph      = build_graph_from_snapshot(snapshot)
    centrality = compute_centrality(graph)
    cycles     = detect_cycles(graph, cycle_mode, max_cycles)
    metrics    = aggregate_metrics(graph, centrality, cycles)
    insights   = generate_insights(metrics)

    log.info(
        "snapshot_analyzed",
        crds=metrics.total_nodes,
        relations=metrics.total_edges,
        cycles=len(cycles),
        cycle_mode=cycle_mode,
        complexity=round(metrics.complexity_score, 2),
        insights=len(insights),
    )
    return AnalysisReport(graph, centrality, cycles, metrics, insights)


def build_graph_view(
    graph: CanonicalGraph,
    options: Optional[FilterOptions] = None,
    layout: str = "circular",
    selected_node_id: Optional[str] = None,
    seed: Optional[int] = None,
) -> GraphView:
    """
    Filter a canonical graph and lay out what remains.

    Centrality is recomputed over the filtered graph, so scores and the
    hierarchical layout reflect the visible subgraph only.
    """
    filtered   = filter_graph(graph, options)
    centrality = compute_centrality(filtered)
    positions  = compute_layout(filtered, layout, centrality=centrality, seed=seed)
    highlight  = highlight_selection(filtered, selected_node_id)
    statistics = summarize_graph(filtered, centrality)

    log.debug(
        "graph_view_built",
        crds=len(filtered.nodes),
        relations=len(filtered.edges),
        hidden_crds=len(graph.nodes) - len(filtered.nodes),
        layout=layout,
        selected=selected_node_id,
    )
    return GraphView(filtered, centrality, positions, highlight, statistics, selected_node_id)

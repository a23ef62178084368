"""
Node placement for graph views — pure functions only.

Positions are abstract canvas units centred on the origin; the rendering
layer decides how to scale and draw them.
"""
from __future__ import annotations

import math
from typing import Optional

import networkx as nx

from crdgraph.analytics.centrality import compute_centrality
from crdgraph.analytics.graph_builder import to_networkx
from crdgraph.models.graph import CanonicalGraph, Position

LAYOUT_STRATEGIES = ("circular", "hierarchical", "force")

HIERARCHY_LEVELS = 5
COLUMN_WIDTH     = 200
ROW_HEIGHT       = 150
FORCE_SCALE      = 400


def circular_layout(graph: CanonicalGraph) -> dict[str, Position]:
    """Evenly spaced on one circle, in node order."""
    n = len(graph.nodes)
    radius = min(250 + n * 15, 400)
    positions = {}
    for i, node_id in enumerate(graph.nodes):
        angle = 2 * math.pi * i / n
        positions[node_id] = Position(x=math.cos(angle) * radius, y=math.sin(angle) * radius)
    return positions


def hierarchical_layout(
    graph: CanonicalGraph,
    centrality: Optional[dict[str, float]] = None,
) -> dict[str, Position]:
    """
    One row per centrality band.

    level = floor(score * 5), capped so a score of 1.0 shares the top band.
    Each row is centred on x = 0 with fixed column spacing.
    """
    scores = centrality if centrality is not None else compute_centrality(graph)

    rows: dict[int, list[str]] = {}
    for node_id in graph.nodes:
        level = min(int(scores.get(node_id, 0.0) * HIERARCHY_LEVELS), HIERARCHY_LEVELS - 1)
        rows.setdefault(level, []).append(node_id)

    positions = {}
    for level, members in rows.items():
        width = len(members)
        for i, node_id in enumerate(members):
            positions[node_id] = Position(
                x=(i - (width - 1) / 2) * COLUMN_WIDTH,
                y=level * ROW_HEIGHT,
            )
    return positions


def force_layout(graph: CanonicalGraph, seed: Optional[int] = None) -> dict[str, Position]:
    """Fruchterman-Reingold spring layout; reproducible when seeded."""
    if not graph.nodes:
        return {}
    G = nx.Graph(to_networkx(graph))
    G.remove_edges_from(list(nx.selfloop_edges(G)))
    coords = nx.spring_layout(G, seed=seed, scale=FORCE_SCALE)
    return {
        node_id: Position(x=float(coords[node_id][0]), y=float(coords[node_id][1]))
        for node_id in graph.nodes
    }


def compute_layout(
    graph: CanonicalGraph,
    strategy: str = "circular",
    centrality: Optional[dict[str, float]] = None,
    seed: Optional[int] = None,
) -> dict[str, Position]:
    """
    Assign a position to every node of graph (and to no others).

    strategy   — "circular" | "hierarchical" | "force"
    centrality — precomputed scores for the hierarchical layout
    seed       — random seed for the force layout
    """
    if strategy == "circular":
        return circular_layout(graph)
    if strategy == "hierarchical":
        return hierarchical_layout(graph, centrality)
    if strategy == "force":
        return force_layout(graph, seed)
    raise ValueError(f"Unknown layout strategy: {strategy!r}. Must be one of {LAYOUT_STRATEGIES}")

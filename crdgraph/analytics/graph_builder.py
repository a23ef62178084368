"""
Canonical CRD graph construction — pure functions only.

Turns a raw analysis snapshot (every resource the cluster analysis service
found) into the directed graph of CRD definitions and the dependencies
between them. This is the only place that reads node labels.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Union

import networkx as nx

from crdgraph.models.graph import (
    CRD_DEFINITION,
    CRDNode,
    CanonicalGraph,
    DependencyEdge,
    RawEdge,
    RawNode,
    Snapshot,
)
from crdgraph.observability.logging import get_logger

log = get_logger("graph_builder")

_STRENGTH_TO_SEVERITY = {"strong": "high", "weak": "low"}


def is_crd_node(node: RawNode) -> bool:
    return node.labels.get("dictionary.type") == CRD_DEFINITION


def crd_kind(node: RawNode) -> str:
    return node.labels.get("crd.kind") or node.kind or "Unknown"


def to_crd_node(node: RawNode) -> CRDNode:
    kind = crd_kind(node)
    group_label = node.labels.get("api.group") or ""
    api_group = group_label or "core"
    return CRDNode(
        id=node.id,
        kind=kind,
        api_group=None if api_group == "core" else api_group,
        version=node.labels.get("crd.version") or "v1",
        plural=(node.name or "").split(".")[0] or f"{kind.lower()}s",
        name=node.name,
        description=f"Custom Resource Definition for {kind}",
        group_label=group_label,
    )


def edge_severity(strength: str | None) -> str:
    return _STRENGTH_TO_SEVERITY.get(strength or "", "medium")


def to_dependency_edge(edge: RawEdge, index: int, nodes: Mapping[str, CRDNode]) -> DependencyEdge:
    meta = edge.metadata
    target_kind = nodes[edge.target].kind
    return DependencyEdge(
        id=edge.id or f"edge-{edge.source}-{edge.target}-{index}",
        source=edge.source,
        target=edge.target,
        kind=(meta and meta.referenceType) or edge.type or "reference",
        severity=edge_severity(edge.strength),
        path=meta.field if meta else None,
        description=(meta and meta.reason) or f"Dependency on {target_kind}",
    )


def build_graph(
    raw_nodes: Iterable[Union[RawNode, dict]],
    raw_edges: Iterable[Union[RawEdge, dict]],
) -> CanonicalGraph:
    """
    Build the canonical CRD graph from raw snapshot records.

    raw_nodes — RawNode models or dicts: {id, name?, kind?, labels}
    raw_edges — RawEdge models or dicts: {id?, source, target, type?, strength?, metadata?}

    Non-CRD nodes are excluded entirely. Edges whose endpoints are not both
    retained CRD nodes are dropped silently; a snapshot without CRDs yields
    an empty graph.
    """
    nodes: dict[str, CRDNode] = {}
    seen_raw = 0
    for raw in raw_nodes:
        seen_raw += 1
        node = raw if isinstance(raw, RawNode) else RawNode.model_validate(raw)
        if is_crd_node(node) and node.id not in nodes:
            nodes[node.id] = to_crd_node(node)

    edges: list[DependencyEdge] = []
    dropped = 0
    for index, raw in enumerate(raw_edges):
        edge = raw if isinstance(raw, RawEdge) else RawEdge.model_validate(raw)
        if edge.source in nodes and edge.target in nodes:
            edges.append(to_dependency_edge(edge, index, nodes))
        else:
            dropped += 1

    log.debug(
        "canonical_graph_built",
        raw_nodes=seen_raw,
        crd_nodes=len(nodes),
        edges=len(edges),
        dropped_edges=dropped,
    )
    return CanonicalGraph(nodes=nodes, edges=tuple(edges))


def build_graph_from_snapshot(snapshot: Union[Snapshot, dict]) -> CanonicalGraph:
    snap = snapshot if isinstance(snapshot, Snapshot) else Snapshot.model_validate(snapshot)
    return build_graph(snap.nodes, snap.edges)


def to_networkx(graph: CanonicalGraph) -> nx.MultiDiGraph:
    """Mirror the canonical graph into networkx, one graph edge per dependency."""
    G = nx.MultiDiGraph()
    for node_id, node in graph.nodes.items():
        G.add_node(node_id, kind=node.kind, api_group=node.api_group)
    for e in graph.edges:
        G.add_edge(e.source, e.target, id=e.id, kind=e.kind, severity=e.severity)
    return G

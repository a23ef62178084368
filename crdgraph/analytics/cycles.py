"""
Circular dependency detection — pure functions only.

find_cycles walks the graph depth-first and records a cycle whenever it
reaches a node already on the current path. Nodes are explored at most once,
so a cycle that is only reachable through an already-explored node is not
reported. find_all_cycles enumerates every elementary cycle instead.
"""
from __future__ import annotations

from itertools import islice

import networkx as nx

from crdgraph.analytics.graph_builder import to_networkx
from crdgraph.models.graph import CanonicalGraph, Cycle

CYCLE_MODES = ("approximate", "exhaustive")


def _successors(graph: CanonicalGraph) -> dict[str, list[str]]:
    """Out-adjacency in edge order, parallel edges collapsed."""
    out_adj: dict[str, dict[str, None]] = {node_id: {} for node_id in graph.nodes}
    for e in graph.edges:
        out_adj[e.source][e.target] = None
    return {node_id: list(targets) for node_id, targets in out_adj.items()}


def find_cycles(graph: CanonicalGraph) -> list[Cycle]:
    """
    Find circular dependency chains with a single DFS sweep.

    Returns cycles as closed id sequences (n0, ..., nk, n0) in discovery
    order. A self-loop is reported as (n, n).
    """
    out_adj = _successors(graph)
    visited: set[str] = set()
    cycles: list[Cycle] = []

    for root in graph.nodes:
        if root in visited:
            continue
        path = [root]
        on_path = {root}
        visited.add(root)
        stack = [iter(out_adj[root])]
        while stack:
            try:
                nxt = next(stack[-1])
            except StopIteration:
                stack.pop()
                on_path.discard(path.pop())
                continue
            if nxt in on_path:
                start = path.index(nxt)
                cycles.append(tuple(path[start:]) + (nxt,))
            elif nxt not in visited:
                visited.add(nxt)
                path.append(nxt)
                on_path.add(nxt)
                stack.append(iter(out_adj[nxt]))

    return cycles


def find_all_cycles(graph: CanonicalGraph, max_results: int = 1000) -> list[Cycle]:
    """
    Enumerate elementary cycles with Johnson's algorithm.

    Each cycle is rotated to start at its earliest node (by node order) and
    closed; results are sorted by length, then node order. Enumeration stops
    after max_results cycles.
    """
    G = nx.DiGraph(to_networkx(graph))

    order = {node_id: i for i, node_id in enumerate(graph.nodes)}
    results: list[Cycle] = []
    for raw in islice(nx.simple_cycles(G), max_results):
        start = min(range(len(raw)), key=lambda i: order[raw[i]])
        rotated = raw[start:] + raw[:start]
        results.append(tuple(rotated) + (rotated[0],))

    results.sort(key=lambda c: (len(c), [order[h] for h in c]))
    return results


def detect_cycles(graph: CanonicalGraph, mode: str = "approximate", max_results: int = 1000) -> list[Cycle]:
    """Dispatch to find_cycles ("approximate") or find_all_cycles ("exhaustive")."""
    if mode == "approximate":
        return find_cycles(graph)
    if mode == "exhaustive":
        return find_all_cycles(graph, max_results)
    raise ValueError(f"Unknown cycle mode: {mode!r}. Must be one of {CYCLE_MODES}")

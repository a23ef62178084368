"""
Selection highlighting — pure functions only.
"""
from __future__ import annotations

from typing import Optional

from crdgraph.models.graph import CanonicalGraph, Highlight


def highlight_selection(graph: CanonicalGraph, selected_node_id: Optional[str]) -> Highlight:
    """
    Split the neighbours of the selected node by edge direction.

    sources — nodes with an edge into the selection (they depend on it)
    targets — nodes the selection has an edge to (it depends on them)

    A node with edges both ways appears in both sets.
    """
    if selected_node_id is None:
        return Highlight()

    sources = frozenset(e.source for e in graph.edges if e.target == selected_node_id)
    targets = frozenset(e.target for e in graph.edges if e.source == selected_node_id)
    return Highlight(sources=sources, targets=targets)

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from crdgraph.analytics.graph_builder import build_graph_from_snapshot
from crdgraph.config import get_analysis_config
from crdgraph.engine import build_graph_view
from crdgraph.models.config import AnalysisConfig
from crdgraph.models.graph import FilterOptions
from crdgraph.snapshots import load_snapshot

router = APIRouter()


@router.get("/api/snapshots/{snapshot_id}/graph")
def snapshot_graph(
    snapshot_id:       str,
    search:            Optional[str] = None,
    severity:          Optional[list[Literal["low", "medium", "high"]]] = Query(None),
    dependency_kind:   Optional[list[str]] = Query(None),
    min_degree:        int = Query(1, ge=0),
    require_connected: bool = True,
    layout:            Optional[Literal["circular", "hierarchical", "force"]] = None,
    selected:          Optional[str] = None,
    config:            AnalysisConfig = Depends(get_analysis_config),
):
    """
    Filtered, laid-out CRD graph for the graph view.

    Defaults mirror the view's initial state: every connected CRD is shown.
    """
    graph = build_graph_from_snapshot(load_snapshot(snapshot_id))
    options = FilterOptions(
        search=search,
        severities=frozenset(severity) if severity else None,
        min_degree=min_degree,
        require_connected=require_connected,
        dependency_kinds=frozenset(dependency_kind) if dependency_kind else None,
    )
    view = build_graph_view(
        graph,
        options,
        layout=layout or config.layout,
        selected_node_id=selected,
        seed=config.force_seed,
    )
    return {"snapshot_id": snapshot_id, "total_crds": len(graph.nodes), **view.to_dict()}

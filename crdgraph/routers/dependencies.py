from typing import Literal, Optional

from fastapi import APIRouter, Query

from crdgraph.analytics.dependency_table import (
    build_dependency_rows,
    dependency_types,
    filter_dependency_rows,
    sort_dependency_rows,
    summarize_rows,
)
from crdgraph.analytics.graph_builder import build_graph_from_snapshot
from crdgraph.snapshots import load_snapshot

router = APIRouter()

SortField = Literal["source_crd", "source_api_group", "target_resource", "dependency_type", "severity"]


@router.get("/api/snapshots/{snapshot_id}/dependencies")
def snapshot_dependencies(
    snapshot_id:     str,
    search:          Optional[str] = None,
    severity:        Optional[Literal["low", "medium", "high"]] = None,
    dependency_type: Optional[str] = None,
    category:        Literal["all", "crd-to-crd", "schema"] = "all",
    sort:            SortField = "source_crd",
    order:           Literal["asc", "desc"] = "asc",
    limit:           int = Query(500, ge=1, le=5000),
):
    graph = build_graph_from_snapshot(load_snapshot(snapshot_id))
    rows  = build_dependency_rows(graph)
    shown = filter_dependency_rows(rows, search, severity, dependency_type, category)
    shown = sort_dependency_rows(shown, sort, descending=order == "desc")
    return {
        "snapshot_id": snapshot_id,
        "total":       len(rows),
        "matched":     len(shown),
        "types":       dependency_types(rows),
        "summary":     summarize_rows(rows),
        "rows":        [r.to_dict() for r in shown[:limit]],
    }

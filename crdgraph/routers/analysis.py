from fastapi import APIRouter, Depends

from crdgraph.config import get_analysis_config
from crdgraph.engine import analyze_snapshot
from crdgraph.models.config import AnalysisConfig
from crdgraph.models.graph import Snapshot
from crdgraph.snapshots import list_snapshots, load_snapshot

router = APIRouter()


@router.get("/api/snapshots")
def snapshots():
    return {"snapshots": list_snapshots()}


@router.get("/api/snapshots/{snapshot_id}/analysis")
def snapshot_analysis(snapshot_id: str, config: AnalysisConfig = Depends(get_analysis_config)):
    snapshot = load_snapshot(snapshot_id)
    report = analyze_snapshot(snapshot, config.cycle_mode, config.max_cycles)
    return {"snapshot_id": snapshot_id, **report.to_dict()}


@router.post("/api/analysis")
def analyze(snapshot: Snapshot, config: AnalysisConfig = Depends(get_analysis_config)):
    """Analyze a snapshot posted in the request body."""
    return analyze_snapshot(snapshot, config.cycle_mode, config.max_cycles).to_dict()

"""
Snapshot store: JSON exports under DATA_DIR, validated on read.
Analysis lives in crdgraph.analytics; this module only does file I/O.
"""
from __future__ import annotations

import re
from pathlib import Path

from fastapi import HTTPException
from pydantic import ValidationError

from crdgraph.config import load_config
from crdgraph.models.graph import Snapshot
from crdgraph.observability.logging import get_logger

log = get_logger("snapshots")

DATA_DIR = load_config().data_dir

_SNAPSHOT_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._@-]*$")


def snapshot_path(snapshot_id: str) -> Path:
    if not _SNAPSHOT_ID.match(snapshot_id):
        raise HTTPException(status_code=400, detail=f"Invalid snapshot id '{snapshot_id}'")
    return DATA_DIR / f"{snapshot_id}.json"


def _read_snapshot(path: Path) -> Snapshot:
    # Bytes, so invalid UTF-8 surfaces as a ValidationError rather than UnicodeDecodeError.
    return Snapshot.model_validate_json(path.read_bytes())


def load_snapshot(snapshot_id: str) -> Snapshot:
    path = snapshot_path(snapshot_id)
    if not path.exists():
        raise HTTPException(
            status_code=404,
            detail=f"Snapshot '{snapshot_id}' not found. Export the CRD analysis to {path}",
        )
    try:
        return _read_snapshot(path)
    except ValidationError as exc:
        log.warning("snapshot_invalid", snapshot_id=snapshot_id, errors=exc.error_count())
        raise HTTPException(
            status_code=422,
            detail=f"Snapshot '{snapshot_id}' is not a valid node/edge export: {exc.error_count()} errors",
        ) from exc
    except OSError as exc:
        log.warning("snapshot_unreadable", snapshot_id=snapshot_id, error=str(exc))
        raise HTTPException(
            status_code=422,
            detail=f"Snapshot '{snapshot_id}' could not be read",
        ) from exc


def list_snapshots() -> list[dict]:
    snapshots = []
    for path in sorted(DATA_DIR.glob("*.json")):
        try:
            snap = _read_snapshot(path)
        except (ValidationError, OSError):
            log.warning("snapshot_skipped", path=str(path))
            continue
        snapshots.append({
            "id":         path.stem,
            "node_count": len(snap.nodes),
            "edge_count": len(snap.edges),
            "metadata":   snap.metadata,
        })
    return snapshots

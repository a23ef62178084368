"""
Shared fixtures for the crdgraph test suite.

Everything here is synthetic: snapshots are built in memory or written to
pytest's tmp_path. No cluster or running server is required.
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from crdgraph import snapshots  # noqa: E402


def crd(node_id: str, kind: str | None = None, group: str | None = None, name: str | None = None) -> dict:
    """Raw CRD-definition node as exported by the analysis service."""
    labels = {"dictionary.type": "crd-definition", "crd.kind": kind or node_id.capitalize()}
    if group:
        labels["api.group"] = group
    return {"id": node_id, "name": name, "kind": "CustomResourceDefinition", "labels": labels}


def native(node_id: str, kind: str = "ConfigMap") -> dict:
    """Raw native-resource node (never part of the CRD graph)."""
    return {"id": node_id, "name": node_id, "kind": kind, "labels": {"dictionary.type": "native-resource"}}


def dep(source: str, target: str, strength: str | None = None, **metadata) -> dict:
    edge = {"id": f"{source}->{target}", "source": source, "target": target, "type": "reference"}
    if strength:
        edge["strength"] = strength
    if metadata:
        edge["metadata"] = metadata
    return edge


@pytest.fixture
def triangle_snapshot() -> dict:
    """Three CRDs in one cycle plus a native node the cycle points at."""
    return {
        "nodes": [crd("a"), crd("b"), crd("c"), native("cm")],
        "edges": [dep("a", "b"), dep("b", "c"), dep("c", "a"), dep("a", "cm", "strong")],
        "metadata": {"namespace": "default"},
    }


@pytest.fixture
def snapshot_dir(tmp_path, monkeypatch) -> Path:
    """Point the snapshot store at an empty temporary directory."""
    monkeypatch.setattr(snapshots, "DATA_DIR", tmp_path)
    return tmp_path


def write_snapshot(directory: Path, snapshot_id: str, snapshot: dict) -> Path:
    path = directory / f"{snapshot_id}.json"
    path.write_text(json.dumps(snapshot))
    return path

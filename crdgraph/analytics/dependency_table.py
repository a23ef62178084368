"""
Tabular dependency listing — pure functions only.

One row per dependency edge, with search, filters and sorting for the
dependencies table.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from crdgraph.models.graph import CanonicalGraph

SORTABLE_FIELDS = ("source_crd", "source_api_group", "target_resource", "dependency_type", "severity")
CATEGORIES = ("all", "crd-to-crd", "schema")


@dataclass(frozen=True)
class DependencyRow:
    id: str
    source_id: str
    target_id: str
    source_crd: str
    source_api_group: str
    target_resource: str
    dependency_type: str
    severity: str
    path: Optional[str]
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


def is_crd_to_crd(dependency_type: str) -> bool:
    t = (dependency_type or "").lower()
    return "crd" in t or t in ("reference", "dependency")


def is_schema_dependency(dependency_type: str) -> bool:
    t = (dependency_type or "").lower()
    return "schema" in t or "field" in t


def build_dependency_rows(graph: CanonicalGraph) -> list[DependencyRow]:
    rows = []
    for e in graph.edges:
        source = graph.nodes[e.source]
        rows.append(DependencyRow(
            id=e.id,
            source_id=e.source,
            target_id=e.target,
            source_crd=source.kind,
            source_api_group=source.api_group or "core",
            target_resource=graph.nodes[e.target].kind,
            dependency_type=e.kind,
            severity=e.severity,
            path=e.path,
            description=e.description,
        ))
    return rows


def filter_dependency_rows(
    rows: list[DependencyRow],
    search: Optional[str] = None,
    severity: Optional[str] = None,
    dependency_type: Optional[str] = None,
    category: str = "all",
) -> list[DependencyRow]:
    """
    Narrow table rows. None (or "all") disables a filter.

    search   — case-insensitive substring of source kind, api group, target,
               dependency type or description
    category — "crd-to-crd" | "schema" | "all"
    """
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}. Must be one of {CATEGORIES}")

    result = rows
    if search:
        q = search.lower()
        result = [
            r for r in result
            if q in r.source_crd.lower()
            or q in r.source_api_group.lower()
            or q in r.target_resource.lower()
            or q in r.dependency_type.lower()
            or q in r.description.lower()
        ]
    if severity and severity != "all":
        result = [r for r in result if r.severity == severity]
    if dependency_type and dependency_type != "all":
        result = [r for r in result if r.dependency_type == dependency_type]
    if category == "crd-to-crd":
        result = [r for r in result if is_crd_to_crd(r.dependency_type)]
    elif category == "schema":
        result = [r for r in result if is_schema_dependency(r.dependency_type)]
    return result


def sort_dependency_rows(
    rows: list[DependencyRow],
    field: str = "source_crd",
    descending: bool = False,
) -> list[DependencyRow]:
    """Stable, case-insensitive sort on one row field."""
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by {field!r}. Must be one of {SORTABLE_FIELDS}")
    return sorted(rows, key=lambda r: getattr(r, field).lower(), reverse=descending)


def dependency_types(rows: list[DependencyRow]) -> list[str]:
    return sorted({r.dependency_type for r in rows})


def summarize_rows(rows: list[DependencyRow]) -> dict:
    return {
        "total":         len(rows),
        "crd_to_crd":    sum(1 for r in rows if is_crd_to_crd(r.dependency_type)),
        "schema":        sum(1 for r in rows if is_schema_dependency(r.dependency_type)),
        "high_severity": sum(1 for r in rows if r.severity == "high"),
    }

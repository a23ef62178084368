"""
Data structures for the CRD dependency graph.

Raw records arrive from the cluster analysis service and are validated once
with pydantic. Everything the analytics produce is a frozen dataclass.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Severity = Literal["low", "medium", "high"]
InsightKind = Literal["warning", "info", "success"]

SEVERITIES: tuple[str, ...] = ("low", "medium", "high")

CRD_DEFINITION = "crd-definition"


# ── Raw snapshot records ─────────────────────────────────────────────────────

class RawNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id:     str
    name:   Optional[str] = None
    kind:   Optional[str] = None
    labels: dict[str, str] = Field(default_factory=dict)


class EdgeMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    referenceType: Optional[str] = None
    field:         Optional[str] = None
    reason:        Optional[str] = None


class RawEdge(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id:       Optional[str] = None
    source:   str
    target:   str
    type:     Optional[str] = None
    strength: Optional[str] = None
    metadata: Optional[EdgeMetadata] = None


class Snapshot(BaseModel):
    """A complete node/edge export from the cluster analysis service."""

    model_config = ConfigDict(extra="ignore")

    nodes:    list[RawNode] = Field(default_factory=list)
    edges:    list[RawEdge] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: Any) -> Any:
        return {} if value is None else value


# ── Canonical graph ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CRDNode:
    """A Custom Resource Definition in the canonical graph."""

    id: str
    kind: str
    api_group: Optional[str]  # None means the core group
    version: str = "v1"
    plural: str = ""
    name: Optional[str] = None
    description: str = ""
    group_label: str = ""  # raw api.group label, "" when unlabelled

    @property
    def display_key(self) -> str:
        """Human-readable group/kind label. Not unique; never index by it."""
        return f"{self.api_group or 'core'}/{self.kind}"

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "kind":        self.kind,
            "api_group":   self.api_group,
            "version":     self.version,
            "plural":      self.plural,
            "name":        self.name,
            "description": self.description,
            "display_key": self.display_key,
        }


@dataclass(frozen=True)
class DependencyEdge:
    """A directed dependency from one CRD to another."""

    id: str
    source: str
    target: str
    kind: str = "reference"
    severity: Severity = "medium"
    path: Optional[str] = None
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "source":      self.source,
            "target":      self.target,
            "kind":        self.kind,
            "severity":    self.severity,
            "path":        self.path,
            "description": self.description,
        }


@dataclass(frozen=True)
class CanonicalGraph:
    nodes: dict[str, CRDNode] = field(default_factory=dict)
    edges: tuple[DependencyEdge, ...] = ()

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }


Cycle = tuple[str, ...]


# ── Derived records ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MetricsRecord:
    total_nodes: int = 0
    total_edges: int = 0
    high_coupling_node_ids: frozenset[str] = frozenset()
    orphan_node_ids: frozenset[str] = frozenset()
    cycles: tuple[Cycle, ...] = ()
    network_density: float = 0.0
    avg_dependencies_per_node: float = 0.0
    complexity_score: float = 0.0
    avg_centrality: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_nodes":               self.total_nodes,
            "total_edges":               self.total_edges,
            "high_coupling_node_ids":    sorted(self.high_coupling_node_ids),
            "orphan_node_ids":           sorted(self.orphan_node_ids),
            "cycles":                    [list(c) for c in self.cycles],
            "network_density":           round(self.network_density, 4),
            "avg_dependencies_per_node": round(self.avg_dependencies_per_node, 4),
            "complexity_score":          round(self.complexity_score, 2),
            "avg_centrality":            round(self.avg_centrality, 4),
        }


@dataclass(frozen=True)
class Insight:
    kind: InsightKind
    title: str
    description: str
    severity_weight: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "kind":            self.kind,
            "title":           self.title,
            "description":     self.description,
            "severity_weight": self.severity_weight,
        }


@dataclass(frozen=True)
class FilterOptions:
    """Search and filter settings for a graph view. All fields are optional."""

    search: Optional[str] = None
    severities: Optional[frozenset[str]] = None
    min_degree: int = 0
    require_connected: bool = False
    dependency_kinds: Optional[frozenset[str]] = None


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Highlight:
    sources: frozenset[str] = frozenset()
    targets: frozenset[str] = frozenset()

    def to_dict(self) -> dict:
        return {"sources": sorted(self.sources), "targets": sorted(self.targets)}

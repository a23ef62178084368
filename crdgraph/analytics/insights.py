"""
Relationship insights — pure functions, iteration pattern.

Each check is an independent step: (state: dict) -> dict.
State carries the accumulated insights plus the metrics record.

To add a new insight: write a function matching the step signature and
append it to INSIGHT_STEPS. Emission order within a kind is preserved.
"""
from __future__ import annotations

from crdgraph.analytics.metrics import HIGH_COUPLING_THRESHOLD
from crdgraph.models.graph import Insight, MetricsRecord

HIGH_DENSITY      = 0.3
MODERATE_DENSITY  = 0.1
HIGH_COMPLEXITY   = 70
LOW_COMPLEXITY    = 30


# ── Individual insight steps ──────────────────────────────────────────────────
# Each receives state = {insights, metrics} and returns updated state.


def _check_high_coupling(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    count = len(metrics.high_coupling_node_ids)
    if count:
        state["insights"].append(Insight(
            kind="warning",
            title="High Coupling Detected",
            description=(
                f"{count} CRDs have more than {HIGH_COUPLING_THRESHOLD} dependencies, "
                "which may indicate tight coupling and reduced maintainability."
            ),
            severity_weight=count,
        ))
    return state


def _check_circular_dependencies(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    count = len(metrics.cycles)
    if count:
        state["insights"].append(Insight(
            kind="warning",
            title="Circular Dependencies Found",
            description=(
                f"{count} circular dependency chains detected. "
                "This can lead to installation and update issues."
            ),
            severity_weight=count,
        ))
    return state


def _check_isolated(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    count = len(metrics.orphan_node_ids)
    if count:
        state["insights"].append(Insight(
            kind="info",
            title="Isolated CRDs",
            description=(
                f"{count} CRDs have no relationships with other CRDs. "
                "These might be standalone resources or missing dependencies."
            ),
        ))
    return state


def _check_density(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    density = metrics.network_density
    pct = f"{density * 100:.1f}%"
    if density > HIGH_DENSITY:
        state["insights"].append(Insight(
            kind="warning",
            title="High Network Density",
            description=(
                f"Network density of {pct} indicates very interconnected CRDs. "
                "Consider decomposing dependencies."
            ),
            severity_weight=round(density * 10),
        ))
    elif density > MODERATE_DENSITY:
        state["insights"].append(Insight(
            kind="info",
            title="Moderate Coupling",
            description=f"Network density of {pct} shows moderate interconnection between CRDs.",
        ))
    return state


def _check_complexity(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    score = metrics.complexity_score
    if score > HIGH_COMPLEXITY:
        state["insights"].append(Insight(
            kind="warning",
            title="High System Complexity",
            description=(
                "The CRD dependency network shows high complexity. "
                "Consider refactoring to reduce interdependencies."
            ),
            severity_weight=round(score / 10),
        ))
    elif score < LOW_COMPLEXITY:
        state["insights"].append(Insight(
            kind="success",
            title="Well-Structured Dependencies",
            description=(
                "The CRD dependency structure shows good separation of concerns "
                "with manageable complexity."
            ),
        ))
    return state


def _check_acyclic(state: dict) -> dict:
    metrics: MetricsRecord = state["metrics"]
    if metrics.total_edges > 0 and not metrics.cycles:
        state["insights"].append(Insight(
            kind="success",
            title="No Circular Dependencies",
            description="All CRD relationships are properly structured without circular dependencies.",
        ))
    return state


# ── Pipeline ──────────────────────────────────────────────────────────────────

INSIGHT_STEPS = [
    _check_high_coupling,
    _check_circular_dependencies,
    _check_isolated,
    _check_density,
    _check_complexity,
    _check_acyclic,
]

_KIND_ORDER = {"warning": 0, "info": 1, "success": 2}


def generate_insights(metrics: MetricsRecord) -> list[Insight]:
    """
    Run all insight checks and order the result warning → info → success.

    An empty graph has nothing to say, so it yields no insights.
    """
    if metrics.total_nodes == 0:
        return []

    state: dict = {"insights": [], "metrics": metrics}
    for step in INSIGHT_STEPS:
        state = step(state)

    return sorted(state["insights"], key=lambda i: _KIND_ORDER[i.kind])

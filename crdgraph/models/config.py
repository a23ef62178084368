"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class AnalysisConfig:
    """Defaults applied when a request leaves an analysis option unset."""

    cycle_mode: str = "approximate"
    max_cycles: int = 1000
    layout: str = "circular"
    force_seed: int = 42


@dataclass
class APIConfig:
    """REST API configuration."""

    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class CRDGraphConfig:
    """Top-level configuration."""

    data_dir: Path = Path("data")
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)

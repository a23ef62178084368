"""Configuration loading from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from crdgraph.analytics.cycles import CYCLE_MODES
from crdgraph.analytics.layout import LAYOUT_STRATEGIES
from crdgraph.models.config import AnalysisConfig, APIConfig, CRDGraphConfig, LogConfig

LOG_FORMATS = ("json", "console")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"CRDGRAPH_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _env_list(key: str, default: str) -> list[str]:
    return [item.strip() for item in _env(key, default).split(",") if item.strip()]


def _validate_choice(name: str, value: str, choices: tuple[str, ...]) -> str:
    value = value.lower()
    if value not in choices:
        raise ValueError(f"Invalid {name}: {value}. Must be one of {choices}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> CRDGraphConfig:
    """Load configuration from CRDGRAPH_* environment variables."""
    return CRDGraphConfig(
        data_dir=Path(_env("DATA_DIR", "data")),
        analysis=AnalysisConfig(
            cycle_mode=_validate_choice("cycle mode", _env("CYCLE_MODE", "approximate"), CYCLE_MODES),
            max_cycles=_env_int("MAX_CYCLES", 1000, min_val=1, max_val=100_000),
            layout=_validate_choice("layout", _env("LAYOUT", "circular"), LAYOUT_STRATEGIES),
            force_seed=_env_int("FORCE_SEED", 42),
        ),
        api=APIConfig(
            cors_origins=_env_list("CORS_ORIGINS", "*"),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_choice("log format", _env("LOG_FORMAT", "json"), LOG_FORMATS),
        ),
    )


def get_analysis_config() -> AnalysisConfig:
    """FastAPI dependency: analysis defaults for the current environment."""
    return load_config().analysis

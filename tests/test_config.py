"""
Tests for config.py: CRDGRAPH_* environment variables.
"""
from pathlib import Path

import pytest

from crdgraph.config import load_config

ENV_KEYS = [
    "DATA_DIR", "CYCLE_MODE", "MAX_CYCLES", "LAYOUT", "FORCE_SEED",
    "CORS_ORIGINS", "LOG_LEVEL", "LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(f"CRDGRAPH_{key}", raising=False)


class TestDefaults:
    def test_defaults(self):
        config = load_config()
        assert config.data_dir == Path("data")
        assert config.analysis.cycle_mode == "approximate"
        assert config.analysis.max_cycles == 1000
        assert config.analysis.layout == "circular"
        assert config.analysis.force_seed == 42
        assert config.api.cors_origins == ["*"]
        assert config.log.level == "info"
        assert config.log.format == "json"


class TestOverrides:
    def test_values_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CRDGRAPH_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CRDGRAPH_CYCLE_MODE", "Exhaustive")
        monkeypatch.setenv("CRDGRAPH_LAYOUT", "force")
        monkeypatch.setenv("CRDGRAPH_FORCE_SEED", "7")
        monkeypatch.setenv("CRDGRAPH_CORS_ORIGINS", "http://localhost:5173, https://crd.example.com,")
        monkeypatch.setenv("CRDGRAPH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CRDGRAPH_LOG_FORMAT", "console")
        config = load_config()
        assert config.data_dir == tmp_path
        assert config.analysis.cycle_mode == "exhaustive"
        assert config.analysis.layout == "force"
        assert config.analysis.force_seed == 7
        assert config.api.cors_origins == ["http://localhost:5173", "https://crd.example.com"]
        assert config.log.level == "debug"
        assert config.log.format == "console"

    @pytest.mark.parametrize("raw,expected", [("0", 1), ("50", 50), ("999999", 100_000)])
    def test_max_cycles_clamped(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CRDGRAPH_MAX_CYCLES", raw)
        assert load_config().analysis.max_cycles == expected


class TestInvalid:
    @pytest.mark.parametrize("key,value", [
        ("CYCLE_MODE", "fast"),
        ("LAYOUT", "spiral"),
        ("LOG_LEVEL", "verbose"),
        ("LOG_FORMAT", "xml"),
        ("MAX_CYCLES", "lots"),
    ])
    def test_rejected(self, monkeypatch, key, value):
        monkeypatch.setenv(f"CRDGRAPH_{key}", value)
        with pytest.raises(ValueError):
            load_config()

"""Pytest fixtures for TestApp tests."""

import logging
import sys
from pathlib import Path

import pytest
import yaml

# Ensure project root is in path for testapp/servers imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def project_root() -> Path:
    return _project_root()


@pytest.fixture
def config_path(project_root: Path) -> Path:
    """Path to config file. Prefers config.yaml, falls back to example."""
    cfg = project_root / "config" / "config.yaml"
    if cfg.exists():
        return cfg
    return project_root / "config" / "config.yaml.example"


@pytest.fixture
def config(config_path: Path) -> dict:
    """Load config dict from YAML."""
    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@pytest.fixture
def fast_config() -> dict:
    """Config with short delays so route and startup tests stay quick."""
    return {
        "startup": {"warmup_seconds": 0},
        "routes": {"slow_delay_seconds": 0.3},
    }


@pytest.fixture
def restore_root_logging():
    """Put root handlers and level back after tests that call setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_testapp_env(monkeypatch):
    for name in ("TESTAPP_CONFIG", "TESTAPP_HOST", "TESTAPP_PORT"):
        monkeypatch.delenv(name, raising=False)

"""Tests for scripts/run_server.py main(): config read failures and a normal start."""

import importlib.util
import logging
import sys

import pytest

import servers.app as server_app


@pytest.fixture
def run_server_script(project_root, monkeypatch):
    """Load scripts/run_server.py as a module; it chdirs to the project root on import."""
    monkeypatch.chdir(project_root)
    monkeypatch.setattr(sys, "path", list(sys.path))
    spec = importlib.util.spec_from_file_location("run_server_script", project_root / "scripts" / "run_server.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def started(monkeypatch):
    calls = []
    monkeypatch.setattr(server_app, "run_server", calls.append)
    return calls


def test_invalid_yaml_exits_1(run_server_script, started, tmp_path, monkeypatch, capsys):
    p = tmp_path / "config.yaml"
    p.write_text("server: [\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["run_server.py", str(p)])
    assert run_server_script.main() == 1
    assert "Failed to read config" in capsys.readouterr().err
    assert started == []


def test_non_mapping_config_exits_1(run_server_script, started, tmp_path, monkeypatch, capsys):
    p = tmp_path / "config.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["run_server.py", str(p)])
    assert run_server_script.main() == 1
    err = capsys.readouterr().err
    assert "Failed to read config" in err
    assert "top level must be a mapping" in err
    assert started == []


def test_normal_start_with_debug(run_server_script, started, tmp_path, monkeypatch, restore_root_logging):
    p = tmp_path / "config.yaml"
    p.write_text("server:\n  port: 7001\nlogging:\n  event_log:\n    enabled: false\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["run_server.py", str(p), "--debug"])
    assert run_server_script.main() == 0
    assert len(started) == 1
    assert started[0]["server"]["port"] == 7001
    assert restore_root_logging.level == logging.DEBUG


def test_no_arguments_uses_default_config(run_server_script, started, monkeypatch, restore_root_logging):
    monkeypatch.setattr(sys, "argv", ["run_server.py"])
    assert run_server_script.main() == 0
    assert len(started) == 1
    assert restore_root_logging.level == logging.INFO

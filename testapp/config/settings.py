"""Config for TestApp: server bind, startup warm-up, route timings, logging sinks.

Defaults: loaded from config/config.yaml.example (single source of truth, no code-level defaults).
Env overrides: TESTAPP_HOST, TESTAPP_PORT. The warm-up is read from the config file only.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Lazy-loaded example config (single source of truth for defaults)
_EXAMPLE_CONFIG: Optional[Dict[str, Any]] = None

_ENV_OVERRIDES = (
    ("TESTAPP_HOST", "server", "host"),
    ("TESTAPP_PORT", "server", "port"),
)


def _load_example_config() -> Dict[str, Any]:
    """Load config.yaml.example as defaults. No code-level defaults."""
    global _EXAMPLE_CONFIG
    if _EXAMPLE_CONFIG is None:
        path = _PROJECT_ROOT / "config" / "config.yaml.example"
        with open(path, encoding="utf-8") as f:
            _EXAMPLE_CONFIG = yaml.safe_load(f) or {}
    return _EXAMPLE_CONFIG


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base. Override values take precedence."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _merged_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge config with example so missing keys come from config file."""
    return _deep_merge(_load_example_config(), cfg)


def _section(cfg: Dict[str, Any], section: str) -> Dict[str, Any]:
    s = cfg.get(section)
    return s if isinstance(s, dict) else {}


def _non_negative(value: Any, name: str) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if out < 0:
        raise ValueError(f"{name} must be >= 0, got {out}")
    return out


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of config with TESTAPP_* environment variables applied."""
    out = dict(config)
    for env_name, section, key in _ENV_OVERRIDES:
        value = os.environ.get(env_name)
        if value is None or value == "":
            continue
        out[section] = {**_section(out, section), key: value}
    return out


def read_config(config_path: Optional[str] = None) -> Tuple[dict, str]:
    """Load YAML config with env overrides. Returns (config, resolved_path)."""
    config_path = config_path or os.environ.get("TESTAPP_CONFIG") or str(_PROJECT_ROOT / "config" / "config.yaml")
    if not Path(config_path).exists():
        config_path = str(_PROJECT_ROOT / "config" / "config.yaml.example")
    config_path = str(Path(config_path).resolve())
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: top level must be a mapping, got {type(config).__name__}")
    return apply_env_overrides(config), config_path


def get_server_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return listener config (host, port, log_level) for uvicorn."""
    s = _section(_merged_config(config or {}), "server")
    try:
        port = int(s.get("port"))
    except (TypeError, ValueError):
        raise ValueError(f"server.port must be an integer, got {s.get('port')!r}") from None
    host = s.get("host")
    if not isinstance(host, str) or not host.strip():
        raise ValueError(f"server.host must be a non-empty string, got {host!r}")
    return {
        "host": host.strip(),
        "port": port,
        "log_level": str(s.get("log_level") or "info").lower(),
    }


def get_startup_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return startup config: warmup_seconds slept before the listener starts."""
    s = _section(_merged_config(config or {}), "startup")
    return {"warmup_seconds": _non_negative(s.get("warmup_seconds"), "startup.warmup_seconds")}


def get_routes_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return per-route timings (slow_delay_seconds for GET /slow)."""
    s = _section(_merged_config(config or {}), "routes")
    return {"slow_delay_seconds": _non_negative(s.get("slow_delay_seconds"), "routes.slow_delay_seconds")}


def get_logging_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return logging config: root level plus the OS event-log sink.

    event_log.enabled is one of true, false, "auto" (Windows only).
    """
    s = _section(_merged_config(config or {}), "logging")
    ev = s.get("event_log") if isinstance(s.get("event_log"), dict) else {}
    enabled = ev.get("enabled")
    if isinstance(enabled, str):
        enabled = enabled.strip().lower()
        if enabled in ("true", "yes", "on"):
            enabled = True
        elif enabled in ("false", "no", "off"):
            enabled = False
        elif enabled != "auto":
            raise ValueError(f"logging.event_log.enabled must be true, false or auto, got {ev.get('enabled')!r}")
    elif not isinstance(enabled, bool):
        raise ValueError(f"logging.event_log.enabled must be true, false or auto, got {enabled!r}")
    return {
        "level": str(s.get("level") or "INFO").upper(),
        "event_log": {
            "enabled": enabled,
            "source_name": ev.get("source_name"),
            "log_name": ev.get("log_name"),
        },
    }

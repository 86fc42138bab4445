"""Logging sinks for TestApp: colored console on stdout plus the OS event log where available."""

import logging
import logging.handlers
import sys
from typing import Any, Dict, Optional

from testapp.config.settings import get_logging_config

logger = logging.getLogger(__name__)

# ANSI color codes
_RESET = "\033[0m"
_BOLD = "\033[1m"
_GRAY = "\033[90m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_CYAN = "\033[36m"

_LEVEL_COLORS = {
    logging.DEBUG: _GRAY,
    logging.INFO: _CYAN,
    logging.WARNING: _YELLOW,
    logging.ERROR: _RED + _BOLD,
    logging.CRITICAL: _RED + _BOLD,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors per log level."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno, _RESET)
        # Copy so other handlers (event log) see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}[{record.levelname}]{_RESET}"
        return super().format(record)


def format_kv(prefix: str, **fields: Any) -> str:
    """Structured message: 'prefix k=v ...' with keys sorted."""
    return prefix + "".join(f" {k}={v}" for k, v in sorted(fields.items()))


def _event_log_wanted(enabled: Any) -> bool:
    if enabled == "auto":
        return sys.platform == "win32"
    return bool(enabled)


def build_event_log_handler(event_log_cfg: Dict[str, Any]) -> Optional[logging.Handler]:
    """NTEventLogHandler for source_name/log_name, or None when not enabled or not on Windows."""
    if not _event_log_wanted(event_log_cfg.get("enabled")):
        return None
    if sys.platform != "win32":
        logger.warning(
            "Event log sink requested but not available on %s; console sink only", sys.platform
        )
        return None
    handler = logging.handlers.NTEventLogHandler(
        event_log_cfg.get("source_name") or "TestApp",
        logtype=event_log_cfg.get("log_name") or "Application",
    )
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def setup_logging(config: Optional[Dict[str, Any]] = None, debug: bool = False) -> None:
    """Replace root handlers with the console sink (and event log sink when configured)."""
    log_cfg = get_logging_config(config)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logging.root.handlers.clear()
    logging.root.addHandler(handler)
    level = logging.DEBUG if debug else logging.getLevelName(log_cfg["level"])
    if not isinstance(level, int):
        level = logging.INFO
    logging.root.setLevel(level)

    ev_handler = build_event_log_handler(log_cfg["event_log"])
    if ev_handler is not None:
        logging.root.addHandler(ev_handler)
        logger.debug(
            "Event log sink: source=%s log=%s",
            log_cfg["event_log"].get("source_name"),
            log_cfg["event_log"].get("log_name"),
        )

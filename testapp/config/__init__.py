"""YAML config loading and section getters."""

from testapp.config.settings import (
    get_logging_config,
    get_routes_config,
    get_server_config,
    get_startup_config,
    read_config,
)

__all__ = [
    "get_logging_config",
    "get_routes_config",
    "get_server_config",
    "get_startup_config",
    "read_config",
]

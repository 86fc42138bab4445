#!/usr/bin/env python3
"""Entry point: run TestApp. Sleeps for startup.warmup_seconds, then serves GET /, /simulate50037, /slow.

Usage: run_server.py [config_path] [--debug]"""

import os
import sys

# Project root: always resolve relative to script location, not cwd
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)
os.chdir(_PROJECT_ROOT)  # Ensure config paths resolve from project root


def main() -> int:
    import yaml

    from testapp.config.settings import read_config
    from testapp.core.logging_utils import setup_logging

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    config_path = args[0] if args else None
    if config_path and not os.path.isabs(config_path):
        config_path = os.path.join(_PROJECT_ROOT, config_path)

    try:
        config, _ = read_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to read config: {e}", file=sys.stderr)
        return 1

    setup_logging(config, debug="--debug" in sys.argv)

    from servers.app import run_server
    run_server(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())

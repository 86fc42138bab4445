"""Logging sinks and startup warm-up."""

from testapp.core.logging_utils import setup_logging
from testapp.core.startup import warm_up

__all__ = ["setup_logging", "warm_up"]

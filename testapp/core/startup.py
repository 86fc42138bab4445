"""Blocking warm-up delay run before the HTTP listener starts."""

import logging
import time
from typing import Callable

from testapp.core.logging_utils import format_kv

logger = logging.getLogger(__name__)


def warm_up(seconds: float, sleep: Callable[[float], None] = time.sleep) -> float:
    """Block the calling thread for `seconds`. Returns the elapsed time. No retry, no cancellation."""
    if seconds < 0:
        raise ValueError(f"warm-up must be >= 0, got {seconds}")
    if seconds == 0:
        return 0.0
    logger.warning(format_kv("startup_delay", phase="begin", seconds=seconds))
    start = time.monotonic()
    sleep(seconds)
    elapsed = time.monotonic() - start
    logger.info(format_kv("startup_delay", phase="end", elapsed_s=round(elapsed, 3)))
    return elapsed

"""FastAPI app for GET /, GET /simulate50037, GET /slow.

Fault-injection target for log monitors: a slow process start plus a fake IIS/ANCM 500.37 log line."""

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from testapp.config.settings import get_routes_config, get_server_config, get_startup_config
from testapp.core.logging_utils import format_kv
from testapp.core.startup import warm_up

logger = logging.getLogger(__name__)

GREETING = "Hello from TestApp!!"
SIMULATED_50037_BODY = "Simulated 500.37 logged."
# Mirrors the headline and detail of the IIS error page
SIMULATED_50037_LOG = (
    "HTTP Error 500.37 - ANCM Failed to Start Within Startup Time Limit. "
    "Default timeout is 120 seconds. (POC log)"
)
SLOW_BODY = "Done after 5s."


def create_app(config: Optional[Dict[str, Any]] = None) -> FastAPI:
    """Build FastAPI app with the three demo routes. Handlers hold no shared state."""
    slow_delay = get_routes_config(config)["slow_delay_seconds"]
    app = FastAPI(title="TestApp", description="Slow-start and 500.37 simulation for log monitoring")

    @app.get("/", response_class=PlainTextResponse)
    def get_root() -> str:
        return GREETING

    @app.get("/simulate50037", response_class=PlainTextResponse)
    def get_simulate_50037() -> PlainTextResponse:
        """Log the 500.37 headline at ERROR and answer 500. Always, regardless of input."""
        logger.error(SIMULATED_50037_LOG)
        return PlainTextResponse(SIMULATED_50037_BODY, status_code=500)

    @app.get("/slow", response_class=PlainTextResponse)
    async def get_slow() -> str:
        """Wait slow_delay seconds on the event loop; other requests keep being served."""
        await asyncio.sleep(slow_delay)
        return SLOW_BODY

    return app


def run_server(config: dict) -> None:
    """Sleep for the warm-up delay, then serve on host/port from config. Bind errors propagate from uvicorn."""
    import uvicorn

    server_cfg = get_server_config(config)
    warmup = get_startup_config(config)["warmup_seconds"]
    app = create_app(config)

    warm_up(warmup)

    logger.info(format_kv("listener_start", host=server_cfg["host"], port=server_cfg["port"]))
    uvicorn.run(app, host=server_cfg["host"], port=server_cfg["port"], log_level=server_cfg["log_level"])
    logger.info(format_kv("listener_stop", host=server_cfg["host"], port=server_cfg["port"]))

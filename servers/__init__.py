"""HTTP server: FastAPI app and uvicorn runner."""

from servers.app import create_app, run_server

__all__ = ["create_app", "run_server"]

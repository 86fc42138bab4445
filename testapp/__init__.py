"""TestApp: slow-start and HTTP 500.37 simulation web app for log-monitor validation."""

__version__ = "0.1.0"

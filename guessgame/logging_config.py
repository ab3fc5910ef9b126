"""
Logging setup.

`setup_logging` routes the `guessgame` loggers to stderr; it is all `play` needs.
`uvicorn_log_config` is what `serve` hands to uvicorn: the same format for
uvicorn's own loggers, and no access log lines for health checks.
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HEALTH_PATH = "/api/v1/health"


class HealthCheckFilter(logging.Filter):
    """Drop access log records for one request path."""

    def __init__(self, path: str = HEALTH_PATH):
        super().__init__()
        self.path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return f" {self.path} " not in record.getMessage()


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("guessgame")
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def uvicorn_log_config(level: str = "INFO", health_path: str = HEALTH_PATH) -> dict[str, Any]:
    """dictConfig for uvicorn that leaves the package logger alone."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "skip_health": {"()": HealthCheckFilter, "path": health_path},
        },
        "formatters": {
            "engine": {"format": LOG_FORMAT},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "engine",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "engine",
                "filters": ["skip_health"],
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["stderr"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
        },
    }

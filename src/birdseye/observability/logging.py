"""
birdseye.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` for JSON logs on stdout.
- Provide bound loggers for the service layers and quiet stdlib-backed loggers for the
  fleet core, which must stay silent unless an application opts in.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

FLEET_LOGGER = "birdseye.fleet"


def configure_logging(*, service_name: str, level: str, fleet_level: str | None = None) -> None:
    """
    Route structlog through stdlib logging and render one JSON object per event.

    `fleet_level` sets the `birdseye.fleet` logger independently, e.g. DEBUG to trace
    individual registry mutations while the rest of the service logs at INFO.
    """

    root_level = _level(level)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level)
    logging.getLogger(FLEET_LOGGER).setLevel(_level(fleet_level) if fleet_level else root_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def get_stdlib_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Bound logger over `logging.getLogger(name)`.

    Output is decided by stdlib levels/handlers alone, so nothing is written before
    `configure_logging` runs (stdlib's default WARNING threshold drops debug events).
    """

    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# --- Module Notes -----------------------------------------------------------
# Request-scoped metadata is bound via contextvars in `observability.middleware`.

"""Structured JSON logging for the proxy."""
from __future__ import annotations

import logging

import structlog


def _service_tagger(service: str):
    def add_service(logger, method_name, event_dict):
        event_dict.setdefault("service", service)
        return event_dict

    return add_service


def setup_logging(level: int | str = logging.INFO, service: str = "zipproxy") -> None:
    if isinstance(level, str):
        level = level.upper()
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            timestamper,
            structlog.processors.add_log_level,
            _service_tagger(service),
            structlog.processors.EventRenamer("message"),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(level=level, format="%(message)s")
    # basicConfig is a no-op once handlers exist, so apply the level directly.
    logging.getLogger().setLevel(level)


logger = structlog.get_logger("zipproxy")

"""Logging configuration for Effect Studio."""

from __future__ import annotations

import logging

import structlog

# httpx logs every request at INFO.
CHATTY_LOGGERS = ("httpx", "httpcore")


def add_service_name(_: object, __: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", "effect-studio")
    return event_dict


def configure_logging(level: str | int = "INFO") -> None:
    """Configure stdlib logging and the structlog JSON pipeline.

    ``level`` accepts a level name (``"DEBUG"``) or number. Unless it is ``DEBUG``
    the transport loggers stay at ``WARNING`` or above.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(level)
    transport_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            add_service_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

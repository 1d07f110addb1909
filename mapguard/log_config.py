"""Structured logging setup shared by the mapper and the validation engine."""

import logging

import structlog

from mapguard.config import get_settings


def configure_logging() -> None:
    """Configure structlog from settings.

    DEBUG switches to the console renderer; otherwise records are rendered as JSON.
    Records below LOG_LEVEL are dropped by the bound logger itself.
    """
    settings = get_settings()
    min_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )

"""Logging configuration."""
import logging

import structlog

from study_processing_core.settings import get_settings


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structured logging.

    Arguments left as None fall back to `log_level` and `log_json` from settings.
    """
    settings = get_settings()
    level = level or settings.log_level
    if json_logs is None:
        json_logs = settings.log_json
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )

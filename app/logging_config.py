"""
Logging for the booking app

structlog over the standard library. Every event carries the app name;
debug mode renders readable console lines, otherwise one JSON object per line.
"""
import logging
import sys
from typing import Optional

import structlog


def _bind_app_name(app_name: Optional[str]):
    def processor(logger, method_name, event_dict):
        if app_name:
            event_dict.setdefault("app", app_name)
        return event_dict

    return processor


def setup_logging(log_level: str = "INFO", debug: bool = False, app_name: Optional[str] = None):
    """
    Configure structlog and the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        debug: Use the console renderer instead of JSON
        app_name: Added to every event as "app"
    """
    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            _bind_app_name(app_name),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)

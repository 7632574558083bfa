"""Structured logging configuration using structlog."""
import logging
import sys
from typing import Any, Optional

import structlog
from pythonjsonlogger import jsonlogger

from hotel_recommender.config.settings import LoggingSettings, settings


def add_location_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with [<location>] when a location is bound."""
    location = event_dict.get("location")
    if location:
        current_event = event_dict.get("event", "")
        event_dict["event"] = f"[{location}] {current_event}"
    return event_dict


def configure_logging(logging_settings: Optional[LoggingSettings] = None) -> None:
    """Configure structlog for the application.

    Args:
        logging_settings: Logging options; defaults to the global settings
    """
    logging_settings = logging_settings or settings.logging
    log_level = getattr(logging, logging_settings.level)

    handler = logging.StreamHandler(sys.stdout)
    if logging_settings.format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    handler.setLevel(log_level)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Silence noisy third-party loggers
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_location_prefix,
            structlog.processors.JSONRenderer()
            if logging_settings.format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)

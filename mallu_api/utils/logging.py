"""Logging configuration for the Mallu Card API.

Address histories carry personal data. Event keys holding names or address
lines are redacted before rendering so they never reach stdout or the log file.
"""

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory


REDACTED = "[redacted]"

PERSONAL_DATA_KEYS = frozenset({
    "name",
    "display_name",
    "displayName",
    "address",
    "address_text",
    "addresses",
})


def redact_personal_data(logger, method_name, event_dict):
    """Replace values of personal-data keys in the event dictionary."""
    for key in PERSONAL_DATA_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _renderer(settings):
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings) -> None:
    """Setup structured logging for the application."""

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            redact_personal_data,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(settings),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter('%(message)s') if settings.log_format == "json"
            else logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logging.getLogger().addHandler(file_handler)

"""
Application logging configuration.

structlog renders coloured console output in development and JSON in
production. Django's own loggers are routed through the same renderer via
``structlog.stdlib.ProcessorFormatter``.

Usage:
    from config.logging import configure_structlog, get_logging_config

    configure_structlog(debug=True)
    LOGGING = get_logging_config(debug=True)
"""

import sys
from typing import Any

import structlog

FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def configure_structlog(debug: bool = False, cache_loggers: bool = True) -> None:
    """
    Configure structlog for the application.

    Must be called early in settings initialization, before any logging occurs.

    Args:
        debug: If True, use pretty console output with colors.
               If False, use JSON output for log aggregation.
        cache_loggers: Cache bound loggers on first use. Tests disable it so
               ``structlog.testing.capture_logs`` sees every event.
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if debug:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,  # type: ignore
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def _logger(level: str, handlers: list[str] | None = None) -> dict[str, Any]:
    return {"handlers": handlers or ["console"], "level": level, "propagate": False}


def get_logging_config(debug: bool = False) -> dict[str, Any]:
    """
    Return Django LOGGING configuration dict.

    Args:
        debug: If True, use console formatter with colors.
               If False, use JSON formatter for production.

    Returns:
        Django LOGGING configuration dict. Environment settings modules may
        add handlers (e.g. rotating files) before assigning it.
    """
    formatter = "console" if debug else "json"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.processors.JSONRenderer(),
                "foreign_pre_chain": FOREIGN_PRE_CHAIN,
            },
            "console": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.dev.ConsoleRenderer(colors=True),
                "foreign_pre_chain": FOREIGN_PRE_CHAIN,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "loggers": {
            "league": _logger("DEBUG" if debug else "INFO"),
            "django": _logger("INFO"),
            "django.request": _logger("WARNING"),
            "django.security": _logger("WARNING"),
        },
    }

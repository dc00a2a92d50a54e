"""
Structured logging configuration using structlog.

Provides JSON logging with ISO timestamps and stdlib compatibility.
The library only emits events; configuring output is left to the
application (the CLI calls ``configure_logging`` on startup).
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from structlog.typing import FilteringBoundLogger

from .errors import RutifyError


def _get_settings():
    """Lazy load settings to avoid circular imports."""
    from .settings import get_settings
    return get_settings()


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog with JSON output and stdlib compatibility.

    Args:
        log_level: Override log level from settings
        log_format: Override log format from settings
    """
    config = _get_settings()
    level = (log_level or config.log_level).upper()
    format_type = (log_format or config.log_format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),

        # Add service metadata
        lambda _, __, event_dict: {
            **event_dict,
            "service": config.service_name,
        },
    ]

    if format_type == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development-friendly format
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_option_error(
    logger: FilteringBoundLogger,
    operation: str,
    error: RutifyError,
    **extra_context: Any,
) -> None:
    """
    Log rejected options with structured information.

    Args:
        logger: Logger instance
        operation: Public operation that received the options
        error: Error raised by option resolution
        **extra_context: Additional context to include
    """
    context: Dict[str, Any] = {
        "operation": operation,
        "code": error.code.value,
        "error": error.message,
        **extra_context,
    }

    if error.details:
        context["details"] = error.details

    logger.warning("Invalid options", **context)

"""
Logging configuration.

Single entry point for configuring structured logging. Defaults come from
Settings (``PATTERN_SPINE_LOG_LEVEL``, ``PATTERN_SPINE_LOG_FORMAT``);
explicit arguments override them.

Usage:
    from pattern_spine.logging import configure_logging
    configure_logging()

    # Or with explicit settings
    configure_logging(level="DEBUG", format="json")
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from pattern_spine.config import get_settings
from pattern_spine.logging.context import add_context_processor

# Track if logging has been configured
_configured = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    format: Literal["json", "console"] | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Subsequent calls are no-ops unless force=True. Log output always goes
    to stderr so that demonstration output on stdout stays clean.

    Args:
        level: Log level (overrides PATTERN_SPINE_LOG_LEVEL)
        format: Output format (overrides PATTERN_SPINE_LOG_FORMAT)
        force: Reconfigure even if already configured

    Raises:
        ValueError: If the level is not DEBUG, INFO, WARNING or ERROR
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    log_format = (format or settings.log_format).lower()
    if log_level not in _LEVELS:
        raise ValueError(f"Unknown log level '{log_level}'. Valid: {', '.join(_LEVELS)}")
    numeric_level = _LEVELS[log_level]

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_context_processor,
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # The CLI reconfigures per invocation; cached loggers would keep the old processors
        cache_logger_on_first_use=False,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )
    logging.getLogger("pattern_spine").setLevel(numeric_level)

    _configured = True

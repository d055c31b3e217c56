"""Logging configuration for CLI."""

from enum import Enum

from pattern_spine.logging import configure_logging


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log format options."""

    CONSOLE = "console"
    JSON = "json"


def configure_cli_logging(
    log_level: LogLevel | None = None,
    log_format: LogFormat | None = None,
    quiet: bool = False,
) -> None:
    """
    Configure logging for CLI.

    Args:
        log_level: Logging level; defaults to settings
        log_format: Format for logs; defaults to settings
        quiet: If True, only errors are logged
    """
    if quiet:
        log_level = LogLevel.ERROR

    configure_logging(
        level=log_level.value if log_level else None,
        format=log_format.value if log_format else None,
        force=True,
    )

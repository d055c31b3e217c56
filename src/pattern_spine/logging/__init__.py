"""
Structured logging for pattern-spine.

- Structured logging with structlog
- Run context propagation via contextvars
- Timing helpers for demonstration runs

Usage:
    from pattern_spine.logging import configure_logging, get_logger, log_step

    configure_logging()
    log = get_logger(__name__)

    with log_step("demonstration.run", pattern="singleton"):
        ...
"""

from pattern_spine.logging.config import configure_logging
from pattern_spine.logging.context import get_logger, push_context, set_context
from pattern_spine.logging.timing import log_step

__all__ = [
    # Configuration
    "configure_logging",
    # Context
    "get_logger",
    "push_context",
    "set_context",
    # Timing
    "log_step",
]

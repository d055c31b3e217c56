"""
pattern-spine - SOLID principles and classic design patterns as runnable examples.

This package:
- Registers one demonstration per principle or pattern (pattern_spine.patterns)
- Runs them and captures their output (pattern_spine.runner)
- Exposes list/run/run-all commands (pattern_spine.cli)
"""

__version__ = "0.1.0"

from pattern_spine.errors import (
    BadParamsError,
    DemonstrationFailure,
    PatternNotFoundError,
    PatternSpineError,
)
from pattern_spine.logging import configure_logging, get_logger
from pattern_spine.models import (
    DemonstrationResult,
    DemonstrationStatus,
    PatternCategory,
    PatternExample,
)
from pattern_spine.registry import (
    PatternRegistry,
    get_pattern,
    get_registry,
    list_patterns,
    register_pattern,
)
from pattern_spine.runner import DemonstrationRunner, get_runner

__all__ = [
    "BadParamsError",
    "DemonstrationFailure",
    "DemonstrationResult",
    "DemonstrationRunner",
    "DemonstrationStatus",
    "PatternCategory",
    "PatternExample",
    "PatternNotFoundError",
    "PatternRegistry",
    "PatternSpineError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_pattern",
    "get_registry",
    "get_runner",
    "list_patterns",
    "register_pattern",
]

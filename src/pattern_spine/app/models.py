"""
Shared data models for commands.

These models define the contract between the command layer and its
adapters (currently the CLI). Commands return Result objects carrying an
optional structured error instead of raising.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Enumerated error codes for structured error handling.

    Adapters switch on these codes; the values double as the tag shown
    to users.
    """

    NOT_FOUND = "NotFound"
    DEMONSTRATION_FAILURE = "DemonstrationFailure"
    INVALID_PARAMS = "InvalidParams"
    INTERNAL_ERROR = "InternalError"


@dataclass
class CommandError:
    """
    Structured error from a command.

    Attributes:
        code: Machine-readable error code (stable, switch on this)
        message: Human-readable error message (can change)
        details: Additional context (schema stable per code)
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Result:
    """Base result class for commands."""

    success: bool = True
    error: CommandError | None = None

    def failed(self) -> bool:
        """Check if the result indicates failure."""
        return not self.success


@dataclass
class PatternSummary:
    """Summary of a pattern example for list operations."""

    name: str
    description: str
    category: str


@dataclass
class PatternDetail:
    """Full details of a pattern example."""

    name: str
    description: str
    category: str
    parameters: list[str] = field(default_factory=list)

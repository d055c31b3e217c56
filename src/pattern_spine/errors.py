"""
Structured error types for pattern-spine.

Every error raised by the registry or the runner extends PatternSpineError,
so callers can catch one base class and still switch on a stable category.

Hierarchy::

    PatternSpineError
    ├── PatternNotFoundError   (NOT_FOUND)     unknown example name
    ├── DemonstrationFailure   (DEMONSTRATION) example raised while running
    └── BadParamsError         (VALIDATION)    unknown demonstration params

Usage:
    from pattern_spine.errors import PatternNotFoundError

    try:
        runner.run("visitor")
    except PatternNotFoundError as e:
        print(e.pattern_name)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    NOT_FOUND = "NOT_FOUND"
    DEMONSTRATION = "DEMONSTRATION"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """Structured metadata attached to an error."""

    pattern: str | None = None
    params: dict[str, Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return non-empty fields as a dict."""
        result: dict[str, Any] = {}
        if self.pattern is not None:
            result["pattern"] = self.pattern
        if self.params:
            result["params"] = dict(self.params)
        if self.metadata:
            result.update(self.metadata)
        return result


class PatternSpineError(Exception):
    """
    Base exception for all pattern-spine errors.

    Subclasses set ``default_category`` so that raising sites only need
    to supply a message.

    Attributes:
        message: Human-readable message
        category: ErrorCategory for classification
        context: ErrorContext with structured metadata
        cause: Underlying exception, if any
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PatternSpineError:
        """Add context fields fluently and return self."""
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logging."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context = self.context.to_dict()
        if context:
            result["context"] = context
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


class PatternNotFoundError(PatternSpineError):
    """Requested pattern example is not registered."""

    default_category = ErrorCategory.NOT_FOUND

    def __init__(self, pattern_name: str, available: list[str] | None = None) -> None:
        message = f"Pattern '{pattern_name}' not found"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, context=ErrorContext(pattern=pattern_name))
        self.pattern_name = pattern_name
        self.available = list(available or [])


class DemonstrationFailure(PatternSpineError):
    """A pattern demonstration raised while producing its output."""

    default_category = ErrorCategory.DEMONSTRATION

    def __init__(
        self,
        pattern_name: str,
        cause: BaseException,
        params: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"{type(cause).__name__}: {cause}",
            context=ErrorContext(pattern=pattern_name, params=params),
            cause=cause,
        )
        self.pattern_name = pattern_name


class BadParamsError(PatternSpineError):
    """Demonstration was given parameters it does not accept."""

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        invalid_params: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.invalid_params = invalid_params or []


__all__ = [
    "BadParamsError",
    "DemonstrationFailure",
    "ErrorCategory",
    "ErrorContext",
    "PatternNotFoundError",
    "PatternSpineError",
]

"""Core data model: pattern examples and demonstration results."""

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

Demonstration = Callable[..., Iterable[str]]


class PatternCategory(str, Enum):
    """Grouping used for listing and filtering examples."""

    SOLID = "solid"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class DemonstrationStatus(str, Enum):
    """Outcome of a single demonstration run."""

    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PatternExample:
    """
    A named, self-contained demonstration of one design pattern.

    Attributes:
        name: Unique registry key, e.g. ``"singleton"``.
        description: One-line summary.
        demonstrate: Callable producing output lines. Optional keyword
            parameters are passed through from the runner.
        category: Which family the example belongs to.
    """

    name: str
    description: str
    demonstrate: Demonstration
    category: PatternCategory

    @property
    def parameters(self) -> tuple[str, ...]:
        """Names of keyword parameters the demonstration accepts."""
        signature = inspect.signature(self.demonstrate)
        return tuple(
            p.name
            for p in signature.parameters.values()
            if p.kind in (p.KEYWORD_ONLY, p.POSITIONAL_OR_KEYWORD)
        )


@dataclass(frozen=True)
class DemonstrationResult:
    """Captured output of one demonstration."""

    name: str
    status: DemonstrationStatus
    lines: tuple[str, ...] = ()
    error: str | None = None
    error_code: str | None = None
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.status == DemonstrationStatus.COMPLETED

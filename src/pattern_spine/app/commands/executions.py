"""
Demonstration execution commands.

These commands wrap DemonstrationRunner and translate its exceptions into
structured CommandErrors.
"""

from dataclasses import dataclass, field
from typing import Any

from pattern_spine.app.models import CommandError, ErrorCode, Result
from pattern_spine.errors import BadParamsError, DemonstrationFailure, PatternNotFoundError
from pattern_spine.logging import get_logger, set_context
from pattern_spine.models import DemonstrationResult
from pattern_spine.registry import PatternRegistry
from pattern_spine.runner import DemonstrationRunner

log = get_logger(__name__)


def _not_found(error: PatternNotFoundError) -> CommandError:
    return CommandError(
        code=ErrorCode.NOT_FOUND,
        message=f"Pattern '{error.pattern_name}' not found.",
        details={"pattern": error.pattern_name, "available": error.available},
    )


# =============================================================================
# Run Pattern Command
# =============================================================================


@dataclass
class RunPatternRequest:
    """Input for running one pattern example."""

    name: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class RunPatternResult(Result):
    """Output from running one pattern example."""

    name: str | None = None
    lines: list[str] = field(default_factory=list)
    duration_seconds: float | None = None


class RunPatternCommand:
    """
    Run a single pattern example.

    Example:
        command = RunPatternCommand()
        result = command.execute(RunPatternRequest(name="factory", params={"kind": "cat"}))
        if result.success:
            print("\\n".join(result.lines))
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._runner = DemonstrationRunner(registry)

    def execute(self, request: RunPatternRequest) -> RunPatternResult:
        set_context(pattern=request.name)

        try:
            outcome = self._runner.run(request.name, request.params)
        except PatternNotFoundError as e:
            return RunPatternResult(success=False, name=request.name, error=_not_found(e))
        except BadParamsError as e:
            return RunPatternResult(
                success=False,
                name=request.name,
                error=CommandError(
                    code=ErrorCode.INVALID_PARAMS,
                    message=e.message,
                    details={"invalid": e.invalid_params},
                ),
            )
        except DemonstrationFailure as e:
            log.warning("command.run.failed", **e.to_dict())
            return RunPatternResult(
                success=False,
                name=request.name,
                error=CommandError(
                    code=ErrorCode.DEMONSTRATION_FAILURE,
                    message=e.message,
                    details={"pattern": e.pattern_name, "params": dict(request.params)},
                ),
            )
        except Exception as e:
            log.error("command.run.error", pattern=request.name, error=str(e))
            return RunPatternResult(
                success=False,
                name=request.name,
                error=CommandError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=f"Execution error: {e}",
                ),
            )

        return RunPatternResult(
            success=True,
            name=outcome.name,
            lines=list(outcome.lines),
            duration_seconds=outcome.duration_seconds,
        )


# =============================================================================
# Run All Patterns Command
# =============================================================================


@dataclass
class RunAllPatternsRequest:
    """Input for running many pattern examples."""

    names: list[str] | None = None
    category: str | None = None
    fail_fast: bool = False


@dataclass
class RunAllPatternsResult(Result):
    """
    Output from running many pattern examples.

    ``success`` is False only when the request itself is invalid (unknown
    name or category); individual demonstration failures live in
    ``results``.
    """

    results: list[DemonstrationResult] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.succeeded)


class RunAllPatternsCommand:
    """Run every (or a filtered set of) pattern example(s)."""

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._runner = DemonstrationRunner(registry)

    def execute(self, request: RunAllPatternsRequest) -> RunAllPatternsResult:
        set_context()

        names = request.names
        if request.category:
            try:
                in_category = [e.name for e in self._runner.registry.by_category(request.category)]
            except ValueError:
                return RunAllPatternsResult(
                    success=False,
                    error=CommandError(
                        code=ErrorCode.INVALID_PARAMS,
                        message=f"Unknown category '{request.category}'.",
                        details={"category": request.category},
                    ),
                )
            names = [n for n in names if n in in_category] if names is not None else in_category

        try:
            results = self._runner.run_all(names, fail_fast=request.fail_fast)
        except PatternNotFoundError as e:
            return RunAllPatternsResult(success=False, error=_not_found(e))
        except Exception as e:
            log.error("command.run_all.error", error=str(e))
            return RunAllPatternsResult(
                success=False,
                error=CommandError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=f"Execution error: {e}",
                ),
            )

        return RunAllPatternsResult(success=True, results=results)

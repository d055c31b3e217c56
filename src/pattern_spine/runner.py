"""Synchronous demonstration runner.

Resolves examples from a registry, invokes them and captures their output
lines. A single ``run`` propagates failures; ``run_all`` records them per
example and keeps going.
"""

from typing import Any

from pattern_spine.errors import BadParamsError, DemonstrationFailure
from pattern_spine.logging import get_logger, log_step, push_context
from pattern_spine.models import DemonstrationResult, DemonstrationStatus, PatternExample
from pattern_spine.registry import PatternRegistry, get_registry

log = get_logger(__name__)


class DemonstrationRunner:
    """
    Synchronous demonstration runner.

    Executes examples immediately in the current thread.
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> PatternRegistry:
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    def run(self, name: str, params: dict[str, Any] | None = None) -> DemonstrationResult:
        """
        Run one example by name.

        Args:
            name: Registered pattern name
            params: Optional keyword parameters for the demonstration

        Returns:
            DemonstrationResult with the captured lines

        Raises:
            PatternNotFoundError: If the name is not registered
            BadParamsError: If params contain names the demonstration does not accept
            DemonstrationFailure: If the demonstration raises
        """
        example = self.registry.get(name)
        return self._execute(example, params or {})

    def run_all(
        self,
        names: list[str] | None = None,
        *,
        fail_fast: bool = False,
    ) -> list[DemonstrationResult]:
        """
        Run several examples in registration (or given) order.

        Every name is resolved before anything runs, so an unknown name
        raises PatternNotFoundError without producing output. Failures of
        individual demonstrations are recorded as failed results.

        Args:
            names: Names to run; defaults to every registered example
            fail_fast: Stop after the first failed demonstration

        Returns:
            List of DemonstrationResults
        """
        if names is None:
            examples = self.registry.examples
        else:
            examples = [self.registry.get(name) for name in names]

        results = []
        for example in examples:
            try:
                result = self._execute(example, {})
            except DemonstrationFailure as e:
                result = DemonstrationResult(
                    name=example.name,
                    status=DemonstrationStatus.FAILED,
                    error=e.message,
                    error_code=type(e).__name__,
                )
            results.append(result)

            if fail_fast and not result.succeeded:
                log.warning("runner.stopped", failed_at=example.name)
                break

        log.info(
            "runner.run_all.completed",
            total=len(results),
            failed=sum(1 for r in results if not r.succeeded),
        )
        return results

    def _execute(self, example: PatternExample, params: dict[str, Any]) -> DemonstrationResult:
        unknown = sorted(set(params) - set(example.parameters))
        if unknown:
            raise BadParamsError(
                f"Pattern '{example.name}' does not accept: {', '.join(unknown)}",
                invalid_params=unknown,
            ).with_context(pattern=example.name, params=params)

        token = push_context(pattern=example.name)
        try:
            with log_step("demonstration.run", level="debug") as timer:
                # Materialize inside the step so a mid-stream failure yields no partial output
                lines = tuple(str(line) for line in example.demonstrate(**params))
                timer.note(lines=len(lines))
        except Exception as e:
            raise DemonstrationFailure(example.name, e, params=params) from e
        finally:
            token.restore()

        return DemonstrationResult(
            name=example.name,
            status=DemonstrationStatus.COMPLETED,
            lines=lines,
            duration_seconds=timer.duration_seconds,
        )


# Default runner instance
_runner: DemonstrationRunner | None = None


def get_runner() -> DemonstrationRunner:
    """Get or create runner instance."""
    global _runner
    if _runner is None:
        _runner = DemonstrationRunner()
    return _runner

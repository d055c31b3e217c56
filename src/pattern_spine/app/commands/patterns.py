"""
Pattern discovery and description commands.
"""

from dataclasses import dataclass, field

from pattern_spine.app.models import (
    CommandError,
    ErrorCode,
    PatternDetail,
    PatternSummary,
    Result,
)
from pattern_spine.errors import PatternNotFoundError
from pattern_spine.logging import get_logger
from pattern_spine.models import PatternCategory
from pattern_spine.registry import PatternRegistry, get_registry

log = get_logger(__name__)

# =============================================================================
# List Patterns Command
# =============================================================================


@dataclass
class ListPatternsRequest:
    """Input for listing patterns."""

    category: str | None = None


@dataclass
class ListPatternsResult(Result):
    """Output from listing patterns."""

    patterns: list[PatternSummary] = field(default_factory=list)
    total_count: int = 0
    filtered: bool = False


class ListPatternsCommand:
    """
    List registered pattern examples in registration order.

    Example:
        command = ListPatternsCommand()
        result = command.execute(ListPatternsRequest(category="creational"))
        for p in result.patterns:
            print(f"{p.name}: {p.description}")
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._registry = registry

    def execute(self, request: ListPatternsRequest) -> ListPatternsResult:
        try:
            registry = self._registry if self._registry is not None else get_registry()

            if request.category:
                try:
                    examples = registry.by_category(request.category)
                except ValueError:
                    valid = ", ".join(c.value for c in PatternCategory)
                    return ListPatternsResult(
                        success=False,
                        error=CommandError(
                            code=ErrorCode.INVALID_PARAMS,
                            message=f"Unknown category '{request.category}'. Valid: {valid}",
                            details={"category": request.category},
                        ),
                    )
            else:
                examples = registry.examples

            return ListPatternsResult(
                success=True,
                patterns=[
                    PatternSummary(name=e.name, description=e.description, category=e.category.value)
                    for e in examples
                ],
                total_count=len(registry),
                filtered=bool(request.category),
            )

        except Exception as e:
            log.error("command.list.error", error=str(e))
            return ListPatternsResult(
                success=False,
                error=CommandError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=f"Failed to list patterns: {e}",
                ),
            )


# =============================================================================
# Describe Pattern Command
# =============================================================================


@dataclass
class DescribePatternRequest:
    """Input for describing a pattern."""

    name: str


@dataclass
class DescribePatternResult(Result):
    """Output from describing a pattern."""

    pattern: PatternDetail | None = None


class DescribePatternCommand:
    """Get detailed information about one pattern example."""

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._registry = registry

    def execute(self, request: DescribePatternRequest) -> DescribePatternResult:
        try:
            registry = self._registry if self._registry is not None else get_registry()
            example = registry.get(request.name)
            parameters = list(example.parameters)
        except PatternNotFoundError as e:
            return DescribePatternResult(
                success=False,
                error=CommandError(
                    code=ErrorCode.NOT_FOUND,
                    message=f"Pattern '{request.name}' not found.",
                    details={"pattern": request.name, "available": e.available},
                ),
            )
        except Exception as e:
            log.error("command.describe.error", pattern=request.name, error=str(e))
            return DescribePatternResult(
                success=False,
                error=CommandError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=f"Failed to describe pattern: {e}",
                ),
            )

        return DescribePatternResult(
            success=True,
            pattern=PatternDetail(
                name=example.name,
                description=example.description,
                category=example.category.value,
                parameters=parameters,
            ),
        )

"""Pattern registry for registering and discovering pattern examples.

A registry holds examples in registration order. The module-level default
registry is filled by the ``@register_pattern`` decorator when the built-in
catalog (``pattern_spine.patterns``) is imported, which happens lazily on
first lookup.

Usage:
    from pattern_spine.registry import register_pattern, get_pattern

    @register_pattern("singleton", category=PatternCategory.CREATIONAL)
    def demonstrate_singleton():
        yield "..."

    example = get_pattern("singleton")
"""

from collections.abc import Callable, Iterable, Iterator

from pattern_spine.errors import PatternNotFoundError
from pattern_spine.logging import get_logger
from pattern_spine.models import Demonstration, PatternCategory, PatternExample

logger = get_logger(__name__)


class PatternRegistry:
    """Ordered, name-unique collection of pattern examples."""

    def __init__(self, examples: Iterable[PatternExample] = ()) -> None:
        self._examples: dict[str, PatternExample] = {}
        for example in examples:
            self.register(example)

    def register(self, example: PatternExample) -> PatternExample:
        """Add an example. Raises ValueError if the name is taken."""
        if example.name in self._examples:
            raise ValueError(f"Pattern '{example.name}' is already registered")
        self._examples[example.name] = example
        logger.debug(
            "pattern_registered",
            name=example.name,
            category=example.category.value,
        )
        return example

    def get(self, name: str) -> PatternExample:
        """Look up an example by name."""
        try:
            return self._examples[name]
        except KeyError:
            raise PatternNotFoundError(name, available=self.names()) from None

    def names(self) -> list[str]:
        """All registered names in registration order."""
        return list(self._examples)

    @property
    def examples(self) -> list[PatternExample]:
        """All registered examples in registration order."""
        return list(self._examples.values())

    def by_category(self, category: PatternCategory | str) -> list[PatternExample]:
        """Return examples in a single category."""
        category = PatternCategory(category)
        return [e for e in self._examples.values() if e.category == category]

    def clear(self) -> None:
        self._examples.clear()

    def __iter__(self) -> Iterator[PatternExample]:
        return iter(list(self._examples.values()))

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, name: object) -> bool:
        return name in self._examples

    def __repr__(self) -> str:
        return f"PatternRegistry(names={self.names()})"


# Global pattern registry
_registry = PatternRegistry()
_loaded: bool = False


def register_pattern(
    name: str,
    *,
    description: str = "",
    category: PatternCategory,
) -> Callable[[Demonstration], Demonstration]:
    """Decorator to register a demonstration function in the default registry."""

    def decorator(func: Demonstration) -> Demonstration:
        summary = description
        if not summary and func.__doc__:
            summary = func.__doc__.strip().splitlines()[0]
        _registry.register(
            PatternExample(
                name=name,
                description=summary,
                demonstrate=func,
                category=category,
            )
        )
        return func

    return decorator


def _ensure_loaded() -> None:
    """Import the built-in catalog once so its decorators run."""
    global _loaded
    if not _loaded:
        _loaded = True
        import pattern_spine.patterns  # noqa: F401

        logger.debug("pattern_registry_loaded", registered=len(_registry))


def get_registry() -> PatternRegistry:
    """Get the default registry with the built-in catalog loaded."""
    _ensure_loaded()
    return _registry


def get_pattern(name: str) -> PatternExample:
    """Get a registered example by name."""
    return get_registry().get(name)


def list_patterns() -> list[str]:
    """List all registered pattern names in registration order."""
    return get_registry().names()


def clear_registry() -> None:
    """Clear the default registry (for testing).

    The built-in catalog is not re-imported afterwards, since its module
    is already in ``sys.modules``; the registry stays empty until
    examples are registered again.
    """
    _registry.clear()

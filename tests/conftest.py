"""
Shared pytest fixtures for pattern-spine tests.

- Logging configured once per test against the current stderr
- Private registries for isolation
- ``install_registry`` to swap the default registry used by commands and CLI
"""

from collections.abc import Callable, Iterator

import pytest

import pattern_spine.registry as registry_module
from pattern_spine.config import reset_settings
from pattern_spine.logging import configure_logging, push_context
from pattern_spine.models import PatternCategory, PatternExample
from pattern_spine.registry import PatternRegistry, get_registry


@pytest.fixture(autouse=True)
def _logging() -> Iterator[None]:
    """Reset settings and bind logging to this test's stderr."""
    reset_settings()
    configure_logging(force=True)
    token = push_context()
    yield
    token.restore()
    reset_settings()


def _explode() -> Iterator[str]:
    yield "this line is discarded"
    raise RuntimeError("boom")


@pytest.fixture
def failing_example() -> PatternExample:
    """An example whose demonstration raises after yielding one line."""
    return PatternExample(
        name="exploding",
        description="Always fails",
        demonstrate=_explode,
        category=PatternCategory.BEHAVIORAL,
    )


@pytest.fixture
def empty_registry() -> PatternRegistry:
    return PatternRegistry()


@pytest.fixture
def sample_registry() -> PatternRegistry:
    """Registry containing only the singleton and factory examples."""
    catalog = get_registry()
    return PatternRegistry([catalog.get("singleton"), catalog.get("factory")])


@pytest.fixture
def install_registry(monkeypatch: pytest.MonkeyPatch) -> Callable[[PatternRegistry], PatternRegistry]:
    """Replace the default registry for the duration of a test."""
    get_registry()  # make sure the catalog is loaded into the real registry first

    def _install(registry: PatternRegistry) -> PatternRegistry:
        monkeypatch.setattr(registry_module, "_registry", registry)
        monkeypatch.setattr(registry_module, "_loaded", True)
        return registry

    return _install

"""Structural pattern demonstrations: adapter, decorator."""

from collections.abc import Iterator
from typing import Protocol

from pattern_spine.models import PatternCategory
from pattern_spine.registry import register_pattern

# =============================================================================
# Adapter
# =============================================================================


class LegacyPrinter:
    """Old API that takes upper-case text and a copy count."""

    def print_text(self, text: str, copies: int) -> str:
        return f"LEGACY x{copies}: {text.upper()}"


class DocumentPrinter(Protocol):
    def print(self, document: str) -> str: ...


class LegacyPrinterAdapter:
    """Exposes LegacyPrinter through the DocumentPrinter interface."""

    def __init__(self, legacy: LegacyPrinter) -> None:
        self._legacy = legacy

    def print(self, document: str) -> str:
        return self._legacy.print_text(document, copies=1)


class ModernPrinter:
    def print(self, document: str) -> str:
        return f"modern: {document}"


@register_pattern(
    "adapter",
    description="Make an incompatible interface fit the one clients expect",
    category=PatternCategory.STRUCTURAL,
)
def demonstrate_adapter() -> Iterator[str]:
    printers: list[DocumentPrinter] = [ModernPrinter(), LegacyPrinterAdapter(LegacyPrinter())]
    for printer in printers:
        yield printer.print("quarterly report")


# =============================================================================
# Decorator
# =============================================================================


class Coffee(Protocol):
    def cost(self) -> float: ...

    def description(self) -> str: ...


class SimpleCoffee:
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "coffee"


class CoffeeDecorator:
    """Owns the coffee it wraps and adds to its cost and description."""

    extra_cost: float = 0.0
    label: str = ""

    def __init__(self, wrapped: Coffee) -> None:
        self._wrapped = wrapped

    def cost(self) -> float:
        return self._wrapped.cost() + self.extra_cost

    def description(self) -> str:
        return f"{self._wrapped.description()}, {self.label}"


class MilkDecorator(CoffeeDecorator):
    extra_cost = 0.5
    label = "milk"


class SugarDecorator(CoffeeDecorator):
    extra_cost = 0.25
    label = "sugar"


class WhipDecorator(CoffeeDecorator):
    extra_cost = 0.75
    label = "whip"


DECORATORS: dict[str, type[CoffeeDecorator]] = {
    "milk": MilkDecorator,
    "sugar": SugarDecorator,
    "whip": WhipDecorator,
}


def make_coffee(extras: list[str]) -> Coffee:
    coffee: Coffee = SimpleCoffee()
    for extra in extras:
        try:
            decorator = DECORATORS[extra]
        except KeyError:
            raise ValueError(f"Unknown type: {extra}") from None
        coffee = decorator(coffee)
    return coffee


@register_pattern(
    "decorator",
    description="Wrap an object to add behaviour without changing its class",
    category=PatternCategory.STRUCTURAL,
)
def demonstrate_decorator(extras: str = "milk,sugar") -> Iterator[str]:
    names = [e.strip().lower() for e in extras.split(",") if e.strip()]
    yield f"{SimpleCoffee().description()}: ${SimpleCoffee().cost():.2f}"
    coffee = make_coffee(names)
    yield f"{coffee.description()}: ${coffee.cost():.2f}"

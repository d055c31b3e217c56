"""SOLID principle demonstrations."""

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from pattern_spine.models import PatternCategory
from pattern_spine.registry import register_pattern

# =============================================================================
# Single responsibility
# =============================================================================


@dataclass(frozen=True)
class Report:
    """Holds report data only."""

    title: str
    rows: tuple[tuple[str, int], ...]

    @property
    def total(self) -> int:
        return sum(value for _, value in self.rows)


class ReportFormatter:
    """Renders a report; knows nothing about where the data came from."""

    def format(self, report: Report) -> list[str]:
        lines = [report.title]
        lines.extend(f"  {label}: {value}" for label, value in report.rows)
        lines.append(f"  total: {report.total}")
        return lines


@register_pattern(
    "single-responsibility",
    description="A class should have one reason to change",
    category=PatternCategory.SOLID,
)
def demonstrate_single_responsibility() -> Iterator[str]:
    report = Report(title="Quarterly sales", rows=(("north", 120), ("south", 80)))
    yield "Report holds data, ReportFormatter renders it:"
    yield from ReportFormatter().format(report)


# =============================================================================
# Open/closed
# =============================================================================


class ShapeKind(str, Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


class Shape(ABC):
    kind: ShapeKind

    @abstractmethod
    def area(self) -> float: ...


@dataclass(frozen=True)
class Circle(Shape):
    radius: float
    kind = ShapeKind.CIRCLE

    def area(self) -> float:
        return math.pi * self.radius**2


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float
    kind = ShapeKind.RECTANGLE

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Triangle(Shape):
    base: float
    height: float
    kind = ShapeKind.TRIANGLE

    def area(self) -> float:
        return 0.5 * self.base * self.height


def total_area(shapes: list[Shape]) -> float:
    """Works for every shape without being edited when a shape is added."""
    return sum(shape.area() for shape in shapes)


@register_pattern(
    "open-closed",
    description="Open for extension, closed for modification",
    category=PatternCategory.SOLID,
)
def demonstrate_open_closed() -> Iterator[str]:
    shapes: list[Shape] = [Circle(1.0), Rectangle(2.0, 3.0), Triangle(4.0, 5.0)]
    for shape in shapes:
        yield f"{shape.kind.value} area: {shape.area():.2f}"
    yield f"total area: {total_area(shapes):.2f}"


# =============================================================================
# Liskov substitution
# =============================================================================


class Bird(ABC):
    name: str = "bird"

    def describe(self) -> str:
        return f"{self.name} eats seeds"


class FlyingBird(Bird):
    def fly(self) -> str:
        return f"{self.name} flies"


class Sparrow(FlyingBird):
    name = "sparrow"


class Penguin(Bird):
    name = "penguin"

    def swim(self) -> str:
        return f"{self.name} swims"


@register_pattern(
    "liskov-substitution",
    description="Subtypes must be usable wherever their base type is",
    category=PatternCategory.SOLID,
)
def demonstrate_liskov_substitution() -> Iterator[str]:
    birds: list[Bird] = [Sparrow(), Penguin()]
    for bird in birds:
        yield bird.describe()
    flyers: list[FlyingBird] = [b for b in birds if isinstance(b, FlyingBird)]
    for flyer in flyers:
        yield flyer.fly()
    yield "Penguin is never asked to fly, so no subtype breaks the contract"


# =============================================================================
# Interface segregation
# =============================================================================


class Printer(Protocol):
    def print_document(self, document: str) -> str: ...


class Scanner(Protocol):
    def scan_document(self, document: str) -> str: ...


class BasicPrinter:
    def print_document(self, document: str) -> str:
        return f"BasicPrinter printed '{document}'"


class MultiFunctionDevice:
    def print_document(self, document: str) -> str:
        return f"MultiFunctionDevice printed '{document}'"

    def scan_document(self, document: str) -> str:
        return f"MultiFunctionDevice scanned '{document}'"


def print_all(printers: list[Printer], document: str) -> list[str]:
    return [p.print_document(document) for p in printers]


@register_pattern(
    "interface-segregation",
    description="Clients should not depend on methods they do not use",
    category=PatternCategory.SOLID,
)
def demonstrate_interface_segregation() -> Iterator[str]:
    yield from print_all([BasicPrinter(), MultiFunctionDevice()], "invoice.pdf")
    scanner: Scanner = MultiFunctionDevice()
    yield scanner.scan_document("contract.pdf")


# =============================================================================
# Dependency inversion
# =============================================================================


class MessageSender(Protocol):
    def send(self, recipient: str, message: str) -> str: ...


class EmailSender:
    def send(self, recipient: str, message: str) -> str:
        return f"email to {recipient}: {message}"


class SmsSender:
    def send(self, recipient: str, message: str) -> str:
        return f"sms to {recipient}: {message}"


class Notifier:
    """High-level policy; depends only on the MessageSender abstraction."""

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def notify(self, recipient: str, message: str) -> str:
        return self._sender.send(recipient, message)


@register_pattern(
    "dependency-inversion",
    description="Depend on abstractions, not concretions",
    category=PatternCategory.SOLID,
)
def demonstrate_dependency_inversion() -> Iterator[str]:
    for sender in (EmailSender(), SmsSender()):
        yield Notifier(sender).notify("alice", "build passed")

"""Creational pattern demonstrations: singleton, factory, builder."""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType

from pattern_spine.models import PatternCategory
from pattern_spine.registry import register_pattern

# =============================================================================
# Singleton
# =============================================================================


class AppConfiguration:
    """Process-wide configuration. The only instance is created below."""

    def __init__(self, settings: dict[str, str]) -> None:
        self._settings = MappingProxyType(dict(settings))

    def get(self, key: str) -> str:
        return self._settings[key]

    def keys(self) -> list[str]:
        return sorted(self._settings)


# Created exactly once, at import
_CONFIGURATION = AppConfiguration({"environment": "production", "region": "eu-west-1"})


def get_configuration() -> AppConfiguration:
    return _CONFIGURATION


@register_pattern(
    "singleton",
    description="Exactly one shared instance, created once up front",
    category=PatternCategory.CREATIONAL,
)
def demonstrate_singleton() -> Iterator[str]:
    first = get_configuration()
    second = get_configuration()
    yield f"first is second: {first is second}"
    for key in first.keys():
        yield f"{key} = {second.get(key)}"


# =============================================================================
# Factory
# =============================================================================


class AnimalKind(str, Enum):
    DOG = "dog"
    CAT = "cat"
    COW = "cow"


@dataclass(frozen=True)
class Animal:
    kind: AnimalKind

    def speak(self) -> str:
        return _SOUNDS[self.kind]


_SOUNDS = {
    AnimalKind.DOG: "Woof",
    AnimalKind.CAT: "Meow",
    AnimalKind.COW: "Moo",
}


class AnimalFactory:
    """Creates animals from a type name; the set of kinds is closed."""

    @staticmethod
    def create(kind: str) -> Animal:
        try:
            return Animal(AnimalKind(kind.lower()))
        except ValueError:
            raise ValueError(f"Unknown type: {kind}") from None


@register_pattern(
    "factory",
    description="Create objects by type name without naming concrete classes",
    category=PatternCategory.CREATIONAL,
)
def demonstrate_factory(kind: str | None = None) -> Iterator[str]:
    kinds = [kind] if kind is not None else [k.value for k in AnimalKind]
    for name in kinds:
        animal = AnimalFactory.create(name)
        yield f"{animal.kind.value} says {animal.speak()}"


# =============================================================================
# Builder
# =============================================================================


@dataclass(frozen=True)
class Computer:
    cpu: str
    ram_gb: int
    storage_gb: int
    gpu: str | None = None

    def describe(self) -> str:
        parts = [f"cpu={self.cpu}", f"ram={self.ram_gb}GB", f"storage={self.storage_gb}GB"]
        if self.gpu:
            parts.append(f"gpu={self.gpu}")
        return "Computer(" + ", ".join(parts) + ")"


@dataclass(frozen=True)
class ComputerBuilder:
    """Each step returns a new builder; build() validates and finalizes."""

    cpu: str | None = None
    ram_gb: int | None = None
    storage_gb: int = 256
    gpu: str | None = None

    def with_cpu(self, cpu: str) -> "ComputerBuilder":
        return replace(self, cpu=cpu)

    def with_ram(self, ram_gb: int) -> "ComputerBuilder":
        return replace(self, ram_gb=ram_gb)

    def with_storage(self, storage_gb: int) -> "ComputerBuilder":
        return replace(self, storage_gb=storage_gb)

    def with_gpu(self, gpu: str) -> "ComputerBuilder":
        return replace(self, gpu=gpu)

    def build(self) -> Computer:
        missing = [name for name in ("cpu", "ram_gb") if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Missing required parts: {', '.join(missing)}")
        return Computer(cpu=self.cpu, ram_gb=self.ram_gb, storage_gb=self.storage_gb, gpu=self.gpu)


@register_pattern(
    "builder",
    description="Assemble a complex immutable object step by step",
    category=PatternCategory.CREATIONAL,
)
def demonstrate_builder() -> Iterator[str]:
    base = ComputerBuilder().with_cpu("8-core").with_ram(16)
    office = base.build()
    gaming = base.with_ram(32).with_storage(2048).with_gpu("RTX").build()
    yield f"office: {office.describe()}"
    yield f"gaming: {gaming.describe()}"
    yield f"base builder unchanged: ram_gb={base.ram_gb}"

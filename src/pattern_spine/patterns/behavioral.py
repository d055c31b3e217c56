"""Behavioral pattern demonstrations: observer, strategy, command."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Protocol

from pattern_spine.models import PatternCategory
from pattern_spine.registry import register_pattern

# =============================================================================
# Observer
# =============================================================================


class Observer(Protocol):
    name: str

    def update(self, headline: str) -> str: ...


class NewsChannel:
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, headline: str) -> str:
        return f"{self.name} received: {headline}"


class NewsAgency:
    """Subject: keeps its subscribers and pushes each headline to them."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def publish(self, headline: str) -> list[str]:
        return [observer.update(headline) for observer in self._observers]


@register_pattern(
    "observer",
    description="Notify dependents automatically when a subject changes",
    category=PatternCategory.BEHAVIORAL,
)
def demonstrate_observer() -> Iterator[str]:
    agency = NewsAgency()
    tv, radio = NewsChannel("tv"), NewsChannel("radio")
    agency.subscribe(tv)
    agency.subscribe(radio)
    yield from agency.publish("markets open higher")
    agency.unsubscribe(radio)
    yield from agency.publish("rain expected tonight")


# =============================================================================
# Strategy
# =============================================================================


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit-card"
    PAYPAL = "paypal"
    CRYPTO = "crypto"


class PaymentStrategy(ABC):
    method: PaymentMethod

    @abstractmethod
    def pay(self, amount: Decimal) -> str: ...


class CreditCardPayment(PaymentStrategy):
    method = PaymentMethod.CREDIT_CARD

    def pay(self, amount: Decimal) -> str:
        return f"Paid ${amount:.2f} with credit card"


class PayPalPayment(PaymentStrategy):
    method = PaymentMethod.PAYPAL

    def pay(self, amount: Decimal) -> str:
        return f"Paid ${amount:.2f} via PayPal"


class CryptoPayment(PaymentStrategy):
    method = PaymentMethod.CRYPTO

    def pay(self, amount: Decimal) -> str:
        return f"Paid ${amount:.2f} in crypto"


STRATEGIES: dict[PaymentMethod, PaymentStrategy] = {
    s.method: s for s in (CreditCardPayment(), PayPalPayment(), CryptoPayment())
}


class ShoppingCart:
    """Context: delegates payment to whichever strategy it is given."""

    def __init__(self, total: Decimal) -> None:
        self.total = total

    def checkout(self, strategy: PaymentStrategy) -> str:
        return strategy.pay(self.total)


@register_pattern(
    "strategy",
    description="Swap interchangeable algorithms behind one interface",
    category=PatternCategory.BEHAVIORAL,
)
def demonstrate_strategy(method: str | None = None, amount: str = "42.50") -> Iterator[str]:
    try:
        total = Decimal(amount)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount}") from None
    cart = ShoppingCart(total)
    if method is None:
        selected = list(STRATEGIES.values())
    else:
        try:
            selected = [STRATEGIES[PaymentMethod(method.lower())]]
        except ValueError:
            raise ValueError(f"Unknown type: {method}") from None
    for strategy in selected:
        yield cart.checkout(strategy)


# =============================================================================
# Command
# =============================================================================


class Light:
    def __init__(self, room: str) -> None:
        self.room = room
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return f"{self.room} light is ON"

    def turn_off(self) -> str:
        self.is_on = False
        return f"{self.room} light is OFF"


class Command(ABC):
    @abstractmethod
    def execute(self) -> str: ...

    @abstractmethod
    def undo(self) -> str: ...


class LightOnCommand(Command):
    def __init__(self, light: Light) -> None:
        self._light = light

    def execute(self) -> str:
        return self._light.turn_on()

    def undo(self) -> str:
        return self._light.turn_off()


class LightOffCommand(Command):
    def __init__(self, light: Light) -> None:
        self._light = light

    def execute(self) -> str:
        return self._light.turn_off()

    def undo(self) -> str:
        return self._light.turn_on()


class RemoteControl:
    """Invoker: runs commands and keeps a history for undo."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    def press(self, command: Command) -> str:
        self._history.append(command)
        return command.execute()

    def undo_last(self) -> str:
        if not self._history:
            return "nothing to undo"
        return self._history.pop().undo()


@register_pattern(
    "command",
    description="Encapsulate a request as an object to queue or undo it",
    category=PatternCategory.BEHAVIORAL,
)
def demonstrate_command() -> Iterator[str]:
    kitchen = Light("kitchen")
    remote = RemoteControl()
    yield remote.press(LightOnCommand(kitchen))
    yield remote.press(LightOffCommand(kitchen))
    yield f"undo: {remote.undo_last()}"
    yield f"undo: {remote.undo_last()}"
    yield f"undo: {remote.undo_last()}"

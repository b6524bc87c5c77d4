"""
Beverage contract and base beverages (Decorator pattern, component side).

Every piece of an order, from a plain espresso to an espresso wrapped in
three condiments, satisfies the same `Beverage` protocol. Callers only ever
ask a beverage for `price()` and `description()`; they never need to know
how many wrappers sit between them and the cup.

The base beverages are the **leaves** of a composition: they hold no inner
reference and answer both questions from fixed class-level constants.

Both operations MUST be pure (no I/O, no mutation) so that asking the
same composition twice always gives the same answer.
"""

from decimal import Decimal
from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Beverage(Protocol):
    """Interface shared by base beverages and condiments.

    Any object with `price()` and `description()` methods satisfies this
    protocol (structural subtyping, no explicit inheritance needed).
    It is runtime-checkable so condiments can reject anything else at
    construction time.
    """

    def price(self) -> Decimal: ...

    def description(self) -> str: ...


class Espresso:
    """Café Expresso, $2.50."""

    PRICE: ClassVar[Decimal] = Decimal("2.50")
    DESCRIPTION: ClassVar[str] = "Café Expresso"

    def price(self) -> Decimal:
        return self.PRICE

    def description(self) -> str:
        return self.DESCRIPTION


class Decaf:
    """Café Descafeinado, $3.00."""

    PRICE: ClassVar[Decimal] = Decimal("3.00")
    DESCRIPTION: ClassVar[str] = "Café Descafeinado"

    def price(self) -> Decimal:
        return self.PRICE

    def description(self) -> str:
        return self.DESCRIPTION

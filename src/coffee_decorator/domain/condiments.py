"""
Condiment decorators (Decorator pattern, wrapper side).

A condiment **wraps** exactly one inner beverage and is itself a beverage,
so wrappers can be stacked to any depth:

    Cream(Milk(Espresso()))

Queries recurse from the outermost wrapper down to the leaf and accumulate
on the way back out: price adds a fixed increment, description appends a
fixed suffix. Wrapping order therefore decides the order of the suffixes,
while the final price is the same whichever way round they go.

Condiments are frozen Pydantic v2 models. The `beverage` field is validated
against the runtime-checkable `Beverage` protocol, so passing `None` (or
anything without `price()` / `description()`) fails at construction instead
of surfacing later as an AttributeError deep inside a price query. Being
frozen, a condiment can never be re-pointed at a different inner beverage.
"""

import logging
from abc import abstractmethod
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from coffee_decorator.domain.beverages import Beverage

logger = logging.getLogger(__name__)


class CondimentDecorator(BaseModel):
    """Abstract wrapper holding one inner beverage.

    Subclasses must implement both `price()` and `description()`, and each
    must call through to `self.beverage` before adding its own contribution.
    """

    # Protocols are not pydantic-native types; arbitrary_types_allowed makes
    # pydantic fall back to an isinstance() check against Beverage.
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    beverage: Beverage

    def __init__(self, beverage: Beverage) -> None:
        super().__init__(beverage=beverage)
        logger.debug("Wrapped %s in %s", type(beverage).__name__, type(self).__name__)

    @field_validator("beverage")
    @classmethod
    def check_beverage_instance(cls, value: Beverage) -> Beverage:
        # A class passes the protocol check too; its methods are unbound.
        if isinstance(value, type):
            raise ValueError(f"expected a beverage instance, got the class {value.__name__}")
        if not (callable(value.price) and callable(value.description)):
            raise ValueError("price and description must be callable")
        return value

    @abstractmethod
    def price(self) -> Decimal: ...

    @abstractmethod
    def description(self) -> str: ...


class Milk(CondimentDecorator):
    """Adds milk: +$0.75, ", con Leche"."""

    PRICE: ClassVar[Decimal] = Decimal("0.75")
    SUFFIX: ClassVar[str] = ", con Leche"

    def price(self) -> Decimal:
        return self.beverage.price() + self.PRICE

    def description(self) -> str:
        return self.beverage.description() + self.SUFFIX


class Cream(CondimentDecorator):
    """Adds cream: +$1.00, ", con Crema"."""

    PRICE: ClassVar[Decimal] = Decimal("1.00")
    SUFFIX: ClassVar[str] = ", con Crema"

    def price(self) -> Decimal:
        return self.beverage.price() + self.PRICE

    def description(self) -> str:
        return self.beverage.description() + self.SUFFIX

"""
Demonstration: builds three orders by wrapping and prints each one.

Order 3 is built by **re-wrapping**: a local variable is rebound to a new
outer condiment around its previous value. Nothing is mutated; each step
constructs a new, immutable composition from the last.

Output (stdout):
    Pedido 1: Café Expresso - $2.50
    Pedido 2: Café Descafeinado, con Leche - $3.75
    Pedido 3: Café Expresso, con Leche, con Crema - $4.25

Run with:
    python -m coffee_decorator.demo
"""

import logging

from coffee_decorator.domain.beverages import Beverage, Decaf, Espresso
from coffee_decorator.domain.condiments import Cream, Milk
from coffee_decorator.domain.orders import format_order

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_orders() -> list[Beverage]:
    # Order 1: plain espresso.
    order1: Beverage = Espresso()

    # Order 2: decaf wrapped once.
    order2: Beverage = Milk(Decaf())

    # Order 3: espresso wrapped in milk, and that composition wrapped in cream.
    order3: Beverage = Espresso()
    order3 = Milk(order3)
    order3 = Cream(order3)

    return [order1, order2, order3]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)

    orders = build_orders()
    logger.info("Serving %d orders", len(orders))
    for number, beverage in enumerate(orders, start=1):
        print(format_order(number, beverage))


if __name__ == "__main__":
    main()

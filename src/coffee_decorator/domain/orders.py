"""Console rendering of a single order line."""

from coffee_decorator.domain.beverages import Beverage


def format_order(number: int, beverage: Beverage) -> str:
    """Render `beverage` as ``Pedido <number>: <description> - $<price>``.

    The price is always shown with two decimals, e.g. ``$4.25``.
    """
    return f"Pedido {number}: {beverage.description()} - ${beverage.price():.2f}"

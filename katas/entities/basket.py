# IN THIS FILE: SHOPPING BASKET TOTALS
from typing import Iterable, List


class Item:
    def __init__(self, unit_price: float, quantity: int):
        self.unit_price = unit_price
        self.quantity = quantity

    def get_subtotal(self) -> float:
        return self.unit_price * float(self.quantity)

    def __repr__(self) -> str:
        return f"Item(unit_price={self.unit_price}, quantity={self.quantity})"


class ShoppingBasket:
    """Sums the subtotals of its items."""

    def __init__(self, items: Iterable[Item] = ()):
        self.items: List[Item] = list(items)

    def get_total(self) -> float:
        return sum((item.get_subtotal() for item in self.items), 0.0)

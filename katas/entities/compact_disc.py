# IN THIS FILE: CD STOCK COUNTER
import logging

from katas.utils.errors import InsufficientStockError

logger = logging.getLogger(__name__)


class CompactDisc:
    """A CD title with a stock count that purchases draw down."""

    def __init__(self, initial_stock: int):
        if initial_stock < 0:
            raise ValueError(f"Initial stock cannot be negative: {initial_stock}")
        self.stock = initial_stock

    def get_stock_count(self) -> int:
        return self.stock

    def buy(self, quantity: int) -> None:
        """
        Take `quantity` copies out of stock.

        Raises:
            InsufficientStockError: if fewer than `quantity` copies are left.
                Stock is left unchanged.
        """
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        if self.stock < quantity:
            raise InsufficientStockError(quantity, self.stock)
        self.stock -= quantity
        logger.debug("Sold %d, %d left", quantity, self.stock)

"""Inventory service, the transaction boundary for sales and restocks.

The service rejects a missing product or a non-positive amount before the
product is touched. Product runs its own checks as well and neither layer
relies on the other.
"""

import structlog

from stockroom.product.product import Product
from stockroom.shared.errors import InventoryError

logger = structlog.get_logger(__name__)


class InventoryService:
    """Stateless sell/restock operations over a single product."""

    def sell_product(self, product: Product | None, amount: int) -> None:
        """Sell ``amount`` units, failing with insufficient stock if the shelf is short."""
        self._validate_product(product)
        self._validate_stock_adjustment(amount)

        product.decrease_stock(amount)
        logger.info(
            "product_sold",
            product_id=product.id,
            quantity=amount,
            remaining=product.quantity_in_stock,
        )

    def restock_product(self, product: Product | None, amount: int) -> None:
        """Put ``amount`` units back on the shelf."""
        self._validate_product(product)
        self._validate_stock_adjustment(amount)

        product.increase_stock(amount)
        logger.info(
            "product_restocked",
            product_id=product.id,
            quantity=amount,
            remaining=product.quantity_in_stock,
        )

    @staticmethod
    def _validate_product(product):
        if product is None:
            raise InventoryError("product", "Invalid product.")

    @staticmethod
    def _validate_stock_adjustment(amount):
        if amount is None or amount <= 0:
            raise InventoryError("amount", "Quantity must be greater than 0.")

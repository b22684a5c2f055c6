"""Product aggregate, the only holder of stock in the stockroom.

Stock Rules:
    quantity_in_stock never drops below zero
    adjustments must be strictly positive
    every check passes before the count changes, so a rejected call
    leaves the product exactly as it was
"""

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation

from protean.fields import Integer, String, ValueObject

from stockroom.category.category import Category
from stockroom.domain import stockroom
from stockroom.product.events import ProductSoldOut, StockDecreased, StockIncreased
from stockroom.shared.errors import InsufficientStockError, InventoryError
from stockroom.shared.money import Money


def _validate_adjustment(amount):
    if amount is None or amount <= 0:
        raise InventoryError("amount", "Quantity must be greater than 0.")


def _price_as_money(price):
    if isinstance(price, Money):
        return price

    try:
        amount = Decimal(str(price)) if price is not None else None
    except (InvalidOperation, ValueError):
        amount = None

    if amount is None or not amount.is_finite():
        raise InventoryError("price", "Price must be a decimal number.")
    if amount < 0:
        raise InventoryError("price", "Price must be greater than or equal to 0.")

    return Money.of(amount)


@stockroom.aggregate
class Product:
    """A sellable item with a price, a category and a shelf count."""

    id: Integer(identifier=True, min_value=0)
    name: String(required=True, max_length=255)
    price: ValueObject(Money, required=True)
    quantity_in_stock: Integer(default=0, min_value=0)
    category: ValueObject(Category, required=True)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, id, name, price, quantity_in_stock, category):
        """Build a product, checking id, name, price, stock and category in that order.

        The first failing check is the one reported.
        """
        if id is None or id < 0:
            raise InventoryError("id", "ID must be greater than or equal to 0.")
        if name is None or not name.strip():
            raise InventoryError("name", "Invalid name.")
        money = _price_as_money(price)
        if quantity_in_stock is None or quantity_in_stock < 0:
            raise InventoryError("quantity_in_stock", "Quantity must be greater than or equal to 0.")
        if category is None:
            raise InventoryError("category", "Category must not be None.")

        return cls(
            id=id,
            name=name,
            price=money,
            quantity_in_stock=quantity_in_stock,
            category=category,
        )

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def increase_stock(self, amount):
        """Add ``amount`` units to the shelf."""
        _validate_adjustment(amount)

        previous = self.quantity_in_stock
        self.quantity_in_stock = previous + amount

        self.raise_(
            StockIncreased(
                product_id=self.id,
                quantity=amount,
                previous_quantity=previous,
                new_quantity=self.quantity_in_stock,
                increased_at=datetime.now(UTC),
            )
        )

    def decrease_stock(self, amount):
        """Take ``amount`` units off the shelf."""
        _validate_adjustment(amount)
        if amount > self.quantity_in_stock:
            raise InsufficientStockError(requested=amount, available=self.quantity_in_stock)

        previous = self.quantity_in_stock
        self.quantity_in_stock = previous - amount

        now = datetime.now(UTC)
        self.raise_(
            StockDecreased(
                product_id=self.id,
                quantity=amount,
                previous_quantity=previous,
                new_quantity=self.quantity_in_stock,
                decreased_at=now,
            )
        )
        if not self.is_in_stock():
            self.raise_(
                ProductSoldOut(
                    product_id=self.id,
                    product_name=self.name,
                    sold_out_at=now,
                )
            )

    def is_in_stock(self):
        return self.quantity_in_stock > 0

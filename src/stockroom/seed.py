"""Starting inventory loaded when the stockroom opens."""

from decimal import Decimal

from stockroom.category.category import Category
from stockroom.product.product import Product


def seed_categories() -> dict[str, Category]:
    return {
        "produce": Category.create(1, "Produce", "This category labels produce products."),
        "dairy": Category.create(2, "Dairy", "This category labels dairy products."),
    }


def seed_products() -> list[Product]:
    """Return a fresh product list in display order."""
    categories = seed_categories()
    return [
        Product.create(1, "Tomato", Decimal("0.25"), 30, categories["produce"]),
        Product.create(2, "Onion", Decimal("0.90"), 20, categories["produce"]),
        Product.create(3, "Milk", Decimal("2.46"), 15, categories["dairy"]),
        Product.create(4, "Cheese", Decimal("3.15"), 10, categories["dairy"]),
    ]

"""Shared BDD fixtures and step definitions for the Stockroom domain."""

import pytest
from pytest_bdd import given, parsers, then
from stockroom.category.category import Category
from stockroom.product.events import ProductSoldOut, StockDecreased, StockIncreased
from stockroom.product.product import Product
from stockroom.shared.errors import ErrorKind

# Map event name strings to classes for dynamic lookup in Then steps
_STOCK_EVENT_CLASSES = {
    "StockIncreased": StockIncreased,
    "StockDecreased": StockDecreased,
    "ProductSoldOut": ProductSoldOut,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def category():
    return Category.create(1, "Produce", "This category labels produce products.")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{name}" priced at {price} with {quantity:d} units in stock'),
    target_fixture="product",
)
def product_in_stock(category, name, price, quantity):
    return Product.create(1, name, price, quantity, category)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the stock level is {quantity:d}"))
def stock_level_is(product, quantity):
    assert product.quantity_in_stock == quantity


@then(parsers.cfparse("the product has {quantity:d} units in stock"))
def product_has_units(product, quantity):
    assert product.quantity_in_stock == quantity


@then("the product is out of stock")
def product_out_of_stock(product):
    assert product.is_in_stock() is False


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(product, event_type):
    event_cls = _STOCK_EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in product._events)


@then("the transaction is rejected for insufficient stock")
def rejected_insufficient(error):
    assert error["exc"] is not None
    assert error["exc"].kind == ErrorKind.INSUFFICIENT_STOCK


@then("the transaction is rejected as an invalid argument")
def rejected_invalid(error):
    assert error["exc"] is not None
    assert error["exc"].kind == ErrorKind.INVALID_ARGUMENT

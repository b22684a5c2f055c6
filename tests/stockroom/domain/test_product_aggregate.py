"""Tests for Product aggregate creation and structure."""

from decimal import Decimal

import pytest
from protean.utils.reflection import declared_fields
from stockroom.category.category import Category
from stockroom.product.product import Product
from stockroom.shared.errors import ErrorKind, InventoryError
from stockroom.shared.money import Money


def _make_product(**overrides):
    defaults = {
        "id": 1,
        "name": "Tomato",
        "price": Decimal("0.25"),
        "quantity_in_stock": 30,
        "category": Category.create(1, "Produce"),
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        assert "id" in fields
        assert "name" in fields
        assert "price" in fields
        assert "quantity_in_stock" in fields
        assert "category" in fields

    def test_create_sets_attributes(self):
        product = _make_product()
        assert product.id == 1
        assert product.name == "Tomato"
        assert product.price.value == Decimal("0.25")
        assert product.quantity_in_stock == 30
        assert product.category.name == "Produce"

    def test_create_accepts_string_price(self):
        product = _make_product(price="2.46")
        assert product.price.value == Decimal("2.46")

    def test_create_accepts_money(self):
        product = _make_product(price=Money.of("3.15"))
        assert product.price.value == Decimal("3.15")

    def test_long_precision_price_kept_exactly(self):
        price = Decimal("1." + "1" * 60)
        product = _make_product(id=5, name="Saffron", price=price, quantity_in_stock=1)
        assert product.price.value == price

    def test_zero_price_and_zero_stock_allowed(self):
        product = _make_product(price=0, quantity_in_stock=0)
        assert product.price.value == Decimal("0")
        assert product.quantity_in_stock == 0

    def test_products_share_a_category(self):
        produce = Category.create(1, "Produce")
        tomato = _make_product(id=1, category=produce)
        onion = _make_product(id=2, name="Onion", category=produce)
        assert tomato.category == onion.category == produce

    def test_create_raises_no_events(self):
        product = _make_product()
        assert product._events == []


class TestProductValidation:
    @pytest.mark.parametrize(
        "overrides, field, message",
        [
            ({"id": -1}, "id", "ID must be greater than or equal to 0."),
            ({"name": ""}, "name", "Invalid name."),
            ({"name": "   "}, "name", "Invalid name."),
            ({"name": None}, "name", "Invalid name."),
            ({"price": Decimal("-0.01")}, "price", "Price must be greater than or equal to 0."),
            ({"price": "cheap"}, "price", "Price must be a decimal number."),
            ({"quantity_in_stock": -1}, "quantity_in_stock", "Quantity must be greater than or equal to 0."),
            ({"category": None}, "category", "Category must not be None."),
        ],
    )
    def test_invalid_attribute_rejected(self, overrides, field, message):
        with pytest.raises(InventoryError) as exc:
            _make_product(**overrides)
        assert exc.value.kind == ErrorKind.INVALID_ARGUMENT
        assert exc.value.field == field
        assert exc.value.messages == {field: [message]}

    def test_first_failing_check_is_reported(self):
        with pytest.raises(InventoryError) as exc:
            _make_product(id=-1, name="", price=-1, quantity_in_stock=-1, category=None)
        assert exc.value.field == "id"

    def test_name_checked_before_price(self):
        with pytest.raises(InventoryError) as exc:
            _make_product(name=" ", price=-1)
        assert exc.value.field == "name"

    def test_stock_checked_before_category(self):
        with pytest.raises(InventoryError) as exc:
            _make_product(quantity_in_stock=-3, category=None)
        assert exc.value.field == "quantity_in_stock"


class TestProductIsInStock:
    def test_in_stock_when_units_remain(self):
        assert _make_product(quantity_in_stock=1).is_in_stock() is True

    def test_not_in_stock_when_empty(self):
        assert _make_product(quantity_in_stock=0).is_in_stock() is False

import os

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def stockroom_bed(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from stockroom.domain import stockroom

    bed = DomainFixture(stockroom)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(stockroom_bed):
    with stockroom_bed.domain_context():
        yield


@pytest.fixture()
def produce():
    from stockroom.category.category import Category

    return Category.create(1, "Produce", "This category labels produce products.")


@pytest.fixture()
def dairy():
    from stockroom.category.category import Category

    return Category.create(2, "Dairy", "This category labels dairy products.")


@pytest.fixture()
def tomato(produce):
    from stockroom.product.product import Product

    return Product.create(1, "Tomato", "0.25", 30, produce)

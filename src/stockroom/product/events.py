"""Domain events for stock movements on the Product aggregate.

Events record what happened to a product's shelf count. They are raised
after the new quantity has been applied, never for rejected adjustments.
"""

from protean.fields import DateTime, Integer, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Product")
class StockIncreased:
    """Units were added to a product's stock."""

    __version__ = 1

    product_id = Integer(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    increased_at = DateTime(required=True)


@stockroom.event(part_of="Product")
class StockDecreased:
    """Units were removed from a product's stock."""

    __version__ = 1

    product_id = Integer(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    decreased_at = DateTime(required=True)


@stockroom.event(part_of="Product")
class ProductSoldOut:
    """The last unit of a product left the shelf."""

    __version__ = 1

    product_id = Integer(required=True)
    product_name = String(required=True)
    sold_out_at = DateTime(required=True)

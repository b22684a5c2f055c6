"""Category value object for classifying products."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer, String, Text

from stockroom.domain import stockroom
from stockroom.shared.errors import InventoryError


@stockroom.value_object
class Category:
    """An immutable grouping such as "Produce" or "Dairy".

    Many products share one category. Two categories are the same category
    when their ids match; name and description play no part in identity.
    """

    id: Integer(required=True, min_value=0)
    name: String(required=True, max_length=100)
    description: Text()

    @classmethod
    def create(cls, id, name, description=None):
        if id is None or id < 0:
            raise InventoryError("id", "Category id must be greater than or equal to 0.")
        if name is None or not name.strip():
            raise InventoryError("name", "Category name must not be null or blank.")

        return cls(id=id, name=name, description=description)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Category name must not be null or blank."]})

    def __eq__(self, other):
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

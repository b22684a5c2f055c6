"""Error kinds raised by stock-bearing domain objects.

Every failure is a protean ``ValidationError`` so existing handlers keep
working, but each one also carries an ``ErrorKind`` so callers can tell the
failures apart without checking the exception class.
"""

from enum import Enum

from protean.exceptions import ValidationError


class ErrorKind(Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    INSUFFICIENT_STOCK = "InsufficientStock"


class InventoryError(ValidationError):
    """A rejected construction or stock adjustment."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, field: str, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__({field: [message]})
        self.field = field
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return self.message


class InsufficientStockError(InventoryError):
    """More units were requested than are on the shelf."""

    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, requested: int, available: int) -> None:
        super().__init__("quantity_in_stock", "Requested amount exceeds amount in stock.")
        self.requested = requested
        self.available = available


def first_message(error: ValidationError) -> str:
    """Return the first human-readable message held by a validation error."""
    messages = getattr(error, "messages", None)
    if isinstance(messages, dict):
        for field_messages in messages.values():
            if isinstance(field_messages, (list, tuple)) and field_messages:
                return str(field_messages[0])
            if field_messages:
                return str(field_messages)
    return str(error)

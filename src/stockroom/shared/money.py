"""Money value object for exact unit prices."""

from decimal import Decimal, InvalidOperation

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String, Text

from stockroom.domain import stockroom

VALID_CURRENCIES = frozenset({"USD", "EUR", "GBP", "CAD", "AUD", "MXN"})


@stockroom.value_object
class Money:
    """A non-negative amount with currency.

    The amount is held as decimal text so prices such as 0.90 never pick up
    binary floating point error. Use ``value`` to do arithmetic.
    """

    amount: Text(required=True)
    currency: String(max_length=3, default="USD")

    @classmethod
    def of(cls, amount, currency="USD"):
        return cls(amount=str(amount), currency=currency)

    @property
    def value(self) -> Decimal:
        return Decimal(self.amount)

    @invariant.post
    def amount_must_be_non_negative_decimal(self):
        try:
            value = Decimal(self.amount)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError({"amount": [f"Amount must be a decimal number, got '{self.amount}'"]}) from None

        if not value.is_finite() or value < 0:
            raise ValidationError({"amount": ["Amount must be greater than or equal to 0"]})

    @invariant.post
    def currency_must_be_supported(self):
        if self.currency not in VALID_CURRENCIES:
            raise ValidationError({"currency": [f"Unsupported currency: {self.currency}"]})

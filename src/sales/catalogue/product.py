"""Product aggregate root — the priced catalogue entries that orders refer to."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from sales.domain import sales
from sales.shared.money import ZERO, format_amount, to_decimal


@sales.aggregate
class Product:
    """A sellable product with a single unit price.

    ``unit_price`` is kept as a canonical two-place decimal string so that
    order totals can be derived with exact ``Decimal`` arithmetic.
    """

    name: String(required=True, max_length=255)
    unit_price: String(required=True, max_length=32)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime()

    @invariant.post
    def unit_price_must_not_be_negative(self):
        if to_decimal(self.unit_price, field="unit_price") < ZERO:
            raise ValidationError({"unit_price": ["Unit price cannot be negative"]})

    @classmethod
    def create(cls, name, unit_price):
        now = datetime.now()
        return cls(
            name=name,
            unit_price=format_amount(to_decimal(unit_price, field="unit_price")),
            created_at=now,
            updated_at=now,
        )

    def revise(self, name, unit_price):
        self.name = name
        self.unit_price = format_amount(to_decimal(unit_price, field="unit_price"))
        self.updated_at = datetime.now()

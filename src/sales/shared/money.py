"""Fixed-point money helpers.

Amounts are persisted as canonical two-place decimal strings ("10.00") and
handled as ``Decimal`` everywhere else. Floats are rejected outright so that
no binary rounding ever leaks into a price or an order total.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value, field="amount") -> Decimal:
    """Parse a stored or submitted amount into a two-place ``Decimal``."""
    if isinstance(value, float):
        raise ValidationError({field: ["Amounts must be given as decimal strings, not floats"]})
    if value is None or value == "":
        raise ValidationError({field: ["Amount is required"]})

    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError({field: [f"'{value}' is not a valid decimal amount"]}) from None

    if not amount.is_finite():
        raise ValidationError({field: [f"'{value}' is not a valid decimal amount"]})
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Render a ``Decimal`` in its canonical stored form."""
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


def line_total(quantity: int, unit_price: Decimal) -> Decimal:
    return (unit_price * quantity).quantize(CENTS, rounding=ROUND_HALF_UP)

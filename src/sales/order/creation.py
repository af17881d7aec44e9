"""Order creation — command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Text

from sales.domain import sales
from sales.order.lifecycle import OrderLifecycle
from sales.order.order import Order
from sales.order.reconciler import DesiredLine


def parse_items(items) -> list[DesiredLine]:
    """Read the ``items`` payload of an order command into desired lines.

    Accepts a JSON string or an already decoded list of
    ``{"product_id": ..., "quantity": ...}`` dicts.
    """
    try:
        data = json.loads(items) if isinstance(items, str) else items
    except json.JSONDecodeError:
        raise ValidationError({"items": ["Items must be valid JSON"]}) from None
    if not isinstance(data, list):
        raise ValidationError({"items": ["Items must be a list of {product_id, quantity} objects"]})

    lines = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict) or not entry.get("product_id"):
            raise ValidationError({"items": [f"Item {position} has no product_id"]})
        quantity = entry.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"items": [f"Item {position} must have a positive integer quantity"]})
        lines.append(DesiredLine(product_id=str(entry["product_id"]), quantity=quantity))
    return lines


@sales.command(part_of="Order")
class CreateOrder:
    customer_id = Identifier(required=True)
    order_date = DateTime(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity}


@sales.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        order = OrderLifecycle.for_domain().create_order(
            customer_id=command.customer_id,
            order_date=command.order_date,
            lines=parse_items(command.items),
        )
        return str(order.id)

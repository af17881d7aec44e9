"""Order modification — replaces an order's header and line items in one go.

The request always carries the full desired state: lines absent from it are
removed, matching lines get the new quantity, and new products are added.
"""

from protean import handle
from protean.fields import DateTime, Identifier, Text

from sales.domain import sales
from sales.order.creation import parse_items
from sales.order.lifecycle import OrderLifecycle
from sales.order.order import Order


@sales.command(part_of="Order")
class UpdateOrder:
    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    order_date = DateTime(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity}


@sales.command_handler(part_of=Order)
class UpdateOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        order = OrderLifecycle.for_domain().update_order(
            order_id=command.order_id,
            customer_id=command.customer_id,
            order_date=command.order_date,
            lines=parse_items(command.items),
        )
        return str(order.id)

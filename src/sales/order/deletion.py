"""Order deletion — command and handler."""

from protean import handle
from protean.fields import Identifier

from sales.domain import sales
from sales.order.lifecycle import OrderLifecycle
from sales.order.order import Order


@sales.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@sales.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        OrderLifecycle.for_domain().delete_order(order_id=command.order_id)
        return str(command.order_id)

"""Order lifecycle — create, update, and delete an order with its line items.

Each operation runs in two phases:

1. Validate and compute: load the current order, reconcile the requested lines
   against it and the catalogue. Anything that can fail fails here, before a
   single write is staged.
2. Apply and commit: mutate the aggregate, stage the writes on a
   ``CommitUnit``, and commit them as one batch.

Concurrent updates to the same order are not detected; the last commit wins.
"""

from sales.catalogue.lookup import CatalogLookup
from sales.order.commit import CommitUnit
from sales.order.order import LineItem, Order
from sales.order.reconciler import reconcile
from sales.shared.exceptions import OrderNotFound
from sales.shared.store import RecordStore, RepositoryStore
from sales.utils.logging import get_logger

logger = get_logger(__name__)


class OrderLifecycle:
    def __init__(self, orders: RecordStore, line_items: RecordStore, catalog: CatalogLookup):
        self.orders = orders
        self.line_items = line_items
        self.catalog = catalog

    @classmethod
    def for_domain(cls) -> "OrderLifecycle":
        """Lifecycle wired to the active domain's repositories."""
        return cls(
            orders=RepositoryStore(Order),
            line_items=RepositoryStore(LineItem),
            catalog=CatalogLookup.for_domain(),
        )

    def _load(self, order_id) -> Order:
        order = self.orders.get(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def create_order(self, customer_id, order_date, lines, cancel_token=None) -> Order:
        """Place a new order. ``lines`` are ``(product_id, quantity)`` pairs or ``DesiredLine``s."""
        reconciliation = reconcile([], lines, self.catalog)

        order = Order.place(customer_id=customer_id, order_date=order_date, reconciliation=reconciliation)
        unit = CommitUnit(cancel_token)
        unit.add(self.orders, order)
        unit.commit()

        logger.info(
            "order.created",
            order_id=str(order.id),
            customer_id=str(customer_id),
            lines=len(reconciliation.final_lines),
            total_price=order.total_price,
        )
        return order

    def update_order(self, order_id, customer_id, order_date, lines, cancel_token=None) -> Order:
        """Replace an order's header and line items with the requested state."""
        order = self._load(order_id)
        reconciliation = reconcile(order.items, lines, self.catalog)

        order.revise(customer_id=customer_id, order_date=order_date, reconciliation=reconciliation)
        unit = CommitUnit(cancel_token)
        unit.update(self.orders, order)
        unit.commit()

        logger.info(
            "order.updated",
            order_id=str(order.id),
            removed=len(reconciliation.removals),
            updated=len(reconciliation.updates),
            created=len(reconciliation.creations),
            lines=reconciliation.final_lines,
            emptied=reconciliation.is_empty,
            total_price=order.total_price,
        )
        return order

    def delete_order(self, order_id, cancel_token=None) -> int:
        """Delete an order and every line item it owns. Returns the number of records removed."""
        order = self._load(order_id)

        # Line items are removed explicitly; stores are not assumed to cascade.
        unit = CommitUnit(cancel_token)
        for item in list(order.items):
            unit.delete(self.line_items, item)
        unit.delete(self.orders, order)
        removed = unit.commit()

        logger.info("order.deleted", order_id=str(order_id), records=removed)
        return removed

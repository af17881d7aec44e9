"""Read-side views of orders.

Snapshots carry the product name and the catalogue's *current* unit price next
to each line, while ``total_price`` is the total recorded when the order was
last reconciled. The two can drift after a product is repriced.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sales.catalogue.lookup import CatalogLookup
from sales.order.order import Order
from sales.shared.exceptions import OrderNotFound
from sales.shared.money import format_amount, to_decimal
from sales.shared.store import RecordStore, RepositoryStore


@dataclass(frozen=True)
class LineSnapshot:
    item_id: str
    product_id: str
    quantity: int
    product_name: str | None = None  # None when the product has since been removed
    unit_price: Decimal | None = None

    def as_dict(self):
        return {
            "item_id": self.item_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "product_name": self.product_name,
            "unit_price": format_amount(self.unit_price) if self.unit_price is not None else None,
        }


@dataclass(frozen=True)
class OrderSnapshot:
    order_id: str
    customer_id: str
    order_date: datetime
    total_price: Decimal
    lines: tuple[LineSnapshot, ...] = ()

    def as_dict(self):
        return {
            "order_id": self.order_id,
            "customer_id": self.customer_id,
            "order_date": self.order_date.isoformat() if self.order_date else None,
            "total_price": format_amount(self.total_price),
            "lines": [line.as_dict() for line in self.lines],
        }


def snapshot(order, catalog: CatalogLookup) -> OrderSnapshot:
    lines = []
    for item in order.items:
        entry = catalog.get_product(item.product_id)
        lines.append(
            LineSnapshot(
                item_id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                product_name=entry.name if entry else None,
                unit_price=entry.unit_price if entry else None,
            )
        )
    return OrderSnapshot(
        order_id=str(order.id),
        customer_id=str(order.customer_id),
        order_date=order.order_date,
        total_price=to_decimal(order.total_price, field="total_price"),
        lines=tuple(lines),
    )


def order_snapshot(order_id, orders: RecordStore | None = None, catalog: CatalogLookup | None = None):
    orders = orders or RepositoryStore(Order)
    order = orders.get(order_id)
    if order is None:
        raise OrderNotFound(order_id)
    return snapshot(order, catalog or CatalogLookup.for_domain())


def customer_orders_by_date(customer_id, orders: RecordStore | None = None, catalog: CatalogLookup | None = None):
    """All orders placed by ``customer_id``, oldest order date first."""
    orders = orders or RepositoryStore(Order)
    catalog = catalog or CatalogLookup.for_domain()
    placed = [order for order in orders.query_all() if str(order.customer_id) == str(customer_id)]
    placed.sort(key=lambda order: order.order_date)
    return [snapshot(order, catalog) for order in placed]

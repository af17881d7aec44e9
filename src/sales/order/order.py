"""Order aggregate (CQRS) with its LineItem entities.

An order's total is never supplied by callers. It is derived from the line
items and the catalogue prices at the moment the order is created or updated,
and stored as a canonical two-place decimal string.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from sales.domain import sales
from sales.shared.money import format_amount


@sales.entity(part_of="Order")
class LineItem:
    """A product on an order. An order holds at most one line per product."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@sales.aggregate
class Order:
    customer_id = Identifier(required=True)  # Not checked against Customer
    order_date = DateTime(required=True)
    total_price = String(max_length=32, default="0.00")
    items = HasMany(LineItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["An order can hold only one line per product"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, order_date, reconciliation):
        """Build a new order from a reconciliation against an empty order."""
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            order_date=order_date,
            total_price=format_amount(reconciliation.total_price),
            items=[LineItem(product_id=line.product_id, quantity=line.quantity) for line in reconciliation.creations],
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Revision
    # -------------------------------------------------------------------
    def revise(self, customer_id, order_date, reconciliation):
        """Overwrite the header and apply a reconciliation computed for this order.

        Removals go first so a product that is dropped and re-added never has
        two lines at once. Updated items keep their identifiers.
        """
        self.customer_id = customer_id
        self.order_date = order_date

        by_id = {str(item.id): item for item in self.items}

        stale = [by_id[item_id] for item_id in reconciliation.removals]
        if stale:
            self.remove_items(stale)

        for change in reconciliation.updates:
            item = by_id[change.item_id]
            if item.quantity != change.quantity:
                item.quantity = change.quantity

        fresh = [LineItem(product_id=line.product_id, quantity=line.quantity) for line in reconciliation.creations]
        if fresh:
            self.add_items(fresh)

        self.total_price = format_amount(reconciliation.total_price)
        self.updated_at = datetime.now(UTC)

    def line_for(self, product_id):
        return next((item for item in self.items if str(item.product_id) == str(product_id)), None)

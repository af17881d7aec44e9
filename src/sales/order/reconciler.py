"""Order line reconciliation.

Turns the current line items of an order and the line items a caller wants
into the changes needed to get from one to the other, and prices the result
against the catalogue. The whole diff is computed up front; nothing is written
here, so a caller either gets a complete ``Reconciliation`` or an exception.

Lines are matched by product id:

    current [(P1, 2), (P2, 3)] + desired [(P1, 5), (P3, 1)]
        -> update P1 to 5, remove P2, create P3 with 1
"""

from dataclasses import dataclass, field
from decimal import Decimal

from sales.shared.exceptions import ProductNotFound
from sales.shared.money import ZERO, line_total


@dataclass(frozen=True)
class DesiredLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class QuantityChange:
    """An existing line item kept in place with a (possibly unchanged) new quantity."""

    item_id: str
    product_id: str
    previous_quantity: int
    quantity: int


@dataclass(frozen=True)
class PricedLine:
    product_id: str
    quantity: int
    unit_price: Decimal

    @property
    def amount(self) -> Decimal:
        return line_total(self.quantity, self.unit_price)


@dataclass(frozen=True)
class Reconciliation:
    removals: tuple[str, ...] = ()  # item ids
    updates: tuple[QuantityChange, ...] = ()
    creations: tuple[DesiredLine, ...] = ()
    total_price: Decimal = ZERO
    priced_lines: tuple[PricedLine, ...] = field(default=(), repr=False)

    @property
    def final_lines(self) -> dict[str, int]:
        """Product id to quantity, as the order will look once applied."""
        return {line.product_id: line.quantity for line in self.priced_lines}

    @property
    def is_empty(self) -> bool:
        return not self.priced_lines


def collapse_lines(desired) -> list[DesiredLine]:
    """Merge repeated product ids into one line each.

    The first occurrence keeps its position, the last occurrence's quantity wins.
    Accepts ``DesiredLine`` objects or ``(product_id, quantity)`` pairs.
    """
    quantities = {}
    for line in desired:
        product_id, quantity = (line.product_id, line.quantity) if isinstance(line, DesiredLine) else line
        quantities[str(product_id)] = int(quantity)
    return [DesiredLine(product_id=pid, quantity=qty) for pid, qty in quantities.items()]


def reconcile(current_items, desired, catalog) -> Reconciliation:
    """Diff ``current_items`` against ``desired`` and price the desired state.

    ``current_items`` are objects exposing ``id``, ``product_id`` and
    ``quantity`` (an order's ``LineItem`` entities). ``catalog`` must provide
    ``get_product(product_id)`` returning an entry with ``unit_price`` or
    ``None``.

    Raises ``ProductNotFound`` naming every desired product the catalogue does
    not know, including products that would only have their quantity changed.
    """
    lines = collapse_lines(desired)

    entries = {line.product_id: catalog.get_product(line.product_id) for line in lines}
    missing = [pid for pid, entry in entries.items() if entry is None]
    if missing:
        raise ProductNotFound(missing)

    wanted = {line.product_id for line in lines}

    # Any second line for the same product is surplus and goes as well.
    current_by_product = {}
    removals = []
    for item in current_items:
        product_id = str(item.product_id)
        if product_id in wanted and product_id not in current_by_product:
            current_by_product[product_id] = item
        else:
            removals.append(str(item.id))

    updates = []
    creations = []
    for line in lines:
        existing = current_by_product.get(line.product_id)
        if existing is not None:
            updates.append(
                QuantityChange(
                    item_id=str(existing.id),
                    product_id=line.product_id,
                    previous_quantity=existing.quantity,
                    quantity=line.quantity,
                )
            )
        else:
            creations.append(line)

    priced = tuple(
        PricedLine(product_id=line.product_id, quantity=line.quantity, unit_price=entries[line.product_id].unit_price)
        for line in lines
    )
    total = sum((p.amount for p in priced), ZERO)

    return Reconciliation(
        removals=tuple(removals),
        updates=tuple(updates),
        creations=tuple(creations),
        total_price=total,
        priced_lines=priced,
    )

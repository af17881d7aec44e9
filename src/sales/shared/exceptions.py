"""Errors raised by the order lifecycle.

Validation problems with individual fields still surface as Protean's
``ValidationError``; the classes here cover the outcomes callers are expected
to branch on.
"""


class SalesError(Exception):
    """Base class for order lifecycle failures."""


class OrderNotFound(SalesError):
    def __init__(self, order_id):
        self.order_id = str(order_id)
        super().__init__(f"Order {self.order_id} does not exist")


class ProductNotFound(SalesError):
    """One or more requested products are missing from the catalogue."""

    def __init__(self, product_ids):
        self.product_ids = tuple(str(pid) for pid in product_ids)
        super().__init__(f"Unknown product(s): {', '.join(self.product_ids)}")


class CommitFailure(SalesError):
    """The batched writes could not be persisted. Nothing was applied.

    Safe to retry for updates and deletes. Retrying a create may place a
    duplicate order; callers own that decision.
    """


class OperationCancelled(SalesError):
    def __init__(self, reason=None):
        self.reason = reason or "cancelled"
        super().__init__(f"Operation cancelled before commit: {self.reason}")

"""Sales domain API package."""

from sales.api.errors import register_error_handlers
from sales.api.routes import customer_router, order_router, product_router

__all__ = ["order_router", "customer_router", "product_router", "register_error_handlers"]

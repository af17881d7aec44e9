"""Sales bounded context — customers, the product catalogue, and orders.

Orders are standard CQRS aggregates (not event sourced). Every create, update,
or delete reconciles the requested line items against the catalogue first and
then persists the whole aggregate in a single unit of work.
"""

from protean.domain import Domain

from sales.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
sales = Domain(name="sales")

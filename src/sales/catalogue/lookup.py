"""Read-only catalogue access used to price order lines."""

from dataclasses import dataclass
from decimal import Decimal

from sales.shared.money import to_decimal
from sales.shared.store import RecordStore, RepositoryStore


@dataclass(frozen=True)
class CatalogEntry:
    """Price snapshot of a product at lookup time."""

    product_id: str
    name: str
    unit_price: Decimal


class CatalogLookup:
    def __init__(self, products: RecordStore):
        self._products = products

    @classmethod
    def for_domain(cls) -> "CatalogLookup":
        from sales.catalogue.product import Product

        return cls(RepositoryStore(Product))

    def get_product(self, product_id) -> CatalogEntry | None:
        product = self._products.get(product_id)
        if product is None:
            return None
        return CatalogEntry(
            product_id=str(product.id),
            name=product.name,
            unit_price=to_decimal(product.unit_price, field="unit_price"),
        )

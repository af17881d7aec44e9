from decimal import Decimal

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def sales_bed():
    from sales.domain import sales
    from sales.utils.db import drop_db, setup_db

    bed = DomainFixture(sales)
    bed.setup()
    setup_db(sales)
    yield bed
    drop_db(sales)
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(sales_bed):
    with sales_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Catalogue fixtures
# ---------------------------------------------------------------------------
class StubCatalog:
    """Dict-backed catalogue for reconciliation tests that need no storage."""

    def __init__(self, prices):
        from sales.catalogue.lookup import CatalogEntry

        self._entries = {
            pid: CatalogEntry(product_id=pid, name=f"Product {pid}", unit_price=Decimal(price))
            for pid, price in prices.items()
        }
        self.lookups = []

    def get_product(self, product_id):
        self.lookups.append(product_id)
        return self._entries.get(product_id)


@pytest.fixture()
def stub_catalog():
    return StubCatalog({"P1": "10.00", "P2": "20.00", "P3": "20.00"})


@pytest.fixture()
def products():
    """Three stored products: P1 at 10.00, P2 and P3 at 20.00. Maps label to id."""
    from sales.catalogue.management import AddProduct

    prices = {"P1": "10.00", "P2": "20.00", "P3": "20.00"}
    return {
        label: current_domain.process(AddProduct(name=f"Product {label}", unit_price=price), asynchronous=False)
        for label, price in prices.items()
    }

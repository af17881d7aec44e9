"""Catalogue management — add, update, and remove product commands with their handler.

Products are read by the order lifecycle but never written by it; price
changes here only affect orders created or updated afterwards.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from sales.catalogue.product import Product
from sales.domain import sales
from sales.utils.logging import get_logger

logger = get_logger(__name__)


@sales.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    unit_price: String(required=True, max_length=32)  # Decimal string, e.g. "19.99"


@sales.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    unit_price: String(required=True, max_length=32)


@sales.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@sales.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(name=command.name, unit_price=command.unit_price)
        current_domain.repository_for(Product).add(product)
        logger.info("product.added", product_id=str(product.id), unit_price=product.unit_price)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        previous_price = product.unit_price
        product.revise(name=command.name, unit_price=command.unit_price)
        repo.add(product)
        if previous_price != product.unit_price:
            logger.info(
                "product.repriced",
                product_id=str(product.id),
                previous_price=previous_price,
                unit_price=product.unit_price,
            )
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product.removed", product_id=str(product.id))
        return str(product.id)

"""Customer management — register, update, and delete commands with their handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from sales.customer.customer import Customer
from sales.domain import sales
from sales.utils.logging import get_logger

logger = get_logger(__name__)


@sales.command(part_of="Customer")
class RegisterCustomer:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    address: String(max_length=255)
    postal_code: String(max_length=20)


@sales.command(part_of="Customer")
class UpdateCustomer:
    customer_id: Identifier(required=True)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    address: String(max_length=255)
    postal_code: String(max_length=20)


@sales.command(part_of="Customer")
class DeleteCustomer:
    """Delete a customer. Orders placed by the customer are left untouched."""

    customer_id: Identifier(required=True)


@sales.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            first_name=command.first_name,
            last_name=command.last_name,
            address=command.address,
            postal_code=command.postal_code,
        )
        current_domain.repository_for(Customer).add(customer)
        logger.info("customer.registered", customer_id=str(customer.id))
        return str(customer.id)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.update_details(
            first_name=command.first_name,
            last_name=command.last_name,
            address=command.address,
            postal_code=command.postal_code,
        )
        repo.add(customer)
        return str(customer.id)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        repo._dao.delete(customer)
        logger.info("customer.deleted", customer_id=str(customer.id))
        return str(customer.id)

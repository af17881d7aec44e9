"""Customer aggregate root."""

from datetime import datetime

from protean.fields import DateTime, String

from sales.domain import sales

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@sales.aggregate
class Customer:
    """A person who places orders.

    Orders refer to a customer by id only, so customers are created, edited,
    and deleted independently of any orders they own.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    address: String(max_length=255)
    postal_code: String(max_length=20)
    registered_at: DateTime(default=datetime.now)
    updated_at: DateTime()

    @classmethod
    def register(cls, first_name, last_name, address=None, postal_code=None):
        now = datetime.now()
        return cls(
            first_name=first_name,
            last_name=last_name,
            address=address,
            postal_code=postal_code,
            registered_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        first_name=_UNSET,
        last_name=_UNSET,
        address=_UNSET,
        postal_code=_UNSET,
    ):
        if first_name is not _UNSET:
            self.first_name = first_name
        if last_name is not _UNSET:
            self.last_name = last_name
        if address is not _UNSET:
            self.address = address
        if postal_code is not _UNSET:
            self.postal_code = postal_code
        self.updated_at = datetime.now()

"""Faker-based payloads matching the OrderDesk API request schemas.

Prices are sent as two-place decimal strings; the API rejects floats.
"""

import random
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()


def customer_data() -> dict:
    return {
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "address": fake.street_address()[:255],
        "postal_code": fake.zipcode()[:20],
    }


def product_data() -> dict:
    return {
        "name": fake.catch_phrase()[:255],
        "unit_price": f"{random.randint(100, 49999) / 100:.2f}",
    }


def order_date() -> str:
    return (datetime.now(UTC) - timedelta(days=random.randint(0, 365))).isoformat()


def order_lines(product_ids: list[str], count: int | None = None) -> list[dict]:
    """Random lines over a sample of ``product_ids``, one line per product."""
    count = count or random.randint(1, len(product_ids))
    return [
        {"product_id": product_id, "quantity": random.randint(1, 5)}
        for product_id in random.sample(product_ids, min(count, len(product_ids)))
    ]


def order_data(customer_id: str, product_ids: list[str]) -> dict:
    return {
        "customer_id": customer_id,
        "order_date": order_date(),
        "items": order_lines(product_ids),
    }

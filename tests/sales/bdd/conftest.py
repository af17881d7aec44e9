"""Shared BDD fixtures and step definitions for the Sales domain."""

import json
from datetime import UTC, datetime

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from sales.catalogue.management import AddProduct
from sales.order.creation import CreateOrder
from sales.order.order import Order

ORDER_DATE = datetime(2024, 3, 1, tzinfo=UTC)


def _items_payload(product_ids, lines):
    """Turn ``"P1:2, P2:3"`` into the JSON items payload of an order command."""
    payload = []
    for part in lines.split(","):
        label, quantity = part.strip().split(":")
        payload.append({"product_id": product_ids.get(label, label), "quantity": int(quantity)})
    return json.dumps(payload)


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def product_ids():
    """Feature-file labels mapped to stored product ids."""
    return {}


@pytest.fixture()
def order_items(product_ids):
    """Builds the items payload for a feature-file line list."""
    return lambda lines: _items_payload(product_ids, lines)


@pytest.fixture()
def order_date():
    return ORDER_DATE


@pytest.fixture()
def context():
    """Mutable scenario state: the order under test and any captured error."""
    return {"order_id": None, "original_items": {}, "error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has "{label}" priced at {price}'))
def _(product_ids, label, price):
    product_ids[label] = current_domain.process(
        AddProduct(name=f"Product {label}", unit_price=price), asynchronous=False
    )


@given(parsers.cfparse('an order with lines "{lines}"'))
def _(order_items, order_date, context, lines):
    context["order_id"] = current_domain.process(
        CreateOrder(customer_id="cust-001", order_date=order_date, items=order_items(lines)),
        asynchronous=False,
    )
    order = current_domain.repository_for(Order).get(context["order_id"])
    context["original_items"] = {str(item.product_id): str(item.id) for item in order.items}


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order total is {total}"))
def _(context, total):
    assert current_domain.repository_for(Order).get(context["order_id"]).total_price == total


@then(parsers.cfparse("the order has {count:d} line items"))
def _(context, count):
    assert len(current_domain.repository_for(Order).get(context["order_id"]).items) == count


@then(parsers.cfparse('the "{label}" line has quantity {quantity:d}'))
def _(context, product_ids, label, quantity):
    order = current_domain.repository_for(Order).get(context["order_id"])
    assert order.line_for(product_ids[label]).quantity == quantity

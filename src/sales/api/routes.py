"""FastAPI routes for the Sales domain — orders, customers, and products."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from sales.api.schemas import (
    CustomerIdResponse,
    CustomerRequest,
    OrderIdResponse,
    OrderRequest,
    OrderResponse,
    ProductIdResponse,
    ProductRequest,
    ProductResponse,
    StatusResponse,
)
from sales.catalogue.management import AddProduct, RemoveProduct, UpdateProduct
from sales.catalogue.product import Product
from sales.customer.management import DeleteCustomer, RegisterCustomer, UpdateCustomer
from sales.order.creation import CreateOrder
from sales.order.deletion import DeleteOrder
from sales.order.modification import UpdateOrder
from sales.order.queries import customer_orders_by_date, order_snapshot


def _items_json(body: OrderRequest) -> str:
    return json.dumps([item.model_dump() for item in body.items])


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: OrderRequest) -> OrderIdResponse:
    command = CreateOrder(
        customer_id=body.customer_id,
        order_date=body.order_date,
        items=_items_json(body),
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return OrderResponse(**order_snapshot(order_id).as_dict())


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: str, body: OrderRequest) -> OrderResponse:
    command = UpdateOrder(
        order_id=order_id,
        customer_id=body.customer_id,
        order_date=body.order_date,
        items=_items_json(body),
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse(**order_snapshot(order_id).as_dict())


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(prefix="/customers", tags=["customers"])


@customer_router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: CustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        first_name=body.first_name,
        last_name=body.last_name,
        address=body.address,
        postal_code=body.postal_code,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@customer_router.put("/{customer_id}", response_model=StatusResponse)
async def update_customer(customer_id: str, body: CustomerRequest) -> StatusResponse:
    command = UpdateCustomer(
        customer_id=customer_id,
        first_name=body.first_name,
        last_name=body.last_name,
        address=body.address,
        postal_code=body.postal_code,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@customer_router.delete("/{customer_id}", response_model=StatusResponse)
async def delete_customer(customer_id: str) -> StatusResponse:
    current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    return StatusResponse()


@customer_router.get("/{customer_id}/orders", response_model=list[OrderResponse])
async def list_customer_orders(customer_id: str) -> list[OrderResponse]:
    """Orders placed by the customer, oldest order date first."""
    return [OrderResponse(**snap.as_dict()) for snap in customer_orders_by_date(customer_id)]


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: ProductRequest) -> ProductIdResponse:
    command = AddProduct(name=body.name, unit_price=str(body.unit_price))
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse(product_id=str(product.id), name=product.name, unit_price=product.unit_price)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: ProductRequest) -> StatusResponse:
    command = UpdateProduct(product_id=product_id, name=body.name, unit_price=str(body.unit_price))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()

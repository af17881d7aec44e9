"""Pydantic request/response schemas for the Sales API.

HTTP bodies are validated here and then translated into Protean commands by
the routes. Money travels as decimal strings.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class OrderRequest(BaseModel):
    """Full desired state of an order, used for both create and update."""

    customer_id: str
    order_date: datetime
    items: list[OrderLineSchema] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "order_date": "2024-03-01T10:30:00",
                    "items": [
                        {"product_id": "prod-001", "quantity": 2},
                        {"product_id": "prod-002", "quantity": 3},
                    ],
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Customer / Product Request Schemas
# ---------------------------------------------------------------------------
class CustomerRequest(BaseModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    address: str | None = Field(None, max_length=255)
    postal_code: str | None = Field(None, max_length=20)


class ProductRequest(BaseModel):
    name: str = Field(..., max_length=255)
    unit_price: Decimal = Field(ge=0, decimal_places=2)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class CustomerIdResponse(BaseModel):
    customer_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class OrderLineResponse(BaseModel):
    item_id: str
    product_id: str
    quantity: int
    product_name: str | None = None
    unit_price: str | None = None


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    order_date: str | None = None
    total_price: str
    lines: list[OrderLineResponse] = Field(default_factory=list)


class ProductResponse(BaseModel):
    product_id: str
    name: str
    unit_price: str


class StatusResponse(BaseModel):
    status: str = "ok"

"""Integration tests for the OrderDesk HTTP endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from sales.api import customer_router, order_router, product_router, register_error_handlers
from sales.order.order import LineItem, Order
from sales.shared.store import RepositoryStore


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(order_router)
    app.include_router(customer_router)
    app.include_router(product_router)
    register_error_handlers(app)
    return TestClient(app)


def _add_product(client, name, unit_price):
    response = client.post("/products", json={"name": name, "unit_price": unit_price})
    assert response.status_code == 201
    return response.json()["product_id"]


def _create_order(client, lines, customer_id="cust-api-001", order_date="2024-03-01T10:30:00"):
    response = client.post(
        "/orders",
        json={
            "customer_id": customer_id,
            "order_date": order_date,
            "items": [{"product_id": pid, "quantity": qty} for pid, qty in lines],
        },
    )
    assert response.status_code == 201
    return response.json()["order_id"]


def _put_lines(client, order_id, lines, customer_id="cust-api-001"):
    return client.put(
        f"/orders/{order_id}",
        json={
            "customer_id": customer_id,
            "order_date": "2024-03-02T09:00:00",
            "items": [{"product_id": pid, "quantity": qty} for pid, qty in lines],
        },
    )


@pytest.fixture()
def catalogue(client):
    return {
        "P1": _add_product(client, "Pen", "10.00"),
        "P2": _add_product(client, "Paper", "20.00"),
        "P3": _add_product(client, "Stapler", "20.00"),
    }


class TestCreateOrderEndpoint:
    def test_create_order(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 2), (catalogue["P2"], 3)])

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total_price == "80.00"

    def test_unknown_product_is_422(self, client, catalogue):
        response = client.post(
            "/orders",
            json={
                "customer_id": "cust-api-001",
                "order_date": "2024-03-01T10:30:00",
                "items": [{"product_id": "ghost", "quantity": 1}],
            },
        )

        assert response.status_code == 422
        assert "ghost" in response.json()["error"]
        assert RepositoryStore(Order).query_all() == []

    def test_zero_quantity_is_rejected_by_schema(self, client, catalogue):
        response = client.post(
            "/orders",
            json={
                "customer_id": "cust-api-001",
                "order_date": "2024-03-01T10:30:00",
                "items": [{"product_id": catalogue["P1"], "quantity": 0}],
            },
        )
        assert response.status_code == 422


class TestOrderReadAndUpdate:
    def test_get_order(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 2)])

        response = client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["total_price"] == "20.00"
        assert body["lines"][0]["product_name"] == "Pen"
        assert body["lines"][0]["unit_price"] == "10.00"

    def test_get_unknown_order_is_404(self, client):
        response = client.get("/orders/no-such-order")
        assert response.status_code == 404
        assert "no-such-order" in response.json()["error"]

    def test_put_replaces_lines(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1)])

        response = client.put(
            f"/orders/{order_id}",
            json={
                "customer_id": "cust-api-001",
                "order_date": "2024-03-02T09:00:00",
                "items": [
                    {"product_id": catalogue["P1"], "quantity": 3},
                    {"product_id": catalogue["P3"], "quantity": 2},
                ],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_price"] == "70.00"
        assert {line["product_id"]: line["quantity"] for line in body["lines"]} == {
            catalogue["P1"]: 3,
            catalogue["P3"]: 2,
        }

    def test_put_removes_several_lines(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1), (catalogue["P2"], 1), (catalogue["P3"], 1)])

        response = _put_lines(client, order_id, [(catalogue["P1"], 2)])

        assert response.status_code == 200
        body = response.json()
        assert [(line["product_id"], line["quantity"]) for line in body["lines"]] == [(catalogue["P1"], 2)]
        assert body["total_price"] == "20.00"

    def test_put_creates_several_lines(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1)])

        response = _put_lines(client, order_id, [(catalogue["P1"], 1), (catalogue["P2"], 2), (catalogue["P3"], 3)])

        assert response.status_code == 200
        body = response.json()
        assert len(body["lines"]) == 3
        assert body["total_price"] == "110.00"

    def test_put_empties_order(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1), (catalogue["P2"], 1), (catalogue["P3"], 1)])

        response = _put_lines(client, order_id, [])

        assert response.status_code == 200
        assert response.json()["lines"] == []
        assert response.json()["total_price"] == "0.00"
        assert RepositoryStore(LineItem).query_all() == []

    def test_put_unknown_order_is_404(self, client, catalogue):
        response = client.put(
            "/orders/no-such-order",
            json={"customer_id": "c", "order_date": "2024-03-01T00:00:00", "items": []},
        )
        assert response.status_code == 404

    def test_put_unknown_product_keeps_order(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1)])

        response = client.put(
            f"/orders/{order_id}",
            json={
                "customer_id": "cust-api-001",
                "order_date": "2024-03-01T10:30:00",
                "items": [{"product_id": "ghost", "quantity": 1}],
            },
        )

        assert response.status_code == 422
        assert current_domain.repository_for(Order).get(order_id).total_price == "10.00"


class TestDeleteOrderEndpoint:
    def test_delete_order(self, client, catalogue):
        order_id = _create_order(client, [(catalogue["P1"], 1), (catalogue["P2"], 1)])

        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert RepositoryStore(LineItem).query_all() == []

    def test_delete_unknown_order_is_404(self, client):
        assert client.delete("/orders/no-such-order").status_code == 404


class TestCustomerEndpoints:
    def test_register_and_list_orders(self, client, catalogue):
        response = client.post("/customers", json={"first_name": "Ada", "last_name": "Lovelace"})
        assert response.status_code == 201
        customer_id = response.json()["customer_id"]

        second = _create_order(client, [(catalogue["P1"], 1)], customer_id=customer_id, order_date="2024-02-01T00:00:00")
        first = _create_order(client, [(catalogue["P2"], 1)], customer_id=customer_id, order_date="2024-01-01T00:00:00")

        response = client.get(f"/customers/{customer_id}/orders")

        assert response.status_code == 200
        assert [order["order_id"] for order in response.json()] == [first, second]

    def test_update_customer(self, client):
        customer_id = client.post("/customers", json={"first_name": "Ada", "last_name": "Byron"}).json()["customer_id"]

        response = client.put(
            f"/customers/{customer_id}", json={"first_name": "Ada", "last_name": "Lovelace", "postal_code": "W1"}
        )

        assert response.status_code == 200


class TestProductEndpoints:
    def test_get_product(self, client):
        product_id = _add_product(client, "Ink", "3.5")

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 200
        assert response.json() == {"product_id": product_id, "name": "Ink", "unit_price": "3.50"}

    def test_negative_price_is_rejected_by_schema(self, client):
        response = client.post("/products", json={"name": "Ink", "unit_price": "-1.00"})
        assert response.status_code == 422

    def test_update_product_price(self, client):
        product_id = _add_product(client, "Ink", "3.50")

        response = client.put(f"/products/{product_id}", json={"name": "Ink", "unit_price": "4.00"})

        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").json()["unit_price"] == "4.00"

"""Order lifecycle load scenario.

Register a customer and a handful of products, then create an order, revise
its lines twice, read it back, list the customer's orders, and delete it.
Every revision sends a fresh random set of lines, so quantity changes,
removals, and new lines all go through reconciliation.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import customer_data, order_data, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import OrderDeskState

PRODUCTS_PER_USER = 4


class OrderLifecycleJourney(SequentialTaskSet):
    def on_start(self):
        self.state = OrderDeskState()

    @task
    def register_customer(self):
        with self.client.post(
            "/customers", json=customer_data(), catch_response=True, name="POST /customers"
        ) as resp:
            if resp.status_code == 201:
                self.state.customer_id = resp.json()["customer_id"]
            else:
                resp.failure(f"Register customer failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_products(self):
        for _ in range(PRODUCTS_PER_USER):
            with self.client.post(
                "/products", json=product_data(), catch_response=True, name="POST /products"
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["product_id"])
                else:
                    resp.failure(f"Add product failed: {resp.status_code} - {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def create_order(self):
        payload = order_data(self.state.customer_id, self.state.product_ids)
        with self.client.post("/orders", json=payload, catch_response=True, name="POST /orders") as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order_id"]
            else:
                resp.failure(f"Create order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    def _revise(self, label):
        payload = order_data(self.state.customer_id, self.state.product_ids)
        with self.client.put(
            f"/orders/{self.state.order_id}", json=payload, catch_response=True, name="PUT /orders/{id}"
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"{label} failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def revise_order(self):
        self._revise("First revision")

    @task
    def revise_order_again(self):
        self._revise("Second revision")

    @task
    def read_order(self):
        with self.client.get(
            f"/orders/{self.state.order_id}", catch_response=True, name="GET /orders/{id}"
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Read order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_customer_orders(self):
        with self.client.get(
            f"/customers/{self.state.customer_id}/orders",
            catch_response=True,
            name="GET /customers/{id}/orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def delete_order(self):
        with self.client.delete(
            f"/orders/{self.state.order_id}", catch_response=True, name="DELETE /orders/{id}"
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrderDeskUser(HttpUser):
    """Simulated back-office user running order lifecycles back to back."""

    wait_time = between(0.5, 3.0)
    tasks = [OrderLifecycleJourney]

"""Storefront load test scenarios.

Two journeys: a shopper browsing and placing bulk orders, and an admin
stocking the catalogue and moving orders through fulfillment.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import admin_headers, customer_headers, order_data, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AdminState, ShopperState

FULFILLMENT_STATUSES = ["processing", "shipped", "delivered"]


class ShopperJourney(SequentialTaskSet):
    """Browse -> Search -> Place order -> Check order history."""

    def on_start(self):
        self.state = ShopperState(headers=customer_headers())

    @task
    def browse(self):
        with self.client.get(
            "/products",
            params={"page": 1, "limit": 12},
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code == 200:
                self.state.product_ids = [p["id"] for p in resp.json()["products"] if p["stock"] > 0]
            else:
                resp.failure(f"Browse failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def search(self):
        self.client.get(
            "/products",
            params={"search": "potato", "category": random.choice(["fresh", "processed", "seeds"])},
            name="GET /products?search",
        )

    @task
    def place_order(self):
        if not self.state.product_ids:
            self.interrupt()
            return
        with self.client.post(
            "/orders",
            json=order_data(self.state.product_ids),
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
            elif resp.status_code == 400:
                # Stock running out under load is expected
                resp.success()
            else:
                resp.failure(f"Place order failed: {extract_error_detail(resp)}")

    @task
    def order_history(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        for order_id in self.state.order_ids:
            self.client.get(f"/orders/{order_id}", headers=self.state.headers, name="GET /orders/{id}")
        self.interrupt()


class AdminJourney(SequentialTaskSet):
    """Add product -> Restock -> Move pending orders along."""

    def on_start(self):
        self.state = AdminState(headers=admin_headers())

    @task
    def add_product(self):
        with self.client.post(
            "/products",
            json=product_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Add product failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def restock(self):
        product_id = random.choice(self.state.product_ids)
        self.client.put(
            f"/products/{product_id}/stock",
            json={"quantity": random.randint(50, 500)},
            headers=self.state.headers,
            name="PUT /products/{id}/stock",
        )

    @task
    def advance_orders(self):
        with self.client.get(
            "/orders/admin/all",
            headers=self.state.headers,
            catch_response=True,
            name="GET /orders/admin/all",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.pending_order_ids = [o["id"] for o in resp.json() if o["status"] != "delivered"][:5]

        for order_id in self.state.pending_order_ids:
            self.client.put(
                f"/orders/admin/orders/{order_id}",
                json={"status": random.choice(FULFILLMENT_STATUSES), "notifyCustomer": False},
                headers=self.state.headers,
                name="PUT /orders/admin/orders/{id}",
            )
        self.interrupt()


class StorefrontUser(HttpUser):
    """Locust user simulating storefront traffic.

    Weighted distribution:
    - 80% Shopper journey
    - 20% Admin journey
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ShopperJourney: 4,
        AdminJourney: 1,
    }

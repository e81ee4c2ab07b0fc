"""Storefront load scenarios.

``CheckoutJourney`` is a stateful SequentialTaskSet: sign up, stock a few
products, place an order, move it along and delete it. Each step depends on
the one before it. ``BrowsingJourney`` is anonymous read traffic.
"""

import random

from locust import HttpUser, SequentialTaskSet, TaskSet, between, task

from loadtests.data_generators import basket, next_status, price_update, product_data, sign_up_data
from loadtests.helpers.state import ShopperState


class CheckoutJourney(SequentialTaskSet):
    """Sign up -> add products -> reprice one -> order -> update status -> read -> delete."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def sign_up(self):
        with self.client.post(
            "/auth/sign-up",
            json=sign_up_data(),
            catch_response=True,
            name="POST /auth/sign-up",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.user_id = body["user_id"]
                self.state.token = body["token"]
            else:
                resp.failure(f"Sign-up failed: {resp.status_code}")
                self.interrupt()

    @task
    def add_products(self):
        for _ in range(3):
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
                    resp.failure(f"Add product failed: {resp.status_code}")
        if not self.state.product_ids:
            self.interrupt()

    @task
    def reprice_product(self):
        product_id = random.choice(self.state.product_ids)
        self.client.put(
            f"/products/{product_id}",
            json=price_update(),
            headers=self.state.headers,
            name="PUT /products/{id}",
        )

    @task
    def place_order(self):
        with self.client.post(
            "/orders",
            json={"user_id": self.state.user_id, "product_ids": basket(self.state.product_ids)},
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}")
                self.interrupt()

    @task
    def update_status(self):
        self.client.put(
            f"/orders/{self.state.order_id}/status",
            json={"status": next_status()},
            headers=self.state.headers,
            name="PUT /orders/{id}/status",
        )

    @task
    def read_orders(self):
        self.client.get(f"/orders/{self.state.order_id}", name="GET /orders/{id}")
        self.client.get(f"/users/{self.state.user_id}/orders", name="GET /users/{id}/orders")

    @task
    def delete_order(self):
        self.client.delete(
            f"/orders/{self.state.order_id}",
            headers=self.state.headers,
            name="DELETE /orders/{id}",
        )
        self.interrupt()


class BrowsingJourney(TaskSet):
    """Anonymous catalogue and order reads."""

    @task(5)
    def list_products(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code}")
                return
            products = resp.json()
        if products:
            self.client.get(f"/products/{random.choice(products)['id']}", name="GET /products/{id}")

    @task(2)
    def list_orders(self):
        self.client.get("/orders", name="GET /orders")

    @task(1)
    def health(self):
        self.client.get("/health", name="GET /health")


class StorefrontUser(HttpUser):
    """Mixed shopper traffic: mostly browsing, some full checkouts."""

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowsingJourney: 7,
        CheckoutJourney: 3,
    }

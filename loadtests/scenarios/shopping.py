"""Customer load test scenarios.

Shoppers browse the public catalogue, fill a cart from what is listed and
check out. A 409 at checkout is a legitimate outcome when another shopper
took the last units first.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import address_data, checkout_data, shopper_headers
from loadtests.helpers.response import error_kind, extract_error_detail
from loadtests.helpers.state import ShopperState


class BrowseAndCheckoutJourney(SequentialTaskSet):
    """Browse -> Add 1-3 Variants -> Adjust Quantity -> Save Address -> Check Out -> View Order."""

    def on_start(self):
        self.state = ShopperState(headers=shopper_headers())
        self.in_stock = []

    @task
    def browse(self):
        with self.client.get("/products?limit=24", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.in_stock = [
                variant["id"]
                for product in resp.json()
                for variant in product["variants"]
                if variant["inventory"] > 0
            ]
            if not self.in_stock:
                resp.success()
                self.interrupt()

    @task
    def fill_cart(self):
        for variant_id in random.sample(self.in_stock, k=min(len(self.in_stock), random.randint(1, 3))):
            with self.client.post(
                "/cart/items",
                json={"variant_id": variant_id, "quantity": random.randint(1, 2)},
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart/items",
            ) as resp:
                if resp.status_code == 201:
                    self.state.item_ids.append(resp.json()["item_id"])
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def adjust_quantity(self):
        if not self.state.item_ids:
            self.interrupt()
            return
        with self.client.patch(
            f"/cart/items/{self.state.item_ids[0]}",
            json={"quantity": 1},
            headers=self.state.headers,
            catch_response=True,
            name="PATCH /cart/items/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update quantity failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def save_address(self):
        with self.client.post(
            "/account/addresses",
            json=address_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /account/addresses",
        ) as resp:
            if resp.status_code == 201:
                self.state.address_id = resp.json()["address_id"]
            else:
                resp.failure(f"Save address failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def check_out(self):
        with self.client.post(
            "/orders",
            json=checkout_data(self.state.address_id),
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
            elif resp.status_code == 409 and error_kind(resp) == "Out_Of_Stock":
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def view_orders(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        for order_id in self.state.order_ids:
            self.client.get(f"/orders/{order_id}", headers=self.state.headers, name="GET /orders/{id}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1, 3)
    tasks = [BrowseAndCheckoutJourney]

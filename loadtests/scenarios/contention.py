"""Last-unit contention scenario.

Every user races for the same scarce variant. The run is healthy when the
number of successful checkouts never exceeds the stock that was published
and every loser receives an Out_Of_Stock 409.
"""

import requests
from locust import HttpUser, between, events, task

from loadtests.data_generators import (
    address_data,
    checkout_data,
    product_data,
    shopper_headers,
    staff_headers,
    variant_data,
)
from loadtests.helpers.response import error_kind, extract_error_detail

SCARCE_STOCK = 5

_scarce = {"variant_id": None, "sold": 0, "refused": 0}


@events.test_start.add_listener
def publish_scarce_variant(environment, **_kwargs):
    """Create one product with ``SCARCE_STOCK`` units before users spawn."""
    if environment.host is None:
        return

    headers = staff_headers()
    product = requests.post(f"{environment.host}/admin/products", json=product_data(), headers=headers, timeout=10)
    product.raise_for_status()
    variant = requests.post(
        f"{environment.host}/admin/products/{product.json()['product_id']}/variants",
        json=variant_data(initial_inventory=SCARCE_STOCK),
        headers=headers,
        timeout=10,
    )
    variant.raise_for_status()
    _scarce["variant_id"] = variant.json()["variant_id"]


@events.test_stop.add_listener
def report_oversell(**_kwargs):
    print(f"\n[CONTENTION] sold={_scarce['sold']} refused={_scarce['refused']} stock={SCARCE_STOCK}")
    if _scarce["sold"] > SCARCE_STOCK:
        print("[CONTENTION] OVERSOLD: more checkouts succeeded than units existed")


class LastUnitUser(HttpUser):
    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.headers = shopper_headers()
        resp = self.client.post(
            "/account/addresses", json=address_data(), headers=self.headers, name="POST /account/addresses"
        )
        self.address_id = resp.json()["address_id"] if resp.status_code == 201 else None

    @task
    def grab_and_check_out(self):
        if _scarce["variant_id"] is None or self.address_id is None:
            return
        self.client.post(
            "/cart/items",
            json={"variant_id": _scarce["variant_id"], "quantity": 1},
            headers=self.headers,
            name="POST /cart/items [scarce]",
        )
        with self.client.post(
            "/orders",
            json=checkout_data(self.address_id),
            headers=self.headers,
            catch_response=True,
            name="POST /orders [scarce]",
        ) as resp:
            if resp.status_code == 201:
                _scarce["sold"] += 1
            elif resp.status_code == 409:
                _scarce["refused"] += 1
                resp.success()
            elif resp.status_code == 400 and error_kind(resp) == "Empty_Cart":
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")

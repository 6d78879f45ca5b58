"""Staff load test scenarios: publishing stock and working the order queue."""

import random
import uuid

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_data, staff_headers, variant_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CatalogueState

NEXT_STATUS = {
    "PENDING": "CONFIRMED",
    "CONFIRMED": "PROCESSING",
    "PROCESSING": "SHIPPED",
    "SHIPPED": "DELIVERED",
}


class PublishProductJourney(SequentialTaskSet):
    """Create Product -> Add 2 Variants -> Restock One -> Count The Other."""

    def on_start(self):
        self.headers = staff_headers()
        self.state = CatalogueState()

    @task
    def create_product(self):
        with self.client.post(
            "/admin/products",
            json=product_data(),
            headers=self.headers,
            catch_response=True,
            name="POST /admin/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["product_id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_variants(self):
        for _ in range(2):
            with self.client.post(
                f"/admin/products/{self.state.product_id}/variants",
                json=variant_data(),
                headers=self.headers,
                catch_response=True,
                name="POST /admin/products/{id}/variants",
            ) as resp:
                if resp.status_code == 201:
                    self.state.variant_ids.append(resp.json()["variant_id"])
                else:
                    resp.failure(f"Add variant failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def restock(self):
        if not self.state.variant_ids:
            self.interrupt()
            return
        self.client.post(
            f"/admin/variants/{self.state.variant_ids[0]}/restock",
            json={"quantity": random.randint(10, 50), "reference": f"PO-{uuid.uuid4().hex[:6]}"},
            headers=self.headers,
            name="POST /admin/variants/{id}/restock",
        )

    @task
    def cycle_count(self):
        self.client.put(
            f"/admin/variants/{self.state.variant_ids[-1]}/stock",
            json={"stock": random.randint(0, 40), "reason": "Cycle count"},
            headers=self.headers,
            name="PUT /admin/variants/{id}/stock",
        )

    @task
    def done(self):
        self.interrupt()


class WorkOrderQueueJourney(SequentialTaskSet):
    """Dashboard -> Order Table -> Move Each Open Order One Step Forward."""

    def on_start(self):
        self.headers = staff_headers()
        self.open_orders = []

    @task
    def dashboard(self):
        self.client.get("/admin/dashboard", headers=self.headers, name="GET /admin/dashboard")
        self.client.get("/admin/low-stock", headers=self.headers, name="GET /admin/low-stock")

    @task
    def load_orders(self):
        with self.client.get(
            "/admin/orders?limit=20",
            headers=self.headers,
            catch_response=True,
            name="GET /admin/orders",
        ) as resp:
            if resp.status_code == 200:
                self.open_orders = [o for o in resp.json() if o["status"] in NEXT_STATUS]
            else:
                resp.failure(f"Order table failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def advance_orders(self):
        for order in self.open_orders[:5]:
            with self.client.put(
                f"/admin/orders/{order['id']}/status",
                json={"status": NEXT_STATUS[order["status"]]},
                headers=self.headers,
                catch_response=True,
                name="PUT /admin/orders/{id}/status",
            ) as resp:
                # Another staff user may have advanced it already
                if resp.status_code == 400:
                    resp.success()

    @task
    def done(self):
        self.interrupt()


class StaffUser(HttpUser):
    wait_time = between(2, 5)
    tasks = {PublishProductJourney: 1, WorkOrderQueueJourney: 3}

"""Anonymous browsing load: catalog reads and session checks."""

from locust import HttpUser, between, task

from loadtests.helpers.response import extract_error_detail


class BrowsingUser(HttpUser):
    """Visitor who never signs in."""

    wait_time = between(0.2, 1.0)

    @task(5)
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code != 200:
                resp.failure(f"Catalog listing failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(2)
    def auth_status(self):
        with self.client.get("/api/auth/status", catch_response=True, name="GET /api/auth/status") as resp:
            if resp.status_code == 401:
                resp.success()
            else:
                resp.failure(f"Anonymous status should be 401, got {resp.status_code}")

    @task(1)
    def orders_require_login(self):
        with self.client.get("/api/orders", catch_response=True, name="GET /api/orders [anonymous]") as resp:
            if resp.status_code == 401:
                resp.success()
            else:
                resp.failure(f"Anonymous order listing should be 401, got {resp.status_code}")

    @task(1)
    def health(self):
        self.client.get("/health", name="GET /health")

"""Checkout load test scenarios.

Stateful SequentialTaskSet journeys: each shopper signs up, browses the
catalog, places orders and reads them back. Steps execute in order and
depend on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_from_products, cart_total, cart_with_unknown_product, credentials
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class _ShopperJourney(SequentialTaskSet):
    def on_start(self):
        self.state = ShopperState()

    def sign_up(self):
        payload = credentials()
        with self.client.post(
            "/api/auth/register",
            json=payload,
            catch_response=True,
            name="POST /api/auth/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["id"]
                self.state.email = payload["email"]
                self.state.password = payload["password"]
            else:
                resp.failure(f"Registration failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    def browse(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            products = resp.json() if resp.status_code == 200 else []
            if not products:
                resp.failure(f"Empty or failed catalog listing: {resp.status_code}")
                self.interrupt()
            self.state.products = products

    def place_order(self):
        cart = cart_from_products(self.state.products)
        expected = cart_total(cart)
        with self.client.post(
            "/api/orders",
            json={"cart": cart},
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                return
            order = resp.json()
            if order["total"] != expected:
                resp.failure(f"Order total {order['total']} != expected {expected}")
                return
            self.state.order_ids.append(order["id"])
            self.state.expected_totals[order["id"]] = expected

    def check_history(self):
        with self.client.get("/api/orders", catch_response=True, name="GET /api/orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")
                return
            listed = {order["id"]: order for order in resp.json()}
            missing = [order_id for order_id in self.state.order_ids if order_id not in listed]
            if missing:
                resp.failure(f"Orders missing from history: {missing}")
            elif any(order["user_id"] != self.state.user_id for order in listed.values()):
                resp.failure("History contains another user's order")


class CheckoutJourney(_ShopperJourney):
    """Register -> List Products -> Place 2 Orders -> List Orders -> Logout."""

    @task
    def register(self):
        self.sign_up()

    @task
    def list_products(self):
        self.browse()

    @task
    def first_order(self):
        self.place_order()

    @task
    def second_order(self):
        self.place_order()

    @task
    def list_orders(self):
        self.check_history()

    @task
    def logout(self):
        self.client.post("/api/auth/logout", name="POST /api/auth/logout")

    @task
    def done(self):
        self.interrupt()


class ReturningShopperJourney(_ShopperJourney):
    """Register -> Logout -> Login -> Order -> List Orders.

    Exercises session cookies across a fresh sign-in.
    """

    @task
    def register(self):
        self.sign_up()

    @task
    def logout(self):
        self.client.post("/api/auth/logout", name="POST /api/auth/logout")

    @task
    def login(self):
        with self.client.post(
            "/api/auth/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /api/auth/login",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_products(self):
        self.browse()

    @task
    def order(self):
        self.place_order()

    @task
    def list_orders(self):
        self.check_history()

    @task
    def done(self):
        self.interrupt()


class FailedCheckoutJourney(_ShopperJourney):
    """Register -> Order with an unknown product -> verify nothing was stored.

    The API must answer 500 and the order must not show up in history.
    """

    @task
    def register(self):
        self.sign_up()

    @task
    def list_products(self):
        self.browse()

    @task
    def broken_order(self):
        with self.client.post(
            "/api/orders",
            json={"cart": cart_with_unknown_product(self.state.products)},
            catch_response=True,
            name="POST /api/orders [unknown product]",
        ) as resp:
            if resp.status_code == 500:
                resp.success()
            else:
                resp.failure(f"Expected 500 for unknown product, got {resp.status_code}")

    @task
    def history_is_empty(self):
        with self.client.get("/api/orders", catch_response=True, name="GET /api/orders") as resp:
            if resp.status_code == 200 and resp.json():
                resp.failure("Rolled-back order is visible in history")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Locust user simulating shoppers.

    Weighted distribution:
    - 70% Checkout
    - 20% Returning shopper
    - 10% Failed checkout (rollback path)
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CheckoutJourney: 7,
        ReturningShopperJourney: 2,
        FailedCheckoutJourney: 1,
    }

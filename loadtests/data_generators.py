"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's validation rules
(EmailAddress value object, password length, cart line shape).
"""

import random
import uuid
from decimal import Decimal

from faker import Faker

fake = Faker()


def valid_email() -> str:
    """Generate unique emails that pass EmailAddress validation.

    Rules: exactly one @, no whitespace, dotted domain, no leading/trailing
    dots, no consecutive dots.
    """
    local = fake.user_name()[:20].strip(".")
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:8]}@{domain}"


def valid_password() -> str:
    """Between 8 and 32 characters, well inside bcrypt's 72-byte limit."""
    return fake.password(length=random.randint(8, 32))


def credentials() -> dict:
    return {"email": valid_email(), "password": valid_password()}


def cart_from_products(products: list[dict], max_lines: int = 4) -> list[dict]:
    """Pick 1..max_lines catalog products, at their listed price."""
    chosen = random.sample(products, k=random.randint(1, min(max_lines, len(products))))
    return [{"id": product["id"], "price": product["price"], "quantity": random.randint(1, 3)} for product in chosen]


def cart_total(cart: list[dict]) -> float:
    """Expected order total for a cart, computed the way the server does."""
    total = sum((Decimal(repr(line["price"])) * line["quantity"] for line in cart), Decimal("0"))
    return float(total.quantize(Decimal("0.01")))


def cart_with_unknown_product(products: list[dict]) -> list[dict]:
    """A cart whose last line points at a product that does not exist."""
    cart = cart_from_products(products, max_lines=2)
    cart.append({"id": str(uuid.uuid4()), "price": 9.99, "quantity": 1})
    return cart

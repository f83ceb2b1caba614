"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. The session cookie itself lives in the Locust client.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a single simulated shopper from sign-up to order history."""

    user_id: str | None = None
    email: str | None = None
    password: str | None = None
    products: list[dict] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)
    expected_totals: dict[str, float] = field(default_factory=dict)

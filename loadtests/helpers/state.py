"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, never shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a simulated customer's browsing and orders."""

    headers: dict = field(default_factory=dict)
    product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)


@dataclass
class AdminState:
    """Tracks products and orders an admin is managing."""

    headers: dict = field(default_factory=dict)
    product_ids: list[str] = field(default_factory=list)
    pending_order_ids: list[str] = field(default_factory=list)

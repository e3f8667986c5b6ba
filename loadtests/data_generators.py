"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
and use the camelCase field names the web client sends.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["fresh", "processed", "seeds"]
NIGERIAN_STATES = ["Plateau", "Lagos", "Abuja FCT", "Kaduna", "Kano", "Bauchi"]


def customer_headers() -> dict:
    """Gateway headers for a fresh simulated customer."""
    return {
        "X-User-Id": f"cust-lt-{uuid.uuid4().hex[:10]}",
        "X-User-Email": fake.free_email(),
        "X-User-Name": fake.name(),
    }


def admin_headers() -> dict:
    return {"X-User-Id": f"admin-lt-{uuid.uuid4().hex[:6]}", "X-User-Role": "admin"}


def bulk_pricing() -> list[dict]:
    """Zero to three tiers with distinct thresholds."""
    thresholds = sorted(random.sample([5, 10, 20, 50], k=random.randint(0, 3)))
    return [{"minQuantity": threshold, "discount": min(5 * (i + 1), 30)} for i, threshold in enumerate(thresholds)]


def product_data(stock: int | None = None) -> dict:
    """Generate a ProductRequest payload."""
    return {
        "name": f"{random.choice(['Irish', 'Plateau', 'Highland'])} Potatoes {uuid.uuid4().hex[:6]}",
        "description": fake.sentence(nb_words=10),
        "price": round(random.uniform(500, 25000), 2),
        "category": random.choice(CATEGORIES),
        "weight": f"{random.choice([1, 5, 10, 25, 50])}kg",
        "stock": stock if stock is not None else random.randint(500, 5000),
        "images": [fake.image_url()],
        "bulkPricing": bulk_pricing(),
    }


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": random.choice(NIGERIAN_STATES),
        "zipCode": fake.postcode()[:20],
        "phone": f"+234{random.randint(7000000000, 9099999999)}",
    }


def order_data(product_ids: list[str], max_lines: int = 3) -> dict:
    """Generate a PlaceOrderRequest payload from known product ids."""
    chosen = random.sample(product_ids, k=min(len(product_ids), random.randint(1, max_lines)))
    return {
        "items": [{"product": product_id, "quantity": random.randint(1, 25)} for product_id in chosen],
        "shippingAddress": shipping_address(),
    }

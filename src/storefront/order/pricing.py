"""Bulk-discount pricing for order lines.

A product may carry several bulk-pricing tiers. For a requested quantity the
tier with the greatest ``min_quantity`` not exceeding that quantity applies;
tiers never stack. Tiers are stored unordered, so they are sorted before the
first match is taken.

All amounts are rounded to 2 decimal places.
"""

from dataclasses import dataclass


def _money(amount: float) -> float:
    return round(amount, 2)


@dataclass(frozen=True)
class LinePrice:
    """Pricing of a single order line."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    raw_subtotal: float
    discount: float
    subtotal: float
    discount_percent: float = 0.0


@dataclass(frozen=True)
class CartPrice:
    """Pricing of a whole cart, line by line."""

    lines: tuple[LinePrice, ...]
    subtotal: float
    discount_total: float
    total_amount: float


def select_tier(tiers, quantity: int):
    """Return the largest tier whose ``min_quantity`` is at most ``quantity``, or None."""
    ordered = sorted(tiers or [], key=lambda tier: tier.min_quantity, reverse=True)
    return next((tier for tier in ordered if tier.min_quantity <= quantity), None)


def price_line(product, quantity: int) -> LinePrice:
    """Price ``quantity`` units of ``product`` at its current unit price."""
    raw_subtotal = _money(product.price * quantity)

    tier = select_tier(product.pricing_tiers, quantity)
    discount_percent = tier.discount_percent if tier else 0.0
    discount = _money(raw_subtotal * discount_percent / 100)

    return LinePrice(
        product_id=str(product.id),
        product_name=product.name,
        quantity=quantity,
        unit_price=product.price,
        raw_subtotal=raw_subtotal,
        discount=discount,
        subtotal=_money(raw_subtotal - discount),
        discount_percent=discount_percent,
    )


def price_cart(lines) -> CartPrice:
    """Price a sequence of ``(product, quantity)`` pairs, keeping their order."""
    priced = tuple(price_line(product, quantity) for product, quantity in lines)
    return CartPrice(
        lines=priced,
        subtotal=_money(sum(line.raw_subtotal for line in priced)),
        discount_total=_money(sum(line.discount for line in priced)),
        total_amount=_money(sum(line.subtotal for line in priced)),
    )

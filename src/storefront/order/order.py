"""Order aggregate (CQRS) with its line items, pricing and shipping address.

Orders are created once from a priced cart and never deleted. Line prices are
locked at purchase: ``unit_price`` is the undiscounted catalogue price at the
time of ordering and is never recalculated.

Fulfillment status is overwritten by administrators; there is no transition
graph, only the closed set of statuses below. Payment status is tracked
separately and is not touched by fulfillment updates.
"""

import json
import secrets
import string
from datetime import UTC, datetime
from enum import Enum

from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from storefront.domain import storefront
from storefront.exceptions import InvalidStatus
from storefront.order.events import OrderPlaced, OrderStatusUpdated

DEFAULT_CURRENCY = "NGN"
REFERENCE_PREFIX = "ORD-"
_REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


def generate_reference() -> str:
    """Human-readable order reference, e.g. ``ORD-7K2Q9XWZ4``."""
    return REFERENCE_PREFIX + "".join(secrets.choice(_REFERENCE_ALPHABET) for _ in range(9))


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order is delivered. Captured at checkout and never changed."""

    street = String(required=True, max_length=255)
    city = String(max_length=100)
    state = String(required=True, max_length=100)
    postal_code = String(max_length=20)
    phone = String(required=True, max_length=30)


@storefront.value_object(part_of="Order")
class OrderPricing:
    """Order totals.

    ``subtotal`` is the sum of undiscounted line amounts, ``discount_total``
    the sum of bulk discounts, and ``total_amount`` what the customer pays.
    """

    subtotal = Float(default=0.0)
    discount_total = Float(default=0.0)
    total_amount = Float(default=0.0)
    currency = String(max_length=3, default=DEFAULT_CURRENCY)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """One product line of an order, priced at purchase time."""

    position = Integer(required=True, min_value=0)  # index in the submitted cart
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    discount = Float(default=0.0)
    subtotal = Float(required=True, min_value=0.0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    reference = String(required=True, max_length=20)
    customer_id = Identifier(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=254)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress)
    pricing = ValueObject(OrderPricing)
    payment_status = String(
        choices=PaymentStatus,
        default=PaymentStatus.PENDING.value,
    )
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    tracking_number = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    @property
    def line_items(self):
        """Items in the order they were submitted."""
        return sorted(self.items or [], key=lambda item: item.position)

    def items_snapshot(self) -> str:
        return json.dumps(
            [
                {
                    "product_id": str(item.product_id),
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                    "discount": item.discount,
                    "subtotal": item.subtotal,
                }
                for item in self.line_items
            ]
        )

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_id,
        cart,
        shipping_address,
        customer_name=None,
        customer_email=None,
        currency=DEFAULT_CURRENCY,
    ):
        """Create an order from a priced cart.

        Args:
            customer_id: The customer placing the order.
            cart: A ``CartPrice`` produced by ``storefront.order.pricing.price_cart``.
            shipping_address: Dict with street, city, state, postal_code, phone.
            customer_name: Display name captured from the caller.
            customer_email: Contact email captured from the caller.
        """
        now = datetime.now(UTC)
        order = cls(
            reference=generate_reference(),
            customer_id=str(customer_id),
            customer_name=customer_name,
            customer_email=customer_email,
            items=[
                OrderItem(
                    position=position,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    discount=line.discount,
                    subtotal=line.subtotal,
                )
                for position, line in enumerate(cart.lines)
            ],
            shipping_address=ShippingAddress(**shipping_address),
            pricing=OrderPricing(
                subtotal=cart.subtotal,
                discount_total=cart.discount_total,
                total_amount=cart.total_amount,
                currency=currency or DEFAULT_CURRENCY,
            ),
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                reference=order.reference,
                customer_id=str(customer_id),
                customer_name=customer_name,
                customer_email=customer_email,
                items=order.items_snapshot(),
                shipping_address=json.dumps(order.shipping_address.to_dict()),
                subtotal=order.pricing.subtotal,
                discount_total=order.pricing.discount_total,
                total_amount=order.pricing.total_amount,
                currency=order.pricing.currency,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Fulfillment
    # -------------------------------------------------------------------
    def update_status(self, new_status, tracking_number=None, notify_customer=True):
        """Overwrite the fulfillment status.

        Raises:
            InvalidStatus: ``new_status`` is not an ``OrderStatus`` value. The
                order is left untouched.
        """
        allowed = [status.value for status in OrderStatus]
        if new_status not in allowed:
            raise InvalidStatus(new_status, allowed)

        previous_status = self.status
        self.status = new_status
        if tracking_number:
            self.tracking_number = tracking_number
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                reference=self.reference,
                customer_id=str(self.customer_id),
                customer_name=self.customer_name,
                customer_email=self.customer_email,
                previous_status=previous_status,
                new_status=new_status,
                tracking_number=self.tracking_number,
                notify_customer=notify_customer,
                updated_at=now,
            )
        )

"""Domain events for the Order aggregate.

Both events carry the customer's contact details so that notification
handlers never have to load the order. Only ``OrderPlaced`` carries the priced
lines and totals.
"""

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A priced order was stored and its stock taken."""

    __version__ = 1

    order_id = Identifier(required=True)
    reference = String(required=True)
    customer_id = Identifier(required=True)
    customer_name = String()
    customer_email = String()
    items = Text(required=True)  # JSON: list of priced line dicts
    shipping_address = Text(required=True)  # JSON: address dict
    subtotal = Float(required=True)
    discount_total = Float(required=True)
    total_amount = Float(required=True)
    currency = String(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusUpdated:
    """An administrator moved the order to a new fulfillment status."""

    __version__ = 1

    order_id = Identifier(required=True)
    reference = String(required=True)
    customer_id = Identifier(required=True)
    customer_name = String()
    customer_email = String()
    previous_status = String(required=True)
    new_status = String(required=True)
    tracking_number = String()
    notify_customer = Boolean(default=True)
    updated_at = DateTime(required=True)

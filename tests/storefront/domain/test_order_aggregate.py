"""Domain tests for the Order aggregate."""

import json
import re

import pytest
from protean.exceptions import ValidationError

from storefront.exceptions import InvalidStatus
from storefront.order.events import OrderPlaced, OrderStatusUpdated
from storefront.order.order import (
    DEFAULT_CURRENCY,
    Order,
    OrderStatus,
    PaymentStatus,
    generate_reference,
)
from storefront.order.pricing import price_cart
from storefront.product.product import Product

ADDRESS = {
    "street": "12 Rayfield Road",
    "city": "Jos",
    "state": "Plateau",
    "postal_code": "930001",
    "phone": "+2348012345678",
}


def _cart():
    potatoes = Product.create(
        name="Fresh Irish Potatoes",
        description="Fresh",
        price=1000.0,
        category="fresh",
        weight="50kg",
        stock=20,
        pricing_tiers=[{"min_quantity": 10, "discount_percent": 10.0}],
    )
    chips = Product.create(
        name="Potato Chips",
        description="Processed",
        price=500.0,
        category="processed",
        weight="1kg",
        stock=20,
    )
    return price_cart([(potatoes, 12), (chips, 2)])


def _place(**overrides):
    fields = {
        "customer_id": "cust-001",
        "cart": _cart(),
        "shipping_address": ADDRESS,
        "customer_name": "Ada Okafor",
        "customer_email": "ada@example.com",
    }
    fields.update(overrides)
    return Order.place(**fields)


class TestReference:
    def test_format(self):
        assert re.fullmatch(r"ORD-[A-Z0-9]{9}", generate_reference())

    def test_references_differ(self):
        assert len({generate_reference() for _ in range(50)}) == 50


class TestPlaceOrder:
    def test_initial_state(self):
        order = _place()

        assert order.status == OrderStatus.PENDING.value
        assert order.payment_status == PaymentStatus.PENDING.value
        assert order.customer_id == "cust-001"
        assert re.fullmatch(r"ORD-[A-Z0-9]{9}", order.reference)
        assert order.tracking_number is None

    def test_pricing(self):
        order = _place()

        assert order.pricing.subtotal == 13000.0
        assert order.pricing.discount_total == 1200.0
        assert order.pricing.total_amount == 11800.0
        assert order.pricing.currency == DEFAULT_CURRENCY

    def test_items_keep_cart_order_and_purchase_price(self):
        order = _place()

        items = order.line_items
        assert [item.product_name for item in items] == ["Fresh Irish Potatoes", "Potato Chips"]
        assert items[0].unit_price == 1000.0
        assert items[0].discount == 1200.0
        assert items[0].subtotal == 10800.0
        assert items[1].subtotal == 1000.0

    def test_shipping_address(self):
        order = _place()

        assert order.shipping_address.street == "12 Rayfield Road"
        assert order.shipping_address.phone == "+2348012345678"

    def test_address_without_phone_rejected(self):
        address = {k: v for k, v in ADDRESS.items() if k != "phone"}
        with pytest.raises(ValidationError):
            _place(shipping_address=address)

    def test_address_city_and_postal_code_are_optional(self):
        order = _place(shipping_address={"street": "1 Main St", "state": "Plateau", "phone": "0801"})
        assert order.shipping_address.city is None

    def test_raises_order_placed(self):
        order = _place()

        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.reference == order.reference
        assert event.customer_email == "ada@example.com"
        assert event.total_amount == 11800.0
        assert len(json.loads(event.items)) == 2


class TestUpdateStatus:
    @pytest.mark.parametrize("status", [s.value for s in OrderStatus])
    def test_any_lifecycle_status_accepted(self, status):
        order = _place()
        order.update_status(status)
        assert order.status == status

    def test_no_transition_graph(self):
        order = _place()
        order.update_status("delivered")
        order.update_status("pending")
        assert order.status == "pending"

    def test_tracking_number_recorded(self):
        order = _place()
        order.update_status("shipped", tracking_number="NG-TRK-1")
        assert order.tracking_number == "NG-TRK-1"

    def test_payment_status_and_totals_untouched(self):
        order = _place()
        order.update_status("cancelled")

        assert order.payment_status == PaymentStatus.PENDING.value
        assert order.pricing.total_amount == 11800.0
        assert len(order.items) == 2

    def test_invalid_status_leaves_order_unchanged(self):
        order = _place()
        order._events.clear()

        with pytest.raises(InvalidStatus) as exc:
            order.update_status("lost")

        assert order.status == OrderStatus.PENDING.value
        assert order._events == []
        assert exc.value.status == "lost"
        assert "shipped" in exc.value.allowed

    def test_raises_status_updated(self):
        order = _place()
        order.update_status("shipped", notify_customer=False)

        event = order._events[-1]
        assert isinstance(event, OrderStatusUpdated)
        assert event.previous_status == "pending"
        assert event.new_status == "shipped"
        assert event.notify_customer is False
        assert not {"items", "total_amount", "currency"} & set(event.to_dict())

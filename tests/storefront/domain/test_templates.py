"""Domain tests for order email templates."""

import pytest

from storefront.notification.templates import (
    OrderConfirmationTemplate,
    OrderStatusUpdateTemplate,
    format_amount,
    status_message,
)


class TestFormatAmount:
    def test_naira(self):
        assert format_amount(10800) == "₦10,800.00"

    def test_other_currency(self):
        assert format_amount(12.5, "USD") == "USD 12.50"


class TestOrderConfirmation:
    def test_subject_and_body(self):
        content = OrderConfirmationTemplate.render(
            {
                "reference": "ORD-ABC123XYZ",
                "customer_name": "Ada",
                "items": [
                    {"product_name": "Fresh Irish Potatoes", "quantity": 12, "subtotal": 10800.0},
                ],
                "discount_total": 1200.0,
                "total_amount": 10800.0,
                "currency": "NGN",
            }
        )

        assert content["subject"] == "Order Confirmation - #ORD-ABC123XYZ"
        assert "Hello Ada" in content["body"]
        assert "Fresh Irish Potatoes (x12)" in content["body"]
        assert "Total: ₦10,800.00" in content["body"]
        assert "The Plateau Potatoes Team" in content["body"]


class TestOrderStatusUpdate:
    @pytest.mark.parametrize(
        "status, message",
        [
            ("processing", "is being processed."),
            ("shipped", "has been shipped."),
            ("delivered", "has been delivered."),
            ("cancelled", "has been cancelled."),
            ("pending", "has been updated to pending."),
        ],
    )
    def test_status_messages(self, status, message):
        assert status_message(status) == message

    def test_subject_and_body(self):
        content = OrderStatusUpdateTemplate.render(
            {"reference": "ORD-ABC123XYZ", "customer_name": "Ada", "status": "shipped", "tracking_number": "TRK-9"}
        )

        assert content["subject"] == "Your Order #ORD-ABC123XYZ has been shipped"
        assert "The status of your order #ORD-ABC123XYZ has been shipped." in content["body"]
        assert "Tracking number: TRK-9" in content["body"]

"""Order email templates.

Each template renders a context dict into ``{"subject", "body"}``. Amounts
are shown in naira with thousands separators.
"""

SIGN_OFF = "Best regards,\nThe Plateau Potatoes Team"

_CURRENCY_SYMBOLS = {"NGN": "₦"}

_STATUS_MESSAGES = {
    "processing": "is being processed.",
    "shipped": "has been shipped.",
    "delivered": "has been delivered.",
    "cancelled": "has been cancelled.",
}


def format_amount(amount, currency="NGN") -> str:
    symbol = _CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    return f"{symbol}{amount:,.2f}"


def status_message(status: str) -> str:
    return _STATUS_MESSAGES.get(status, f"has been updated to {status}.")


class OrderConfirmationTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        reference = context.get("reference", "N/A")
        currency = context.get("currency", "NGN")
        lines = "\n".join(
            f"  {item['product_name']} (x{item['quantity']}): {format_amount(item['subtotal'], currency)}"
            for item in context.get("items", [])
        )
        return {
            "subject": f"Order Confirmation - #{reference}",
            "body": (
                f"Hello {context.get('customer_name') or 'there'},\n\n"
                "Thank you for your purchase. We've received your order and are getting it ready.\n\n"
                f"Order ID: {reference}\n\n"
                f"{lines}\n\n"
                f"Discount: - {format_amount(context.get('discount_total', 0.0), currency)}\n"
                f"Total: {format_amount(context.get('total_amount', 0.0), currency)}\n\n"
                "We will notify you again once your order has shipped.\n\n"
                f"{SIGN_OFF}"
            ),
        }


class OrderStatusUpdateTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        reference = context.get("reference", "N/A")
        status = context.get("status", "")
        tracking_number = context.get("tracking_number")
        tracking = f"Tracking number: {tracking_number}\n\n" if tracking_number else ""
        return {
            "subject": f"Your Order #{reference} has been {status}",
            "body": (
                f"Hello {context.get('customer_name') or 'there'},\n\n"
                f"The status of your order #{reference} {status_message(status)}\n\n"
                f"{tracking}"
                f"{SIGN_OFF}"
            ),
        }

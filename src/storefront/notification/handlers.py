"""Order notifications: emails the customer when an order is placed or its status changes.

Delivery is best effort: a failed or raising mailer is logged and never
propagates back into the order workflow.
"""

import json

import structlog
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.notification.mailer import get_mailer
from storefront.notification.templates import (
    OrderConfirmationTemplate,
    OrderStatusUpdateTemplate,
)
from storefront.order.events import OrderPlaced, OrderStatusUpdated
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


def _deliver(to, content, **log_context) -> bool:
    try:
        result = get_mailer().send(to=to, subject=content["subject"], body=content["body"])
    except Exception as e:
        logger.error("Order email failed", to=to, error=str(e), **log_context)
        return False

    if result.get("status") != "sent":
        logger.error("Order email failed", to=to, error=result.get("error"), **log_context)
        return False

    logger.info("Order email sent", to=to, message_id=result.get("message_id"), **log_context)
    return True


@storefront.event_handler(part_of=Order)
class OrderNotificationHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        if not event.customer_email:
            logger.warning("Order has no customer email, confirmation skipped", order_id=str(event.order_id))
            return

        content = OrderConfirmationTemplate.render(
            {
                "reference": event.reference,
                "customer_name": event.customer_name,
                "items": json.loads(event.items),
                "discount_total": event.discount_total,
                "total_amount": event.total_amount,
                "currency": event.currency,
            }
        )
        _deliver(event.customer_email, content, order_id=str(event.order_id), email="confirmation")

    @handle(OrderStatusUpdated)
    def on_order_status_updated(self, event: OrderStatusUpdated) -> None:
        if event.notify_customer is False:
            return
        if not event.customer_email:
            logger.warning("Order has no customer email, status update skipped", order_id=str(event.order_id))
            return

        content = OrderStatusUpdateTemplate.render(
            {
                "reference": event.reference,
                "customer_name": event.customer_name,
                "status": event.new_status,
                "tracking_number": event.tracking_number,
            }
        )
        _deliver(event.customer_email, content, order_id=str(event.order_id), email="status_update")

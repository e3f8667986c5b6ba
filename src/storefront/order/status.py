"""Admin order status updates — command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    """Overwrite an order's fulfillment status, optionally with a tracking number."""

    order_id = Identifier(required=True)
    status = String(required=True)
    tracking_number = String(max_length=255)
    notify_customer = Boolean(default=True)


@storefront.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_status(
            command.status,
            tracking_number=command.tracking_number,
            notify_customer=command.notify_customer is not False,
        )
        repo.add(order)

        logger.info(
            "order_status_updated",
            order_id=str(order.id),
            status=order.status,
        )
        return order.status

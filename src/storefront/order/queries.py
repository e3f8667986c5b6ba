"""Read operations over the order store.

Access control beyond ownership lives at the HTTP boundary: callers of
``list_all_orders`` are expected to have checked the admin role already.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.order.order import Order


def get_order(order_id, requested_by, is_admin: bool = False) -> Order:
    """Fetch one order.

    A caller who neither owns the order nor is an administrator gets the same
    ``ObjectNotFoundError`` as for a missing order, so order ids cannot be
    probed.
    """
    order = current_domain.repository_for(Order).get(order_id)
    if not is_admin and str(order.customer_id) != str(requested_by):
        raise ObjectNotFoundError(f"`Order` object with identifier {order_id} does not exist.")
    return order


def list_orders_for_customer(customer_id) -> list[Order]:
    return current_domain.repository_for(Order).for_customer(customer_id)


def list_all_orders() -> list[Order]:
    return current_domain.repository_for(Order).all_orders()

"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order


def _newest_first(orders):
    return sorted(orders, key=lambda order: order.created_at, reverse=True)


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id) -> list[Order]:
        """Orders placed by ``customer_id``, newest first."""
        return _newest_first(self._dao.query.filter(customer_id=str(customer_id)).all().items)

    def all_orders(self) -> list[Order]:
        return _newest_first(self._dao.query.all().items)

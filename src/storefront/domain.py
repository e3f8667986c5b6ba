"""Storefront bounded context — Catalogue, Orders and Order Notifications.

Products and orders live in one domain so that placing an order and
decrementing stock commit in the same unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")

"""Order placement — command and handler.

Placing an order validates the cart, prices every line with its best bulk
tier, stores the order and takes the ordered quantities out of stock. The
order insert and the stock decrements run in the handler's unit of work, so
a failure on any line leaves both the order store and the catalogue as they
were.
"""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.exceptions import InsufficientStock, ProductNotFound
from storefront.order.order import DEFAULT_CURRENCY, Order
from storefront.order.pricing import price_cart
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_REQUIRED_ADDRESS_FIELDS = ("street", "state", "phone")


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    customer_name = String(max_length=255)
    customer_email = String(max_length=254)
    items = Text(required=True)  # JSON: list of {product_id, quantity}
    shipping_address = Text(required=True)  # JSON: address dict
    currency = String(max_length=3, default=DEFAULT_CURRENCY)


def _parse_cart(raw):
    """Decode and validate the cart lines, keeping their order."""
    lines = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(lines, list) or not lines:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    parsed = []
    for index, line in enumerate(lines):
        if not isinstance(line, dict) or not line.get("product_id"):
            raise ValidationError({"items": [f"Item {index + 1} is missing a product"]})

        quantity = line.get("quantity")
        # bool is an int subclass; True is not a quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError({"items": [f"Item {index + 1} must have a positive whole quantity"]})

        parsed.append((str(line["product_id"]), quantity))
    return parsed


def _parse_address(raw):
    address = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(address, dict):
        raise ValidationError({"shipping_address": ["Shipping address is required"]})

    missing = [field for field in _REQUIRED_ADDRESS_FIELDS if not address.get(field)]
    if missing:
        raise ValidationError({field: ["is required"] for field in missing})

    return {
        "street": address["street"],
        "city": address.get("city"),
        "state": address["state"],
        "postal_code": address.get("postal_code"),
        "phone": address["phone"],
    }


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = _parse_cart(command.items)
        shipping_address = _parse_address(command.shipping_address)

        product_repo = current_domain.repository_for(Product)

        products = {}
        requested = {}
        priced_lines = []
        for product_id, quantity in lines:
            product = products.get(product_id)
            if product is None:
                try:
                    product = product_repo.get(product_id)
                except ObjectNotFoundError:
                    raise ProductNotFound(product_id) from None
                if not product.is_active:
                    raise ProductNotFound(product_id)
                products[product_id] = product

            # Repeated lines for one product draw on the same stock
            requested[product_id] = requested.get(product_id, 0) + quantity
            if product.stock < requested[product_id]:
                raise InsufficientStock(
                    product_id=product_id,
                    product_name=product.name,
                    requested=requested[product_id],
                    available=product.stock,
                )

            priced_lines.append((product, quantity))

        cart = price_cart(priced_lines)

        order = Order.place(
            customer_id=command.customer_id,
            cart=cart,
            shipping_address=shipping_address,
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            currency=command.currency,
        )
        current_domain.repository_for(Order).add(order)

        for product, quantity in priced_lines:
            product.decrement_stock(quantity)
        for product in products.values():
            product_repo.add(product)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            reference=order.reference,
            customer_id=str(command.customer_id),
            lines=len(cart.lines),
            total_amount=cart.total_amount,
            discount_total=cart.discount_total,
        )
        return str(order.id)

"""Domain errors raised while pricing and fulfilling orders.

All of them are Protean ``ValidationError`` subclasses, so the FastAPI
exception handlers render them as 400 responses with an ``error`` body.
"""

from protean.exceptions import ValidationError


class ProductNotFound(ValidationError):
    """A cart line references a product that does not exist or was removed."""

    def __init__(self, product_id):
        self.product_id = str(product_id)
        super().__init__({"product": [f"Product {product_id} not found"]})


class InsufficientStock(ValidationError):
    """The requested quantity exceeds the product's available stock."""

    def __init__(self, product_id, product_name, requested, available):
        self.product_id = str(product_id)
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            {
                "stock": [
                    f"Insufficient stock for {product_name}: requested {requested}, available {available}"
                ]
            }
        )

    @property
    def shortfall(self) -> int:
        return self.requested - self.available


class InvalidStatus(ValidationError):
    """An order status outside the fulfillment lifecycle was requested."""

    def __init__(self, status, allowed):
        self.status = status
        self.allowed = list(allowed)
        super().__init__(
            {"status": [f"Invalid order status '{status}'. Allowed values: {', '.join(self.allowed)}"]}
        )

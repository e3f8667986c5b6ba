"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Product details, price or bulk-pricing tiers were replaced."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    updated_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductRemoved:
    """The product was taken off the storefront."""

    __version__ = 1

    product_id = Identifier(required=True)
    removed_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockRestocked:
    """Stock was added to the product."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_stock = Integer(required=True)
    restocked_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockDecremented:
    """Stock was taken from the product by an order."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_stock = Integer(required=True)
    decremented_at = DateTime(required=True)

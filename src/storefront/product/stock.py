"""Stock receiving — command and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class RestockProduct:
    """Add received units to a product's stock."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.command_handler(part_of=Product)
class RestockProductHandler:
    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.quantity)
        repo.add(product)
        return product.stock

"""Catalogue management — admin commands and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True)
    category = String(required=True, max_length=20)
    weight = String(required=True, max_length=50)
    stock = Integer(default=0)
    images = Text()  # JSON: list of image URLs
    origin = String(max_length=100)
    is_active = Boolean(default=True)
    pricing_tiers = Text()  # JSON: list of {min_quantity, discount_percent}


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True)
    category = String(required=True, max_length=20)
    weight = String(required=True, max_length=50)
    stock = Integer(default=0)
    images = Text()
    origin = String(max_length=100)
    is_active = Boolean()
    pricing_tiers = Text()


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


def _parse_tiers(raw):
    """Decode a JSON tier list into dicts carrying only the PricingTier fields."""
    if not raw:
        return []
    tiers = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(tiers, list):
        raise ValidationError({"pricing_tiers": ["Bulk-pricing tiers must be a list"]})

    parsed = []
    for tier in tiers:
        if not isinstance(tier, dict) or "min_quantity" not in tier or "discount_percent" not in tier:
            raise ValidationError(
                {"pricing_tiers": ["Each tier needs a min_quantity and a discount_percent"]}
            )
        parsed.append(
            {
                "min_quantity": tier["min_quantity"],
                "discount_percent": tier["discount_percent"],
            }
        )
    return parsed


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            weight=command.weight,
            stock=command.stock or 0,
            images=json.loads(command.images) if command.images else None,
            origin=command.origin,
            is_active=command.is_active if command.is_active is not None else True,
            pricing_tiers=_parse_tiers(command.pricing_tiers),
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            weight=command.weight,
            stock=command.stock or 0,
            images=json.loads(command.images) if command.images else None,
            origin=command.origin,
            is_active=command.is_active,
            pricing_tiers=_parse_tiers(command.pricing_tiers),
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove()
        repo.add(product)

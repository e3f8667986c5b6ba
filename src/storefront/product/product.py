"""Product aggregate root with the PricingTier entity.

Products are CQRS aggregates (not event sourced): the catalogue needs the
current price, stock and bulk-pricing tiers, and nothing temporal.

Stock only moves through ``restock`` and ``decrement_stock``. The decrement
is conditional: it refuses to take stock below zero, so an order's stock
check and its decrement are the same operation.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Integer,
    String,
    Text,
)

from storefront.domain import storefront
from storefront.exceptions import InsufficientStock
from storefront.product.events import (
    ProductAdded,
    ProductRemoved,
    ProductUpdated,
    StockDecremented,
    StockRestocked,
)

DEFAULT_ORIGIN = "Jos Plateau"


class ProductCategory(Enum):
    FRESH = "fresh"
    PROCESSED = "processed"
    SEEDS = "seeds"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Product")
class PricingTier:
    """A bulk-pricing threshold: ordering ``min_quantity`` or more earns ``discount_percent`` off."""

    min_quantity = Integer(required=True, min_value=1)
    discount_percent = Float(required=True, min_value=0.0, max_value=100.0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True, min_value=0.0)
    category = String(required=True, choices=ProductCategory)
    weight = String(required=True, max_length=50)  # e.g. "50kg"
    stock = Integer(default=0, min_value=0)
    images = Text()  # JSON: list of image URLs
    origin = String(max_length=100, default=DEFAULT_ORIGIN)
    is_active = Boolean(default=True)
    pricing_tiers = HasMany(PricingTier)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def tier_thresholds_must_be_unique(self):
        thresholds = [t.min_quantity for t in self.pricing_tiers or []]
        if len(thresholds) != len(set(thresholds)):
            raise ValidationError({"pricing_tiers": ["Bulk-pricing tiers must have distinct minimum quantities"]})

    @property
    def image_urls(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        weight,
        stock=0,
        images=None,
        origin=None,
        is_active=True,
        pricing_tiers=None,
    ):
        """Add a product to the catalogue.

        Args:
            pricing_tiers: List of dicts with ``min_quantity`` and
                ``discount_percent``, in any order.
        """
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            category=category,
            weight=weight,
            stock=stock,
            images=json.dumps(images) if images else None,
            origin=origin or DEFAULT_ORIGIN,
            is_active=is_active,
            pricing_tiers=[PricingTier(**tier) for tier in pricing_tiers or []],
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                category=category,
                price=price,
                stock=stock,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Catalogue management
    # -------------------------------------------------------------------
    def update(
        self,
        name,
        description,
        price,
        category,
        weight,
        stock,
        images=None,
        origin=None,
        is_active=None,
        pricing_tiers=None,
    ):
        """Replace the product's editable fields and its bulk-pricing tiers."""
        with atomic_change(self):
            self.name = name
            self.description = description
            self.price = price
            self.category = category
            self.weight = weight
            self.stock = stock
            self.images = json.dumps(images) if images else None
            if origin is not None:
                self.origin = origin
            if is_active is not None:
                self.is_active = is_active

            for tier in list(self.pricing_tiers):
                self.remove_pricing_tiers(tier)
            for tier_data in pricing_tiers or []:
                self.add_pricing_tiers(PricingTier(**tier_data))

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                stock=self.stock,
                updated_at=now,
            )
        )

    def remove(self):
        """Take the product off the storefront. Existing orders keep referencing it."""
        if not self.is_active:
            raise ValidationError({"is_active": ["Product has already been removed"]})

        self.is_active = False
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductRemoved(
                product_id=str(self.id),
                removed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def restock(self, quantity):
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Restock quantity must be positive"]})

        self.stock = self.stock + quantity
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            StockRestocked(
                product_id=str(self.id),
                quantity=quantity,
                new_stock=self.stock,
                restocked_at=now,
            )
        )

    def decrement_stock(self, quantity):
        """Take ``quantity`` units out of stock, or fail without touching it."""
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if self.stock < quantity:
            raise InsufficientStock(
                product_id=self.id,
                product_name=self.name,
                requested=quantity,
                available=self.stock,
            )

        self.stock = self.stock - quantity
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            StockDecremented(
                product_id=str(self.id),
                quantity=quantity,
                new_stock=self.stock,
                decremented_at=now,
            )
        )

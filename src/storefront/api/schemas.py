"""Pydantic request/response schemas for the Storefront API.

Request bodies accept both snake_case names and the camelCase names used by
the web client (``shippingAddress``, ``zipCode``, ``bulkPricing``, ...).
Value checks beyond JSON shape are left to the domain so that they surface
as 400 responses.
"""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Product Request Schemas ---


class PricingTierSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_quantity: int = Field(..., alias="minQuantity")
    discount_percent: float = Field(..., alias="discount")


class ProductRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Fresh Irish Potatoes",
                    "description": "Freshly harvested potatoes from the Jos Plateau.",
                    "price": 1000,
                    "category": "fresh",
                    "weight": "50kg",
                    "stock": 20,
                    "images": ["https://images.example.com/potatoes.jpg"],
                    "bulkPricing": [
                        {"minQuantity": 5, "discount": 5},
                        {"minQuantity": 10, "discount": 10},
                    ],
                }
            ]
        },
    )

    name: str = Field(..., max_length=255)
    description: str
    price: float
    category: str
    weight: str = Field(..., max_length=50)
    stock: int = 0
    images: list[str] = Field(default_factory=list)
    origin: str | None = Field(None, max_length=100)
    is_active: bool | None = Field(None, alias="isActive")
    pricing_tiers: list[PricingTierSchema] = Field(default_factory=list, alias="bulkPricing")

    def tiers_json(self) -> str:
        return json.dumps([tier.model_dump() for tier in self.pricing_tiers])


class RestockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 25}]}}

    quantity: int


# --- Product Response Schemas ---


class PricingTierResponse(BaseModel):
    min_quantity: int
    discount_percent: float


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    weight: str
    stock: int
    images: list[str]
    origin: str | None = None
    is_active: bool
    pricing_tiers: list[PricingTierResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            weight=product.weight,
            stock=product.stock,
            images=product.image_urls,
            origin=product.origin,
            is_active=product.is_active,
            pricing_tiers=[
                PricingTierResponse(min_quantity=tier.min_quantity, discount_percent=tier.discount_percent)
                for tier in sorted(product.pricing_tiers or [], key=lambda t: t.min_quantity)
            ],
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    total: int
    current_page: int
    total_pages: int


class StockResponse(BaseModel):
    product_id: str
    stock: int


# --- Order Request Schemas ---


class CartLineSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str | None = Field(None, alias="product")
    quantity: int | None = None


class ShippingAddressSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = Field(None, alias="zipCode")
    phone: str | None = None


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "items": [{"product": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 12}],
                    "shippingAddress": {
                        "street": "12 Rayfield Road",
                        "city": "Jos",
                        "state": "Plateau",
                        "zipCode": "930001",
                        "phone": "+2348012345678",
                    },
                }
            ]
        },
    )

    items: list[CartLineSchema] = Field(default_factory=list)
    shipping_address: ShippingAddressSchema | None = Field(None, alias="shippingAddress")


class UpdateOrderStatusRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"status": "shipped", "trackingNumber": "NG-TRK-000123"}]},
    )

    status: str
    tracking_number: str | None = Field(None, alias="trackingNumber")
    notify_customer: bool = Field(True, alias="notifyCustomer")


# --- Order Response Schemas ---


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    discount: float
    subtotal: float


class ShippingAddressResponse(BaseModel):
    street: str
    city: str | None = None
    state: str
    postal_code: str | None = None
    phone: str


class OrderResponse(BaseModel):
    id: str
    reference: str
    customer_id: str
    customer_name: str | None = None
    customer_email: str | None = None
    items: list[OrderItemResponse]
    shipping_address: ShippingAddressResponse | None = None
    subtotal: float
    discount_total: float
    total_amount: float
    currency: str
    payment_status: str
    status: str
    tracking_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        address = order.shipping_address
        return cls(
            id=str(order.id),
            reference=order.reference,
            customer_id=str(order.customer_id),
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            items=[
                OrderItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    discount=item.discount,
                    subtotal=item.subtotal,
                )
                for item in order.line_items
            ],
            shipping_address=(
                ShippingAddressResponse(
                    street=address.street,
                    city=address.city,
                    state=address.state,
                    postal_code=address.postal_code,
                    phone=address.phone,
                )
                if address
                else None
            ),
            subtotal=order.pricing.subtotal,
            discount_total=order.pricing.discount_total,
            total_amount=order.pricing.total_amount,
            currency=order.pricing.currency,
            payment_status=order.payment_status,
            status=order.status,
            tracking_number=order.tracking_number,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"

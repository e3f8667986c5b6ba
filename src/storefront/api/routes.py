"""FastAPI endpoints for the Storefront domain."""

import json

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.auth import Caller, admin_caller, current_caller
from storefront.api.schemas import (
    OrderResponse,
    PlaceOrderRequest,
    ProductListResponse,
    ProductRequest,
    ProductResponse,
    RestockRequest,
    StatusResponse,
    StockResponse,
    UpdateOrderStatusRequest,
)
from storefront.order.placement import PlaceOrder
from storefront.order.queries import get_order, list_all_orders, list_orders_for_customer
from storefront.order.status import UpdateOrderStatus
from storefront.product.management import AddProduct, RemoveProduct, UpdateProduct
from storefront.product.product import Product
from storefront.product.repository import DEFAULT_PAGE_SIZE
from storefront.product.stock import RestockProduct

product_router = APIRouter(prefix="/products", tags=["products"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _product_command_fields(body: ProductRequest) -> dict:
    return {
        "name": body.name,
        "description": body.description,
        "price": body.price,
        "category": body.category,
        "weight": body.weight,
        "stock": body.stock,
        "images": json.dumps(body.images),
        "origin": body.origin,
        "is_active": body.is_active,
        "pricing_tiers": body.tiers_json(),
    }


# --- Product endpoints ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    category: str | None = None,
    search: str | None = None,
) -> ProductListResponse:
    result = current_domain.repository_for(Product).catalogue_page(
        page=page, limit=limit, category=category, search=search
    )
    return ProductListResponse(
        products=[ProductResponse.from_product(product) for product in result.products],
        total=result.total,
        current_page=result.current_page,
        total_pages=result.total_pages,
    )


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: ProductRequest, _admin: Caller = Depends(admin_caller)) -> ProductResponse:
    fields = _product_command_fields(body)
    if fields["is_active"] is None:
        fields["is_active"] = True
    product_id = current_domain.process(AddProduct(**fields), asynchronous=False)
    return ProductResponse.from_product(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductRequest, _admin: Caller = Depends(admin_caller)
) -> ProductResponse:
    command = UpdateProduct(product_id=product_id, **_product_command_fields(body))
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str, _admin: Caller = Depends(admin_caller)) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse(status="removed")


@product_router.put("/{product_id}/stock", response_model=StockResponse)
async def restock_product(
    product_id: str, body: RestockRequest, _admin: Caller = Depends(admin_caller)
) -> StockResponse:
    stock = current_domain.process(
        RestockProduct(product_id=product_id, quantity=body.quantity),
        asynchronous=False,
    )
    return StockResponse(product_id=product_id, stock=stock)


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, caller: Caller = Depends(current_caller)) -> OrderResponse:
    command = PlaceOrder(
        customer_id=caller.user_id,
        customer_name=caller.name,
        customer_email=caller.email,
        items=json.dumps([line.model_dump() for line in body.items]),
        shipping_address=json.dumps(body.shipping_address.model_dump() if body.shipping_address else None),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id, caller.user_id))


@order_router.get("", response_model=list[OrderResponse])
async def my_orders(caller: Caller = Depends(current_caller)) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in list_orders_for_customer(caller.user_id)]


# Declared before "/{order_id}" so that "admin" is not taken for an order id
@order_router.get("/admin/all", response_model=list[OrderResponse])
async def all_orders(_admin: Caller = Depends(admin_caller)) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in list_all_orders()]


@order_router.put("/admin/orders/{order_id}", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, admin: Caller = Depends(admin_caller)
) -> OrderResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        status=body.status,
        tracking_number=body.tracking_number,
        notify_customer=body.notify_customer,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id, admin.user_id, is_admin=True))


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order_details(order_id: str, caller: Caller = Depends(current_caller)) -> OrderResponse:
    return OrderResponse.from_order(get_order(order_id, caller.user_id, is_admin=caller.is_admin))

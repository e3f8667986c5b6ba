"""BDD tests for bulk-tier order pricing."""

import json

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from storefront.exceptions import InsufficientStock
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.product.product import Product

scenarios("features/bulk_pricing.feature")


def _parse_tiers(text):
    tiers = []
    for pair in filter(None, text.split(",")):
        min_quantity, percent = pair.split(":")
        tiers.append({"min_quantity": int(min_quantity), "discount_percent": float(percent)})
    return tiers


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.parse('a product priced at {price:f} with {stock:d} in stock and tiers "{tiers}"'),
    target_fixture="product_id",
)
def product_with_tiers(make_product, price, stock, tiers):
    return make_product(price=price, stock=stock, pricing_tiers=_parse_tiers(tiers)).id


@given(
    parsers.parse('a product priced at {price:f} with {stock:d} in stock and tiers ""'),
    target_fixture="product_id",
)
def product_without_tiers(make_product, price, stock):
    return make_product(price=price, stock=stock).id


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.parse("the customer orders {quantity:d} units"))
def customer_orders(product_id, quantity, outcome):
    try:
        outcome["order_id"] = current_domain.process(
            PlaceOrder(
                customer_id="cust-bdd",
                customer_email="bdd@example.com",
                items=json.dumps([{"product_id": product_id, "quantity": quantity}]),
                shipping_address=json.dumps({"street": "1 Main St", "state": "Plateau", "phone": "0801"}),
            ),
            asynchronous=False,
        )
    except ValidationError as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _order(outcome):
    assert outcome["exc"] is None, outcome["exc"]
    return current_domain.repository_for(Order).get(outcome["order_id"])


@then(parsers.parse("the order total is {amount:f}"))
def order_total_is(outcome, amount):
    assert _order(outcome).pricing.total_amount == amount


@then(parsers.parse("the order discount is {amount:f}"))
def order_discount_is(outcome, amount):
    assert _order(outcome).pricing.discount_total == amount


@then(parsers.parse("the product has {stock:d} left in stock"))
def product_stock_is(product_id, stock):
    assert current_domain.repository_for(Product).get(product_id).stock == stock


@then("the order is rejected for insufficient stock")
def order_rejected(outcome):
    assert isinstance(outcome["exc"], InsufficientStock)
    assert outcome["order_id"] is None

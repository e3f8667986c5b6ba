"""Domain tests for bulk-tier selection and order line pricing."""

import pytest

from storefront.order.pricing import price_cart, price_line, select_tier
from storefront.product.product import PricingTier, Product


def _product(price=1000.0, tiers=None, name="Fresh Irish Potatoes"):
    return Product.create(
        name=name,
        description="Freshly harvested",
        price=price,
        category="fresh",
        weight="50kg",
        stock=100,
        pricing_tiers=tiers or [],
    )


TWO_TIERS = [
    {"min_quantity": 5, "discount_percent": 5.0},
    {"min_quantity": 10, "discount_percent": 10.0},
]


class TestSelectTier:
    def test_no_tiers(self):
        assert select_tier([], 50) is None
        assert select_tier(None, 50) is None

    def test_below_every_threshold(self):
        tiers = [PricingTier(**t) for t in TWO_TIERS]
        assert select_tier(tiers, 4) is None

    def test_threshold_is_inclusive(self):
        tiers = [PricingTier(**t) for t in TWO_TIERS]
        assert select_tier(tiers, 5).discount_percent == 5.0
        assert select_tier(tiers, 10).discount_percent == 10.0

    def test_largest_qualifying_tier_wins_regardless_of_storage_order(self):
        tiers = [PricingTier(**t) for t in TWO_TIERS]
        assert select_tier(tiers, 12).min_quantity == 10
        assert select_tier(list(reversed(tiers)), 12).min_quantity == 10


class TestPriceLine:
    def test_product_without_tiers_is_not_discounted(self):
        line = price_line(_product(price=500.0), 3)

        assert line.raw_subtotal == 1500.0
        assert line.discount == 0.0
        assert line.subtotal == 1500.0
        assert line.unit_price == 500.0

    @pytest.mark.parametrize(
        "quantity, percent",
        [(4, 0.0), (5, 5.0), (9, 5.0), (10, 10.0), (100, 10.0)],
    )
    def test_tier_discount_by_quantity(self, quantity, percent):
        line = price_line(_product(price=100.0, tiers=TWO_TIERS), quantity)

        assert line.discount_percent == percent
        assert line.discount == pytest.approx(100.0 * quantity * percent / 100)
        assert line.subtotal == pytest.approx(line.raw_subtotal - line.discount)

    def test_discounts_do_not_stack(self):
        line = price_line(_product(price=1000.0, tiers=TWO_TIERS), 12)

        assert line.discount == 1200.0
        assert line.subtotal == 10800.0

    def test_unit_price_is_undiscounted(self):
        line = price_line(_product(price=1000.0, tiers=TWO_TIERS), 12)
        assert line.unit_price == 1000.0

    def test_amounts_are_rounded_to_two_places(self):
        tiers = [{"min_quantity": 1, "discount_percent": 33.333}]
        line = price_line(_product(price=10.01, tiers=tiers), 3)

        assert line.raw_subtotal == 30.03
        assert line.discount == 10.01
        assert line.subtotal == 20.02


class TestPriceCart:
    def test_totals_across_lines(self):
        potatoes = _product(price=500.0, name="Potatoes")
        seeds = _product(price=2000.0, tiers=[{"min_quantity": 10, "discount_percent": 20.0}], name="Seeds")

        cart = price_cart([(potatoes, 3), (seeds, 10)])

        assert cart.subtotal == 21500.0
        assert cart.discount_total == 4000.0
        assert cart.total_amount == 17500.0
        assert cart.total_amount == cart.subtotal - cart.discount_total

    def test_lines_keep_input_order(self):
        first = _product(name="First")
        second = _product(name="Second")

        cart = price_cart([(second, 1), (first, 2)])

        assert [line.product_name for line in cart.lines] == ["Second", "First"]

    def test_totals_equal_sum_of_lines(self):
        a = _product(price=250.0, tiers=TWO_TIERS, name="A")
        b = _product(price=1200.0, tiers=TWO_TIERS, name="B")

        cart = price_cart([(a, 7), (b, 15), (a, 1)])

        assert cart.total_amount == pytest.approx(sum(line.subtotal for line in cart.lines))
        assert cart.discount_total == pytest.approx(sum(line.discount for line in cart.lines))

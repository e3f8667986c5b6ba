"""Repository for the Product aggregate."""

import math
from dataclasses import dataclass

from storefront.domain import storefront
from storefront.product.product import Product

DEFAULT_PAGE_SIZE = 12


@dataclass(frozen=True)
class CataloguePage:
    """One page of the storefront listing."""

    products: list
    total: int
    current_page: int
    total_pages: int


@storefront.repository(part_of=Product)
class ProductRepository:
    def active_products(self, category: str | None = None, search: str | None = None) -> list[Product]:
        """Active products, newest first, optionally narrowed by category and name."""
        products = self._dao.query.filter(is_active=True).all().items
        if category:
            products = [p for p in products if p.category == category]
        if search:
            needle = search.lower()
            products = [p for p in products if needle in p.name.lower()]
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def catalogue_page(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        category: str | None = None,
        search: str | None = None,
    ) -> CataloguePage:
        page = max(page, 1)
        limit = max(limit, 1)

        products = self.active_products(category=category, search=search)
        start = (page - 1) * limit
        return CataloguePage(
            products=products[start : start + limit],
            total=len(products),
            current_page=page,
            total_pages=math.ceil(len(products) / limit),
        )

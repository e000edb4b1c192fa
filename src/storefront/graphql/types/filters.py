"""
Product filter input shared by Query.products and Category.products
"""

import strawberry

from ...store.filters import ProductsFilter


@strawberry.input
class ProductsFilterInput:
    """Optional criteria for narrowing a product listing."""

    on_sale: bool | None = None
    avg_rating: int | None = None

    def to_filter(self) -> ProductsFilter:
        return ProductsFilter(on_sale=self.on_sale, avg_rating=self.avg_rating)

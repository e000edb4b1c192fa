"""
Root GraphQL query definitions
"""

import strawberry

from ..types.category import Category
from ..types.filters import ProductsFilterInput
from ..types.product import Product

GREETING = "Hello World!"


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self) -> str | None:
        """Static greeting, handy as a liveness probe."""
        return GREETING

    @strawberry.field
    async def products(
        self, info: strawberry.Info, filter: ProductsFilterInput | None = None
    ) -> list[Product]:
        """Get all products, optionally filtered."""
        from ..resolvers.product import resolve_products

        return await resolve_products(info, filter)

    @strawberry.field
    async def product(self, info: strawberry.Info, id: strawberry.ID) -> Product | None:
        """Get a product by ID."""
        from ..resolvers.product import resolve_product_by_id

        return await resolve_product_by_id(info, str(id))

    @strawberry.field
    async def categories(self, info: strawberry.Info) -> list[Category]:
        """Get all categories."""
        from ..resolvers.category import resolve_categories

        return await resolve_categories(info)

    @strawberry.field
    async def category(self, info: strawberry.Info, id: strawberry.ID) -> Category | None:
        """Get a category by ID."""
        from ..resolvers.category import resolve_category_by_id

        return await resolve_category_by_id(info, str(id))

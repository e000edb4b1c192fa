"""
Category GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import Category as CategoryRecord
from .filters import ProductsFilterInput

if TYPE_CHECKING:
    from .product import Product


@strawberry.type
class Category:
    """Category type for GraphQL API."""

    id: strawberry.ID
    name: str

    @classmethod
    def from_record(cls, record: CategoryRecord) -> "Category":
        return cls(id=strawberry.ID(record.id), name=record.name)

    @strawberry.field
    async def products(
        self, info: strawberry.Info, filter: ProductsFilterInput | None = None
    ) -> list[Annotated["Product", strawberry.lazy(".product")]]:
        """Get products in this category, optionally filtered."""
        from ..resolvers.category import resolve_category_products

        return await resolve_category_products(self, info, filter)

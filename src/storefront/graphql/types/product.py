"""
Product GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import Product as ProductRecord
from .review import Review

if TYPE_CHECKING:
    from .category import Category


@strawberry.type
class Product:
    """Product type for GraphQL API."""

    id: strawberry.ID
    name: str
    description: str
    quantity: int
    price: float
    on_sale: bool
    image: str
    category_id: strawberry.Private[str | None]

    @classmethod
    def from_record(cls, record: ProductRecord) -> "Product":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            description=record.description,
            quantity=record.quantity,
            price=record.price,
            on_sale=record.on_sale,
            image=record.image,
            category_id=record.category_id,
        )

    @strawberry.field
    async def category(
        self, info: strawberry.Info
    ) -> Annotated["Category", strawberry.lazy(".category")] | None:
        """Get the category this product belongs to."""
        if not self.category_id:
            return None
        from ..resolvers.product import resolve_product_category

        return await resolve_product_category(self, info)

    @strawberry.field
    async def reviews(self, info: strawberry.Info) -> list[Review]:
        """Get reviews written for this product."""
        from ..resolvers.product import resolve_product_reviews

        return await resolve_product_reviews(self, info)

"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.category import Category
from ..types.product import Product
from ..types.review import Review


# Input types for mutations
@strawberry.input
class AddCategoryInput:
    """Input for creating a category."""

    name: str


@strawberry.input
class UpdateCategoryInput:
    """Input for renaming a category."""

    name: str


@strawberry.input
class AddProductInput:
    """Input for creating a product."""

    name: str
    description: str
    quantity: int
    image: str
    price: float
    on_sale: bool
    category_id: str | None = strawberry.UNSET


@strawberry.input
class UpdateProductInput:
    """Input for replacing a product's fields."""

    name: str
    description: str
    quantity: int
    image: str
    price: float
    on_sale: bool
    category_id: str | None = strawberry.UNSET


@strawberry.input
class AddReviewInput:
    """Input for reviewing a product."""

    date: str
    title: str
    comment: str
    rating: int
    product_id: strawberry.ID


@strawberry.input
class UpdateReviewInput:
    """Input for replacing a review's fields."""

    date: str
    title: str
    comment: str
    rating: int
    product_id: strawberry.ID


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Category mutations
    @strawberry.mutation(name="addCategory")
    async def add_category(self, info: strawberry.Info, input: AddCategoryInput) -> Category:
        """Create a new category."""
        from ..resolvers.category import add_category

        return await add_category(info, input)

    @strawberry.mutation(name="updateCategory")
    async def update_category(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateCategoryInput
    ) -> Category | None:
        """Update a category; null when it does not exist."""
        from ..resolvers.category import update_category

        return await update_category(info, str(id), input)

    @strawberry.mutation(name="deleteCategory")
    async def delete_category(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a category."""
        from ..resolvers.category import delete_category

        return await delete_category(info, str(id))

    # Product mutations
    @strawberry.mutation(name="addProduct")
    async def add_product(self, info: strawberry.Info, input: AddProductInput) -> Product:
        """Create a new product."""
        from ..resolvers.product import add_product

        return await add_product(info, input)

    @strawberry.mutation(name="updateProduct")
    async def update_product(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateProductInput
    ) -> Product | None:
        """Update a product; null when it does not exist."""
        from ..resolvers.product import update_product

        return await update_product(info, str(id), input)

    @strawberry.mutation(name="deleteProduct")
    async def delete_product(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a product and its reviews."""
        from ..resolvers.product import delete_product

        return await delete_product(info, str(id))

    # Review mutations
    @strawberry.mutation(name="addReview")
    async def add_review(self, info: strawberry.Info, input: AddReviewInput) -> Review:
        """Create a new review."""
        from ..resolvers.review import add_review

        return await add_review(info, input)

    @strawberry.mutation(name="updateReview")
    async def update_review(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateReviewInput
    ) -> Review | None:
        """Update a review; null when it does not exist."""
        from ..resolvers.review import update_review

        return await update_review(info, str(id), input)

    @strawberry.mutation(name="deleteReview")
    async def delete_review(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a review."""
        from ..resolvers.review import delete_review

        return await delete_review(info, str(id))

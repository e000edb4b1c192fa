from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.filters import apply_products_filter
from ..context import get_loaders, get_store

if TYPE_CHECKING:
    from ..mutations.root import AddProductInput, UpdateProductInput
    from ..types.category import Category
    from ..types.filters import ProductsFilterInput
    from ..types.product import Product
    from ..types.review import Review

logger = get_logger(__name__)


def _product_fields(input: AddProductInput | UpdateProductInput) -> dict:
    """Map an input to store fields; an omitted ``categoryId`` is left out, explicit null kept."""
    fields = {
        "name": input.name,
        "description": input.description,
        "quantity": input.quantity,
        "image": input.image,
        "price": input.price,
        "on_sale": input.on_sale,
    }
    if input.category_id is not strawberry.UNSET:
        fields["category_id"] = input.category_id
    return fields


# Query resolvers
async def resolve_products(
    info: strawberry.Info, filter: ProductsFilterInput | None = None
) -> list[Product]:
    """Resolve the full product listing, narrowed by an optional filter."""
    store = get_store(info)
    matched = apply_products_filter(
        store.get_products(),
        store.get_reviews(),
        filter.to_filter() if filter is not None else None,
    )

    from ..types.product import Product as ProductType

    return [ProductType.from_record(p) for p in matched]


async def resolve_product_by_id(info: strawberry.Info, id: str) -> Product | None:
    record = get_store(info).get_product_by_id(id)
    if record is None:
        logger.info("Product not found", product_id=id)
        return None

    from ..types.product import Product as ProductType

    return ProductType.from_record(record)


# Field resolvers
async def resolve_product_category(product: Product, info: strawberry.Info) -> Category | None:
    """Resolve the category of a product.

    A category id that no longer matches a category resolves to null.
    """
    if not product.category_id:
        return None

    record = await get_loaders(info).category_loader.load(product.category_id)
    if record is None:
        logger.debug(
            "Dangling category reference",
            product_id=str(product.id),
            category_id=product.category_id,
        )
        return None

    from ..types.category import Category as CategoryType

    return CategoryType.from_record(record)


async def resolve_product_reviews(product: Product, info: strawberry.Info) -> list[Review]:
    records = await get_loaders(info).reviews_loader.load(str(product.id))

    from ..types.review import Review as ReviewType

    return [ReviewType.from_record(r) for r in records]


# Mutation resolvers
async def add_product(info: strawberry.Info, input: AddProductInput) -> Product:
    record = get_store(info).insert_product(_product_fields(input))
    get_loaders(info).clear()

    from ..types.product import Product as ProductType

    return ProductType.from_record(record)


async def update_product(
    info: strawberry.Info, id: str, input: UpdateProductInput
) -> Product | None:
    record = get_store(info).update_product(id, _product_fields(input))
    if record is None:
        logger.info("Product not found for update", product_id=id)
        return None
    get_loaders(info).clear()

    from ..types.product import Product as ProductType

    return ProductType.from_record(record)


async def delete_product(info: strawberry.Info, id: str) -> bool:
    """Delete a product along with its reviews."""
    removed = get_store(info).remove_product(id)
    if not removed:
        logger.info("Product not found for delete", product_id=id)
        return False
    get_loaders(info).clear()
    return True

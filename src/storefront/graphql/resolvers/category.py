from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.filters import apply_products_filter
from ..context import get_loaders, get_store

if TYPE_CHECKING:
    from ..mutations.root import AddCategoryInput, UpdateCategoryInput
    from ..types.category import Category
    from ..types.filters import ProductsFilterInput
    from ..types.product import Product

logger = get_logger(__name__)


# Query resolvers
async def resolve_categories(info: strawberry.Info) -> list[Category]:
    from ..types.category import Category as CategoryType

    return [CategoryType.from_record(c) for c in get_store(info).get_categories()]


async def resolve_category_by_id(info: strawberry.Info, id: str) -> Category | None:
    """Resolve a category by its ID; unknown ids resolve to null."""
    record = get_store(info).get_category_by_id(id)
    if record is None:
        logger.info("Category not found", category_id=id)
        return None

    from ..types.category import Category as CategoryType

    return CategoryType.from_record(record)


# Field resolvers
async def resolve_category_products(
    category: Category,
    info: strawberry.Info,
    filter: ProductsFilterInput | None = None,
) -> list[Product]:
    """Resolve the products of a category, narrowed by an optional filter."""
    store = get_store(info)
    products = store.get_products_by_category_id(str(category.id))
    matched = apply_products_filter(
        products,
        store.get_reviews(),
        filter.to_filter() if filter is not None else None,
    )

    from ..types.product import Product as ProductType

    return [ProductType.from_record(p) for p in matched]


# Mutation resolvers
async def add_category(info: strawberry.Info, input: AddCategoryInput) -> Category:
    record = get_store(info).insert_category({"name": input.name})
    get_loaders(info).clear()

    from ..types.category import Category as CategoryType

    return CategoryType.from_record(record)


async def update_category(
    info: strawberry.Info, id: str, input: UpdateCategoryInput
) -> Category | None:
    record = get_store(info).update_category(id, {"name": input.name})
    if record is None:
        logger.info("Category not found for update", category_id=id)
        return None
    get_loaders(info).clear()

    from ..types.category import Category as CategoryType

    return CategoryType.from_record(record)


async def delete_category(info: strawberry.Info, id: str) -> bool:
    """Delete a category; its products stay in the catalog uncategorized."""
    removed = get_store(info).remove_category(id)
    if not removed:
        logger.info("Category not found for delete", category_id=id)
        return False
    get_loaders(info).clear()
    return True

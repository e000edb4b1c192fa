"""
In-memory catalog store.

Holds categories, products and reviews in insertion order. Lookups of
missing ids return ``None`` (or ``False`` for removals) rather than
raising. All writes go through a single lock so concurrent resolvers on
a threaded host cannot interleave partial updates.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from ..logging import get_logger
from .models import Category, Product, Review
from .seed_data import seed_categories, seed_products, seed_reviews

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid.uuid4())


def _find_index(records: list[RecordT], id: str) -> int | None:
    for index, record in enumerate(records):
        if record.id == id:  # type: ignore[attr-defined]
            return index
    return None


class CatalogStore:
    """Process-lifetime catalog state shared by all resolvers."""

    def __init__(
        self,
        categories: Iterable[Category] = (),
        products: Iterable[Product] = (),
        reviews: Iterable[Review] = (),
    ) -> None:
        self._categories: list[Category] = [c.model_copy() for c in categories]
        self._products: list[Product] = [p.model_copy() for p in products]
        self._reviews: list[Review] = [r.model_copy() for r in reviews]
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls) -> CatalogStore:
        """Build a store populated with the bundled seed catalog."""
        store = cls(seed_categories(), seed_products(), seed_reviews())
        logger.info(
            "Catalog store seeded",
            categories=len(store._categories),
            products=len(store._products),
            reviews=len(store._reviews),
        )
        return store

    # Generic helpers
    def _get(self, records: list[RecordT], id: str) -> RecordT | None:
        index = _find_index(records, id)
        if index is None:
            return None
        return records[index].model_copy()

    def _insert(self, records: list[RecordT], model: type[RecordT], fields: Mapping[str, Any]) -> RecordT:
        data = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            record = model(id=new_id(), **data)
            records.append(record)
        return record.model_copy()

    def _update(self, records: list[RecordT], id: str, fields: Mapping[str, Any]) -> RecordT | None:
        changes = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = _find_index(records, id)
            if index is None:
                return None
            current = records[index]
            # Revalidate so a bad field never lands in the store
            updated = type(current).model_validate({**current.model_dump(), **changes})
            records[index] = updated
        return updated.model_copy()

    # Categories
    def get_categories(self) -> list[Category]:
        return [c.model_copy() for c in self._categories]

    def get_category_by_id(self, id: str) -> Category | None:
        return self._get(self._categories, id)

    def insert_category(self, fields: Mapping[str, Any]) -> Category:
        category = self._insert(self._categories, Category, fields)
        logger.info("Category created", category_id=category.id)
        return category

    def update_category(self, id: str, fields: Mapping[str, Any]) -> Category | None:
        return self._update(self._categories, id, fields)

    def remove_category(self, id: str) -> bool:
        """Remove a category and detach its products.

        Products that referenced the category keep existing with
        ``category_id`` cleared.
        """
        with self._lock:
            index = _find_index(self._categories, id)
            if index is None:
                return False
            del self._categories[index]
            detached = 0
            for i, product in enumerate(self._products):
                if product.category_id == id:
                    self._products[i] = product.model_copy(update={"category_id": None})
                    detached += 1
        logger.info("Category removed", category_id=id, detached_products=detached)
        return True

    # Products
    def get_products(self) -> list[Product]:
        return [p.model_copy() for p in self._products]

    def get_product_by_id(self, id: str) -> Product | None:
        return self._get(self._products, id)

    def get_products_by_category_id(self, category_id: str) -> list[Product]:
        return [p.model_copy() for p in self._products if p.category_id == category_id]

    def insert_product(self, fields: Mapping[str, Any]) -> Product:
        product = self._insert(self._products, Product, fields)
        logger.info("Product created", product_id=product.id, category_id=product.category_id)
        return product

    def update_product(self, id: str, fields: Mapping[str, Any]) -> Product | None:
        return self._update(self._products, id, fields)

    def remove_product(self, id: str) -> bool:
        """Remove a product together with its reviews."""
        with self._lock:
            index = _find_index(self._products, id)
            if index is None:
                return False
            del self._products[index]
            before = len(self._reviews)
            self._reviews[:] = [r for r in self._reviews if r.product_id != id]
            removed_reviews = before - len(self._reviews)
        logger.info("Product removed", product_id=id, removed_reviews=removed_reviews)
        return True

    # Reviews
    def get_reviews(self) -> list[Review]:
        return [r.model_copy() for r in self._reviews]

    def get_review_by_id(self, id: str) -> Review | None:
        return self._get(self._reviews, id)

    def get_reviews_by_product_id(self, product_id: str) -> list[Review]:
        return [r.model_copy() for r in self._reviews if r.product_id == product_id]

    def insert_review(self, fields: Mapping[str, Any]) -> Review:
        review = self._insert(self._reviews, Review, fields)
        logger.info("Review created", review_id=review.id, product_id=review.product_id)
        return review

    def update_review(self, id: str, fields: Mapping[str, Any]) -> Review | None:
        return self._update(self._reviews, id, fields)

    def remove_review(self, id: str) -> bool:
        with self._lock:
            index = _find_index(self._reviews, id)
            if index is None:
                return False
            del self._reviews[index]
        logger.info("Review removed", review_id=id)
        return True

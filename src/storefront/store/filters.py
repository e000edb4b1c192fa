"""
Product listing filters.

A product with no reviews has no average rating and never satisfies an
``avg_rating`` threshold, whatever its value.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from .models import Product, Review


class ProductsFilter(BaseModel):
    """Optional criteria applied to a product listing; unset fields match everything."""

    on_sale: bool | None = None
    avg_rating: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.on_sale is None and self.avg_rating is None


def average_rating(reviews: Sequence[Review]) -> float | None:
    """Mean rating of ``reviews``, or None when there are none."""
    if not reviews:
        return None
    return sum(review.rating for review in reviews) / len(reviews)


def apply_products_filter(
    products: Sequence[Product],
    reviews: Iterable[Review],
    filter: ProductsFilter | None = None,
) -> list[Product]:
    """Return the products matching every criterion set on ``filter``.

    Args:
        products: Listing to filter; its order is preserved.
        reviews: Reviews used to compute average ratings. Only consulted
            when ``filter.avg_rating`` is set.
        filter: Criteria to apply. None or an empty filter returns the
            listing unchanged.
    """
    if filter is None or filter.is_empty:
        return list(products)

    matched = list(products)

    if filter.on_sale is not None:
        matched = [p for p in matched if p.on_sale == filter.on_sale]

    if filter.avg_rating is not None:
        by_product: dict[str, list[Review]] = defaultdict(list)
        for review in reviews:
            by_product[review.product_id].append(review)

        threshold = filter.avg_rating
        kept = []
        for product in matched:
            avg = average_rating(by_product.get(product.id, []))
            if avg is not None and avg >= threshold:
                kept.append(product)
        matched = kept

    return matched

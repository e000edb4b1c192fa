"""In-memory catalog storage."""

from .filters import ProductsFilter, apply_products_filter, average_rating
from .memory import CatalogStore
from .models import Category, Product, Review

__all__ = [
    "CatalogStore",
    "Category",
    "Product",
    "ProductsFilter",
    "Review",
    "apply_products_filter",
    "average_rating",
]

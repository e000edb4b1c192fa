from strawberry.dataloader import DataLoader

from ..store.memory import CatalogStore
from ..store.models import Category, Review


class Loaders:
    """Request-scoped batch loaders over the catalog store."""

    def __init__(self, store: CatalogStore):
        self.store = store
        self.category_loader = DataLoader(load_fn=self.load_categories)
        self.reviews_loader = DataLoader(load_fn=self.load_reviews)

    async def load_categories(self, keys: list[str]) -> list[Category | None]:
        """Batch load categories by ID."""
        categories_map = {category.id: category for category in self.store.get_categories()}
        return [categories_map.get(key) for key in keys]

    async def load_reviews(self, keys: list[str]) -> list[list[Review]]:
        """Batch load reviews grouped by product ID."""
        wanted = set(keys)
        grouped: dict[str, list[Review]] = {key: [] for key in wanted}
        for review in self.store.get_reviews():
            if review.product_id in wanted:
                grouped[review.product_id].append(review)
        return [grouped[key] for key in keys]

    def clear(self) -> None:
        """Drop cached results after the store has been written to."""
        self.category_loader.clear_all()
        self.reviews_loader.clear_all()

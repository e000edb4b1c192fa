"""
Per-request GraphQL context.

Resolvers never reach for a module-level store; the store and the
request-scoped data loaders travel in ``info.context``.
"""

from typing import Any

import strawberry

from ..store.memory import CatalogStore
from .loaders import Loaders


def build_context(store: CatalogStore, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver for one operation."""
    return {"store": store, "loaders": Loaders(store), **extra}


def get_store(info: strawberry.Info) -> CatalogStore:
    return info.context["store"]


def get_loaders(info: strawberry.Info) -> Loaders:
    loaders = info.context.get("loaders")
    if loaders is None:
        # Contexts built by hand in tests may omit loaders
        loaders = info.context["loaders"] = Loaders(get_store(info))
    return loaders

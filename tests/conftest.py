"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from storefront.store.memory import CatalogStore


@pytest.fixture
def store() -> CatalogStore:
    """A fresh store populated with the seed catalog."""
    return CatalogStore.from_seed()


@pytest.fixture
def empty_store() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def execute(store: CatalogStore):
    """Run a GraphQL document against the schema with the ``store`` fixture injected."""
    from storefront.graphql.context import build_context
    from storefront.graphql.schema import schema

    async def _execute(query: str, variables: dict[str, Any] | None = None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(store),
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")

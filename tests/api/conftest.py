"""Shared fixtures for API tests."""

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from catalog_api.api.catalog import get_product_repository
from catalog_api.api.categories import get_category_repository
from catalog_api.api.health import database_ready
from catalog_api.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from catalog_api.main import app


@pytest.fixture
def client(
    product_repo: InMemoryProductRepository,
    category_repo: InMemoryCategoryRepository,
) -> Generator[TestClient, None, None]:
    """Create test client backed by the in-memory stores."""
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo
    app.dependency_overrides[database_ready] = lambda: True
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def filtered_spy(product_repo: InMemoryProductRepository) -> AsyncMock:
    """Record the arguments the handler passes to the product store."""
    spy = AsyncMock(wraps=product_repo.get_filtered_products)
    product_repo.get_filtered_products = spy  # type: ignore[method-assign]
    return spy

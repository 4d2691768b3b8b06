"""Tests for the in-memory catalog stores."""

from decimal import Decimal

import pytest

from catalog_api.catalog.memory import InMemoryProductRepository
from catalog_api.catalog.models import Product
from catalog_api.domain.exceptions import CatalogStoreError, ProductNotFoundError
from catalog_api.domain.value_objects import ProductFilters


class TestInMemoryProductRepository:
    """Tests for InMemoryProductRepository."""

    @pytest.mark.asyncio
    async def test_total_ignores_pagination(
        self, product_repo: InMemoryProductRepository
    ) -> None:
        """Total counts every match, the page holds at most limit items."""
        page, total = await product_repo.get_filtered_products(0, 2, ProductFilters())

        assert total == 4
        assert [p.code for p in page] == ["PROD001", "PROD002"]

    @pytest.mark.asyncio
    async def test_page_is_contiguous_slice(
        self, product_repo: InMemoryProductRepository
    ) -> None:
        """Consecutive windows cover the filtered set without gaps."""
        seen = []
        for offset in range(4):
            page, _ = await product_repo.get_filtered_products(offset, 1, ProductFilters())
            seen.extend(p.code for p in page)

        assert seen == ["PROD001", "PROD002", "PROD003", "PROD004"]

    @pytest.mark.asyncio
    async def test_filters_are_conjunctive(
        self, product_repo: InMemoryProductRepository
    ) -> None:
        """Both filters must hold."""
        filters = ProductFilters(category_code="clothing", price_less_than=Decimal("30"))

        page, total = await product_repo.get_filtered_products(0, 10, filters)

        assert total == 1
        assert [p.code for p in page] == ["PROD002"]

    @pytest.mark.asyncio
    async def test_ordered_by_code(self, sample_products: list[Product]) -> None:
        """Listing order does not depend on insertion order."""
        repo = InMemoryProductRepository(reversed(sample_products))

        products = await repo.get_all_products()

        assert [p.code for p in products] == ["PROD001", "PROD002", "PROD003", "PROD004"]

    @pytest.mark.asyncio
    async def test_get_by_code_not_found(
        self, product_repo: InMemoryProductRepository
    ) -> None:
        """Unknown codes raise ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError) as exc_info:
            await product_repo.get_by_code("PROD999")
        assert exc_info.value.details == {"code": "PROD999"}

    @pytest.mark.asyncio
    async def test_error_injection(self, product_repo: InMemoryProductRepository) -> None:
        """A configured error fails every operation."""
        product_repo.error = ConnectionError("db down")

        with pytest.raises(CatalogStoreError) as exc_info:
            await product_repo.get_all_products()
        assert exc_info.value.operation == "get_all_products"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

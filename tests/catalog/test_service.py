"""Tests for catalog and category services."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from catalog_api.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from catalog_api.catalog.models import Product, Variant
from catalog_api.catalog.service import (
    CatalogService,
    CategoryService,
    CategoryView,
    ProductDetail,
    VariantView,
    to_product_detail,
)
from catalog_api.domain.exceptions import CatalogStoreError, ProductNotFoundError
from catalog_api.domain.value_objects import CatalogQuery


class TestVariantPriceInheritance:
    """Tests for variant price resolution."""

    @pytest.mark.parametrize(
        ("own_price", "expected"),
        [
            (None, Decimal("20.00")),
            (Decimal("0"), Decimal("20.00")),
            (Decimal("0.00"), Decimal("20.00")),
            (Decimal("25.50"), Decimal("25.50")),
            (Decimal("0.01"), Decimal("0.01")),
        ],
    )
    def test_effective_price(self, own_price: Decimal | None, expected: Decimal) -> None:
        """Absent or zero prices inherit the parent price."""
        variant = Variant(name="Variant", sku="SKU", price=own_price)
        assert variant.effective_price(Decimal("20.00")) == expected

    def test_to_product_detail(self, make_product: Callable[..., Product]) -> None:
        """Detail mapping resolves every variant price."""
        product = make_product(
            "PROD001",
            "clothing",
            "Clothing",
            "10.99",
            [("Variant A", "SKU001A", "11.99"), ("Variant B", "SKU001B", None)],
        )

        assert to_product_detail(product) == ProductDetail(
            code="PROD001",
            price=Decimal("10.99"),
            category=CategoryView(code="clothing", name="Clothing"),
            variants=[
                VariantView(name="Variant A", sku="SKU001A", price=Decimal("11.99")),
                VariantView(name="Variant B", sku="SKU001B", price=Decimal("10.99")),
            ],
        )

    def test_inheritance_is_read_time_only(self, make_product: Callable[..., Product]) -> None:
        """Mapping does not write the inherited price back to the variant."""
        product = make_product("PROD001", "clothing", "Clothing", "10.99", [("A", "SKU-A", None)])

        to_product_detail(product)

        assert product.variants[0].price is None


class TestCatalogService:
    """Tests for CatalogService."""

    @pytest.fixture
    def service(self, product_repo: InMemoryProductRepository) -> CatalogService:
        """Create service over the sample products."""
        return CatalogService(product_repo)

    @pytest.mark.asyncio
    async def test_list_products_scenario(self, service: CatalogService) -> None:
        """Clothing under 30 matches only PROD002."""
        result = await service.list_products(
            CatalogQuery.from_query(category="clothing", price_lt="30")
        )

        assert result.total == 1
        assert [p.code for p in result.items] == ["PROD002"]
        assert result.items[0].category == CategoryView(code="clothing", name="Clothing")

    @pytest.mark.asyncio
    async def test_list_products_window(self, service: CatalogService) -> None:
        """The page is the contiguous slice starting at offset."""
        result = await service.list_products(CatalogQuery.from_query(offset="1", limit="2"))

        assert result.total == 4
        assert [p.code for p in result.items] == ["PROD002", "PROD003"]

    @pytest.mark.asyncio
    async def test_list_products_last_page(self, service: CatalogService) -> None:
        """The last page holds the remaining items, the total is unchanged."""
        result = await service.list_products(CatalogQuery.from_query(offset="3"))

        assert result.total == 4
        assert [p.code for p in result.items] == ["PROD004"]

    @pytest.mark.asyncio
    async def test_get_product(self, service: CatalogService) -> None:
        """Should map the product to its detail."""
        detail = await service.get_product("PROD003")

        assert detail.code == "PROD003"
        assert detail.price == Decimal("10.00")
        assert detail.variants == []

    @pytest.mark.asyncio
    async def test_get_product_not_found(
        self, service: CatalogService, product_repo: InMemoryProductRepository
    ) -> None:
        """Missing products raise ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError):
            await service.get_product("NOPE")
        assert product_repo.calls == ["get_by_code"]

    @pytest.mark.asyncio
    async def test_store_error_propagates(
        self, service: CatalogService, product_repo: InMemoryProductRepository
    ) -> None:
        """Store failures are not turned into not-found."""
        product_repo.error = ConnectionError("db down")

        with pytest.raises(CatalogStoreError):
            await service.get_product("PROD001")
        with pytest.raises(CatalogStoreError):
            await service.list_products(CatalogQuery())

    @pytest.mark.asyncio
    async def test_list_all_products(self, service: CatalogService) -> None:
        """Should return every product ordered by code."""
        details = await service.list_all_products()

        assert [d.code for d in details] == ["PROD001", "PROD002", "PROD003", "PROD004"]


class TestCategoryService:
    """Tests for CategoryService."""

    @pytest.mark.asyncio
    async def test_list_categories(self, category_repo: InMemoryCategoryRepository) -> None:
        """Should list categories ordered by code."""
        service = CategoryService(category_repo)

        categories = await service.list_categories()

        assert [c.code for c in categories] == ["accessories", "clothing", "shoes"]

    @pytest.mark.asyncio
    async def test_create_category(self, category_repo: InMemoryCategoryRepository) -> None:
        """Should store the category and return its view."""
        service = CategoryService(category_repo)

        created = await service.create_category(code="bags", name="Bags")

        assert created == CategoryView(code="bags", name="Bags")
        assert "bags" in [c.code for c in await service.list_categories()]

    @pytest.mark.asyncio
    async def test_create_duplicate_category(
        self, category_repo: InMemoryCategoryRepository
    ) -> None:
        """Duplicate codes are rejected by the store."""
        service = CategoryService(category_repo)

        with pytest.raises(CatalogStoreError):
            await service.create_category(code="shoes", name="Shoes again")

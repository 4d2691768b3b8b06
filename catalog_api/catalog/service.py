"""Catalog service for product and category operations.

High-level service that combines repository operations with the
catalog's read-time business rules: pagination windows and variant
price inheritance.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Generic, TypeVar

import structlog

from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import CategoryProvider, ProductProvider
from catalog_api.domain.value_objects import CatalogQuery

T = TypeVar("T")

logger = structlog.get_logger()


# ============================================================================
# Read Models
# ============================================================================


@dataclass(frozen=True)
class CategoryView:
    """Category as exposed to clients."""

    code: str
    name: str


@dataclass(frozen=True)
class VariantView:
    """Variant with its effective price resolved."""

    name: str
    sku: str
    price: Decimal


@dataclass(frozen=True)
class ProductSummary:
    """Product entry of a catalog listing."""

    code: str
    price: Decimal
    category: CategoryView


@dataclass(frozen=True)
class ProductDetail:
    """Single product with its variants."""

    code: str
    price: Decimal
    category: CategoryView
    variants: list[VariantView] = field(default_factory=list)


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items of the requested window.
        total: Total matches before pagination.
    """

    items: list[T]
    total: int


# ============================================================================
# Mapping
# ============================================================================


def to_category_view(category: Category) -> CategoryView:
    """Convert a Category model to its view."""
    return CategoryView(code=category.code, name=category.name)


def to_product_summary(product: Product) -> ProductSummary:
    """Convert a Product model to a listing entry."""
    return ProductSummary(
        code=product.code,
        price=product.price,
        category=to_category_view(product.category),
    )


def to_product_detail(product: Product) -> ProductDetail:
    """Convert a Product model to its detail view.

    Variants without their own price (absent or zero) take the
    product's price.

    Args:
        product: Product with category and variants loaded.

    Returns:
        Product detail with resolved variant prices.
    """
    return ProductDetail(
        code=product.code,
        price=product.price,
        category=to_category_view(product.category),
        variants=[
            VariantView(
                name=variant.name,
                sku=variant.sku,
                price=variant.effective_price(product.price),
            )
            for variant in product.variants
        ],
    )


# ============================================================================
# Services
# ============================================================================


class CatalogService:
    """Service for product catalog reads.

    Example usage:
        service = CatalogService(ProductRepository(session))
        page = await service.list_products(
            CatalogQuery.from_query(limit="20", category="shoes"),
        )
    """

    def __init__(self, products: ProductProvider) -> None:
        """Initialize service with a product store.

        Args:
            products: Product store.
        """
        self.products = products

    async def list_products(self, query: CatalogQuery) -> PaginatedResult[ProductSummary]:
        """List products matching filters, one page at a time.

        Args:
            query: Normalized pagination and filters.

        Returns:
            Paginated product summaries.

        Raises:
            CatalogStoreError: If the store fails.
        """
        pagination = query.pagination
        products, total = await self.products.get_filtered_products(
            pagination.offset,
            pagination.limit,
            query.filters,
        )

        return PaginatedResult(
            items=[to_product_summary(p) for p in products],
            total=total,
        )

    async def get_product(self, code: str) -> ProductDetail:
        """Get product detail by code.

        Args:
            code: Product code.

        Returns:
            Product detail with inherited variant prices.

        Raises:
            ProductNotFoundError: If no product has this code.
            CatalogStoreError: If the store fails.
        """
        product = await self.products.get_by_code(code)
        return to_product_detail(product)

    async def list_all_products(self) -> list[ProductDetail]:
        """Get every product with variants, unpaginated."""
        return [to_product_detail(p) for p in await self.products.get_all_products()]


class CategoryService:
    """Service for category listing and creation."""

    def __init__(self, categories: CategoryProvider) -> None:
        """Initialize service with a category store.

        Args:
            categories: Category store.
        """
        self.categories = categories

    async def list_categories(self) -> list[CategoryView]:
        """List all categories.

        Raises:
            CatalogStoreError: If the store fails.
        """
        categories: Sequence[Category] = await self.categories.get_all_categories()
        return [to_category_view(c) for c in categories]

    async def create_category(self, code: str, name: str) -> CategoryView:
        """Create a category.

        Args:
            code: Unique category code.
            name: Display name.

        Returns:
            The created category.

        Raises:
            CatalogStoreError: If the store rejects the insert.
        """
        category = await self.categories.create_category(Category(code=code, name=name))
        logger.info("Category created", code=category.code)
        return to_category_view(category)

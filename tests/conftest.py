"""Shared fixtures and sample data."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from catalog_api.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from catalog_api.catalog.models import Category, Product, Variant

ProductFactory = Callable[..., Product]


def build_product(
    code: str,
    category_code: str,
    category_name: str,
    price: str,
    variants: list[tuple[str, str, str | None]] | None = None,
) -> Product:
    """Build a transient product with its category and variants."""
    return Product(
        code=code,
        price=Decimal(price),
        category=Category(code=category_code, name=category_name),
        variants=[
            Variant(
                name=name,
                sku=sku,
                price=Decimal(own_price) if own_price is not None else None,
            )
            for name, sku, own_price in (variants or [])
        ],
    )


@pytest.fixture
def make_product() -> ProductFactory:
    """Factory for transient products."""
    return build_product


@pytest.fixture
def sample_products() -> list[Product]:
    """Four products across three categories."""
    return [
        build_product("PROD001", "shoes", "Shoes", "19.99"),
        build_product("PROD002", "clothing", "Clothing", "24.99"),
        build_product("PROD003", "accessories", "Accessories", "10.00"),
        build_product("PROD004", "clothing", "Clothing", "95.50"),
    ]


@pytest.fixture
def product_repo(sample_products: list[Product]) -> InMemoryProductRepository:
    """In-memory product store holding the sample products."""
    return InMemoryProductRepository(sample_products)


@pytest.fixture
def category_repo() -> InMemoryCategoryRepository:
    """In-memory category store holding the three reference categories."""
    return InMemoryCategoryRepository(
        [
            Category(code="clothing", name="Clothing"),
            Category(code="shoes", name="Shoes"),
            Category(code="accessories", name="Accessories"),
        ]
    )

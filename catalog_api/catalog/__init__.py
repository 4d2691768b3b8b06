"""Product Catalog.

Provides catalog models, stores and the read-side service logic.
"""

from catalog_api.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from catalog_api.catalog.models import Category, Product, Variant
from catalog_api.catalog.repository import (
    CategoryProvider,
    CategoryRepository,
    ProductProvider,
    ProductRepository,
)
from catalog_api.catalog.service import (
    CatalogService,
    CategoryService,
    CategoryView,
    PaginatedResult,
    ProductDetail,
    ProductSummary,
    VariantView,
)

__all__ = [
    # Models
    "Category",
    "Product",
    "Variant",
    # Repositories
    "CategoryProvider",
    "CategoryRepository",
    "InMemoryCategoryRepository",
    "InMemoryProductRepository",
    "ProductProvider",
    "ProductRepository",
    # Service
    "CatalogService",
    "CategoryService",
    "CategoryView",
    "PaginatedResult",
    "ProductDetail",
    "ProductSummary",
    "VariantView",
]

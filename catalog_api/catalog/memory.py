"""In-memory catalog stores.

Implement the same protocols as the SQLAlchemy repositories over plain
lists of transient model instances. Used by tests and local demos that
run without a database.
"""

from collections.abc import Iterable, Sequence

from catalog_api.catalog.models import Category, Product
from catalog_api.domain.exceptions import CatalogStoreError, ProductNotFoundError
from catalog_api.domain.value_objects import ProductFilters


class InMemoryProductRepository:
    """In-memory repository for products.

    Set ``error`` to make every call fail with that exception, the way
    a broken database connection would.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {p.code: p for p in products}
        self.error: Exception | None = None
        self.calls: list[str] = []

    def add(self, product: Product) -> None:
        """Add or replace a product."""
        self._products[product.code] = product

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if self.error is not None:
            raise CatalogStoreError(operation, reason=str(self.error)) from self.error

    def _ordered(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.code)

    async def get_all_products(self) -> Sequence[Product]:
        """Get all products ordered by code."""
        self._check("get_all_products")
        return self._ordered()

    async def get_filtered_products(
        self,
        offset: int,
        limit: int,
        filters: ProductFilters,
    ) -> tuple[Sequence[Product], int]:
        """Filter, count, then slice the ordered product list."""
        self._check("get_filtered_products")
        matching = [
            p for p in self._ordered() if filters.matches(p.category.code, p.price)
        ]
        return matching[offset : offset + limit], len(matching)

    async def get_by_code(self, code: str) -> Product:
        """Get product by code."""
        self._check("get_by_code")
        product = self._products.get(code)
        if product is None:
            raise ProductNotFoundError(code)
        return product


class InMemoryCategoryRepository:
    """In-memory repository for categories."""

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._categories: dict[str, Category] = {c.code: c for c in categories}
        self.error: Exception | None = None
        self.calls: list[str] = []

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if self.error is not None:
            raise CatalogStoreError(operation, reason=str(self.error)) from self.error

    async def get_all_categories(self) -> Sequence[Category]:
        """Get all categories ordered by code."""
        self._check("get_all_categories")
        return sorted(self._categories.values(), key=lambda c: c.code)

    async def create_category(self, category: Category) -> Category:
        """Save a category; duplicate codes fail like a unique index."""
        self._check("create_category")
        if category.code in self._categories:
            raise CatalogStoreError(
                "create_category",
                reason=f"duplicate category code {category.code!r}",
            )
        self._categories[category.code] = category
        return category

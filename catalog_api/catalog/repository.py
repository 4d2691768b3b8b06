"""Catalog repositories for database operations.

Defines the store protocols the service layer depends on, and their
SQLAlchemy implementations.
"""

from collections.abc import Sequence
from typing import Protocol

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from catalog_api.catalog.models import Category, Product
from catalog_api.domain.exceptions import CatalogStoreError, ProductNotFoundError
from catalog_api.domain.value_objects import ProductFilters

logger = structlog.get_logger()


# ============================================================================
# Store Protocols
# ============================================================================


class ProductProvider(Protocol):
    """Read access to products."""

    async def get_all_products(self) -> Sequence[Product]:
        """Return every product with category and variants loaded."""
        ...

    async def get_filtered_products(
        self,
        offset: int,
        limit: int,
        filters: ProductFilters,
    ) -> tuple[Sequence[Product], int]:
        """Return one page of matching products and the total match count."""
        ...

    async def get_by_code(self, code: str) -> Product:
        """Return a product by code or raise ProductNotFoundError."""
        ...


class CategoryProvider(Protocol):
    """Read and create access to categories."""

    async def get_all_categories(self) -> Sequence[Category]:
        """Return every category."""
        ...

    async def create_category(self, category: Category) -> Category:
        """Persist a new category."""
        ...


# ============================================================================
# SQLAlchemy Implementations
# ============================================================================


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering and pagination. Driver errors are logged and re-raised
    as CatalogStoreError.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products, total = await repo.get_filtered_products(
                offset=0,
                limit=10,
                filters=ProductFilters(category_code="clothing"),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_all_products(self) -> Sequence[Product]:
        """Get all products.

        Returns:
            Every product ordered by code, with category and variants.

        Raises:
            CatalogStoreError: If the query fails.
        """
        query = (
            select(Product)
            .options(selectinload(Product.category), selectinload(Product.variants))
            .order_by(Product.code)
        )
        try:
            result = await self.session.execute(query)
            return result.scalars().all()
        except SQLAlchemyError as exc:
            raise self._store_error("get_all_products", exc) from exc

    async def get_filtered_products(
        self,
        offset: int,
        limit: int,
        filters: ProductFilters,
    ) -> tuple[Sequence[Product], int]:
        """Find products matching filters, with pagination.

        Args:
            offset: Result offset.
            limit: Maximum results.
            filters: Category and price filters, applied conjunctively.

        Returns:
            Tuple of (page of products ordered by code, total matches).

        Raises:
            CatalogStoreError: If either query fails.
        """
        conditions = []

        if filters.category_code is not None:
            conditions.append(Category.code == filters.category_code)

        if filters.price_less_than is not None:
            conditions.append(Product.price < filters.price_less_than)

        count_query = (
            select(func.count(Product.id))
            .join(Product.category)
            .where(*conditions)
        )
        page_query = (
            select(Product)
            .join(Product.category)
            .options(contains_eager(Product.category))
            .where(*conditions)
            .order_by(Product.code)
            .offset(offset)
            .limit(limit)
        )

        try:
            total = (await self.session.execute(count_query)).scalar_one()
            result = await self.session.execute(page_query)
            return result.scalars().all(), total
        except SQLAlchemyError as exc:
            raise self._store_error("get_filtered_products", exc) from exc

    async def get_by_code(self, code: str) -> Product:
        """Get product by code.

        Args:
            code: Product code.

        Returns:
            Product with category and variants loaded.

        Raises:
            ProductNotFoundError: If no product has this code.
            CatalogStoreError: If the query fails.
        """
        query = (
            select(Product)
            .where(Product.code == code)
            .options(selectinload(Product.category), selectinload(Product.variants))
        )
        try:
            result = await self.session.execute(query)
            product = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._store_error("get_by_code", exc) from exc

        if product is None:
            raise ProductNotFoundError(code)
        return product

    def _store_error(self, operation: str, exc: Exception) -> CatalogStoreError:
        logger.error(
            "Product store query failed",
            operation=operation,
            error=str(exc),
        )
        return CatalogStoreError(operation, reason=str(exc))


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_all_categories(self) -> Sequence[Category]:
        """Get all categories ordered by code.

        Raises:
            CatalogStoreError: If the query fails.
        """
        try:
            result = await self.session.execute(select(Category).order_by(Category.code))
            return result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error(
                "Category store query failed",
                operation="get_all_categories",
                error=str(exc),
            )
            raise CatalogStoreError("get_all_categories", reason=str(exc)) from exc

    async def create_category(self, category: Category) -> Category:
        """Save a new category and commit.

        Args:
            category: Category to save.

        Returns:
            Saved category with its ID assigned.

        Raises:
            CatalogStoreError: If the insert fails (e.g. duplicate code).
        """
        self.session.add(category)
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(
                "Category store insert failed",
                operation="create_category",
                code=category.code,
                error=str(exc),
            )
            raise CatalogStoreError("create_category", reason=str(exc)) from exc
        return category

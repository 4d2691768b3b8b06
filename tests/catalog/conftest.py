"""Fixtures for repository tests against SQLite."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.catalog.models import Category, Product, Variant
from catalog_api.infrastructure.database import Base


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with the catalog schema."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a session on the SQLite engine."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session whose database holds four products in three categories."""
    shoes = Category(code="shoes", name="Shoes")
    clothing = Category(code="clothing", name="Clothing")
    accessories = Category(code="accessories", name="Accessories")

    session.add_all(
        [
            # Inserted out of code order on purpose
            Product(code="PROD004", price=Decimal("95.50"), category=clothing),
            Product(
                code="PROD002",
                price=Decimal("24.99"),
                category=clothing,
                variants=[
                    Variant(name="Variant A", sku="SKU002A", price=Decimal("29.99")),
                    Variant(name="Variant B", sku="SKU002B", price=None),
                ],
            ),
            Product(code="PROD001", price=Decimal("19.99"), category=shoes),
            Product(code="PROD003", price=Decimal("10.00"), category=accessories),
        ]
    )
    await session.commit()
    session.expunge_all()
    return session

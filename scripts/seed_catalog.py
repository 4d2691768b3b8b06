#!/usr/bin/env python3
"""Seed product catalog script.

Loads the reference categories and products into the configured
database. Rows that already exist (matched by code) are skipped.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables
"""

import argparse
import asyncio

from catalog_api.catalog.repository import ProductRepository
from catalog_api.catalog.seed import seed_catalog
from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import Base, async_session_factory, engine
from catalog_api.infrastructure.log_config import configure_logging


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the reference product catalog",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from model metadata instead of relying on migrations",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level, json=False)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)

    if args.create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    async with async_session_factory() as session:
        result = await seed_catalog(session)
        products = await CatalogService(ProductRepository(session)).list_all_products()

    print(f"  ✓ Categories created: {result['categories_created']}")
    print(f"  ✓ Products created: {result['products_created']}")
    print(f"  ✓ Variants created: {result['variants_created']}")
    print()
    for product in products:
        print(
            f"  {product.code}  {product.category.code:<12} "
            f"{product.price:>8}  variants={len(product.variants)}"
        )

    await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())

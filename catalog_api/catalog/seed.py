"""Reference catalog seed data.

Loads the three reference categories and eight reference products
(with a few variants) into an empty or partially seeded database.
Existing rows, matched by code, are left untouched.
"""

from collections.abc import Collection
from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import Category, Product, Variant

logger = structlog.get_logger()


CATEGORIES: list[tuple[str, str]] = [
    ("clothing", "Clothing"),
    ("shoes", "Shoes"),
    ("accessories", "Accessories"),
]

# (code, price, category code, [(variant name, sku, own price or None)])
PRODUCTS: list[tuple[str, str, str, list[tuple[str, str, str | None]]]] = [
    (
        "PROD001",
        "10.99",
        "clothing",
        [
            ("Variant A", "SKU001A", "11.99"),
            ("Variant B", "SKU001B", None),
        ],
    ),
    ("PROD002", "12.49", "shoes", [("Variant A", "SKU002A", "0.00")]),
    (
        "PROD003",
        "8.75",
        "accessories",
        [
            ("Variant A", "SKU003A", "9.25"),
            ("Variant B", "SKU003B", "9.75"),
        ],
    ),
    ("PROD004", "15.00", "clothing", []),
    ("PROD005", "20.50", "accessories", [("Variant A", "SKU005A", None)]),
    ("PROD006", "5.99", "shoes", []),
    ("PROD007", "9.99", "clothing", [("Variant A", "SKU007A", "12.99")]),
    ("PROD008", "11.25", "accessories", []),
]


def build_products(
    categories: dict[str, Category],
    exclude: Collection[str] = (),
) -> list[Product]:
    """Build transient Product instances for the reference catalog.

    Args:
        categories: Categories keyed by code; must contain every code
            referenced in PRODUCTS.
        exclude: Product codes to leave out.

    Returns:
        Products with variants attached.
    """
    return [
        Product(
            code=code,
            price=Decimal(price),
            category=categories[category_code],
            variants=[
                Variant(
                    name=name,
                    sku=sku,
                    price=Decimal(own_price) if own_price is not None else None,
                )
                for name, sku, own_price in variants
            ],
        )
        for code, price, category_code, variants in PRODUCTS
        if code not in exclude
    ]


async def seed_catalog(session: AsyncSession) -> dict[str, Any]:
    """Insert missing reference categories and products, then commit.

    Args:
        session: Async SQLAlchemy session.

    Returns:
        Seeding result with counts.
    """
    result = await session.execute(select(Category))
    categories = {c.code: c for c in result.scalars().all()}

    categories_created = 0
    for code, name in CATEGORIES:
        if code not in categories:
            category = Category(code=code, name=name)
            session.add(category)
            categories[code] = category
            categories_created += 1

    result = await session.execute(select(Product.code))
    existing_products = set(result.scalars().all())

    new_products = build_products(categories, exclude=existing_products)
    session.add_all(new_products)
    await session.commit()

    summary = {
        "categories_created": categories_created,
        "products_created": len(new_products),
        "variants_created": sum(len(p.variants) for p in new_products),
    }
    logger.info("Catalog seeded", **summary)
    return summary

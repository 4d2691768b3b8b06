"""SQLAlchemy models for the product catalog.

Defines Category, Product and Variant tables.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base

PRICE_TYPE = Numeric(10, 2, asdecimal=True)


class Category(Base):
    """Product category.

    Attributes:
        id: Surrogate primary key.
        code: Unique category code (e.g. "clothing").
        name: Human-readable name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)

    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(code={self.code}, name={self.name})>"


class Product(Base):
    """Product in the catalog.

    Every product belongs to exactly one category and owns zero or
    more variants.

    Attributes:
        id: Surrogate primary key.
        code: Unique product code (e.g. "PROD001").
        price: Base price.
        category_id: Owning category.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(PRICE_TYPE, nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped[Category] = relationship("Category", back_populates="products")
    variants: Mapped[list["Variant"]] = relationship(
        "Variant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Variant.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(code={self.code}, price={self.price})>"


class Variant(Base):
    """Product variant (e.g. a size or color).

    A variant without its own price, or with a zero price, is sold at
    the parent product's price.

    Attributes:
        id: Surrogate primary key.
        product_id: Parent product.
        name: Variant name (e.g. "Variant A").
        sku: Stock keeping unit.
        price: Own price, or None to inherit.
    """

    __tablename__ = "variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    sku: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    price: Mapped[Decimal | None] = mapped_column(PRICE_TYPE, nullable=True)

    product: Mapped[Product] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Variant(sku={self.sku}, name={self.name})>"

    def effective_price(self, parent_price: Decimal) -> Decimal:
        """Resolve the price this variant sells at.

        Args:
            parent_price: Price of the owning product.

        Returns:
            Own price, or parent price when own price is absent or zero.
        """
        if self.price is None or self.price == 0:
            return parent_price
        return self.price

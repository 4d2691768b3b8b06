"""Create categories, products and variants tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories, products and variants tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(64), nullable=False, unique=True),
        sa.Column('name', sa.String(256), nullable=False),
    )

    # Products table; a category with products cannot be deleted
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(64), nullable=False, unique=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False, index=True),
    )

    # Variants table; NULL price means the product price applies
    op.create_table(
        'variants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(256), nullable=False),
        sa.Column('sku', sa.String(256), nullable=False, unique=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
    )


def downgrade() -> None:
    """Drop variants, products and categories tables."""
    op.drop_table('variants')
    op.drop_table('products')
    op.drop_table('categories')

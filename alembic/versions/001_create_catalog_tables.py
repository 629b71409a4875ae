"""Create products, review_tokens and reviews tables.

Revision ID: 001
Revises:
Create Date: 2026-10-16

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
    """Create products, review_tokens and reviews tables."""
    # Products table
    op.create_table(
        'products',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.BigInteger(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('stock', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('origin', sa.String(255), nullable=True),
        sa.Column('finish', sa.String(255), nullable=True),
        sa.Column('images', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_products_id', 'products', ['id'], unique=True)

    # Live review tokens, one row per token
    op.create_table(
        'review_tokens',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.BigInteger(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('token', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_review_tokens_product_id', 'review_tokens', ['product_id'])
    op.create_unique_constraint(
        'uq_review_tokens_product_token',
        'review_tokens',
        ['product_id', 'token'],
    )

    # Reviews table
    op.create_table(
        'reviews',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.BigInteger(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user', sa.String(255), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_reviews_product_id', 'reviews', ['product_id'])


def downgrade() -> None:
    """Drop reviews, review_tokens and products tables."""
    op.drop_table('reviews')
    op.drop_table('review_tokens')
    op.drop_table('products')

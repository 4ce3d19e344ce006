"""Create catalog tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `products`, `services` and `categories` tables.
How:   Portable column types only, so the same revision runs on PostgreSQL
       and on the SQLite databases used locally and in tests.

Each table has an internal autoincrement `pk` and a public `id` under a
UNIQUE constraint; see catalog_api/models/base.py.

Rollback: downgrade() drops all three tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    """Columns shared by every catalog table, in model order."""
    return [
        sa.Column("pk", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "products",
        *_record_columns(),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("pk"),
        sa.UniqueConstraint("id"),
        sa.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )
    op.create_index("ix_products_created_at", "products", ["created_at"])
    op.create_index("ix_products_category", "products", ["category"])

    op.create_table(
        "services",
        *_record_columns(),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("pk"),
        sa.UniqueConstraint("id"),
        sa.CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
    )
    op.create_index("ix_services_created_at", "services", ["created_at"])

    op.create_table(
        "categories",
        *_record_columns(),
        sa.Column("title", sa.String(120), nullable=False),
        sa.PrimaryKeyConstraint("pk"),
        sa.UniqueConstraint("id"),
        sa.UniqueConstraint("title"),
    )
    op.create_index("ix_categories_created_at", "categories", ["created_at"])


def downgrade() -> None:
    """Drop every catalog table. All catalog data is permanently lost."""
    op.drop_index("ix_categories_created_at", table_name="categories")
    op.drop_table("categories")
    op.drop_index("ix_services_created_at", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_products_category", table_name="products")
    op.drop_index("ix_products_created_at", table_name="products")
    op.drop_table("products")

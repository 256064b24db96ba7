"""Baseline schema — customers, product types, products.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-18

Databases found by ``pastelaria init`` are stamped at this revision
when they already exist; new databases are built by ``upgrade_head``.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def _envelope() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
        sa.Column("deleted_at", sa.Text),
    ]


def upgrade() -> None:
    # customers
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.Text),
        sa.Column("phone", sa.Text),
        sa.Column("date_of_birth", sa.Text),
        sa.Column("address", sa.Text),
        sa.Column("complement", sa.Text),
        sa.Column("neighborhood", sa.Text),
        sa.Column("zip_code", sa.Text),
        *_envelope(),
    )
    op.create_index("ix_customers_name", "customers", ["name"])
    op.create_index("ix_customers_deleted_at", "customers", ["deleted_at"])

    # product_types
    op.create_table(
        "product_types",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        *_envelope(),
    )
    op.create_index("ix_product_types_name", "product_types", ["name"])
    op.create_index("ix_product_types_deleted_at", "product_types", ["deleted_at"])

    # products
    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "product_type_id",
            sa.Integer,
            sa.ForeignKey("product_types.id"),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("price", sa.Text, nullable=False),
        sa.Column("photo", sa.Text),
        *_envelope(),
    )
    op.create_index("ix_products_name", "products", ["name"])
    op.create_index("ix_products_deleted_at", "products", ["deleted_at"])
    op.create_index("ix_products_product_type_id", "products", ["product_type_id"])


def downgrade() -> None:
    op.drop_table("products")
    op.drop_table("product_types")
    op.drop_table("customers")

"""SQLAlchemy Core table definitions for the pastelaria database.

Every record table shares the same envelope: integer surrogate id,
ISO-8601 text timestamps, and a nullable ``deleted_at`` soft-delete
marker. Prices are stored as decimal text so values such as ``10.10``
round-trip exactly.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, MetaData, Table, Text

metadata = MetaData()


def _envelope() -> list[Column]:
    """Columns shared by every record table (fresh objects per table)."""
    return [
        Column("created_at", Text, nullable=False),
        Column("updated_at", Text, nullable=False),
        Column("deleted_at", Text),  # NULL = active
    ]


customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("email", Text),
    Column("phone", Text),
    Column("date_of_birth", Text),  # YYYY-MM-DD
    Column("address", Text),
    Column("complement", Text),
    Column("neighborhood", Text),
    Column("zip_code", Text),
    *_envelope(),
)

product_types = Table(
    "product_types",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    *_envelope(),
)

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("product_type_id", Integer, ForeignKey("product_types.id"), nullable=False),
    Column("name", Text, nullable=False),
    Column("price", Text, nullable=False),  # decimal text
    Column("photo", Text),  # image store reference, e.g. img/<token>.png
    *_envelope(),
)

# ---------------------------------------------------------------------------
# Indexes for name ordering and scope filtering
# ---------------------------------------------------------------------------

Index("ix_customers_name", customers.c.name)
Index("ix_customers_deleted_at", customers.c.deleted_at)
Index("ix_product_types_name", product_types.c.name)
Index("ix_product_types_deleted_at", product_types.c.deleted_at)
Index("ix_products_name", products.c.name)
Index("ix_products_deleted_at", products.c.deleted_at)
Index("ix_products_product_type_id", products.c.product_type_id)

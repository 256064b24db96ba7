"""SQLite database engine and schema via SQLAlchemy Core."""

from pastelaria.infrastructure.database.engine import create_db_engine, db_path_for, init_database
from pastelaria.infrastructure.database.schema import customers, metadata, product_types, products

__all__ = [
    "create_db_engine",
    "customers",
    "db_path_for",
    "init_database",
    "metadata",
    "product_types",
    "products",
]

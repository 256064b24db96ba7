"""Tests for database engine setup and schema creation."""

from pathlib import Path

from sqlalchemy import inspect, text

from pastelaria.infrastructure.database.engine import db_path_for, init_database


class TestInitDatabase:
    def test_creates_file_and_tables(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            assert db_path_for(tmp_path).is_file()
            tables = set(inspect(engine).get_table_names())
            assert {"customers", "product_types", "products"} <= tables
        finally:
            engine.dispose()

    def test_custom_filename(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path, "shop.db")
        try:
            assert (tmp_path / ".pastelaria" / "shop.db").is_file()
        finally:
            engine.dispose()

    def test_idempotent(self, tmp_path: Path) -> None:
        init_database(tmp_path).dispose()
        engine = init_database(tmp_path)
        try:
            with engine.connect() as conn:
                assert conn.execute(text("SELECT count(*) FROM products")).scalar_one() == 0
        finally:
            engine.dispose()

    def test_pragmas(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            with engine.connect() as conn:
                assert conn.execute(text("PRAGMA journal_mode")).scalar_one() == "wal"
                assert conn.execute(text("PRAGMA foreign_keys")).scalar_one() == 1
        finally:
            engine.dispose()


class TestSchema:
    def test_envelope_columns(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            inspector = inspect(engine)
            for table in ("customers", "product_types", "products"):
                columns = {c["name"]: c for c in inspector.get_columns(table)}
                assert {"id", "created_at", "updated_at", "deleted_at"} <= set(columns)
                assert columns["deleted_at"]["nullable"] is True
                assert columns["created_at"]["nullable"] is False
        finally:
            engine.dispose()

    def test_product_type_foreign_key(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            fks = inspect(engine).get_foreign_keys("products")
            assert any(fk["referred_table"] == "product_types" for fk in fks)
        finally:
            engine.dispose()

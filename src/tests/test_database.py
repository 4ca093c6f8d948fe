"""
Tests for database engine and session management.
"""

import pytest
from sqlalchemy import inspect

from unit_catalog.models.unit_reference import UnitCategory
from unit_catalog.services import database


@pytest.fixture
def memory_database(monkeypatch):
    """Point the global engine at a fresh in-memory database."""
    monkeypatch.setenv("UNIT_CATALOG_DATABASE_URL", "sqlite:///:memory:")
    database.close_connections()
    yield
    database.close_connections()


class TestDatabaseLifecycle:
    """init, verify, reset and close."""

    def test_verify_before_init(self, memory_database):
        assert database.verify_database() is False

    def test_init_creates_reference_tables(self, memory_database):
        database.init_database()
        assert database.verify_database() is True
        tables = inspect(database.get_engine()).get_table_names()
        assert set(database.REFERENCE_TABLES) <= set(tables)

    def test_init_is_repeatable(self, memory_database):
        database.init_database()
        database.init_database()
        assert database.verify_database() is True

    def test_session_scope_commits(self, memory_database):
        database.init_database()
        with database.session_scope() as session:
            session.add(UnitCategory(id=5, name="Length", region_code="US"))

        with database.session_scope() as session:
            assert session.get(UnitCategory, 5).name == "Length"

    def test_session_scope_rolls_back(self, memory_database):
        database.init_database()
        with pytest.raises(RuntimeError):
            with database.session_scope() as session:
                session.add(UnitCategory(id=5, name="Length", region_code="US"))
                session.flush()
                raise RuntimeError("abort")

        with database.session_scope() as session:
            assert session.get(UnitCategory, 5) is None

    def test_reset_requires_confirmation(self, memory_database):
        with pytest.raises(ValueError, match="confirm=True"):
            database.reset_database()

    def test_reset_clears_rows(self, memory_database):
        database.init_database()
        with database.session_scope() as session:
            session.add(UnitCategory(id=5, name="Length", region_code="US"))

        database.reset_database(confirm=True)

        with database.session_scope() as session:
            assert session.query(UnitCategory).count() == 0

    def test_close_connections_drops_engine(self, memory_database):
        engine = database.get_engine()
        database.close_connections()
        assert database.get_engine() is not engine

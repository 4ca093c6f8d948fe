"""Pytest configuration and fixtures for unit catalog tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session

from unit_catalog.models.base import Base
from unit_catalog.models import unit_reference  # noqa: F401
from unit_catalog.services.localization import DictStringProvider
from unit_catalog.services.unit_data_loader import UnitDataLoader
from unit_catalog.utils.config import reset_config


@pytest.fixture(scope="function")
def test_db():
    """Provide a clean test database for each test function.

    This fixture:
    1. Creates an in-memory SQLite database
    2. Creates all tables
    3. Provides the database to the test
    4. Drops all tables after the test completes
    """
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)

    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    Session = scoped_session(session_factory)

    # Monkey-patch the global session factory for tests
    import unit_catalog.services.database as db_module

    original_get_session_factory = db_module.get_session_factory
    db_module.get_session_factory = lambda: Session

    yield Session

    Session.remove()
    Base.metadata.drop_all(engine)
    engine.dispose()

    db_module.get_session_factory = original_get_session_factory


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from UNIT_CATALOG_* variables and the config singleton."""
    for name in (
        "UNIT_CATALOG_ENV",
        "UNIT_CATALOG_REGION",
        "UNIT_CATALOG_LOG_LEVEL",
        "UNIT_CATALOG_DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def strings():
    """Bundled English string provider."""
    return DictStringProvider()


def _built_loader(region_code: str) -> UnitDataLoader:
    loader = UnitDataLoader(region_code)
    loader.build()
    return loader


@pytest.fixture
def us_loader():
    """Catalog built for the United States."""
    return _built_loader("US")


@pytest.fixture
def fr_loader():
    """Catalog built for France."""
    return _built_loader("FR")


@pytest.fixture
def gb_loader():
    """Catalog built for Great Britain."""
    return _built_loader("GB")


@pytest.fixture
def kr_loader():
    """Catalog built for South Korea."""
    return _built_loader("KR")


@pytest.fixture
def de_loader():
    """Catalog built for Germany."""
    return _built_loader("DE")

"""
Engine and session handling for the unit reference database.

The reference database is optional: the catalog itself is built in memory,
and only the seed command and reference_table_service touch SQLAlchemy.

Provided here:
- create_database_engine() for file, in-memory and server URLs
- A lazily created engine and session factory shared by the services
- session_scope() for commit/rollback handling
- init_database(), verify_database(), reset_database(), close_connections()
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, close_all_sessions, sessionmaker
from sqlalchemy.pool import StaticPool

from ..models.base import Base
from ..utils.config import get_config

logger = logging.getLogger(__name__)

# Created on first use; close_connections() drops both
_engine: Optional[Engine] = None
_SessionFactory: Optional[sessionmaker] = None

REFERENCE_TABLES = ("unit_categories", "units", "unit_conversions")


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Turn on foreign key enforcement for SQLite connections only."""
    if "sqlite" not in type(dbapi_connection).__module__:
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """
    Create an engine for the reference database.

    Args:
        database_url: SQLAlchemy URL. Defaults to the configured database_url,
            creating its directory if needed.
        echo: Log every SQL statement

    Returns:
        Engine for the URL. In-memory SQLite URLs get a StaticPool so every
        session sees the same database.
    """
    if database_url is None:
        config = get_config()
        config.ensure_directories()
        database_url = config.database_url

    logger.info(f"Opening reference database: {database_url}")

    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    if ":memory:" in database_url or "mode=memory" in database_url:
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        echo=echo,
        connect_args={"check_same_thread": False, "timeout": 30},
    )


def _register_models() -> None:
    # Table classes must be imported before metadata.create_all()
    from ..models import unit_reference  # noqa: F401


def get_engine(force_recreate: bool = False) -> Engine:
    """
    Get the shared engine, creating it from configuration on first use.

    Args:
        force_recreate: Discard the current engine and create a new one
    """
    global _engine

    if force_recreate and _engine is not None:
        _engine.dispose()
        _engine = None
    if _engine is None:
        _engine = create_database_engine()
    return _engine


def get_session_factory() -> sessionmaker:
    """Get the shared session factory bound to get_engine()."""
    global _SessionFactory

    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _SessionFactory


def get_session() -> Session:
    """Open a new session from the shared factory."""
    return get_session_factory()()


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Run a block of work in one transaction.

    Commits when the block finishes, rolls back and re-raises if it fails, and
    closes the session either way.

    Example:
        with session_scope() as session:
            session.add(UnitCategory(id=5, name="Length", region_code="US"))
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_database(engine: Optional[Engine] = None) -> None:
    """
    Create the reference tables that do not exist yet.

    Args:
        engine: Engine to use. Defaults to get_engine().
    """
    if engine is None:
        engine = get_engine()

    _register_models()
    Base.metadata.create_all(engine)
    logger.info(f"Reference tables ready: {', '.join(REFERENCE_TABLES)}")


def verify_database() -> bool:
    """
    Check that the database is reachable and holds every reference table.

    Returns:
        False if the database cannot be inspected or a table is missing
    """
    try:
        tables = set(inspect(get_engine()).get_table_names())
    except SQLAlchemyError as e:
        logger.error(f"Reference database check failed: {e}")
        return False
    return tables.issuperset(REFERENCE_TABLES)


def reset_database(confirm: bool = False) -> None:
    """
    Drop and recreate the reference tables, deleting every stored catalog.

    Args:
        confirm: Must be True; guards against accidental calls

    Raises:
        ValueError: If confirm is not True
    """
    if not confirm:
        raise ValueError("Pass confirm=True to reset the reference database; all rows are deleted")

    engine = get_engine()
    _register_models()
    logger.warning("Dropping reference tables")
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    logger.info("Reference tables recreated")


def close_connections() -> None:
    """Close open sessions and dispose of the shared engine."""
    global _engine, _SessionFactory

    if _SessionFactory is not None:
        close_all_sessions()
        _SessionFactory = None

    if _engine is not None:
        _engine.dispose()
        _engine = None

    logger.debug("Reference database connections closed")

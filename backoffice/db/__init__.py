"""Database package: engine, session factory, init_db(), get_session()."""

import threading
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from backoffice.config import (
    DATABASE_URL,
    DB_ECHO,
    DB_MAX_OVERFLOW,
    DB_POOL_SIZE,
    SEED_ON_INIT,
)
from backoffice.db.base import Base
from backoffice.errors import DependencyFailure
from backoffice.utils.logger import get_logger

# Import all models so Base.metadata has all tables
from backoffice.db.models import (  # noqa: F401
    Category,
    Client,
    DailyStockItemDetail,
    DailyStockRecord,
    GardenBooking,
    InventoryItem,
    MenuItem,
    Room,
    RoomBooking,
    User,
)

logger = get_logger("backoffice.db")

_init_lock = threading.Lock()
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores ON DELETE CASCADE and FK checks unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _get_engine() -> Engine:
    """Create the process-wide engine; SQLite gets check_same_thread=False for executor threads."""
    url = DATABASE_URL
    if url.startswith("sqlite"):
        if "?" in url:
            url += "&check_same_thread=False"
        else:
            url += "?check_same_thread=False"
        engine = create_engine(url, echo=DB_ECHO)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(
        url,
        echo=DB_ECHO,
        pool_pre_ping=True,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
    )


def init_db(seed: bool | None = None) -> None:
    """Create engine and tables. Optionally seed categories/inventory from CSV when inventory is empty."""
    global _engine, _SessionLocal
    with _init_lock:
        if _SessionLocal is not None:
            return
        _engine = _get_engine()
        Base.metadata.create_all(bind=_engine)
        _SessionLocal = sessionmaker(bind=_engine, autocommit=False, autoflush=False, expire_on_commit=False)
        logger.info("db.init", dialect=_engine.dialect.name, tables=sorted(inspect(_engine).get_table_names()))

    do_seed = SEED_ON_INIT if seed is None else seed
    if do_seed:
        from backoffice.db.seed_data import seed_from_csv

        with get_session() as session:
            if session.scalars(select(InventoryItem.id)).first() is None:
                seed_from_csv(session)


def reset_db() -> None:
    """Drop and recreate all tables. Test helper; never called by the API."""
    init_db(seed=False)
    Base.metadata.drop_all(bind=_engine)
    Base.metadata.create_all(bind=_engine)


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Context manager yielding a DB session. Commits on success, rolls back on any error, always closes.

    Raw SQLAlchemy errors that escape the caller are re-raised as DependencyFailure.
    """
    init_db()
    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("db.session.rollback", error=str(e))
        raise DependencyFailure(f"Database operation failed: {e}") from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

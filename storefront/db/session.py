from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..models.base import Base


@lru_cache(maxsize=None)
def get_engine(database_url: str) -> Engine:
    """Pooled engine for ``database_url``, kept for the life of the process.

    Callers that create throwaway databases dispose the engine and clear the cache.
    """
    # Ensure sqlite file parent directory exists to avoid 'unable to open database file'
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.split("sqlite:///")[-1]
        Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, future=True)


def make_session_factory(database_url: str):
    """Return a ``get_session`` context manager bound to the pooled engine for ``database_url``."""
    SessionLocal = sessionmaker(
        bind=get_engine(database_url), autoflush=False, expire_on_commit=False, future=True
    )

    @contextmanager
    def get_session():
        session = SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return get_session


def init_db(database_url: str) -> None:
    """Create the Products and CartItems tables (local development and tests)."""
    Base.metadata.create_all(get_engine(database_url))

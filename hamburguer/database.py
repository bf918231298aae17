"""Database engine set-up."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

_POOL_OPTIONS = {
    "pool_size": 800,
    "max_overflow": 200,
    "pool_recycle": 3600,
    "pool_pre_ping": True,
}


def _normalise_url(url: str) -> str:
    """Accept the common 'postgres://' spelling of a PostgreSQL URL."""
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def connect(url: str) -> Engine:
    """Create an engine for *url*; connections are opened lazily.

    A PostgreSQL URL needs a PostgreSQL driver installed alongside SQLAlchemy.
    """
    if not url:
        raise ValueError("database url is empty")
    database_url = make_url(_normalise_url(url))
    options = {} if database_url.get_backend_name() == "sqlite" else dict(_POOL_OPTIONS)
    return create_engine(database_url, **options)
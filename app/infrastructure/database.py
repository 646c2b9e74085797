"""
SQLAlchemy engine shared by every repository adapter.

One pooled engine per process; each repository call opens its own
connection (reads) or transaction (writes).
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.core.config import settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the SQLAlchemy engine from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)

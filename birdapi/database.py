"""
BirdAPI: Database Engine Setup
===============================

What:  Async SQLAlchemy engine construction and the declarative Base.
Why:   Keeps connection options in one place for the relational store.
How:   build_engine() turns Settings into an AsyncEngine. The SqlBirdStore
       owns the engine it is given and disposes it on shutdown.

Architecture Decision:
    Async SQLAlchemy (asyncpg for PostgreSQL, aiosqlite for SQLite) so a
    slow query never blocks the event loop serving other requests.

    The engine is built on demand instead of at import time. The in-memory
    variant never touches a database, so importing this module must not
    require a reachable server or an installed driver.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from birdapi.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register with this metadata, which SqlBirdStore.create_schema()
    uses to create missing tables.
    """
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by `settings`.

    Pool sizing only applies to server databases. SQLite drivers pick
    their own pool class, which rejects the sizing arguments.
    """
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,  # Recycle after 1 hour to prevent stale connections
        )
    return create_async_engine(settings.database_url, **options)

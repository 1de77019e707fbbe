"""
BirdAPI: Relational Bird Store
===============================

What:  BirdStore backed by the `birds` table through async SQLAlchemy.
How:   Each call opens its own session from the engine's pool, so
       concurrent requests never share a session.

Query plans:
    create_bird: INSERT INTO birds (species, description) VALUES (:species, :description)
    get_birds:   SELECT species, description FROM birds ORDER BY id

Error Handling Strategy:
    Driver and mapping errors are logged with full detail and re-raised as
    DatabaseError, which the global handler turns into a generic 500.
    get_birds builds its list inside the guarded block, so a failure on any
    row discards the rows read so far instead of returning a partial list.
"""

import logging
from typing import List

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from birdapi.config import Settings
from birdapi.database import Base, build_engine
from birdapi.exceptions import DatabaseError
from birdapi.models.bird import BirdRecord
from birdapi.schemas.bird import Bird
from birdapi.stores.base import BirdStore

logger = logging.getLogger(__name__)


class SqlBirdStore(BirdStore):
    """Bird store over a relational database."""

    name = "sql"

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        # expire_on_commit=False: rows stay readable after the transaction ends
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqlBirdStore":
        return cls(build_engine(settings))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def create_schema(self) -> None:
        """Create the `birds` table if it does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Ensured table '%s' exists", BirdRecord.__tablename__)

    async def create_bird(self, bird: Bird) -> None:
        """
        Insert one row. Values travel as bound parameters.

        Raises:
            DatabaseError: The insert or commit failed; the transaction
                           was rolled back.
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(
                        BirdRecord(species=bird.species, description=bird.description)
                    )
        except SQLAlchemyError as e:
            logger.error("Database error storing bird: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not store the bird. Please try again.",
                context={"operation": "create_bird", "error_type": type(e).__name__},
            ) from e

        logger.debug("Stored bird '%s'", bird.species)

    async def get_birds(self) -> List[Bird]:
        """
        Read every row in insertion order.

        Raises:
            DatabaseError: The query failed (e.g. the table is missing) or a
                           row could not be turned into a Bird (e.g. NULL column).
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(BirdRecord.species, BirdRecord.description).order_by(BirdRecord.id)
                )
                birds = [
                    Bird(species=row.species, description=row.description)
                    for row in result
                ]
        # pydantic's ValidationError is a ValueError
        except (SQLAlchemyError, ValueError) as e:
            logger.error("Database error listing birds: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve birds. Please try again.",
                context={"operation": "get_birds", "error_type": type(e).__name__},
            ) from e

        return birds

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database unreachable: %s", str(e))
            return False
        return True

    async def close(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()

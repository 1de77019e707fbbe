"""
BirdAPI: Relational Store Tests
================================

What:  SqlBirdStore against a temporary SQLite database (aiosqlite).
Why:   The insert/select pair and its error handling are the only real
       database code in the service.

What we test:
    ✅ Empty table lists nothing
    ✅ Round-trip keeps values exactly, including empty strings and quotes
    ✅ Rows come back in insertion order
    ✅ Missing table raises DatabaseError on read and write
    ✅ A bad row aborts the whole read (no partial list)
    ✅ ping() reports reachability
"""

import pytest
from sqlalchemy import text

from birdapi.exceptions import DatabaseError
from birdapi.schemas.bird import Bird
from birdapi.stores import SqlBirdStore


class TestSqlBirdStore:

    @pytest.mark.asyncio
    async def test_empty_table_returns_empty_list(self, sql_store):
        assert await sql_store.get_birds() == []

    @pytest.mark.asyncio
    async def test_round_trip(self, sql_store, sample_bird):
        await sql_store.create_bird(sample_bird)

        assert await sql_store.get_birds() == [sample_bird]

    @pytest.mark.asyncio
    async def test_values_are_bound_not_interpolated(self, sql_store):
        """Quotes and SQL fragments are stored verbatim."""
        tricky = Bird(species="O'Reilly's \"Owl\"", description="x'); DROP TABLE birds; --")

        await sql_store.create_bird(tricky)

        assert await sql_store.get_birds() == [tricky]

    @pytest.mark.asyncio
    async def test_empty_strings_round_trip(self, sql_store):
        await sql_store.create_bird(Bird())

        birds = await sql_store.get_birds()

        assert birds == [Bird(species="", description="")]

    @pytest.mark.asyncio
    async def test_insertion_order(self, sql_store):
        for name in ["Wren", "Kite", "Avocet"]:
            await sql_store.create_bird(Bird(species=name, description=f"{name} notes"))

        birds = await sql_store.get_birds()

        assert [b.species for b in birds] == ["Wren", "Kite", "Avocet"]

    @pytest.mark.asyncio
    async def test_ping(self, sql_store):
        assert await sql_store.ping() is True
        assert sql_store.name == "sql"


class TestSqlBirdStoreFailures:

    @pytest.mark.asyncio
    async def test_missing_table_read_raises(self, sqlite_settings):
        store = SqlBirdStore.from_settings(sqlite_settings)
        try:
            with pytest.raises(DatabaseError) as exc_info:
                await store.get_birds()
            assert exc_info.value.context["operation"] == "get_birds"
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_missing_table_write_raises(self, sqlite_settings, sample_bird):
        store = SqlBirdStore.from_settings(sqlite_settings)
        try:
            with pytest.raises(DatabaseError) as exc_info:
                await store.create_bird(sample_bird)
            assert exc_info.value.context["operation"] == "create_bird"
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_bad_row_aborts_whole_read(self, sqlite_settings):
        """A NULL species after a good row must not yield the good row alone."""
        store = SqlBirdStore.from_settings(sqlite_settings)
        try:
            async with store.engine.begin() as conn:
                await conn.execute(text(
                    "CREATE TABLE birds (id INTEGER PRIMARY KEY, species TEXT, description TEXT)"
                ))
                await conn.execute(text(
                    "INSERT INTO birds (species, description) VALUES ('Crow', 'Black bird')"
                ))
                await conn.execute(text(
                    "INSERT INTO birds (species, description) VALUES (NULL, 'unknown')"
                ))

            with pytest.raises(DatabaseError):
                await store.get_birds()
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_create_schema_is_idempotent(self, sql_store, sample_bird):
        await sql_store.create_bird(sample_bird)

        await sql_store.create_schema()

        assert await sql_store.get_birds() == [sample_bird]

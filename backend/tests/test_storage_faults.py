"""Driver faults raised through a real session: retry on a fresh transaction, no retry for bad statements."""

from __future__ import annotations

import sqlite3
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy import event, text

from core.context import FootballContext
from core.database import DatabaseManager
from core.errors import StorageFault, TransientStorageFault
from models import Club, Coach
from repositories import ClubRepository, CoachRepository


@pytest_asyncio.fixture
async def file_db(tmp_path):
    """File-backed SQLite, so a dropped connection is replaced by a new one from the pool."""
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'football.db'}")
    await manager.init()
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def drop_connection_once(file_db, monkeypatch):
    """Fail the next SELECT on ``clubs`` with a connection reset the dialect treats as a disconnect."""
    engine = file_db.engine.sync_engine
    state = {"armed": False, "raised": 0}

    def _reset(conn, cursor, statement, parameters, context, executemany):
        if state["armed"] and statement.lstrip().startswith("SELECT") and "FROM clubs" in statement:
            state["armed"] = False
            state["raised"] += 1
            raise sqlite3.OperationalError("connection reset by peer")

    event.listen(engine, "before_cursor_execute", _reset)
    monkeypatch.setattr(engine.dialect, "is_disconnect", lambda e, connection, cursor: True)
    yield state
    event.remove(engine, "before_cursor_execute", _reset)


async def _seed(manager: DatabaseManager, retry) -> None:
    async with manager.session() as session:
        context = FootballContext(session)
        clubs = ClubRepository(context, retry)
        await clubs.create(Club(club_name="Arsenal", city="London", founded=date(1886, 1, 1)))
        await clubs.create(Club(club_name="Liverpool", city="Liverpool", founded=date(1892, 6, 3)))
        await CoachRepository(context, retry).create("Arsenal", Coach(name="Mikel", surname="Arteta"))


@pytest.mark.asyncio
async def test_dropped_connection_is_retried_in_open_transaction(file_db, retry, sleep, drop_connection_once):
    await _seed(file_db, retry)

    async with file_db.session() as session:
        context = FootballContext(session)
        await context.all(context.tournaments.query())
        assert session.in_transaction()

        drop_connection_once["armed"] = True
        result = await ClubRepository(context, retry).get_one("Arsenal")

    assert drop_connection_once["raised"] == 1
    assert result.ok
    assert result.value.coach.surname == "Arteta"
    assert sleep.waits == [5]


@pytest.mark.asyncio
async def test_update_refetches_entities_after_dropped_connection(file_db, retry, sleep, drop_connection_once):
    await _seed(file_db, retry)

    async with file_db.session() as session:
        drop_connection_once["armed"] = True
        result = await CoachRepository(FootballContext(session), retry).update(
            "Arteta", "Liverpool", Coach(name="Mikel", surname="Arteta")
        )

    assert drop_connection_once["raised"] == 1
    assert result.ok
    assert sleep.waits == [5]

    async with file_db.session() as session:
        details = (await CoachRepository(FootballContext(session), retry).get_one("Arteta")).value
    assert details.club.club_name == "Liverpool"


@pytest.mark.asyncio
async def test_missing_table_is_not_retried(test_db, retry, sleep):
    async with test_db.session() as session:
        context = FootballContext(session)
        await ClubRepository(context, retry).create(
            Club(club_name="Arsenal", city="London", founded=date(1886, 1, 1))
        )
        await CoachRepository(context, retry).create("Arsenal", Coach(name="Mikel", surname="Arteta"))

    async with test_db.engine.begin() as conn:
        await conn.execute(text("DROP TABLE coaches"))

    with pytest.raises(StorageFault) as exc_info:
        async with test_db.session() as session:
            await CoachRepository(FootballContext(session), retry).get_one("Arteta")

    assert not isinstance(exc_info.value, TransientStorageFault)
    assert "no such table" in str(exc_info.value)
    assert sleep.waits == []

"""FootballContext: atomic save, stable first-match lookups, untracked reads."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import select

from core.context import FootballContext, ids_of
from core.errors import StorageFault
from models import Club, Coach


def _club(name: str) -> Club:
    return Club(club_name=name, city="London", founded=date(1900, 1, 1))


@pytest.mark.asyncio
async def test_save_persists_all_pending_changes(test_db):
    async with test_db.session() as session:
        context = FootballContext(session)
        context.clubs.add(_club("Arsenal"))
        context.clubs.add(_club("Chelsea"))
        await context.save()

    async with test_db.session() as session:
        context = FootballContext(session)
        clubs = await context.all(context.clubs.query())
    assert [c.club_name for c in clubs] == ["Arsenal", "Chelsea"]


@pytest.mark.asyncio
async def test_failed_save_persists_nothing(test_db):
    async with test_db.session() as session:
        context = FootballContext(session)
        context.clubs.add(_club("Arsenal"))
        await context.save()
        arsenal_id = (await context.first(context.clubs.query())).id

    with pytest.raises(StorageFault):
        async with test_db.session() as session:
            context = FootballContext(session)
            context.clubs.add(_club("Chelsea"))
            context.coaches.add(Coach(name="Mikel", surname="Arteta", club_id=arsenal_id))
            context.coaches.add(Coach(name="Arsene", surname="Wenger", club_id=arsenal_id))
            await context.save()

    async with test_db.session() as session:
        context = FootballContext(session)
        assert [c.club_name for c in await context.all(context.clubs.query())] == ["Arsenal"]
        assert await context.all(context.coaches.query()) == []


@pytest.mark.asyncio
async def test_first_returns_lowest_id_or_none(context):
    context.clubs.add(_club("Arsenal"))
    context.clubs.add(_club("Arsenal"))
    await context.save()

    stmt = context.clubs.query().where(Club.club_name == "Arsenal")
    first = await context.first(stmt)
    assert first.id == min(ids_of(await context.all(stmt)))

    assert await context.first(context.clubs.query().where(Club.club_name == "Chelsea")) is None


@pytest.mark.asyncio
async def test_untracked_reads_are_not_saved(context):
    context.clubs.add(_club("Arsenal"))
    await context.save()

    clubs = await context.all(context.clubs.query(), tracking=False)
    clubs[0].city = "Manchester"
    await context.save()

    fresh = await context.first(select(Club))
    assert fresh is not clubs[0]
    assert fresh.city == "London"


def test_ids_of_is_distinct_and_ordered():
    clubs = [Club(id=3), Club(id=1), Club(id=3), Club(id=None)]
    assert ids_of(clubs) == [3, 1]

"""TournamentRepository: tournaments and club memberships."""

from __future__ import annotations

from datetime import date

import pytest

from core.context import FootballContext
from models import Club, Tournament
from repositories import ClubRepository, ErrorKind, TournamentRepository


async def _setup(context: FootballContext, retry) -> TournamentRepository:
    clubs = ClubRepository(context, retry)
    await clubs.create(Club(club_name="Arsenal", city="London", founded=date(1886, 1, 1)))
    await clubs.create(Club(club_name="Liverpool", city="Liverpool", founded=date(1892, 6, 3)))
    repo = TournamentRepository(context, retry)
    await repo.create(Tournament(tournament_name="Premier League"))
    return repo


@pytest.mark.asyncio
async def test_enrolled_clubs_are_listed(context, retry):
    repo = await _setup(context, retry)
    assert (await repo.add_club("Premier League", "Liverpool")).ok
    assert (await repo.add_club("Premier League", "Arsenal")).ok

    details = (await repo.get_one("Premier League")).value
    assert [c.club_name for c in details.clubs] == ["Arsenal", "Liverpool"]

    club = (await ClubRepository(context, retry).get_one("Arsenal")).value
    assert [t.tournament_name for t in club.tournaments] == ["Premier League"]


@pytest.mark.asyncio
async def test_add_club_twice_is_a_no_op(context, retry):
    repo = await _setup(context, retry)
    await repo.add_club("Premier League", "Arsenal")
    assert (await repo.add_club("Premier League", "Arsenal")).ok

    details = (await repo.get_one("Premier League")).value
    assert len(details.clubs) == 1


@pytest.mark.asyncio
async def test_add_club_with_unknown_names(context, retry):
    repo = await _setup(context, retry)

    missing_tournament = await repo.add_club("Serie A", "Arsenal")
    assert missing_tournament.error is ErrorKind.NOT_FOUND
    assert missing_tournament.message == "Tournament with name Serie A doesn't exist."

    missing_club = await repo.add_club("Premier League", "Chelsea")
    assert missing_club.error is ErrorKind.NOT_FOUND
    assert missing_club.message == "Club with name Chelsea doesn't exist."


@pytest.mark.asyncio
async def test_remove_club(context, retry):
    repo = await _setup(context, retry)
    await repo.add_club("Premier League", "Arsenal")

    assert (await repo.remove_club("Premier League", "Arsenal")).ok
    assert (await repo.get_one("Premier League")).value.clubs == []

    again = await repo.remove_club("Premier League", "Arsenal")
    assert again.error is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_tournament_keeps_clubs(test_db, retry):
    async with test_db.session() as session:
        context = FootballContext(session)
        repo = await _setup(context, retry)
        await repo.add_club("Premier League", "Arsenal")
        assert (await repo.delete("Premier League")).ok

    async with test_db.session() as session:
        context = FootballContext(session)
        assert (await TournamentRepository(context, retry).get_all()).value == []
        club = (await ClubRepository(context, retry).get_one("Arsenal")).value
        assert club.tournaments == []


@pytest.mark.asyncio
async def test_get_all_lists_every_tournament(context, retry):
    repo = await _setup(context, retry)
    await repo.create(Tournament(tournament_name="Champions League"))
    await repo.add_club("Champions League", "Liverpool")

    result = await repo.get_all()

    assert [(d.tournament.tournament_name, [c.club_name for c in d.clubs]) for d in result.value] == [
        ("Premier League", []),
        ("Champions League", ["Liverpool"]),
    ]


@pytest.mark.asyncio
async def test_get_one_and_delete_missing_tournament(context, retry):
    repo = TournamentRepository(context, retry)
    assert (await repo.get_one("Serie A")).error is ErrorKind.NOT_FOUND
    assert (await repo.delete("Serie A")).error is ErrorKind.NOT_FOUND

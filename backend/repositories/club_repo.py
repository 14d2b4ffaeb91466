from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from sqlalchemy import Select, select

from core.context import FootballContext, ids_of
from models import Club, ClubTournament, Coach, Footballer, Stadium, Tournament

from .base import BaseRepository
from .results import RepositoryResult
from .views import ClubDetails


def _club_with_staff() -> Select:
    """Club joined to its (optional) coach and stadium: one row per club."""
    return (
        select(Club, Coach, Stadium)
        .outerjoin(Coach, Coach.club_id == Club.id)
        .outerjoin(Stadium, Stadium.club_id == Club.id)
        .order_by(Club.id)
    )


async def _load_squads(
    context: FootballContext, club_ids: Sequence[int], tracking: bool
) -> Tuple[Dict[int, List[Footballer]], Dict[int, List[Tournament]]]:
    """Footballers and tournaments for ``club_ids`` in two batched queries."""
    footballers: Dict[int, List[Footballer]] = defaultdict(list)
    tournaments: Dict[int, List[Tournament]] = defaultdict(list)
    if not club_ids:
        return footballers, tournaments

    stmt = (
        context.footballers.query()
        .where(Footballer.club_id.in_(club_ids))
    )
    for footballer in await context.all(stmt, tracking=tracking):
        footballers[footballer.club_id].append(footballer)

    stmt = (
        select(ClubTournament.club_id, Tournament)
        .join(Tournament, Tournament.id == ClubTournament.tournament_id)
        .where(ClubTournament.club_id.in_(club_ids))
        .order_by(Tournament.id)
    )
    for club_id, tournament in await context.rows(stmt, tracking=tracking):
        tournaments[club_id].append(tournament)
    return footballers, tournaments


class ClubRepository(BaseRepository):
    """Repository for Club entities, keyed by club name."""

    async def get_one(self, club_name: str) -> RepositoryResult[ClubDetails]:
        """Club with coach, stadium, footballers and tournaments."""

        async def _load():
            stmt = _club_with_staff().where(Club.club_name == club_name)
            row = await self.context.first_row(stmt)
            if row is None:
                return None
            club, coach, stadium = row
            footballers, tournaments = await _load_squads(self.context, [club.id], tracking=True)
            return ClubDetails(
                club=club,
                coach=coach,
                stadium=stadium,
                footballers=footballers[club.id],
                tournaments=tournaments[club.id],
            )

        details = await self._read(_load)
        if details is None:
            return self._not_found("Club", club_name)
        return RepositoryResult.success(details)

    async def get_all(self) -> RepositoryResult[List[ClubDetails]]:
        """Every club, fully expanded, detached from the unit of work.

        An empty table gives an empty list, not NOT_FOUND.
        """

        async def _load():
            rows = await self.context.rows(_club_with_staff(), tracking=False)
            clubs = [row[0] for row in rows]
            footballers, tournaments = await _load_squads(
                self.context, ids_of(clubs), tracking=False
            )
            return [
                ClubDetails(
                    club=club,
                    coach=coach,
                    stadium=stadium,
                    footballers=footballers[club.id],
                    tournaments=tournaments[club.id],
                )
                for club, coach, stadium in rows
            ]

        return RepositoryResult.success(await self._read(_load))

    async def update(self, club_name: str, updated: Club) -> RepositoryResult[Club]:
        """Overwrite name, city, founding date and image of ``club_name``."""
        existing = await self._find_club(club_name)
        if existing is None:
            return self._not_found("Club", club_name)

        existing.club_name = updated.club_name
        existing.city = updated.city
        existing.founded = updated.founded
        existing.club_image_url = updated.club_image_url

        await self.context.save()
        self.logger.info("Club %s has been updated.", club_name)
        return RepositoryResult.success(existing)

    async def create(self, new_club: Club) -> RepositoryResult[Club]:
        self.context.clubs.add(new_club)
        await self.context.save()
        self.logger.info("Club %s has been added.", new_club.club_name)
        return RepositoryResult.success(new_club)

    async def delete(self, club_name: str) -> RepositoryResult[None]:
        """Hard delete. Dependents follow the storage referential actions:
        coach, stadium and memberships cascade; footballers restrict.
        """
        existing = await self._find_club(club_name)
        if existing is None:
            return self._not_found("Club", club_name)

        await self.context.clubs.remove(existing)
        await self.context.save()
        self.logger.info("Club %s has been deleted.", club_name)
        return RepositoryResult.success(None)

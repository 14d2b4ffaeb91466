from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import Select, select

from core.context import FootballContext, ids_of
from models import Club, ClubTournament, Tournament

from .base import BaseRepository
from .results import RepositoryResult
from .views import TournamentDetails


async def _load_participants(
    context: FootballContext, tournament_ids: Sequence[int], tracking: bool
) -> Dict[int, List[Club]]:
    clubs: Dict[int, List[Club]] = defaultdict(list)
    if not tournament_ids:
        return clubs
    stmt = (
        select(ClubTournament.tournament_id, Club)
        .join(Club, Club.id == ClubTournament.club_id)
        .where(ClubTournament.tournament_id.in_(tournament_ids))
        .order_by(Club.id)
    )
    for tournament_id, club in await context.rows(stmt, tracking=tracking):
        clubs[tournament_id].append(club)
    return clubs


class TournamentRepository(BaseRepository):
    """Repository for Tournament entities and club memberships, keyed by tournament name."""

    def _by_name(self, tournament_name: str) -> Select:
        return self.context.tournaments.query().where(Tournament.tournament_name == tournament_name)

    async def _find(self, tournament_name: str) -> Optional[Tournament]:
        return await self._lookup(self._by_name(tournament_name))

    async def get_one(self, tournament_name: str) -> RepositoryResult[TournamentDetails]:
        """Tournament with its participating clubs."""

        async def _load():
            tournament = await self.context.first(self._by_name(tournament_name))
            if tournament is None:
                return None
            clubs = await _load_participants(self.context, [tournament.id], tracking=True)
            return TournamentDetails(tournament=tournament, clubs=clubs[tournament.id])

        details = await self._read(_load)
        if details is None:
            return self._not_found("Tournament", tournament_name)
        return RepositoryResult.success(details)

    async def get_all(self) -> RepositoryResult[List[TournamentDetails]]:
        async def _load():
            tournaments = await self.context.all(self.context.tournaments.query(), tracking=False)
            clubs = await _load_participants(self.context, ids_of(tournaments), tracking=False)
            return [TournamentDetails(tournament=t, clubs=clubs[t.id]) for t in tournaments]

        return RepositoryResult.success(await self._read(_load))

    async def create(self, new_tournament: Tournament) -> RepositoryResult[Tournament]:
        self.context.tournaments.add(new_tournament)
        await self.context.save()
        self.logger.info("Tournament %s has been added.", new_tournament.tournament_name)
        return RepositoryResult.success(new_tournament)

    async def delete(self, tournament_name: str) -> RepositoryResult[None]:
        """Hard delete; memberships cascade at the storage layer."""
        existing = await self._find(tournament_name)
        if existing is None:
            return self._not_found("Tournament", tournament_name)

        await self.context.tournaments.remove(existing)
        await self.context.save()
        self.logger.info("Tournament %s has been deleted.", tournament_name)
        return RepositoryResult.success(None)

    async def _find_enrollment(
        self, tournament_name: str, club_name: str
    ) -> Tuple[Optional[Tournament], Optional[Club], Optional[ClubTournament]]:
        """Tournament, club and their membership row in one retried read."""

        async def _load():
            tournament = await self.context.first(self._by_name(tournament_name))
            if tournament is None:
                return None, None, None
            club = await self.context.first(
                self.context.clubs.query().where(Club.club_name == club_name)
            )
            if club is None:
                return tournament, None, None
            membership = await self.context.first(
                self.context.club_tournaments.query().where(
                    ClubTournament.club_id == club.id,
                    ClubTournament.tournament_id == tournament.id,
                )
            )
            return tournament, club, membership

        return await self._read(_load)

    async def add_club(self, tournament_name: str, club_name: str) -> RepositoryResult[None]:
        """Enroll ``club_name`` in ``tournament_name``. Already enrolled is a no-op."""
        tournament, club, membership = await self._find_enrollment(tournament_name, club_name)
        if tournament is None:
            return self._not_found("Tournament", tournament_name)
        if club is None:
            return self._not_found("Club", club_name)

        if membership is None:
            self.context.club_tournaments.add(
                ClubTournament(club_id=club.id, tournament_id=tournament.id)
            )
            await self.context.save()
            self.logger.info("Club %s has joined %s.", club_name, tournament_name)
        return RepositoryResult.success(None)

    async def remove_club(self, tournament_name: str, club_name: str) -> RepositoryResult[None]:
        """Withdraw ``club_name`` from ``tournament_name``; NOT_FOUND if it was never enrolled."""
        tournament, club, membership = await self._find_enrollment(tournament_name, club_name)
        if tournament is None:
            return self._not_found("Tournament", tournament_name)
        if club is None:
            return self._not_found("Club", club_name)
        if membership is None:
            return self._not_found("Membership", f"{club_name}/{tournament_name}")

        await self.context.club_tournaments.remove(membership)
        await self.context.save()
        self.logger.info("Club %s has left %s.", club_name, tournament_name)
        return RepositoryResult.success(None)

"""Map between API commands/responses and models/read views."""

from __future__ import annotations

from datetime import date
from typing import Optional, TypeVar

from fastapi import HTTPException

from models import Club, Coach, Footballer, Stadium, Tournament
from repositories import (
    ClubDetails,
    CoachDetails,
    ErrorKind,
    FootballerDetails,
    RepositoryResult,
    StadiumDetails,
    TournamentDetails,
)

from .schemas import (
    ClubCommand,
    ClubResponse,
    CoachCommand,
    CoachResponse,
    CoachSummary,
    FootballerCommand,
    FootballerResponse,
    StadiumCommand,
    StadiumResponse,
    StadiumSummary,
    TournamentCommand,
    TournamentResponse,
)

T = TypeVar("T")


def unwrap(result: RepositoryResult[T]) -> Optional[T]:
    """Return the value or raise the matching HTTP error."""
    if result.error is ErrorKind.NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.message)
    return result.value


def _full_name(name: str, surname: str) -> str:
    return f"{name} {surname}"


# --- commands -> models ---


def club_from_command(command: ClubCommand) -> Club:
    return Club(
        club_name=command.club_name,
        city=command.city,
        founded=command.founded,
        club_image_url=command.club_image_url,
    )


def coach_from_command(command: CoachCommand) -> Coach:
    return Coach(name=command.name, surname=command.surname)


def footballer_from_command(command: FootballerCommand) -> Footballer:
    return Footballer(name=command.name, surname=command.surname)


def stadium_from_command(command: StadiumCommand) -> Stadium:
    return Stadium(
        stadium_name=command.stadium_name,
        capacity=command.capacity,
        stadium_image_url=command.stadium_image_url,
    )


def tournament_from_command(command: TournamentCommand) -> Tournament:
    return Tournament(tournament_name=command.tournament_name)


# --- views -> responses ---


def club_response(details: ClubDetails, today: Optional[date] = None) -> ClubResponse:
    today = today or date.today()
    club = details.club
    stadium = None
    if details.stadium is not None:
        stadium = StadiumSummary(
            stadium_name=details.stadium.stadium_name,
            stadium_image_url=details.stadium.stadium_image_url,
            capacity=details.stadium.capacity,
        )
    coach = None
    if details.coach is not None:
        coach = CoachSummary(full_name=_full_name(details.coach.name, details.coach.surname))
    return ClubResponse(
        club_name=club.club_name,
        club_image_url=club.club_image_url,
        city=club.city,
        founded=club.founded,
        age=today.year - club.founded.year,
        stadium=stadium,
        coach=coach,
        footballers=[_full_name(f.name, f.surname) for f in details.footballers],
        tournaments=[t.tournament_name for t in details.tournaments],
    )


def coach_response(details: CoachDetails) -> CoachResponse:
    return CoachResponse(
        full_name=_full_name(details.coach.name, details.coach.surname),
        current_club=details.club.club_name,
    )


def footballer_response(details: FootballerDetails) -> FootballerResponse:
    return FootballerResponse(
        full_name=_full_name(details.footballer.name, details.footballer.surname),
        current_club=details.club.club_name if details.club is not None else None,
    )


def stadium_response(details: StadiumDetails) -> StadiumResponse:
    return StadiumResponse(
        stadium_name=details.stadium.stadium_name,
        capacity=details.stadium.capacity,
        stadium_image_url=details.stadium.stadium_image_url,
        club=details.club.club_name,
    )


def tournament_response(details: TournamentDetails) -> TournamentResponse:
    return TournamentResponse(
        tournament_name=details.tournament.tournament_name,
        clubs=[c.club_name for c in details.clubs],
    )

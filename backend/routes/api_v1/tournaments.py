"""Tournaments API: /api/v1/tournaments and club memberships."""

from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_tournament_repository
from repositories import TournamentRepository

from .mapping import tournament_from_command, tournament_response, unwrap
from .schemas import TournamentCommand, TournamentResponse

router = APIRouter(prefix="/tournaments", tags=["tournaments"])


@router.get("", response_model=List[TournamentResponse], summary="List tournaments")
async def get_all_tournaments(repo: TournamentRepository = Depends(get_tournament_repository)):
    return [tournament_response(t) for t in unwrap(await repo.get_all())]


@router.get("/{tournament_name}", response_model=TournamentResponse, summary="Get a tournament by name")
async def get_tournament(
    tournament_name: str, repo: TournamentRepository = Depends(get_tournament_repository)
):
    return tournament_response(unwrap(await repo.get_one(tournament_name)))


@router.post("", status_code=201, summary="Add a tournament")
async def post_tournament(
    command: TournamentCommand,
    repo: TournamentRepository = Depends(get_tournament_repository),
) -> dict:
    tournament = unwrap(await repo.create(tournament_from_command(command)))
    return {"status": "created", "id": tournament.id}


@router.delete("/{tournament_name}", summary="Delete a tournament")
async def delete_tournament(
    tournament_name: str, repo: TournamentRepository = Depends(get_tournament_repository)
) -> dict:
    unwrap(await repo.delete(tournament_name))
    return {"status": "deleted"}


@router.put("/{tournament_name}/clubs/{club_name}", summary="Enroll a club")
async def put_tournament_club(
    tournament_name: str,
    club_name: str,
    repo: TournamentRepository = Depends(get_tournament_repository),
) -> dict:
    unwrap(await repo.add_club(tournament_name, club_name))
    return {"status": "enrolled"}


@router.delete("/{tournament_name}/clubs/{club_name}", summary="Withdraw a club")
async def delete_tournament_club(
    tournament_name: str,
    club_name: str,
    repo: TournamentRepository = Depends(get_tournament_repository),
) -> dict:
    unwrap(await repo.remove_club(tournament_name, club_name))
    return {"status": "withdrawn"}

"""Clubs API: /api/v1/clubs, keyed by club name."""

from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_club_repository
from repositories import ClubRepository

from .mapping import club_from_command, club_response, unwrap
from .schemas import ClubCommand, ClubResponse

router = APIRouter(prefix="/clubs", tags=["clubs"])


@router.get("", response_model=List[ClubResponse], summary="List clubs")
async def get_all_clubs(repo: ClubRepository = Depends(get_club_repository)):
    """Every club with coach, stadium, footballers and tournaments."""
    clubs = unwrap(await repo.get_all())
    return [club_response(c) for c in clubs]


@router.get("/{club_name}", response_model=ClubResponse, summary="Get a club by name")
async def get_club(club_name: str, repo: ClubRepository = Depends(get_club_repository)):
    return club_response(unwrap(await repo.get_one(club_name)))


@router.put("/{club_name}", summary="Update a club")
async def put_club(
    club_name: str,
    command: ClubCommand,
    repo: ClubRepository = Depends(get_club_repository),
) -> dict:
    """Replace every mutable field of the club; partial updates are not supported."""
    unwrap(await repo.update(club_name, club_from_command(command)))
    return {"status": "updated"}


@router.post("", status_code=201, summary="Add a club")
async def post_club(
    command: ClubCommand,
    repo: ClubRepository = Depends(get_club_repository),
) -> dict:
    club = unwrap(await repo.create(club_from_command(command)))
    return {"status": "created", "id": club.id}


@router.delete("/{club_name}", summary="Delete a club")
async def delete_club(club_name: str, repo: ClubRepository = Depends(get_club_repository)) -> dict:
    """Coach, stadium and memberships go with the club; a club with footballers cannot be deleted."""
    unwrap(await repo.delete(club_name))
    return {"status": "deleted"}

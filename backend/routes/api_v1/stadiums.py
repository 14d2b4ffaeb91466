"""Stadiums API: /api/v1/stadiums, keyed by stadium name."""

from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_stadium_repository
from repositories import StadiumRepository

from .mapping import stadium_from_command, stadium_response, unwrap
from .schemas import StadiumCommand, StadiumResponse

router = APIRouter(prefix="/stadiums", tags=["stadiums"])


@router.get("", response_model=List[StadiumResponse], summary="List stadiums")
async def get_all_stadiums(repo: StadiumRepository = Depends(get_stadium_repository)):
    return [stadium_response(s) for s in unwrap(await repo.get_all())]


@router.get("/{stadium_name}", response_model=StadiumResponse, summary="Get a stadium by name")
async def get_stadium(stadium_name: str, repo: StadiumRepository = Depends(get_stadium_repository)):
    return stadium_response(unwrap(await repo.get_one(stadium_name)))


@router.put("/{stadium_name}", summary="Update a stadium")
async def put_stadium(
    stadium_name: str,
    command: StadiumCommand,
    repo: StadiumRepository = Depends(get_stadium_repository),
) -> dict:
    unwrap(await repo.update(stadium_name, command.club, stadium_from_command(command)))
    return {"status": "updated"}


@router.post("", status_code=201, summary="Add a stadium")
async def post_stadium(
    command: StadiumCommand,
    repo: StadiumRepository = Depends(get_stadium_repository),
) -> dict:
    details = unwrap(await repo.create(command.club, stadium_from_command(command)))
    return {"status": "created", "id": details.stadium.id}


@router.delete("/{stadium_name}", summary="Delete a stadium")
async def delete_stadium(
    stadium_name: str, repo: StadiumRepository = Depends(get_stadium_repository)
) -> dict:
    unwrap(await repo.delete(stadium_name))
    return {"status": "deleted"}

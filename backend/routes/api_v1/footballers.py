"""Footballers API: /api/v1/footballers, keyed by surname."""

from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_footballer_repository
from repositories import FootballerRepository

from .mapping import footballer_from_command, footballer_response, unwrap
from .schemas import FootballerCommand, FootballerResponse

router = APIRouter(prefix="/footballers", tags=["footballers"])


@router.get("", response_model=List[FootballerResponse], summary="List footballers")
async def get_all_footballers(repo: FootballerRepository = Depends(get_footballer_repository)):
    return [footballer_response(f) for f in unwrap(await repo.get_all())]


@router.get("/{surname}", response_model=FootballerResponse, summary="Get a footballer by surname")
async def get_footballer(surname: str, repo: FootballerRepository = Depends(get_footballer_repository)):
    return footballer_response(unwrap(await repo.get_one(surname)))


@router.put("/{surname}", summary="Update a footballer")
async def put_footballer(
    surname: str,
    command: FootballerCommand,
    repo: FootballerRepository = Depends(get_footballer_repository),
) -> dict:
    """Overwrite name and surname and move the footballer to ``current_club``."""
    unwrap(await repo.update(surname, command.current_club, footballer_from_command(command)))
    return {"status": "updated"}


@router.post("", status_code=201, summary="Add a footballer")
async def post_footballer(
    command: FootballerCommand,
    repo: FootballerRepository = Depends(get_footballer_repository),
) -> dict:
    details = unwrap(await repo.create(command.current_club, footballer_from_command(command)))
    return {"status": "created", "id": details.footballer.id}


@router.delete("/{surname}", summary="Delete a footballer")
async def delete_footballer(
    surname: str, repo: FootballerRepository = Depends(get_footballer_repository)
) -> dict:
    unwrap(await repo.delete(surname))
    return {"status": "deleted"}

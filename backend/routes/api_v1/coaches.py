"""Coaches API: /api/v1/coaches, keyed by surname."""

from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_coach_repository
from repositories import CoachRepository

from .mapping import coach_from_command, coach_response, unwrap
from .schemas import CoachCommand, CoachResponse

router = APIRouter(prefix="/coaches", tags=["coaches"])


@router.get("", response_model=List[CoachResponse], summary="List coaches")
async def get_all_coaches(repo: CoachRepository = Depends(get_coach_repository)):
    return [coach_response(c) for c in unwrap(await repo.get_all())]


@router.get("/{surname}", response_model=CoachResponse, summary="Get a coach by surname")
async def get_coach(surname: str, repo: CoachRepository = Depends(get_coach_repository)):
    return coach_response(unwrap(await repo.get_one(surname)))


@router.put("/{surname}", summary="Update a coach")
async def put_coach(
    surname: str,
    command: CoachCommand,
    repo: CoachRepository = Depends(get_coach_repository),
) -> dict:
    unwrap(await repo.update(surname, command.current_club, coach_from_command(command)))
    return {"status": "updated"}


@router.post("", status_code=201, summary="Add a coach")
async def post_coach(
    command: CoachCommand,
    repo: CoachRepository = Depends(get_coach_repository),
) -> dict:
    details = unwrap(await repo.create(command.current_club, coach_from_command(command)))
    return {"status": "created", "id": details.coach.id}


@router.delete("/{surname}", summary="Delete a coach")
async def delete_coach(surname: str, repo: CoachRepository = Depends(get_coach_repository)) -> dict:
    unwrap(await repo.delete(surname))
    return {"status": "deleted"}

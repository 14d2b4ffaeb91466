from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from repositories import (
    ClubRepository,
    CoachRepository,
    FootballerRepository,
    StadiumRepository,
    TournamentRepository,
)

from .context import FootballContext
from .database import get_database_manager
from .retry import RetryPolicy


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding an AsyncSession from the DatabaseManager."""
    manager = get_database_manager()
    async with manager.session() as session:
        yield session


def get_context(session: AsyncSession = Depends(get_db_session)) -> FootballContext:
    """Per-request unit of work."""
    return FootballContext(session)


def get_retry_policy() -> RetryPolicy:
    return RetryPolicy()


def get_club_repository(
    context: FootballContext = Depends(get_context),
    retry: RetryPolicy = Depends(get_retry_policy),
) -> ClubRepository:
    return ClubRepository(context, retry)


def get_coach_repository(
    context: FootballContext = Depends(get_context),
    retry: RetryPolicy = Depends(get_retry_policy),
) -> CoachRepository:
    return CoachRepository(context, retry)


def get_footballer_repository(
    context: FootballContext = Depends(get_context),
    retry: RetryPolicy = Depends(get_retry_policy),
) -> FootballerRepository:
    return FootballerRepository(context, retry)


def get_stadium_repository(
    context: FootballContext = Depends(get_context),
    retry: RetryPolicy = Depends(get_retry_policy),
) -> StadiumRepository:
    return StadiumRepository(context, retry)


def get_tournament_repository(
    context: FootballContext = Depends(get_context),
    retry: RetryPolicy = Depends(get_retry_policy),
) -> TournamentRepository:
    return TournamentRepository(context, retry)

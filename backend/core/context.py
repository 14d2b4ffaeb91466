"""Persistence context: one unit of work over an ``AsyncSession``.

Exposes one queryable collection per entity type and a single ``save()``
boundary. All SQLAlchemy errors leaving this module are classified into
:class:`core.errors.StorageFault` / :class:`core.errors.TransientStorageFault`.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, inspect, select
from sqlalchemy.engine import Result, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import Club, ClubTournament, Coach, Footballer, Stadium, Tournament
from models.base import Base

from .errors import TransientStorageFault, classify

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class EntitySet(Generic[T]):
    """Queryable collection for one mapped table."""

    def __init__(self, context: "FootballContext", model: Type[T]) -> None:
        self._context = context
        self.model = model

    def query(self) -> Select:
        """``SELECT`` over the table, ordered by primary key so first-match lookups are stable."""
        return select(self.model).order_by(*inspect(self.model).primary_key)

    def add(self, entity: T) -> T:
        """Stage an insert (written on ``save()``)."""
        self._context.session.add(entity)
        return entity

    async def remove(self, entity: T) -> None:
        """Stage a delete (written on ``save()``)."""
        await self._context.session.delete(entity)


class FootballContext:
    """Unit of work for the football schema.

    One instance per request; it is never shared between concurrent callers.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.clubs: EntitySet[Club] = EntitySet(self, Club)
        self.coaches: EntitySet[Coach] = EntitySet(self, Coach)
        self.footballers: EntitySet[Footballer] = EntitySet(self, Footballer)
        self.stadiums: EntitySet[Stadium] = EntitySet(self, Stadium)
        self.tournaments: EntitySet[Tournament] = EntitySet(self, Tournament)
        self.club_tournaments: EntitySet[ClubTournament] = EntitySet(self, ClubTournament)

    async def _execute(self, stmt: Select) -> Result:
        """Run ``stmt``. A transient fault rolls the session back before it is raised,
        so the next attempt starts on a fresh transaction (and connection).

        The rollback expires every instance loaded in this unit of work; callers
        that retry must fetch their entities again.
        """
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Query failed: %s", e)
            fault = classify(e, "query")
            if isinstance(fault, TransientStorageFault):
                await self.session.rollback()
            raise fault from e

    async def first(self, stmt: Select) -> Optional[Any]:
        """First entity of a single-entity statement, or None."""
        result = await self._execute(stmt.limit(1))
        return result.scalars().first()

    async def first_row(self, stmt: Select) -> Optional[Row]:
        """First row of a multi-entity statement (joins), or None."""
        result = await self._execute(stmt.limit(1))
        return result.first()

    async def all(self, stmt: Select, *, tracking: bool = True) -> List[Any]:
        """All entities of a single-entity statement.

        With ``tracking=False`` the instances are detached from the unit of
        work, so later ``save()`` calls never see them.
        """
        result = await self._execute(stmt)
        entities = list(result.scalars().all())
        if not tracking:
            self._detach(entities)
        return entities

    async def rows(self, stmt: Select, *, tracking: bool = True) -> List[Row]:
        """All rows of a multi-entity statement."""
        result = await self._execute(stmt)
        rows = list(result.all())
        if not tracking:
            self._detach(entity for row in rows for entity in row)
        return rows

    async def save(self) -> None:
        """Commit every pending insert/update/delete atomically.

        On failure nothing is persisted: the transaction is rolled back and a
        classified storage fault is raised.
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("Saving changes failed, rolling back: %s", e)
            await self.session.rollback()
            raise classify(e, "save") from e

    def _detach(self, entities: Iterable[Any]) -> None:
        for entity in entities:
            if isinstance(entity, Base) and entity in self.session:
                self.session.expunge(entity)


def ids_of(entities: Sequence[Any], attr: str = "id") -> List[int]:
    """Distinct non-null ids from ``entities`` in first-seen order."""
    seen: List[int] = []
    for entity in entities:
        value = getattr(entity, attr)
        if value is not None and value not in seen:
            seen.append(value)
    return seen

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, ClassVar, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import Select, select

from core.context import EntitySet, FootballContext
from core.retry import RetryPolicy
from models import Club
from models.base import Base

from .results import RepositoryResult

T = TypeVar("T", bound=Base)
V = TypeVar("V")
R = TypeVar("R")


def _club_by_name(context: FootballContext, club_name: str) -> Select:
    """Clubs named ``club_name``, lowest id first."""
    return context.clubs.query().where(Club.club_name == club_name)


class BaseRepository:
    """Base repository: persistence context, retry policy and logger.

    Every natural-key lookup goes through the retry policy; an operation that
    needs several entities fetches them in one retried read, since a transient
    fault rolls the unit of work back. Writes go through ``context.save()`` and
    are not retried.
    """

    def __init__(
        self,
        context: FootballContext,
        retry: Optional[RetryPolicy] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize repository with a persistence context."""
        self.context = context
        self.retry = retry or RetryPolicy()
        self.logger = logger or logging.getLogger(type(self).__module__)

    async def _read(self, operation: Callable[[], Awaitable[R]]) -> R:
        """Run a read under the retry policy."""
        return await self.retry.execute(operation)

    async def _lookup(self, stmt: Select) -> Optional[Any]:
        return await self._read(lambda: self.context.first(stmt))

    async def _find_club(self, club_name: str) -> Optional[Club]:
        """Club by name (first by id when names repeat)."""
        return await self._lookup(_club_by_name(self.context, club_name))

    def _not_found(self, label: str, key: str) -> RepositoryResult[Any]:
        message = f"{label} with name {key} doesn't exist."
        self.logger.info(message)
        return RepositoryResult.not_found(message)


class ClubMemberRepository(BaseRepository, Generic[T, V]):
    """Shared CRUD for entities that belong to a club (coach, footballer, stadium).

    Subclasses declare the model, the natural-key column, the fields copied on
    update and the read view built from ``(entity, club)``.
    """

    model: ClassVar[Type[Base]]
    key_attr: ClassVar[str]
    label: ClassVar[str]
    mutable_fields: ClassVar[Tuple[str, ...]]
    view: ClassVar[Callable[..., Any]]
    # Footballers may be unattached at the storage layer.
    club_optional: ClassVar[bool] = False

    @property
    def entities(self) -> EntitySet:
        raise NotImplementedError

    def _key_column(self):
        return getattr(self.model, self.key_attr)

    def _expanded_query(self) -> Select:
        return (
            select(self.model, Club)
            .join(Club, Club.id == self.model.club_id, isouter=self.club_optional)
            .order_by(self.model.id)
        )

    async def _find(self, key: str) -> Optional[T]:
        stmt = self.entities.query().where(self._key_column() == key)
        return await self._lookup(stmt)

    async def get_one(self, key: str) -> RepositoryResult[V]:
        """Entity by natural key with its club loaded."""
        stmt = self._expanded_query().where(self._key_column() == key)
        row = await self._read(lambda: self.context.first_row(stmt))
        if row is None:
            return self._not_found(self.label, key)
        entity, club = row
        return RepositoryResult.success(self.view(entity, club))

    async def get_all(self) -> RepositoryResult[List[V]]:
        """Every entity with its club loaded; detached from the unit of work."""
        stmt = self._expanded_query()
        rows = await self._read(lambda: self.context.rows(stmt, tracking=False))
        return RepositoryResult.success([self.view(entity, club) for entity, club in rows])

    async def _find_with_club(self, key: str, club_name: str) -> Tuple[Optional[T], Optional[Club]]:
        """Entity and target club in one retried read; a retry fetches both again."""

        async def _load():
            existing = await self.context.first(self.entities.query().where(self._key_column() == key))
            if existing is None:
                return None, None
            return existing, await self.context.first(_club_by_name(self.context, club_name))

        return await self._read(_load)

    async def update(self, key: str, club_name: str, updated: T) -> RepositoryResult[V]:
        """Overwrite the mutable fields of ``key`` from ``updated`` and re-point it to ``club_name``.

        Nothing changes unless both the entity and the club exist.
        """
        existing, club = await self._find_with_club(key, club_name)
        if existing is None:
            return self._not_found(self.label, key)
        if club is None:
            return self._not_found("Club", club_name)

        for field_name in self.mutable_fields:
            setattr(existing, field_name, getattr(updated, field_name))
        existing.club_id = club.id

        await self.context.save()
        self.logger.info("%s %s has been updated.", self.label, key)
        return RepositoryResult.success(self.view(existing, club))

    async def create(self, club_name: str, new_entity: T) -> RepositoryResult[V]:
        """Insert ``new_entity`` attached to ``club_name``."""
        club = await self._find_club(club_name)
        if club is None:
            return self._not_found("Club", club_name)

        new_entity.club_id = club.id
        self.entities.add(new_entity)
        await self.context.save()
        self.logger.info("%s %s has been added.", self.label, getattr(new_entity, self.key_attr))
        return RepositoryResult.success(self.view(new_entity, club))

    async def delete(self, key: str) -> RepositoryResult[None]:
        """Hard-delete the entity with natural key ``key``."""
        existing = await self._find(key)
        if existing is None:
            return self._not_found(self.label, key)

        await self.entities.remove(existing)
        await self.context.save()
        self.logger.info("%s %s has been deleted.", self.label, key)
        return RepositoryResult.success(None)

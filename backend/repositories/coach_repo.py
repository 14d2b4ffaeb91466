from __future__ import annotations

from core.context import EntitySet
from models.coach import Coach

from .base import ClubMemberRepository
from .views import CoachDetails


class CoachRepository(ClubMemberRepository[Coach, CoachDetails]):
    """Repository for Coach entities, keyed by surname."""

    model = Coach
    key_attr = "surname"
    label = "Coach"
    mutable_fields = ("name", "surname")
    view = CoachDetails

    @property
    def entities(self) -> EntitySet[Coach]:
        return self.context.coaches

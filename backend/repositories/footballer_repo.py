from __future__ import annotations

from core.context import EntitySet
from models.footballer import Footballer

from .base import ClubMemberRepository
from .views import FootballerDetails


class FootballerRepository(ClubMemberRepository[Footballer, FootballerDetails]):
    """Repository for Footballer entities, keyed by surname."""

    model = Footballer
    key_attr = "surname"
    label = "Footballer"
    mutable_fields = ("name", "surname")
    view = FootballerDetails
    club_optional = True

    @property
    def entities(self) -> EntitySet[Footballer]:
        return self.context.footballers
